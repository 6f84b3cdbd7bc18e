from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any

from resume_analyzer.extraction.models import ExtractionResult
from resume_analyzer.processor.models import Upload


class RequestStage(str, Enum):
    RECEIVED = "received"
    EXTRACTING = "extracting"
    EXTRACTED = "extracted"
    EXTRACTION_FAILED = "extraction_failed"
    ANALYZING = "analyzing"
    ANALYZED = "analyzed"
    ANALYSIS_FAILED = "analysis_failed"


@dataclass(slots=True)
class PipelineContext:
    upload: Upload
    stage: RequestStage = RequestStage.RECEIVED
    extraction: ExtractionResult | None = None
    analysis: Any = None


class PipelineStep(ABC):
    failed_stage: RequestStage

    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
