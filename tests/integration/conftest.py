from pathlib import Path
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from resume_analyzer.analysis.client_base import BaseAnalysisClient
from resume_analyzer.analysis.generator import ReportGenerator
from resume_analyzer.api.app import create_app
from resume_analyzer.config.settings import Settings
from resume_analyzer.extraction.orchestrator import TextExtractionOrchestrator
from resume_analyzer.ocr.base import BaseOcrEngine
from resume_analyzer.pdf.base import BasePdfExtractor
from resume_analyzer.processor.processor import Processor
from resume_analyzer.processor.steps import AnalyzeStep, ExtractTextStep

AI_REPLY = (
    '{"atsScore": 58, "strengths": ["Python"], "weakAreas": ["No metrics"], '
    '"missingSkills": ["Docker"], "projectGaps": ["No GitHub"], '
    '"quickFixes": ["Link deployed project"], "oneLineVerdict": "Needs projects."}'
)


class FakeStack:
    """Spies for the three external capabilities behind the endpoint."""

    def __init__(self) -> None:
        self.pdf_extractor = MagicMock(spec=BasePdfExtractor)
        self.pdf_extractor.extract.return_value = ""
        self.ocr_engine = MagicMock(spec=BaseOcrEngine)
        self.ocr_engine.recognize.return_value = ""
        self.ai_client = MagicMock(spec=BaseAnalysisClient)
        self.ai_client.generate.return_value = AI_REPLY

    def build_processor(self) -> Processor:
        orchestrator = TextExtractionOrchestrator(
            pdf_extractor=self.pdf_extractor,
            ocr_engine=self.ocr_engine,
        )
        generator = ReportGenerator(client=self.ai_client, model="fake-model")
        return Processor(steps=[ExtractTextStep(orchestrator), AnalyzeStep(generator)])


@pytest.fixture()
def test_settings(tmp_path: Path) -> Settings:
    return Settings(ai_provider="example", static_dir=str(tmp_path / "no-public"))


@pytest.fixture()
def fake_stack() -> FakeStack:
    return FakeStack()


@pytest.fixture()
def client(fake_stack: FakeStack, test_settings: Settings) -> TestClient:
    return TestClient(create_app(test_settings, processor=fake_stack.build_processor()))
