from resume_analyzer.analysis.generator import ReportGenerator
from resume_analyzer.extraction.orchestrator import TextExtractionOrchestrator
from resume_analyzer.logging.logger import Log
from resume_analyzer.processor.pipeline import PipelineContext, PipelineStep, RequestStage


class ExtractTextStep(PipelineStep):
    failed_stage = RequestStage.EXTRACTION_FAILED

    def __init__(self, orchestrator: TextExtractionOrchestrator) -> None:
        self._orchestrator = orchestrator

    def run(self, context: PipelineContext) -> PipelineContext:
        context.stage = RequestStage.EXTRACTING
        context.extraction = self._orchestrator.extract(context.upload.content)
        context.stage = RequestStage.EXTRACTED
        Log.info(
            f"Extracted {context.extraction.char_count} chars from {context.upload.file_name!r} "
            f"via {context.extraction.source.value}"
        )
        return context


class AnalyzeStep(PipelineStep):
    failed_stage = RequestStage.ANALYSIS_FAILED

    def __init__(self, generator: ReportGenerator) -> None:
        self._generator = generator

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.extraction is None:
            raise ValueError("PipelineContext.extraction must be set before analysis")
        context.stage = RequestStage.ANALYZING
        Log.info(f"Sending resume to AI for analysis (target role: {context.upload.target_role})")
        context.analysis = self._generator.generate(
            context.extraction.text,
            context.upload.target_role,
        )
        context.stage = RequestStage.ANALYZED
        return context
