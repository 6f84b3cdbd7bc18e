from resume_analyzer.analysis.factory import ReportGeneratorFactory
from resume_analyzer.config.settings import Settings
from resume_analyzer.extraction.orchestrator import TextExtractionOrchestrator
from resume_analyzer.logging.logger import Log
from resume_analyzer.ocr.factory import OcrEngineFactory
from resume_analyzer.pdf.factory import PdfExtractorFactory
from resume_analyzer.processor.models import Upload
from resume_analyzer.processor.pipeline import PipelineContext, PipelineStep
from resume_analyzer.processor.steps import AnalyzeStep, ExtractTextStep


class Processor:
    """Runs one upload through extract -> analyze.

    Steps run strictly in order. The first failing step records its failed
    stage on the context and its exception propagates to the caller.
    """

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def process(self, upload: Upload) -> PipelineContext:
        Log.info(f"Processing {upload.file_name!r} ({len(upload.content)} bytes)")
        context = PipelineContext(upload=upload)
        for step in self._steps:
            try:
                context = step.run(context)
            except Exception as exc:
                context.stage = step.failed_stage
                Log.error(f"Processing {upload.file_name!r} stopped at {context.stage.value}: {exc}")
                raise
        return context


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with the adapters selected by settings."""
    orchestrator = TextExtractionOrchestrator(
        pdf_extractor=PdfExtractorFactory.create(settings),
        ocr_engine=OcrEngineFactory.create(settings),
        ocr_language=settings.ocr_language,
        min_text_length=settings.min_text_length,
    )
    generator = ReportGeneratorFactory.create(settings)
    return Processor(steps=[ExtractTextStep(orchestrator), AnalyzeStep(generator)])
