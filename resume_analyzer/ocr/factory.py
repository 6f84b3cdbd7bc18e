from resume_analyzer.config.settings import Settings
from resume_analyzer.ocr.base import BaseOcrEngine
from resume_analyzer.ocr.tesseract_adapter import TesseractAdapter


class OcrEngineFactory:
    """Creates the OCR engine named by ``settings.ocr_engine``."""

    ENGINES: tuple[str, ...] = ("tesseract",)

    @classmethod
    def create(cls, settings: Settings) -> BaseOcrEngine:
        engine = settings.ocr_engine.strip().lower()
        if engine == "tesseract":
            return TesseractAdapter(dpi=settings.ocr_dpi, tesseract_cmd=settings.tesseract_cmd)
        raise ValueError(f"Unknown OCR engine '{engine}'. Choose from: {list(cls.ENGINES)}")
