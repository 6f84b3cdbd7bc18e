"""Structured text extraction with an OCR fallback."""

from resume_analyzer.extraction.exceptions import (
    NoTextFoundError,
    OcrFailedError,
    TextTooShortError,
)
from resume_analyzer.extraction.models import ExtractionResult, TextSource
from resume_analyzer.logging.logger import Log
from resume_analyzer.ocr.base import BaseOcrEngine
from resume_analyzer.ocr.exceptions import OcrError
from resume_analyzer.pdf.base import BasePdfExtractor
from resume_analyzer.pdf.exceptions import PdfExtractionError

DEFAULT_MIN_TEXT_LENGTH = 50


class TextExtractionOrchestrator:
    """Gets resume text from the PDF text layer, falling back to OCR.

    OCR runs only when the text layer is empty. A short non-empty text layer
    is not retried through OCR and fails the length gate instead.
    """

    def __init__(
        self,
        *,
        pdf_extractor: BasePdfExtractor,
        ocr_engine: BaseOcrEngine,
        ocr_language: str = "eng",
        min_text_length: int = DEFAULT_MIN_TEXT_LENGTH,
    ) -> None:
        self._pdf_extractor = pdf_extractor
        self._ocr_engine = ocr_engine
        self._ocr_language = ocr_language
        self._min_text_length = min_text_length

    def extract(self, payload: bytes) -> ExtractionResult:
        """Return usable resume text or raise an ExtractionError subclass."""
        text = self._extract_text_layer(payload)
        source = TextSource.PDF
        if not text:
            Log.info("PDF text empty, attempting OCR")
            text = self._extract_with_ocr(payload)
            source = TextSource.OCR
            Log.info(f"OCR extracted {len(text)} characters")

        if len(text) < self._min_text_length:
            Log.warning(
                f"Extracted text too short: {len(text)} < {self._min_text_length} "
                f"(source={source.value})"
            )
            raise TextTooShortError(len(text), self._min_text_length)

        return ExtractionResult(text=text, source=source)

    def _extract_text_layer(self, payload: bytes) -> str:
        Log.info("Extracting text from PDF")
        try:
            text = self._pdf_extractor.extract(payload).strip()
        except PdfExtractionError as exc:
            Log.error(f"PDF extraction failed: {exc}")
            return ""
        Log.info(f"Extracted {len(text)} characters from PDF")
        return text

    def _extract_with_ocr(self, payload: bytes) -> str:
        try:
            text = self._ocr_engine.recognize(
                payload,
                language=self._ocr_language,
                progress=_log_ocr_progress,
            )
        except OcrError as exc:
            Log.error(f"OCR error: {exc}")
            raise OcrFailedError(str(exc)) from exc
        text = (text or "").strip()
        if not text:
            raise NoTextFoundError()
        return text


def _log_ocr_progress(done: int, total: int) -> None:
    Log.debug(f"OCR progress: page {done}/{total}")
