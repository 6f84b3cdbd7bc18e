from unittest.mock import ANY, MagicMock

import pytest

from resume_analyzer.extraction.exceptions import (
    NoTextFoundError,
    OcrFailedError,
    TextTooShortError,
)
from resume_analyzer.extraction.models import TextSource
from resume_analyzer.extraction.orchestrator import TextExtractionOrchestrator
from resume_analyzer.ocr.base import BaseOcrEngine
from resume_analyzer.ocr.exceptions import OcrError
from resume_analyzer.pdf.base import BasePdfExtractor
from resume_analyzer.pdf.exceptions import PdfExtractionError

PAYLOAD = b"%PDF-1.4 fake resume"


def _make_orchestrator(
    pdf_text: str = "",
    ocr_text: str = "",
) -> tuple[TextExtractionOrchestrator, MagicMock, MagicMock]:
    pdf_extractor = MagicMock(spec=BasePdfExtractor)
    pdf_extractor.extract.return_value = pdf_text
    ocr_engine = MagicMock(spec=BaseOcrEngine)
    ocr_engine.recognize.return_value = ocr_text
    orchestrator = TextExtractionOrchestrator(
        pdf_extractor=pdf_extractor,
        ocr_engine=ocr_engine,
    )
    return orchestrator, pdf_extractor, ocr_engine


class TestTextLayerPath:
    def test_uses_text_layer_without_ocr(self) -> None:
        orchestrator, pdf_extractor, ocr_engine = _make_orchestrator(pdf_text="A" * 200)

        result = orchestrator.extract(PAYLOAD)

        assert result.text == "A" * 200
        assert result.char_count == 200
        assert result.source is TextSource.PDF
        pdf_extractor.extract.assert_called_once_with(PAYLOAD)
        ocr_engine.recognize.assert_not_called()

    def test_trims_text_layer(self) -> None:
        orchestrator, _pdf, _ocr = _make_orchestrator(pdf_text="\n\n  " + "B" * 60 + "  \n")
        result = orchestrator.extract(PAYLOAD)
        assert result.text == "B" * 60

    def test_49_chars_is_too_short(self) -> None:
        orchestrator, _pdf, ocr_engine = _make_orchestrator(pdf_text="  " + "A" * 49 + "  ")
        with pytest.raises(TextTooShortError) as exc_info:
            orchestrator.extract(PAYLOAD)
        assert exc_info.value.length == 49
        ocr_engine.recognize.assert_not_called()

    def test_50_chars_is_accepted(self) -> None:
        orchestrator, _pdf, _ocr = _make_orchestrator(pdf_text="A" * 50)
        result = orchestrator.extract(PAYLOAD)
        assert result.char_count == 50

    def test_short_garbled_text_layer_does_not_fall_back_to_ocr(self) -> None:
        orchestrator, _pdf, ocr_engine = _make_orchestrator(
            pdf_text="\x00\x01garbled", ocr_text="C" * 500
        )
        with pytest.raises(TextTooShortError):
            orchestrator.extract(PAYLOAD)
        ocr_engine.recognize.assert_not_called()

    def test_custom_minimum_length(self) -> None:
        pdf_extractor = MagicMock(spec=BasePdfExtractor)
        pdf_extractor.extract.return_value = "short but enough"
        orchestrator = TextExtractionOrchestrator(
            pdf_extractor=pdf_extractor,
            ocr_engine=MagicMock(spec=BaseOcrEngine),
            min_text_length=10,
        )
        assert orchestrator.extract(PAYLOAD).text == "short but enough"


class TestOcrFallback:
    def test_empty_text_layer_calls_ocr_once_with_payload(self) -> None:
        orchestrator, _pdf, ocr_engine = _make_orchestrator(pdf_text="", ocr_text="C" * 80)

        result = orchestrator.extract(PAYLOAD)

        ocr_engine.recognize.assert_called_once_with(PAYLOAD, language="eng", progress=ANY)
        assert result.source is TextSource.OCR
        assert result.text == "C" * 80

    def test_whitespace_text_layer_calls_ocr(self) -> None:
        orchestrator, _pdf, ocr_engine = _make_orchestrator(pdf_text=" \n\t ", ocr_text="C" * 80)
        orchestrator.extract(PAYLOAD)
        ocr_engine.recognize.assert_called_once()

    def test_text_layer_error_falls_back_to_ocr(self) -> None:
        orchestrator, pdf_extractor, ocr_engine = _make_orchestrator(ocr_text="D" * 70)
        pdf_extractor.extract.side_effect = PdfExtractionError("not a pdf")

        result = orchestrator.extract(PAYLOAD)

        ocr_engine.recognize.assert_called_once()
        assert result.source is TextSource.OCR

    def test_passes_language_hint(self) -> None:
        ocr_engine = MagicMock(spec=BaseOcrEngine)
        ocr_engine.recognize.return_value = "E" * 60
        pdf_extractor = MagicMock(spec=BasePdfExtractor)
        pdf_extractor.extract.return_value = ""
        orchestrator = TextExtractionOrchestrator(
            pdf_extractor=pdf_extractor,
            ocr_engine=ocr_engine,
            ocr_language="fra",
        )
        orchestrator.extract(PAYLOAD)
        assert ocr_engine.recognize.call_args.kwargs["language"] == "fra"

    def test_empty_ocr_raises_no_text_found(self) -> None:
        orchestrator, _pdf, _ocr = _make_orchestrator(pdf_text="", ocr_text="   \n ")
        with pytest.raises(NoTextFoundError, match="Could not extract text from PDF"):
            orchestrator.extract(PAYLOAD)

    def test_ocr_error_raises_ocr_failed_with_detail(self) -> None:
        orchestrator, _pdf, ocr_engine = _make_orchestrator(pdf_text="")
        ocr_engine.recognize.side_effect = OcrError("engine crashed")
        with pytest.raises(OcrFailedError) as exc_info:
            orchestrator.extract(PAYLOAD)
        assert str(exc_info.value) == "OCR extraction failed: engine crashed"

    def test_short_ocr_text_raises_too_short(self) -> None:
        orchestrator, _pdf, _ocr = _make_orchestrator(pdf_text="", ocr_text="Jane Doe")
        with pytest.raises(TextTooShortError, match="too short"):
            orchestrator.extract(PAYLOAD)
