from abc import ABC, abstractmethod

_PDF_MAGIC = b"%PDF"
_PDF_HEADER_WINDOW = 1024


def is_pdf(payload: bytes) -> bool:
    """PDF readers accept the header anywhere in the first kilobyte."""
    return _PDF_MAGIC in payload[:_PDF_HEADER_WINDOW]


class BasePdfExtractor(ABC):
    """Contract for structured (text layer) PDF extraction adapters."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract the embedded text layer from an uploaded document.

        Args:
            pdf_bytes: Raw upload content. May not be a PDF at all.

        Returns:
            Extracted text joined across pages and stripped. Empty string when
            the document has no text layer (scanned resumes).

        Raises:
            PdfExtractionError: if the payload cannot be parsed.
        """
