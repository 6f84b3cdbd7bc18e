import pymupdf

from resume_analyzer.pdf.base import BasePdfExtractor, is_pdf
from resume_analyzer.pdf.exceptions import PdfExtractionError


class PyMuPdfAdapter(BasePdfExtractor):
    """Reads the resume text layer using PyMuPDF."""

    def extract(self, pdf_bytes: bytes) -> str:
        # PyMuPDF opens raster images as documents even with filetype="pdf".
        if not is_pdf(pdf_bytes):
            raise PdfExtractionError("pymupdf could not read document: missing %PDF header")
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text("text") for page in doc]
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf could not read document: {exc}") from exc
        return "\n".join(pages).strip()
