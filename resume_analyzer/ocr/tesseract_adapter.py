import io

import pymupdf
import pytesseract
from PIL import Image

from resume_analyzer.ocr.base import BaseOcrEngine, ProgressCallback
from resume_analyzer.ocr.exceptions import OcrError
from resume_analyzer.pdf.base import is_pdf


class TesseractAdapter(BaseOcrEngine):
    """Recognizes text with Tesseract, rasterizing PDF pages through PyMuPDF."""

    def __init__(self, *, dpi: int = 200, tesseract_cmd: str = "") -> None:
        self._dpi = dpi
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    def recognize(
        self,
        payload: bytes,
        language: str = "eng",
        progress: ProgressCallback | None = None,
    ) -> str:
        try:
            images = self._rasterize(payload)
            pages: list[str] = []
            for index, image in enumerate(images, start=1):
                pages.append(pytesseract.image_to_string(image, lang=language))
                if progress is not None:
                    progress(index, len(images))
        except OcrError:
            raise
        except Exception as exc:
            raise OcrError(f"tesseract recognition failed: {exc}") from exc
        return "\n".join(pages).strip()

    def _rasterize(self, payload: bytes) -> list[Image.Image]:
        if is_pdf(payload):
            return self._render_pdf_pages(payload)
        with Image.open(io.BytesIO(payload)) as image:
            return [image.convert("RGB")]

    def _render_pdf_pages(self, payload: bytes) -> list[Image.Image]:
        images: list[Image.Image] = []
        with pymupdf.open(stream=payload, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
            for page in doc:
                pix = page.get_pixmap(dpi=self._dpi, alpha=False)
                images.append(Image.frombytes("RGB", (pix.width, pix.height), pix.samples))
        if not images:
            raise OcrError("document has no pages to recognize")
        return images
