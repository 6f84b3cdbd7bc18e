from abc import ABC, abstractmethod
from collections.abc import Callable

ProgressCallback = Callable[[int, int], None]
"""Called with ``(pages_done, pages_total)`` after each recognized page."""


class BaseOcrEngine(ABC):
    """Contract for optical character recognition adapters."""

    @abstractmethod
    def recognize(
        self,
        payload: bytes,
        language: str = "eng",
        progress: ProgressCallback | None = None,
    ) -> str:
        """Recognize text in an image or image-only PDF.

        Args:
            payload: Raw upload content, a PDF or a raster image.
            language: Engine language hint, e.g. ``"eng"``.
            progress: Optional per-page progress callback.

        Returns:
            Recognized text, possibly empty.

        Raises:
            OcrError: if the payload cannot be rasterized or recognized.
        """
