from dataclasses import dataclass
from enum import Enum


class TextSource(str, Enum):
    """Which extraction path produced the text."""

    PDF = "pdf"
    OCR = "ocr"


@dataclass(frozen=True)
class ExtractionResult:
    """Trimmed resume text that passed the minimum length gate."""

    text: str
    source: TextSource

    @property
    def char_count(self) -> int:
        return len(self.text)
