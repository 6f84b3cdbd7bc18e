class ExtractionError(Exception):
    """Base for failures that prevent getting usable resume text.

    The message is user facing and returned to the client as-is.
    """


class NoTextFoundError(ExtractionError):
    """Neither the text layer nor OCR produced any text."""

    def __init__(self) -> None:
        super().__init__(
            "Could not extract text from PDF. Please upload a proper text-based resume."
        )


class OcrFailedError(ExtractionError):
    """The OCR engine raised while recognizing the upload."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"OCR extraction failed: {detail}")
        self.detail = detail


class TextTooShortError(ExtractionError):
    """Extracted text is below the minimum usable length."""

    def __init__(self, length: int, minimum: int) -> None:
        super().__init__("Extracted text is too short. Please upload a valid resume PDF.")
        self.length = length
        self.minimum = minimum
