class OcrError(Exception):
    """Raised when the OCR engine cannot recognize the payload."""
