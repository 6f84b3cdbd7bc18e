class AiAnalysisError(Exception):
    """Raised when the resume could not be analyzed by the AI provider."""


class InvalidAiResponseError(AiAnalysisError):
    """Raised when the AI reply contains no decodable JSON object."""


class AiProviderError(AiAnalysisError):
    """Raised when the AI provider call fails or returns nothing."""
