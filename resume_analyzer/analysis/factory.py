from resume_analyzer.analysis.client_base import BaseAnalysisClient
from resume_analyzer.analysis.example_client_adapter import ExampleClientAdapter
from resume_analyzer.analysis.gemini_client_adapter import GeminiClientAdapter
from resume_analyzer.analysis.generator import ReportGenerator
from resume_analyzer.analysis.openai_client_adapter import OpenAIClientAdapter
from resume_analyzer.config.settings import Settings


class ReportGeneratorFactory:
    """Creates a report generator wired to the configured AI provider."""

    PROVIDERS: tuple[str, ...] = ("gemini", "openai", "example")

    @classmethod
    def create(cls, settings: Settings) -> ReportGenerator:
        provider = settings.ai_provider.strip().lower()
        client = cls._create_client(provider, settings)
        return ReportGenerator(
            client=client,
            model=cls._resolve_model_name(provider, settings),
            temperature=settings.ai_temperature,
        )

    @classmethod
    def _create_client(cls, provider: str, settings: Settings) -> BaseAnalysisClient:
        if provider == "example":
            return ExampleClientAdapter()
        if provider == "gemini":
            if not settings.gemini_api_key:
                raise ValueError("gemini_api_key is required for ai_provider=gemini")
            return GeminiClientAdapter(
                api_key=settings.gemini_api_key,
                timeout_seconds=settings.gemini_timeout_seconds,
            )
        if provider == "openai":
            if not settings.openai_api_key:
                raise ValueError("openai_api_key is required for ai_provider=openai")
            return OpenAIClientAdapter(
                api_key=settings.openai_api_key,
                timeout_seconds=settings.openai_timeout_seconds,
                base_url=(settings.openai_base_url or "").strip() or None,
            )
        raise ValueError(
            f"Unknown AI provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        model_map = {
            "gemini": settings.gemini_model_name,
            "openai": settings.openai_model_name,
            "example": "example",
        }
        return model_map.get(provider, "")
