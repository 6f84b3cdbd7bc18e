import httpx
from google import genai
from google.genai import errors, types

from resume_analyzer.analysis.client_base import BaseAnalysisClient
from resume_analyzer.analysis.exceptions import AiProviderError


class GeminiClientAdapter(BaseAnalysisClient):
    """Analysis client adapter built on the Google Gen AI SDK."""

    def __init__(self, *, api_key: str, timeout_seconds: int) -> None:
        self._client = genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=timeout_seconds * 1000),
        )

    def generate(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        try:
            response = self._client.models.generate_content(
                model=model,
                contents=user_prompt,
                config=types.GenerateContentConfig(
                    system_instruction=system_prompt or None,
                    temperature=temperature,
                    response_mime_type="application/json",
                ),
            )
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AiProviderError(f"AI provider network error: {exc}") from exc
        except errors.APIError as exc:
            raise AiProviderError(f"AI provider API error: {exc}") from exc

        text = response.text
        if not text:
            raise AiProviderError("AI returned empty response")
        return text
