"""AI-powered resume report generator."""

from pathlib import Path
from typing import Any

from resume_analyzer.analysis.client_base import BaseAnalysisClient
from resume_analyzer.analysis.exceptions import (
    AiAnalysisError,
    AiProviderError,
    InvalidAiResponseError,
)
from resume_analyzer.analysis.json_decoder import Failed, RecoveredOk, decode_ai_json
from resume_analyzer.analysis.prompt_loader import load_prompt_template
from resume_analyzer.logging.logger import Log

JSON_ONLY_SYSTEM_PROMPT = (
    "You are an API. Return ONLY valid JSON.\n"
    "No markdown. No backticks. No extra explanation."
)


class ReportGenerator:
    """Evaluates resume text against a target role using an AI provider."""

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        model: str,
        temperature: float = 0.2,
        prompt_template_path: Path | None = None,
        system_prompt: str = JSON_ONLY_SYSTEM_PROMPT,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt_template(prompt_template_path)

    def generate(self, text: str, target_role: str) -> Any:
        """Return the decoded report exactly as the provider produced it.

        Raises:
            AiProviderError: the provider call failed.
            InvalidAiResponseError: the reply held no decodable JSON.
        """
        prompt = self.build_prompt(text, target_role)
        Log.debug(f"Analysis prompt:\n{prompt}")

        try:
            raw_response = self._client.generate(
                model=self._model,
                temperature=self._temperature,
                system_prompt=self._system_prompt,
                user_prompt=prompt,
            )
        except AiAnalysisError:
            raise
        except Exception as exc:
            raise AiProviderError(f"AI provider call failed: {exc}") from exc
        Log.debug(f"AI raw response:\n{raw_response}")

        result = decode_ai_json(raw_response)
        if isinstance(result, Failed):
            raise InvalidAiResponseError(result.reason)
        if isinstance(result, RecoveredOk):
            Log.warning(
                f"AI reply was not strict JSON, recovered chars {result.start}-{result.end} "
                f"of {len(raw_response)}"
            )

        Log.info("Analysis complete")
        return result.value

    def build_prompt(self, text: str, target_role: str) -> str:
        return self._prompt_template.format(target_role=target_role, resume_text=text)
