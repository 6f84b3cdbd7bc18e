"""Offline analysis client adapter.

Returns the same report for every request. Select it with
``AI_PROVIDER=example`` to run the service without provider credentials.
"""

import json
from typing import ClassVar

from resume_analyzer.analysis.client_base import BaseAnalysisClient
from resume_analyzer.analysis.models import AnalysisReport


class ExampleClientAdapter(BaseAnalysisClient):
    """Deterministic adapter with no network calls."""

    DEFAULT_REPORT: ClassVar[AnalysisReport] = {
        "atsScore": 60,
        "strengths": ["Clear education section"],
        "weakAreas": ["Few measurable achievements"],
        "missingSkills": ["Git", "Unit testing"],
        "projectGaps": ["No deployed project or GitHub link"],
        "quickFixes": ["Add a GitHub profile link", "Quantify project impact"],
        "oneLineVerdict": "Promising fresher resume that needs visible project work.",
    }

    def generate(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt
        return json.dumps(self.DEFAULT_REPORT)
