from typing import TypedDict


class AnalysisReport(TypedDict):
    """Report shape the prompt asks the AI provider for.

    Replies are passed through without validation against this shape.
    """

    atsScore: int
    strengths: list[str]
    weakAreas: list[str]
    missingSkills: list[str]
    projectGaps: list[str]
    quickFixes: list[str]
    oneLineVerdict: str
