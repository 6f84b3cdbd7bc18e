"""Two-tier decoding of AI replies that should contain a JSON object.

Tier one parses the whole reply. Tier two parses the span from the first
``{`` to the last ``}``, which recovers objects wrapped in prose or code fences.
"""

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class StrictOk:
    """The whole reply was valid JSON."""

    value: Any


@dataclass(frozen=True)
class RecoveredOk:
    """JSON was recovered from the outermost brace span of the reply."""

    value: Any
    start: int
    end: int


@dataclass(frozen=True)
class Failed:
    """No JSON could be decoded from the reply."""

    reason: str


DecodeResult = StrictOk | RecoveredOk | Failed


def decode_strict(raw: str) -> StrictOk | Failed:
    try:
        return StrictOk(json.loads(raw))
    except json.JSONDecodeError as exc:
        return Failed(f"Invalid JSON response: {exc}")


def decode_brace_span(raw: str) -> RecoveredOk | Failed:
    start = raw.find("{")
    end = raw.rfind("}")
    if start == -1 or end == -1:
        return Failed("AI did not return JSON")
    try:
        value = json.loads(raw[start : end + 1])
    except json.JSONDecodeError as exc:
        return Failed(f"Recovered JSON is invalid: {exc}")
    return RecoveredOk(value=value, start=start, end=end + 1)


def decode_ai_json(raw: str) -> DecodeResult:
    """Decode an AI reply, trying the strict tier before the brace-span tier."""
    result = decode_strict(raw)
    if isinstance(result, StrictOk):
        return result
    return decode_brace_span(raw)
