"""Value types passed between the caller, the orchestrator and the correctors."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


EMPTY_INPUT_REASON = "empty input"


@dataclass(frozen=True)
class CorrectionRequest:
    """A single correction call: the caller's text and whether a credential is configured."""

    input_text: str
    has_credential: bool


@dataclass(frozen=True)
class Success:
    text: str


@dataclass(frozen=True)
class Failure:
    reason: str


CorrectionResult = Union[Success, Failure]
