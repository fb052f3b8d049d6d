"""
OpenAI chat-completion based text correction.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

import httpx
import openai
from openai import OpenAI

from .logger import get_logger

logger = get_logger(__name__)


DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_BASE_URL = "https://api.openai.com/v1"


@dataclass(frozen=True)
class RemoteSettings:
    """Request parameters and transport bounds for the chat-completion call."""

    model_name: str = DEFAULT_MODEL
    max_tokens: int = 2000
    temperature: float = 0.3
    base_url: str = DEFAULT_BASE_URL
    connect_timeout: float = 10.0
    read_timeout: float = 30.0


@dataclass(frozen=True)
class RemoteUnavailable:
    """The remote corrector produced no usable text; ``reason`` is for logs only."""

    reason: str


RemoteReply = Union[str, RemoteUnavailable]


PROMPT_PRESETS: Dict[str, Dict[str, str]] = {
    "english": {
        "label": "English proofreader",
        "description": "Fix typos, spelling, punctuation and grammar; return only the corrected text.",
        "instruction": "\n".join([
            "You are a proofreader and will correct my typos in the text. You will only return the corrected text, nothing else.",
            "Task and objective:",
            "* Correcting typos, spelling, punctuation, and grammatical errors in the text provided by the user.",
            "* Return only the corrected version of the text, without any additional comments, explanations, or questions.",
            "Behavior and rules:",
            "1) Receiving the text:",
            "a) Wait for the text from the user that needs proofreading.",
            "b) Do not initiate a conversation or ask questions.",
            "2) Correction and return:",
            "a) Carefully correct the text for typos, spelling, grammar, and punctuation.",
            "b) Return the entire text after correction.",
            "c) Make sure that the reply contains only the corrected text. Do not add any \"Please,\" \"Here is the corrected text,\" or similar phrases.",
            "3) Tone and style:",
            "a) Be neutral and impersonal.",
            "b) Your \"personality\" is to be a quiet but effective tool for proofreading text.",
            "Text to be corrected:",
        ]),
    },
    "polish": {
        "label": "Polish proofreader",
        "description": "Correct Polish spelling and grammar while keeping the original style and meaning.",
        "instruction": (
            "Jesteś asystentem korygującym błędy ortograficzne i gramatyczne w języku polskim. "
            "Popraw tekst zachowując jego oryginalny styl i znaczenie. "
            "Zwróć tylko poprawiony tekst bez dodatkowych komentarzy."
        ),
    },
}

DEFAULT_PRESET = "english"


def get_preset_options() -> List[Dict[str, str]]:
    """Expose prompt presets for configuration surfaces."""
    return [
        {
            "key": key,
            "label": preset.get("label", key.title()),
            "description": preset.get("description", ""),
        }
        for key, preset in PROMPT_PRESETS.items()
    ]


def get_system_instruction(preset: Optional[str] = None) -> str:
    """Return the instruction text for ``preset``; unknown names raise KeyError."""
    key = (preset or DEFAULT_PRESET).strip().lower()
    return PROMPT_PRESETS[key]["instruction"]


class OpenAICorrector:
    """Single-shot text correction through an OpenAI-compatible chat-completion endpoint."""

    def __init__(
        self,
        api_key: str,
        system_instruction: str,
        settings: Optional[RemoteSettings] = None,
        client: Optional[Any] = None,
    ) -> None:
        """
        Initialize the corrector.

        Args:
            api_key: Bearer credential for the endpoint
            system_instruction: Fixed correction instructions sent as the system message
            settings: Model, sampling and timeout settings
            client: Pre-built client exposing ``chat.completions.create`` (tests)
        """
        self.system_instruction = system_instruction
        self.settings = settings or RemoteSettings()
        if client is None:
            client = OpenAI(
                api_key=api_key,
                base_url=self.settings.base_url,
                timeout=httpx.Timeout(
                    self.settings.read_timeout,
                    connect=self.settings.connect_timeout,
                ),
                max_retries=0,
            )
        self._client = client

    def build_messages(self, text: str) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": self.system_instruction},
            {"role": "user", "content": text},
        ]

    def correct(self, text: str) -> RemoteReply:
        """
        Request a correction for ``text``.

        Never raises: transport errors, timeouts, non-2xx statuses and
        malformed envelopes all come back as ``RemoteUnavailable``.

        Returns:
            The first choice's content, trimmed, or ``RemoteUnavailable``
        """
        try:
            response = self._client.chat.completions.create(
                model=self.settings.model_name,
                max_tokens=self.settings.max_tokens,
                temperature=self.settings.temperature,
                messages=self.build_messages(text),
            )
        except openai.APIStatusError as e:
            logger.warning(f"OpenAI API error: {e.status_code}")
            return RemoteUnavailable(f"API error: {e.status_code}")
        except openai.APITimeoutError:
            logger.warning("OpenAI API request timed out")
            return RemoteUnavailable("timeout")
        except Exception as e:
            logger.error(f"OpenAI API call failed: {e}")
            return RemoteUnavailable(f"network error: {e}")

        return self._extract_content(response)

    @staticmethod
    def _extract_content(response: Any) -> RemoteReply:
        choices = getattr(response, "choices", None)
        if not choices:
            logger.warning("No response from API (empty choices)")
            return RemoteUnavailable("no choices")

        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if not isinstance(content, str) or not content.strip():
            logger.warning("First choice carries no message content")
            return RemoteUnavailable("no message content")

        return content.strip()
