"""Deterministic, rule-based text cleanup used when the remote corrector is unavailable."""
from __future__ import annotations

import re
from typing import Optional

_WHITESPACE_RUN = re.compile(r"\s+")

# Marks that never take a space in front of them.
TIGHT_PUNCTUATION = (".", ",", ";", "!", "?")

# A sentence counts as finished when it ends with one of these.
TERMINAL_PUNCTUATION = (".", "!", "?")


def normalize(text: Optional[str]) -> str:
    """
    Apply the fixed normalization rules to ``text``.

    Rules run in order, each relying on the previous ones:
    CRLF to LF, tabs to spaces, whitespace runs collapsed and trimmed,
    spaces before ``. , ; ! ?`` removed, first character uppercased and
    a closing period appended when the text has no terminal mark.

    Args:
        text: Text to clean up; ``None`` is treated as empty

    Returns:
        Normalized text, ``""`` for empty or whitespace-only input
    """
    if not text:
        return ""

    s = text.replace("\r\n", "\n")
    s = s.replace("\t", " ")
    s = _WHITESPACE_RUN.sub(" ", s).strip()

    for mark in TIGHT_PUNCTUATION:
        s = s.replace(f" {mark}", mark)

    if not s:
        return ""

    s = s[0].upper() + s[1:]

    if not s.endswith(TERMINAL_PUNCTUATION):
        s += "."

    return s
