"""Caller-side handling of "process selected text" requests.

The host hands over the selected text and a read-only flag. Writable selections
are corrected in place; read-only ones are routed to a display surface instead.
The host always gets usable text back: on any failure it receives the original
selection unchanged.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Optional

from .logger import get_logger
from .models import Success
from .orchestrator import CorrectionOrchestrator

logger = get_logger(__name__)


class ProcessTextStatus(enum.Enum):
    REPLACED = "replaced"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class ProcessTextResult:
    status: ProcessTextStatus
    text: str


class ProcessTextHandler:
    """Bridges a host text-processing request to the correction orchestrator."""

    def __init__(
        self,
        orchestrator: CorrectionOrchestrator,
        viewer: Optional[Callable[[str], None]] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Args:
            orchestrator: Performs the correction
            viewer: Display-only surface for read-only selections
            timeout: Seconds to wait for a correction before giving up
        """
        self._orchestrator = orchestrator
        self._viewer = viewer
        self._timeout = timeout

    def handle(self, text: Optional[str], read_only: bool = False) -> ProcessTextResult:
        original = text or ""
        logger.debug(f"Input text length: {len(original)}, read-only: {read_only}")

        if not original:
            logger.warning("Empty input, returning without changes")
            return ProcessTextResult(ProcessTextStatus.REPLACED, original)

        if read_only:
            logger.info("Source is read-only; showing text instead of replacing it")
            self._show(original)
            return ProcessTextResult(ProcessTextStatus.CANCELLED, original)

        try:
            result = self._orchestrator.correct(original).result(timeout=self._timeout)
        except Exception as e:
            logger.error(f"Unexpected error while correcting text: {e}", exc_info=True)
            return ProcessTextResult(ProcessTextStatus.REPLACED, original)

        if isinstance(result, Success):
            logger.debug(f"Text correction successful, output length: {len(result.text)}")
            return ProcessTextResult(ProcessTextStatus.REPLACED, result.text)

        logger.warning(f"Text correction failed: {result.reason}")
        return ProcessTextResult(ProcessTextStatus.REPLACED, original)

    def _show(self, text: str) -> None:
        if self._viewer is None:
            return
        try:
            self._viewer(text)
        except Exception as e:
            logger.error(f"Viewer failed to display text: {e}")
