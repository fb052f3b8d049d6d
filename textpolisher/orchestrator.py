"""Correction entry point: remote correction first, local normalization as fallback."""
from __future__ import annotations

import asyncio
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional

from .credentials import CredentialStore, is_usable_credential
from .local_normalizer import normalize
from .logger import get_logger
from .models import (
    EMPTY_INPUT_REASON,
    CorrectionRequest,
    CorrectionResult,
    Failure,
    Success,
)
from .openai_corrector import (
    OpenAICorrector,
    RemoteReply,
    RemoteSettings,
    RemoteUnavailable,
    get_system_instruction,
)

logger = get_logger(__name__)

# (api_key, system_instruction, settings) -> object with correct(text) -> RemoteReply
CorrectorFactory = Callable[[str, str, RemoteSettings], OpenAICorrector]


class CorrectionOrchestrator:
    """
    Corrects text through the remote corrector, degrading to the local normalizer.

    ``correct`` never raises and never reports remote problems to the caller:
    the only ``Failure`` it produces is for empty or blank input.
    """

    def __init__(
        self,
        credentials: CredentialStore,
        *,
        system_instruction: Optional[str] = None,
        settings: Optional[RemoteSettings] = None,
        corrector_factory: Optional[CorrectorFactory] = None,
        max_workers: int = 4,
    ) -> None:
        self._credentials = credentials
        self._system_instruction = system_instruction or get_system_instruction()
        self._settings = settings or RemoteSettings()
        self._corrector_factory = corrector_factory or OpenAICorrector
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="correction")

    @property
    def system_instruction(self) -> str:
        return self._system_instruction

    def __enter__(self) -> "CorrectionOrchestrator":
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown()

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting work; pending corrections still complete."""
        self._executor.shutdown(wait=wait)

    def correct(
        self,
        input_text: Optional[str],
        callback: Optional[Callable[[CorrectionResult], None]] = None,
    ) -> "Future[CorrectionResult]":
        """
        Start a correction and return a future for its result.

        Args:
            input_text: Text to correct, sent to the remote corrector untrimmed
            callback: Invoked exactly once with the result when it is ready

        Returns:
            Future resolving to ``Success`` or, for blank input, ``Failure``
        """
        if input_text is None or not input_text.strip():
            future: Future = Future()
            future.set_result(Failure(EMPTY_INPUT_REASON))
        else:
            api_key = self._credentials.get()
            request = CorrectionRequest(
                input_text=input_text,
                has_credential=is_usable_credential(api_key),
            )
            future = self._dispatch(request, api_key)

        if callback is not None:
            future.add_done_callback(lambda f: self._deliver(f, callback))
        return future

    def correct_sync(self, input_text: Optional[str], timeout: Optional[float] = None) -> CorrectionResult:
        """Blocking variant of ``correct``."""
        return self.correct(input_text).result(timeout=timeout)

    async def correct_async(self, input_text: Optional[str]) -> CorrectionResult:
        """Awaitable variant of ``correct`` for asyncio callers."""
        return await asyncio.wrap_future(self.correct(input_text))

    def _dispatch(self, request: CorrectionRequest, api_key: Optional[str]) -> "Future[CorrectionResult]":
        if not request.has_credential:
            logger.warning("API key not configured, using local fallback")
            future: Future = Future()
            future.set_result(Success(normalize(request.input_text)))
            return future

        try:
            return self._executor.submit(self._correct_remotely, request.input_text, api_key)
        except RuntimeError as e:
            logger.error(f"Failed to submit API request: {e}, using fallback")
            future = Future()
            future.set_result(Success(normalize(request.input_text)))
            return future

    def _correct_remotely(self, input_text: str, api_key: str) -> CorrectionResult:
        reply = self._request_remote(input_text, api_key)
        if isinstance(reply, RemoteUnavailable):
            logger.warning(f"Remote correction failed: {reply.reason}, using fallback")
            return Success(normalize(input_text))

        logger.debug(f"Remote correction succeeded, output length: {len(reply)}")
        return Success(reply)

    def _request_remote(self, input_text: str, api_key: str) -> RemoteReply:
        try:
            corrector = self._corrector_factory(api_key, self._system_instruction, self._settings)
            return corrector.correct(input_text)
        except Exception as e:
            # Exception text is not logged: client setup errors can include the key.
            logger.error(f"Remote corrector raised {type(e).__name__}")
            return RemoteUnavailable(type(e).__name__)

    @staticmethod
    def _deliver(future: Future, callback: Callable[[CorrectionResult], None]) -> None:
        try:
            callback(future.result())
        except Exception as e:
            logger.error(f"Correction callback error: {e}", exc_info=True)
