"""Unit tests for process_text.py module."""
from __future__ import annotations

import unittest
from concurrent.futures import Future
from unittest.mock import MagicMock

from textpolisher.models import Failure, Success
from textpolisher.process_text import ProcessTextHandler, ProcessTextResult, ProcessTextStatus


def resolved(result):
    future = Future()
    future.set_result(result)
    return future


class TestProcessTextHandler(unittest.TestCase):
    """Test cases for the host text-processing bridge."""

    def setUp(self):
        self.orchestrator = MagicMock()
        self.viewer = MagicMock()
        self.handler = ProcessTextHandler(self.orchestrator, viewer=self.viewer)

    def test_replaces_with_corrected_text(self):
        self.orchestrator.correct.return_value = resolved(Success("Fixed text"))

        result = self.handler.handle("fixd text")

        self.assertEqual(result, ProcessTextResult(ProcessTextStatus.REPLACED, "Fixed text"))
        self.orchestrator.correct.assert_called_once_with("fixd text")
        self.viewer.assert_not_called()

    def test_read_only_never_corrects(self):
        result = self.handler.handle("some text", read_only=True)

        self.assertEqual(result.status, ProcessTextStatus.CANCELLED)
        self.orchestrator.correct.assert_not_called()
        self.viewer.assert_called_once_with("some text")

    def test_read_only_without_viewer(self):
        handler = ProcessTextHandler(self.orchestrator)
        result = handler.handle("some text", read_only=True)
        self.assertEqual(result.status, ProcessTextStatus.CANCELLED)

    def test_empty_input_returned_unchanged(self):
        for text in ("", None):
            with self.subTest(text=text):
                result = self.handler.handle(text)
                self.assertEqual(result, ProcessTextResult(ProcessTextStatus.REPLACED, ""))
        self.orchestrator.correct.assert_not_called()

    def test_failure_returns_original(self):
        self.orchestrator.correct.return_value = resolved(Failure("empty input"))

        result = self.handler.handle("   ")

        self.assertEqual(result, ProcessTextResult(ProcessTextStatus.REPLACED, "   "))

    def test_unexpected_error_returns_original(self):
        self.orchestrator.correct.side_effect = RuntimeError("boom")

        result = self.handler.handle("keep me")

        self.assertEqual(result, ProcessTextResult(ProcessTextStatus.REPLACED, "keep me"))

    def test_failing_future_returns_original(self):
        future = Future()
        future.set_exception(TimeoutError("slow"))
        self.orchestrator.correct.return_value = future

        self.assertEqual(self.handler.handle("keep me").text, "keep me")

    def test_viewer_error_still_cancels(self):
        self.viewer.side_effect = RuntimeError("no display")
        result = self.handler.handle("text", read_only=True)
        self.assertEqual(result.status, ProcessTextStatus.CANCELLED)


if __name__ == '__main__':
    unittest.main()
