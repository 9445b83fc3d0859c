"""Unit tests for the terminal line input handler."""

import pytest
from unittest.mock import Mock

from handsfree.ui.line_input import LineInputHandler


def feed_lines(monkeypatch, lines):
    remaining = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


@pytest.mark.unit
class TestLineInputHandler:
    """Test cases for LineInputHandler."""

    def test_lines_are_passed_until_quit(self, monkeypatch):
        feed_lines(monkeypatch, ["take a picture", "open camera", "quit", "never read"])
        callback = Mock(return_value=True)
        handler = LineInputHandler(callback)

        handler.start()
        assert handler.finished.wait(timeout=2.0)
        handler.stop()

        assert [c.args[0] for c in callback.call_args_list] == ["take a picture", "open camera"]
        assert not handler.running

    def test_end_of_input_finishes(self, monkeypatch):
        feed_lines(monkeypatch, [])
        handler = LineInputHandler(Mock(return_value=True))

        handler.start()

        assert handler.finished.wait(timeout=2.0)

    def test_callback_can_stop_loop(self, monkeypatch):
        feed_lines(monkeypatch, ["first", "second"])
        callback = Mock(return_value=False)
        handler = LineInputHandler(callback)

        handler.start()
        assert handler.finished.wait(timeout=2.0)

        callback.assert_called_once_with("first")
