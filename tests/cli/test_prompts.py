"""
Tests for the interactive prompts.
"""

import io
from unittest.mock import patch

from rich.console import Console

from exam_toolkit.cli.prompts import confirm_overwrite, select_exam


def make_console() -> Console:
    return Console(file=io.StringIO(), width=120)


class TestSelectExam:

    def test_select_when_number_entered_then_returns_exam(self):
        console = make_console()

        with patch("exam_toolkit.cli.prompts.Prompt.ask", return_value="2") as mock_ask:
            result = select_exam(["exam_1", "exam_2"], console)

        assert result == "exam_2"
        assert mock_ask.call_args.kwargs["choices"] == ["1", "2"]
        assert mock_ask.call_args.kwargs["default"] == "1"
        assert "2) exam_2" in console.file.getvalue()


class TestConfirmOverwrite:

    def test_confirm_defaults_to_no(self):
        with patch("exam_toolkit.cli.prompts.Confirm.ask", return_value=False) as mock_ask:
            assert confirm_overwrite("algo", make_console()) is False

        assert mock_ask.call_args.kwargs["default"] is False
        assert "algo" in mock_ask.call_args.args[0]
