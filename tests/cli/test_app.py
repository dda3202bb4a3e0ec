"""
Tests for the command-line entry point.

cargo is replaced by patching subprocess.run in the scaffold module.
"""

import io
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest
from rich.console import Console

from exam_toolkit.cli.app import build_parser, main


def fake_cargo(argv, cwd, **kwargs):
    """Stand-in for `cargo new --bin <name>`."""
    project = Path(cwd) / argv[-1]
    (project / "src").mkdir(parents=True)
    (project / "Cargo.toml").write_text(f'[package]\nname = "{argv[-1]}"\n')
    (project / "src" / "main.rs").write_text("fn main() {}\n")
    return subprocess.CompletedProcess(argv, 0, stdout="", stderr="")


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200)


@pytest.fixture
def cli_args(tmp_path, algo_library):
    return ["--library", str(algo_library), "--output", str(tmp_path / "exercice")]


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.library == "lib"
        assert args.output == "exercice"
        assert args.exam is None
        assert args.seed is None
        assert args.yes is False


@patch("exam_toolkit.builder.scaffold.subprocess.run", side_effect=fake_cargo)
class TestMain:

    def test_main_when_exam_given_then_builds_and_reports(self, mock_run, tmp_path, cli_args, console):
        code = main(cli_args + ["--exam", "algo", "--seed", "4"], console=console)

        output = console.file.getvalue()
        assert code == 0
        assert "Creating algo ..." in output
        assert "Level 1: ✓" in output
        assert "Level 2: ✓ graph" in output
        assert "Exam structure created successfully!" in output
        assert (tmp_path / "exercice" / "algo" / "2" / "graph" / "src" / "lib.rs").is_file()

    def test_main_when_no_exam_flag_then_prompts(self, mock_run, tmp_path, cli_args, console):
        with patch("exam_toolkit.cli.app.select_exam", return_value="algo") as mock_select:
            code = main(cli_args, console=console)

        assert code == 0
        assert mock_select.call_args[0][0] == ["algo"]

    def test_main_when_overwrite_declined_then_cancelled(self, mock_run, tmp_path, cli_args, console):
        (tmp_path / "exercice" / "algo").mkdir(parents=True)

        with patch("exam_toolkit.cli.app.confirm_overwrite", return_value=False):
            code = main(cli_args + ["--exam", "algo"], console=console)

        assert code == 0
        assert "Operation cancelled." in console.file.getvalue()
        assert mock_run.call_count == 0

    def test_main_when_yes_flag_then_overwrites_without_prompt(self, mock_run, tmp_path, cli_args, console):
        stale = tmp_path / "exercice" / "algo" / "stale.txt"
        stale.parent.mkdir(parents=True)
        stale.write_text("x")

        with patch("exam_toolkit.cli.app.confirm_overwrite") as mock_confirm:
            code = main(cli_args + ["--exam", "algo", "--yes"], console=console)

        assert code == 0
        mock_confirm.assert_not_called()
        assert not stale.exists()

    def test_main_when_empty_level_then_warning_line(self, mock_run, tmp_path, algo_library, cli_args, console):
        (algo_library / "algo" / "2").mkdir()

        code = main(cli_args + ["--exam", "algo"], console=console)

        assert code == 0
        assert "⚠ No exercises found in" in console.file.getvalue()

    def test_main_when_library_missing_then_exit_one(self, mock_run, tmp_path, console, capsys):
        code = main(["--library", str(tmp_path / "none"), "--output", str(tmp_path / "out")],
                    console=console)

        assert code == 1
        assert "Library not found" in capsys.readouterr().err

    def test_main_when_generator_fails_then_exit_one(self, mock_run, cli_args, console, capsys):
        mock_run.side_effect = None
        mock_run.return_value = subprocess.CompletedProcess([], 101, stdout="", stderr="boom")

        code = main(cli_args + ["--exam", "algo"], console=console)

        assert code == 1
        assert "boom" in capsys.readouterr().err

    def test_main_when_same_roots_then_exit_two(self, mock_run, tmp_path, console):
        code = main(["--library", str(tmp_path), "--output", str(tmp_path)], console=console)
        assert code == 2

    def test_main_when_interrupted_then_exit_130(self, mock_run, cli_args, console):
        with patch("exam_toolkit.cli.app.select_exam", side_effect=KeyboardInterrupt):
            assert main(cli_args, console=console) == 130
