"""
Command-line entry point for assembling practice exams.

Usage:
    exam-toolkit [--library LIB] [--output DIR] [--exam NAME] [--seed N] [--yes] [-v]

Exit codes:
    0  exam assembled, or overwrite declined
    1  assembly failed
    2  invalid configuration
    130 interrupted at a prompt
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from rich.console import Console
from rich.markup import escape

from exam_toolkit import __version__
from exam_toolkit.builder import (
    AssemblyConfig,
    AssemblyOutcome,
    ProgressEvent,
    ProgressKind,
    assemble_exam,
)
from exam_toolkit.common.errors import ExamToolkitError

from .logging_utils import configure_logging
from .prompts import confirm_overwrite, select_exam

logger = logging.getLogger(__name__)

DEFAULT_LIBRARY = "lib"
DEFAULT_OUTPUT = "exercice"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exam-toolkit",
        description="Draw one exercise per level from the library and scaffold a project for each.",
    )
    parser.add_argument("--library", default=DEFAULT_LIBRARY,
                        help=f"Content library root (default: {DEFAULT_LIBRARY})")
    parser.add_argument("--output", default=DEFAULT_OUTPUT,
                        help=f"Folder receiving generated exams (default: {DEFAULT_OUTPUT})")
    parser.add_argument("--exam", help="Exam to build; skips the selection prompt")
    parser.add_argument("--seed", type=int, help="Random seed for a reproducible draw")
    parser.add_argument("-y", "--yes", action="store_true",
                        help="Overwrite an existing exam without asking")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def make_progress_printer(console: Console) -> Callable[[ProgressEvent], None]:
    """Render progress events as the per-level status lines."""
    def _print(event: ProgressEvent) -> None:
        if event.kind is ProgressKind.STARTED:
            console.print(f"Creating [green]{escape(event.exam)}[/green] ...")
        elif event.kind is ProgressKind.LEVEL_CREATED:
            console.print(
                f"  Level {event.ordinal}: [green]✓[/green] {escape(event.exercise.name)}"
            )
        elif event.kind is ProgressKind.LEVEL_SKIPPED:
            console.print(
                f"[yellow]⚠[/yellow] No exercises found in {escape(str(event.level_path))}"
            )
    return _print


def _exam_chooser(args: argparse.Namespace, console: Console) -> Callable[[Sequence[str]], str]:
    if args.exam:
        return lambda exams: args.exam
    return lambda exams: select_exam(exams, console)


def _overwrite_confirmer(args: argparse.Namespace, console: Console) -> Callable[[str], bool]:
    if args.yes:
        return lambda exam: True
    return lambda exam: confirm_overwrite(exam, console)


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()
    err_console = Console(stderr=True)
    configure_logging(args.verbose, err_console)

    try:
        config = AssemblyConfig(
            library_root=Path(args.library),
            output_root=Path(args.output),
            seed=args.seed,
        )
    except ValueError as e:
        err_console.print(f"[red]✗ Invalid configuration: {escape(str(e))}[/red]")
        return 2

    logger.debug(f"Library: {config.library_root}, output: {config.output_root}")

    try:
        result = assemble_exam(
            config,
            choose_exam=_exam_chooser(args, console),
            confirm_overwrite=_overwrite_confirmer(args, console),
            on_progress=make_progress_printer(console),
        )
    except ExamToolkitError as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        return 1
    except KeyboardInterrupt:
        err_console.print("[yellow]Interrupted.[/yellow]")
        return 130

    if result.outcome is AssemblyOutcome.ABORTED:
        console.print("[yellow]Operation cancelled.[/yellow]")
        return 0

    console.print("[green]Exam structure created successfully![/green]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
