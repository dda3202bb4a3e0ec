"""
Interactive prompts: exam selection and overwrite confirmation.
"""
from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt


def select_exam(exams: Sequence[str], console: Console) -> str:
    """
    Ask the operator to pick one exam from a numbered list.

    The first entry is the default.

    Args:
        exams: Exam names, in display order (non-empty).
        console: Console used for the prompt.

    Returns:
        The chosen exam name.
    """
    console.print("[bold]Which exam do you want to create/reshuffle?[/bold]")
    for number, exam in enumerate(exams, start=1):
        console.print(f"  [cyan]{number}[/cyan]) {escape(exam)}")

    choices = [str(number) for number in range(1, len(exams) + 1)]
    answer = Prompt.ask("Exam", choices=choices, default="1", console=console)
    return exams[int(answer) - 1]


def confirm_overwrite(exam: str, console: Console) -> bool:
    """Ask before replacing an existing exam folder. Defaults to no."""
    return Confirm.ask(
        f"Exam '{escape(exam)}' already exists. Overwrite and reshuffle?",
        default=False,
        console=console,
    )
