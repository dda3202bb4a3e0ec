"""
Module: builder.selection.selector

Purpose:
    Uniform random draw of one exercise per level.

Key Functions:
    - choose(): Draw one exercise from a non-empty candidate set
    - plan_exam(): One independent draw per non-empty level
    - make_rng(): Build the random source from an optional seed

Key Classes:
    - SelectionError: Exception for invalid draws

Algorithm:
    Each level is an independent draw over its own candidates. There is
    no memory across levels or runs; only "one draw per level" is
    guaranteed, not any particular order of draws.

Dependencies:
    - random (std)
    - library.models: Exercise, Level, ExamPlan

Used By:
    - builder.controller: Main assembly controller
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional, Sequence

from exam_toolkit.common.errors import ExamToolkitError
from exam_toolkit.library.models import ExamPlan, Exercise, Level

logger = logging.getLogger(__name__)


class SelectionError(ExamToolkitError):
    """Error during exercise selection."""
    pass


def make_rng(seed: Optional[int] = None) -> random.Random:
    """
    Create the random source for a run.

    Args:
        seed: Fixed seed for reproducible draws, or None to seed from
            the operating system's entropy source

    Returns:
        A process-local random.Random instance
    """
    return random.Random(seed)


def choose(candidates: Sequence[Exercise], rng: random.Random) -> Exercise:
    """
    Pick one exercise uniformly at random.

    Args:
        candidates: Non-empty exercise candidates of one level
        rng: Random source

    Returns:
        The chosen exercise

    Raises:
        SelectionError: If candidates is empty

    Example:
        >>> choose(level.exercises, make_rng()).name in {"sort", "search"}
        True
    """
    if not candidates:
        raise SelectionError("Cannot choose from an empty candidate set")
    return rng.choice(list(candidates))


def plan_exam(
    exam: str,
    levels: Iterable[Level],
    rng: random.Random,
) -> ExamPlan:
    """
    Draw one exercise for every non-empty level.

    Empty levels are recorded in ``skipped`` and never reach choose().

    Args:
        exam: Exam name
        levels: Levels in output order
        rng: Random source

    Returns:
        ExamPlan mapping ordinal to chosen exercise
    """
    picks = {}
    skipped: List[int] = []
    for level in levels:
        if level.is_empty:
            skipped.append(level.ordinal)
            continue
        picks[level.ordinal] = choose(level.exercises, rng)
        logger.debug(f"Level {level.ordinal}: drew {picks[level.ordinal].name} "
                     f"from {len(level.exercises)} candidates")
    return ExamPlan(exam=exam, picks=picks, skipped=tuple(skipped))
