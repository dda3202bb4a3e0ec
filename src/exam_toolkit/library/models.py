"""
Module: library.models

Purpose:
    Immutable data types describing the content library and the exam plan
    drawn from it.

Key Classes:
    - Exercise: One exercise folder (template bundle)
    - Level: A numbered group of exercise candidates
    - ExamPlan: One chosen exercise per non-empty level

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - library.index: Catalog construction
    - builder.selection: Exercise draw
    - builder.controller: Assembly pipeline
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Tuple


@dataclass(frozen=True)
class Exercise:
    """
    A named template bundle inside a level folder (immutable).

    The template files themselves (entry-point source, library source,
    readme, manifest) are all optional and resolved at copy time.

    Attributes:
        name: Exercise name, equal to its folder name
        source_path: Absolute path of the exercise folder in the library
    """
    name: str
    source_path: Path


@dataclass(frozen=True)
class Level:
    """
    A level of an exam with its exercise candidates (immutable).

    Attributes:
        ordinal: Dense 1-based output number (position in sorted order)
        source_path: Absolute path of the level folder in the library
        exercises: Candidate exercises, sorted by name (may be empty)

    Invariants:
        - ordinal >= 1
    """
    ordinal: int
    source_path: Path
    exercises: Tuple[Exercise, ...] = ()

    def __post_init__(self) -> None:
        if self.ordinal < 1:
            raise ValueError(f"ordinal must be >= 1: {self.ordinal}")

    @property
    def folder_name(self) -> str:
        """Original folder name in the library (e.g. "5")."""
        return self.source_path.name

    @property
    def is_empty(self) -> bool:
        return not self.exercises


Catalog = Dict[str, List[Level]]


@dataclass(frozen=True)
class ExamPlan:
    """
    Exercises chosen for one exam assembly (immutable).

    Attributes:
        exam: Exam name
        picks: Mapping of output level ordinal to the chosen exercise
        skipped: Ordinals of levels that had no candidates

    Example:
        >>> plan.picks[1].name
        'search'
        >>> plan.skipped
        (2,)
    """
    exam: str
    picks: Dict[int, Exercise] = field(default_factory=dict)
    skipped: Tuple[int, ...] = ()

    def __iter__(self) -> Iterator[Tuple[int, Exercise]]:
        return iter(sorted(self.picks.items()))

    def __len__(self) -> int:
        return len(self.picks)
