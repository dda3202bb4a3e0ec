"""
Module: builder.controller

Purpose:
    Orchestrate the complete exam assembly pipeline.
    Discover → Choose exam → Confirm overwrite → Draw → Scaffold → Overlay

Key Functions:
    - assemble_exam(): Main entry point for assembling an exam

Key Classes:
    - AssemblyResult: Outcome of one assembly run
    - AssemblyOutcome: DONE or ABORTED
    - ProgressEvent: Per-level progress notification
    - AssemblyError: Exception for pipeline failures
    - CleanupFailure: Existing exam folder could not be removed

Dependencies:
    - library.index: Library discovery
    - builder.selection: Exercise draw
    - builder.scaffold: Project generation
    - builder.templates: Template overlay

Used By:
    - cli.app: Interactive front end
"""

from __future__ import annotations

import logging
import random
import shutil
import time
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

from exam_toolkit.common.errors import ExamToolkitError
from exam_toolkit.library import ExamPlan, Exercise, Level, LibraryIndex

from .config import AssemblyConfig
from .scaffold import CommandSkeletonGenerator, SkeletonGenerator, scaffold
from .selection import make_rng, plan_exam
from .templates import materialize

logger = logging.getLogger(__name__)


class AssemblyError(ExamToolkitError):
    """Error during the assembly pipeline."""
    pass


class CleanupFailure(AssemblyError):
    """Existing exam folder could not be deleted before reshuffling."""
    pass


class AssemblyOutcome(Enum):
    DONE = "done"
    ABORTED = "aborted"


class ProgressKind(Enum):
    STARTED = "started"
    LEVEL_CREATED = "level_created"
    LEVEL_SKIPPED = "level_skipped"


@dataclass(frozen=True)
class ProgressEvent:
    """
    Progress notification emitted while assembling (immutable).

    Attributes:
        kind: What happened
        exam: Exam being assembled
        ordinal: Output level number (None for STARTED)
        level_path: Source level folder (None for STARTED)
        exercise: Chosen exercise (LEVEL_CREATED only)
        project_path: Created project directory (LEVEL_CREATED only)
    """
    kind: ProgressKind
    exam: str
    ordinal: Optional[int] = None
    level_path: Optional[Path] = None
    exercise: Optional[Exercise] = None
    project_path: Optional[Path] = None


@dataclass(frozen=True)
class AssemblyResult:
    """
    Complete assembly result (immutable).

    Attributes:
        outcome: DONE when levels were processed, ABORTED when the
            operator declined to overwrite an existing exam
        exam: Chosen exam name
        exam_dir: Output folder of the exam
        plan: Exercises drawn (None when aborted)
        projects: Created project directories, in level order

    Example:
        >>> result = assemble_exam(config, choose_exam=..., confirm_overwrite=...)
        >>> [p.relative_to(config.output_root).as_posix() for p in result.projects]
        ['algo/1/sort', 'algo/2/graph']
    """
    outcome: AssemblyOutcome
    exam: str
    exam_dir: Path
    plan: Optional[ExamPlan] = None
    projects: Tuple[Path, ...] = ()

    @property
    def skipped(self) -> Tuple[int, ...]:
        return self.plan.skipped if self.plan else ()


ProgressCallback = Callable[[ProgressEvent], None]


def assemble_exam(
    config: AssemblyConfig,
    *,
    choose_exam: Callable[[Sequence[str]], str],
    confirm_overwrite: Callable[[str], bool],
    generator: Optional[SkeletonGenerator] = None,
    rng: Optional[random.Random] = None,
    on_progress: Optional[ProgressCallback] = None,
) -> AssemblyResult:
    """
    Assemble an exam from start to finish.

    Pipeline:
    1. Discover exams in the library
    2. Let the operator choose one
    3. If its output folder exists, ask before deleting it
    4. Draw one exercise per non-empty level
    5. For each level: scaffold a project and overlay its templates

    Any failure aborts the whole run; levels finished before the failure
    stay on disk.

    Args:
        config: Assembly configuration
        choose_exam: Picks one exam name from the discovered list
        confirm_overwrite: Returns True to replace an existing exam folder
        generator: Skeleton generator (default runs the profile command)
        rng: Random source (default built from config.seed)
        on_progress: Receives a ProgressEvent per milestone

    Returns:
        AssemblyResult describing what was created

    Raises:
        DiscoveryError: If the library is missing or empty
        CleanupFailure: If the existing exam folder cannot be deleted
        ScaffoldError: If a project cannot be generated or moved
        CopyFailure: If a template file cannot be copied
        AssemblyError: For any other pipeline failure
    """
    emit = on_progress or (lambda event: None)
    if generator is None:
        generator = CommandSkeletonGenerator(config.profile)
    if rng is None:
        rng = make_rng(config.seed)
    index = LibraryIndex(config.library_root)

    # 1. Discover
    exams = index.list_exams()
    logger.info(f"Found {len(exams)} exams in {index.root}")

    # 2. Choose
    exam = choose_exam(exams)
    if exam not in exams:
        raise AssemblyError(f"Unknown exam {exam!r}; available: {', '.join(exams)}")
    exam_dir = config.exam_dir(exam)

    # 3. Overwrite handling
    if exam_dir.exists():
        if not confirm_overwrite(exam):
            logger.info(f"Overwrite of {exam_dir} declined")
            return AssemblyResult(outcome=AssemblyOutcome.ABORTED, exam=exam, exam_dir=exam_dir)
        _remove_existing(exam_dir)

    start_time = time.perf_counter()
    emit(ProgressEvent(kind=ProgressKind.STARTED, exam=exam))

    # 4. Draw
    levels = index.load_levels(exam)
    plan = plan_exam(exam, levels, rng)
    logger.info(f"Drew {len(plan)} exercises across {len(levels)} levels of {exam}")

    try:
        exam_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise AssemblyError(f"Failed to create exam folder {exam_dir}: {e}") from e

    # 5. Build each level in order
    projects: List[Path] = []
    for level in levels:
        exercise = plan.picks.get(level.ordinal)
        if exercise is None:
            logger.info(f"Level {level.ordinal} skipped: no exercises in {level.source_path}")
            emit(ProgressEvent(
                kind=ProgressKind.LEVEL_SKIPPED,
                exam=exam,
                ordinal=level.ordinal,
                level_path=level.source_path,
            ))
            continue

        project_path = _build_level(config, exam_dir, level, exercise, generator)
        projects.append(project_path)
        emit(ProgressEvent(
            kind=ProgressKind.LEVEL_CREATED,
            exam=exam,
            ordinal=level.ordinal,
            level_path=level.source_path,
            exercise=exercise,
            project_path=project_path,
        ))

    elapsed = time.perf_counter() - start_time
    logger.info(f"Assembled {exam} ({len(projects)} projects) in {elapsed:.2f}s")

    return AssemblyResult(
        outcome=AssemblyOutcome.DONE,
        exam=exam,
        exam_dir=exam_dir,
        plan=plan,
        projects=tuple(projects),
    )


def _build_level(
    config: AssemblyConfig,
    exam_dir: Path,
    level: Level,
    exercise: Exercise,
    generator: SkeletonGenerator,
) -> Path:
    """Scaffold and overlay one level's project; returns its directory."""
    level_dir = exam_dir / str(level.ordinal)
    try:
        level_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise AssemblyError(f"Failed to create level folder {level_dir}: {e}") from e

    project_path = scaffold(level_dir / exercise.name, exercise.name, generator)
    copied = materialize(exercise.source_path, project_path, config.profile)
    logger.debug(f"Level {level.ordinal}: {exercise.name} with {len(copied)} template files")
    return project_path


def _remove_existing(exam_dir: Path) -> None:
    """
    Delete a previous exam folder recursively.

    Raises:
        CleanupFailure: If deletion fails
    """
    logger.info(f"Removing existing exam folder {exam_dir}")
    try:
        if exam_dir.is_dir() and not exam_dir.is_symlink():
            shutil.rmtree(exam_dir)
        else:
            exam_dir.unlink()
    except OSError as e:
        raise CleanupFailure(f"Failed to remove existing exam folder {exam_dir}: {e}") from e
