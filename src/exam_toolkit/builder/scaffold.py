"""
Module: builder.scaffold

Purpose:
    Create an empty buildable project skeleton for an exercise by running
    an external project generator, then move it into place.

Key Functions:
    - scaffold(): Generate a skeleton and relocate it to its destination

Key Classes:
    - SkeletonGenerator: Abstract generator interface
    - CommandSkeletonGenerator: Runs the toolchain command (cargo new)
    - ScaffoldError: Base error for scaffolding
    - GeneratorFailure: Generator missing or exited non-zero
    - RelocationFailure: Generated project could not be moved into place

Dependencies:
    - subprocess (std)
    - shutil (std)
    - builder.config: ToolchainProfile

Used By:
    - builder.controller: Main assembly controller
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from exam_toolkit.common.errors import ExamToolkitError

from .config import RUST_PROFILE, ToolchainProfile

logger = logging.getLogger(__name__)


class ScaffoldError(ExamToolkitError):
    """Error while scaffolding a project."""
    pass


class GeneratorFailure(ScaffoldError):
    """External generator could not run or exited non-zero."""

    def __init__(self, message: str, *, returncode: Optional[int] = None, output: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.output = output

    def __str__(self) -> str:
        base = super().__str__()
        if self.output:
            return f"{base}\n{self.output.rstrip()}"
        return base


class RelocationFailure(ScaffoldError):
    """Generated project could not be moved to its destination."""
    pass


class SkeletonGenerator(ABC):
    """
    Abstract interface for creating project skeletons.

    Implementations create ``<parent_dir>/<name>/`` containing a minimal
    buildable project and return that path.
    """

    @abstractmethod
    def generate_skeleton(self, name: str, parent_dir: Path) -> Path:
        """
        Create a project named ``name`` inside ``parent_dir``.

        Args:
            name: Project name (also the folder name)
            parent_dir: Existing directory to create the project in

        Returns:
            Path of the generated project directory

        Raises:
            GeneratorFailure: If generation fails
        """
        pass


class CommandSkeletonGenerator(SkeletonGenerator):
    """
    Generator backed by an external command such as ``cargo new --bin``.

    The command runs with ``cwd=parent_dir`` and blocks until it exits;
    there is no timeout.
    """

    def __init__(self, profile: ToolchainProfile = RUST_PROFILE):
        self.profile = profile

    def generate_skeleton(self, name: str, parent_dir: Path) -> Path:
        argv = self.profile.generator_argv(name)
        logger.debug(f"Running {' '.join(argv)} in {parent_dir}")

        try:
            completed = subprocess.run(
                argv,
                cwd=parent_dir,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            raise GeneratorFailure(f"Failed to run {argv[0]}: {e}") from e

        if completed.returncode != 0:
            output = (completed.stderr or "") + (completed.stdout or "")
            raise GeneratorFailure(
                f"{argv[0]} failed for {name} (exit code {completed.returncode})",
                returncode=completed.returncode,
                output=output,
            )
        return parent_dir / name


def scaffold(
    destination: Path,
    exercise_name: str,
    generator: SkeletonGenerator,
    *,
    staging_dir: Optional[Path] = None,
) -> Path:
    """
    Generate a project skeleton and move it to ``destination``.

    The skeleton is created under ``staging_dir`` (default: the parent of
    ``destination``) with the exercise name, then renamed to
    ``destination`` when the two paths differ.

    Args:
        destination: Final project directory (must not exist yet)
        exercise_name: Project name passed to the generator
        generator: Skeleton generator
        staging_dir: Directory the generator runs in

    Returns:
        The destination path

    Raises:
        GeneratorFailure: If the generator fails
        RelocationFailure: If the destination parent is missing or the
            move cannot complete

    Example:
        >>> scaffold(Path("/out/algo/1/sort"), "sort", CommandSkeletonGenerator())
        PosixPath('/out/algo/1/sort')
    """
    if not destination.parent.is_dir():
        raise RelocationFailure(f"Destination parent does not exist: {destination.parent}")

    parent = staging_dir if staging_dir is not None else destination.parent
    generated = generator.generate_skeleton(exercise_name, parent)

    if not generated.is_dir():
        raise RelocationFailure(f"Generator did not create {generated}")

    if generated.resolve() != destination.resolve():
        if destination.exists():
            raise RelocationFailure(f"Destination already exists: {destination}")
        try:
            shutil.move(str(generated), str(destination))
        except OSError as e:
            raise RelocationFailure(
                f"Failed to move project from {generated} to {destination}: {e}"
            ) from e
        logger.debug(f"Moved {generated} to {destination}")

    return destination
