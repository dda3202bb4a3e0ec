"""
Module: builder.templates

Purpose:
    Overlay an exercise's template files onto a scaffolded project.
    Every recognised file is optional; present files replace the
    scaffold's defaults.

Key Functions:
    - materialize(): Copy template files into a project
    - template_destination(): Where a template file lands in the project

Key Classes:
    - CopyFailure: A present template file could not be copied

Dependencies:
    - shutil (std)
    - builder.config: ToolchainProfile

Used By:
    - builder.controller: Main assembly controller
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import List

from exam_toolkit.common.errors import ExamToolkitError

from .config import RUST_PROFILE, ToolchainProfile

logger = logging.getLogger(__name__)


class CopyFailure(ExamToolkitError):
    """Template file exists but could not be copied."""

    def __init__(self, filename: str, message: str):
        super().__init__(message)
        self.filename = filename


def template_destination(project_path: Path, filename: str, profile: ToolchainProfile) -> Path:
    """
    Resolve where a template file is placed inside the project.

    Source files go to the profile's source subfolder, everything else to
    the project root.

    Example:
        >>> template_destination(Path("queens"), "lib.rs", RUST_PROFILE)
        PosixPath('queens/src/lib.rs')
        >>> template_destination(Path("queens"), "Cargo.toml", RUST_PROFILE)
        PosixPath('queens/Cargo.toml')
    """
    if filename in profile.source_files:
        return project_path / profile.source_dir / filename
    return project_path / filename


def materialize(
    exercise_source: Path,
    project_path: Path,
    profile: ToolchainProfile = RUST_PROFILE,
) -> List[Path]:
    """
    Copy the exercise's template files into a scaffolded project.

    Only files that exist in ``exercise_source`` are copied; an exercise
    may ship, say, only ``lib.rs``.

    Args:
        exercise_source: Exercise folder in the library
        project_path: Scaffolded project directory
        profile: Toolchain profile listing the recognised files

    Returns:
        Destination paths of the files copied, in profile order

    Raises:
        CopyFailure: If a present file cannot be read or written
    """
    copied: List[Path] = []

    for filename in profile.template_files:
        src = exercise_source / filename
        if not src.is_file():
            continue

        dest = template_destination(project_path, filename, profile)
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy(src, dest)
        except OSError as e:
            raise CopyFailure(filename, f"Failed to copy {filename} from {exercise_source}: {e}") from e

        logger.debug(f"Copied {src} -> {dest}")
        copied.append(dest)

    return copied
