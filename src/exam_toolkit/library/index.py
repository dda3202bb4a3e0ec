"""
Module: library.index

Purpose:
    Read the content library's directory tree (exam → level → exercise)
    and expose it as an in-memory catalog. Only directories are
    considered; stray files are ignored.

Key Functions:
    - LibraryIndex.list_exams(): Exam names in the library
    - LibraryIndex.list_levels(): Ordered (ordinal, path) pairs for an exam
    - LibraryIndex.list_exercises(): Exercise names in a level folder
    - LibraryIndex.build_catalog(): Whole library as a Catalog

Key Classes:
    - LibraryIndex: Directory-backed library reader
    - DiscoveryError: Base error for discovery failures
    - LibraryNotFoundError: Library root (or exam) missing/unreadable
    - EmptyLibraryError: No exams in the library

Dependencies:
    - pathlib (std)
    - common.path_utils: Level ordering

Used By:
    - builder.controller: Assembly pipeline
    - cli.app: Exam selection prompt
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Tuple

from exam_toolkit.common.errors import ExamToolkitError
from exam_toolkit.common.path_utils import level_sort_key, list_subdirectories

from .models import Catalog, Exercise, Level

logger = logging.getLogger(__name__)


class DiscoveryError(ExamToolkitError):
    """Error discovering exams in the library."""
    pass


class LibraryNotFoundError(DiscoveryError):
    """Library root or exam folder is missing or unreadable."""
    pass


class EmptyLibraryError(DiscoveryError):
    """Library exists but holds no exam folders."""
    pass


class LibraryIndex:
    """
    Directory-backed view of the content library.

    Layout:
        <root>/<exam>/<level>/<exercise>/

    Every call re-reads the filesystem; nothing is cached between calls.

    Attributes:
        root: Absolute library root path

    Example:
        >>> index = LibraryIndex(Path("/data/lib"))
        >>> index.list_exams()
        ['exam_1', 'exam_2']
        >>> index.list_levels("exam_2")
        [(1, PosixPath('/data/lib/exam_2/1')), (2, PosixPath('/data/lib/exam_2/5'))]
    """

    def __init__(self, root: Path):
        self.root = Path(root).resolve()

    def __repr__(self) -> str:
        return f"LibraryIndex({str(self.root)!r})"

    def list_exams(self) -> List[str]:
        """
        List exam names, sorted by name.

        Returns:
            Exam folder names

        Raises:
            LibraryNotFoundError: If the root is missing or unreadable
            EmptyLibraryError: If the root holds no exam folders
        """
        if not self.root.is_dir():
            raise LibraryNotFoundError(f"Library not found: {self.root}")

        try:
            exams = [entry.name for entry in list_subdirectories(self.root)]
        except OSError as e:
            raise LibraryNotFoundError(f"Cannot read library {self.root}: {e}") from e

        if not exams:
            raise EmptyLibraryError(f"No exams found in {self.root}")

        logger.debug(f"Discovered {len(exams)} exams in {self.root}")
        return exams

    def exam_path(self, exam: str) -> Path:
        return self.root / exam

    def list_levels(self, exam: str) -> List[Tuple[int, Path]]:
        """
        List the levels of an exam in output order.

        Folders are sorted by numeric value (non-numeric names last, ties
        by name) and then numbered 1..N by position, so gaps in the source
        numbering disappear: folders "2" and "5" become levels 1 and 2.

        Args:
            exam: Exam name

        Returns:
            List of (ordinal, level_path) pairs

        Raises:
            LibraryNotFoundError: If the exam folder is missing or unreadable
        """
        exam_dir = self.exam_path(exam)
        if not exam_dir.is_dir():
            raise LibraryNotFoundError(f"Exam not found in library: {exam_dir}")

        try:
            folders = list_subdirectories(exam_dir)
        except OSError as e:
            raise LibraryNotFoundError(f"Cannot read exam {exam_dir}: {e}") from e

        folders.sort(key=level_sort_key)
        return [(ordinal, folder) for ordinal, folder in enumerate(folders, start=1)]

    def list_exercises(self, level_path: Path) -> List[str]:
        """
        List exercise names in a level folder, sorted by name.

        An empty level yields an empty list; that is not an error here.

        Raises:
            LibraryNotFoundError: If the level folder cannot be read
        """
        try:
            return [entry.name for entry in list_subdirectories(level_path)]
        except OSError as e:
            raise LibraryNotFoundError(f"Cannot read level {level_path}: {e}") from e

    def load_levels(self, exam: str) -> List[Level]:
        """Resolve every level of an exam together with its candidates."""
        levels = []
        for ordinal, level_path in self.list_levels(exam):
            exercises = tuple(
                Exercise(name=name, source_path=level_path / name)
                for name in self.list_exercises(level_path)
            )
            levels.append(Level(ordinal=ordinal, source_path=level_path, exercises=exercises))
        return levels

    def build_catalog(self) -> Catalog:
        """
        Read the whole library into a Catalog.

        Returns:
            Mapping of exam name to its ordered levels

        Raises:
            DiscoveryError: As for list_exams()
        """
        catalog: Catalog = {}
        for exam in self.list_exams():
            catalog[exam] = self.load_levels(exam)
        logger.debug(
            f"Catalog built: {sum(len(levels) for levels in catalog.values())} levels "
            f"across {len(catalog)} exams"
        )
        return catalog
