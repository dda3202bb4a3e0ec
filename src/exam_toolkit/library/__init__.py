"""
Module: library

Purpose:
    Discovery of the content library (exam → level → exercise).

Key Classes:
    - LibraryIndex: Directory-backed library reader
    - Exercise, Level, ExamPlan: Library data types
"""

from .models import Catalog, ExamPlan, Exercise, Level
from .index import (
    DiscoveryError,
    EmptyLibraryError,
    LibraryIndex,
    LibraryNotFoundError,
)

__all__ = [
    "Catalog",
    "ExamPlan",
    "Exercise",
    "Level",
    "LibraryIndex",
    "DiscoveryError",
    "EmptyLibraryError",
    "LibraryNotFoundError",
]
