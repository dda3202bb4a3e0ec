"""Common utilities shared across the toolkit."""

from __future__ import annotations

from .errors import ExamToolkitError
from .path_utils import level_sort_key, list_subdirectories

__all__ = [
    "ExamToolkitError",
    "level_sort_key",
    "list_subdirectories",
]
