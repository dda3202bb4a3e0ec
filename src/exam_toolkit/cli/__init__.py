"""Interactive terminal front end for the exam toolkit."""

from .app import build_parser, main

__all__ = ["build_parser", "main"]
