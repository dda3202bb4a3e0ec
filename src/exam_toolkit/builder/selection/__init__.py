"""
Module: builder.selection

Purpose:
    Random exercise selection for building exams.

Key Functions:
    - choose(): One uniform draw from a level
    - plan_exam(): One draw per non-empty level
    - make_rng(): Seedable random source

Used By:
    - builder.controller: Main assembly controller
"""

from .selector import SelectionError, choose, make_rng, plan_exam

__all__ = [
    "SelectionError",
    "choose",
    "make_rng",
    "plan_exam",
]
