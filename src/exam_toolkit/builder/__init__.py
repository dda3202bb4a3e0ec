"""
Module: builder

Purpose:
    Exam assembly pipeline: draws one exercise per level from the library
    and scaffolds a runnable project for each pick.

Key Functions:
    - assemble_exam(): Main entry point
    - scaffold(): Generate a project skeleton
    - materialize(): Overlay template files

Key Classes:
    - AssemblyConfig: Configuration for assembly
    - ToolchainProfile: Generator command and template layout
    - SkeletonGenerator: Abstract project generator

Dependencies:
    - subprocess (std): External project generator
    - exam_toolkit.library: Library discovery

Used By:
    - exam_toolkit.cli: Terminal front end
"""

from .config import AssemblyConfig, ToolchainProfile, RUST_PROFILE
from .scaffold import (
    CommandSkeletonGenerator,
    GeneratorFailure,
    RelocationFailure,
    ScaffoldError,
    SkeletonGenerator,
    scaffold,
)
from .templates import CopyFailure, materialize
from .selection import SelectionError, choose, make_rng, plan_exam
from .controller import (
    AssemblyError,
    AssemblyOutcome,
    AssemblyResult,
    CleanupFailure,
    ProgressEvent,
    ProgressKind,
    assemble_exam,
)

__all__ = [
    # Config
    "AssemblyConfig",
    "ToolchainProfile",
    "RUST_PROFILE",
    # Selection
    "SelectionError",
    "choose",
    "make_rng",
    "plan_exam",
    # Scaffolding
    "SkeletonGenerator",
    "CommandSkeletonGenerator",
    "ScaffoldError",
    "GeneratorFailure",
    "RelocationFailure",
    "scaffold",
    # Templates
    "CopyFailure",
    "materialize",
    # Controller
    "assemble_exam",
    "AssemblyResult",
    "AssemblyOutcome",
    "AssemblyError",
    "CleanupFailure",
    "ProgressEvent",
    "ProgressKind",
]
