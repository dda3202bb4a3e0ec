"""
Module: builder.config

Purpose:
    Configuration dataclasses for the assembly pipeline. Immutable
    configuration with validation on construction.

Key Classes:
    - ToolchainProfile: Generator command and template file layout
    - AssemblyConfig: Main configuration for assembling an exam

Key Constants:
    - RUST_PROFILE: Cargo-based profile (default)

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - builder.controller: Main assembly controller
    - builder.scaffold: Generator command
    - builder.templates: Template file layout
    - cli.app: Built from command-line arguments
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple


@dataclass(frozen=True)
class ToolchainProfile:
    """
    Describes how projects are generated and which templates overlay them.

    Attributes:
        name: Display name of the toolchain
        command: Generator argv; the exercise name is appended
        source_dir: Source subfolder created by the generator
        source_files: Template files copied into source_dir
        root_files: Template files copied to the project root

    Invariants:
        - command is non-empty
        - source_files and root_files are disjoint plain file names

    Example:
        >>> RUST_PROFILE.generator_argv("queens")
        ['cargo', 'new', '--bin', 'queens']
    """
    name: str
    command: Tuple[str, ...]
    source_dir: str
    source_files: Tuple[str, ...]
    root_files: Tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate profile on construction."""
        if not self.command:
            raise ValueError(f"command must not be empty for profile {self.name!r}")
        overlap = set(self.source_files) & set(self.root_files)
        if overlap:
            raise ValueError(f"files listed as both source and root: {sorted(overlap)}")
        for filename in (self.source_dir, *self.source_files, *self.root_files):
            if not filename or Path(filename).name != filename:
                raise ValueError(f"expected a plain file name: {filename!r}")

    @property
    def template_files(self) -> Tuple[str, ...]:
        return self.source_files + self.root_files

    def generator_argv(self, project_name: str) -> list[str]:
        return [*self.command, project_name]


RUST_PROFILE = ToolchainProfile(
    name="rust",
    command=("cargo", "new", "--bin"),
    source_dir="src",
    source_files=("main.rs", "lib.rs"),
    root_files=("README.md", "Cargo.toml"),
)


@dataclass(frozen=True)
class AssemblyConfig:
    """
    Configuration for assembling an exam (immutable).

    Paths are made absolute on construction so no component depends on
    the process working directory afterwards.

    Attributes:
        library_root: Root of the content library
        output_root: Folder that receives <exam>/<level>/<exercise>/
        seed: Random seed for reproducible draws (None = OS entropy)
        profile: Toolchain used to scaffold projects

    Example:
        >>> config = AssemblyConfig(
        ...     library_root=Path("lib"),
        ...     output_root=Path("exercice"),
        ... )
        >>> config.exam_dir("exam_2")
        PosixPath('/home/me/work/exercice/exam_2')
    """

    # Required
    library_root: Path
    output_root: Path

    # Selection behavior
    seed: Optional[int] = None

    # Scaffolding
    profile: ToolchainProfile = field(default=RUST_PROFILE)

    def __post_init__(self) -> None:
        """Normalise paths and validate configuration on construction."""
        # frozen: assign through object.__setattr__
        object.__setattr__(self, "library_root", Path(self.library_root).expanduser().absolute())
        object.__setattr__(self, "output_root", Path(self.output_root).expanduser().absolute())
        if self.library_root == self.output_root:
            raise ValueError(f"output_root must differ from library_root: {self.output_root}")
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"seed must be non-negative: {self.seed}")

    def exam_dir(self, exam: str) -> Path:
        """Output folder for an exam."""
        return self.output_root / exam
