import pytest
import sys
from pathlib import Path
from typing import Dict, List, Optional, Set

# Add src to sys.path so we can import exam_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from exam_toolkit.builder.scaffold import GeneratorFailure, SkeletonGenerator


class FakeSkeletonGenerator(SkeletonGenerator):
    """Creates a cargo-like skeleton without running any external tool."""

    def __init__(self, fail_on: Optional[Set[str]] = None, with_main: bool = True):
        self.fail_on = set(fail_on or ())
        self.with_main = with_main
        self.calls: List[tuple[str, Path]] = []

    def generate_skeleton(self, name: str, parent_dir: Path) -> Path:
        self.calls.append((name, parent_dir))
        if name in self.fail_on:
            raise GeneratorFailure(f"fake generator failed for {name}", returncode=101)
        project = parent_dir / name
        (project / "src").mkdir(parents=True)
        (project / "Cargo.toml").write_text(f'[package]\nname = "{name}"\n')
        if self.with_main:
            (project / "src" / "main.rs").write_text('fn main() { println!("Hello, world!"); }\n')
        return project


LibraryLayout = Dict[str, Dict[str, Dict[str, Dict[str, str]]]]


def write_library(root: Path, layout: LibraryLayout) -> Path:
    """Write {exam: {level: {exercise: {filename: content}}}} under root."""
    root.mkdir(parents=True, exist_ok=True)
    for exam, levels in layout.items():
        (root / exam).mkdir(exist_ok=True)
        for level, exercises in levels.items():
            level_dir = root / exam / level
            level_dir.mkdir(exist_ok=True)
            for exercise, files in exercises.items():
                exercise_dir = level_dir / exercise
                exercise_dir.mkdir(exist_ok=True)
                for filename, content in files.items():
                    (exercise_dir / filename).write_text(content)
    return root


# Common test fixtures
@pytest.fixture
def fake_generator():
    """Return a fake skeleton generator that always succeeds."""
    return FakeSkeletonGenerator()


@pytest.fixture
def make_generator():
    """Return a factory for configurable fake generators."""
    return FakeSkeletonGenerator


@pytest.fixture
def make_library(tmp_path: Path):
    """Return a function that writes a library tree under tmp_path/lib."""
    def _make(layout: LibraryLayout) -> Path:
        return write_library(tmp_path / "lib", layout)
    return _make


@pytest.fixture
def algo_library(make_library):
    """Library with exam 'algo': level 1 (sort, search) and level 3 (graph)."""
    return make_library({
        "algo": {
            "1": {
                "sort": {"main.rs": "// sort main\n", "README.md": "# Sort\n"},
                "search": {"lib.rs": "// search lib\n"},
            },
            "3": {
                "graph": {"lib.rs": "// graph lib\n", "Cargo.toml": '[package]\nname = "graph"\nedition = "2021"\n'},
            },
        },
    })
