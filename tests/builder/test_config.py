"""
Unit tests for AssemblyConfig and ToolchainProfile.
"""

from pathlib import Path

import pytest

from exam_toolkit.builder import RUST_PROFILE, AssemblyConfig, ToolchainProfile


class TestToolchainProfile:
    """Tests for ToolchainProfile dataclass."""

    def test_rust_profile_generator_argv(self):
        assert RUST_PROFILE.generator_argv("queens") == ["cargo", "new", "--bin", "queens"]

    def test_rust_profile_template_files_in_order(self):
        assert RUST_PROFILE.template_files == ("main.rs", "lib.rs", "README.md", "Cargo.toml")

    def test_init_when_empty_command_then_raises_error(self):
        with pytest.raises(ValueError, match="command must not be empty"):
            ToolchainProfile(name="x", command=(), source_dir="src",
                             source_files=(), root_files=())

    def test_init_when_file_in_both_lists_then_raises_error(self):
        with pytest.raises(ValueError, match="both source and root"):
            ToolchainProfile(name="x", command=("gen",), source_dir="src",
                             source_files=("a.rs",), root_files=("a.rs",))

    def test_init_when_nested_path_then_raises_error(self):
        with pytest.raises(ValueError, match="plain file name"):
            ToolchainProfile(name="x", command=("gen",), source_dir="src",
                             source_files=("nested/a.rs",), root_files=())


class TestAssemblyConfig:
    """Tests for AssemblyConfig dataclass."""

    def test_init_when_relative_paths_then_made_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        config = AssemblyConfig(library_root=Path("lib"), output_root=Path("exercice"))

        assert config.library_root == tmp_path / "lib"
        assert config.output_root == tmp_path / "exercice"
        assert config.exam_dir("algo") == tmp_path / "exercice" / "algo"

    def test_init_defaults(self, tmp_path):
        config = AssemblyConfig(library_root=tmp_path / "lib", output_root=tmp_path / "out")

        assert config.seed is None
        assert config.profile is RUST_PROFILE

    def test_init_when_same_roots_then_raises_error(self, tmp_path):
        with pytest.raises(ValueError, match="must differ"):
            AssemblyConfig(library_root=tmp_path, output_root=tmp_path)

    def test_init_when_negative_seed_then_raises_error(self, tmp_path):
        with pytest.raises(ValueError, match="seed must be non-negative"):
            AssemblyConfig(library_root=tmp_path / "lib", output_root=tmp_path / "out", seed=-1)
