"""Tests for generator run options."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from mib_to_py.generate.config import GenerateOptions


class TestGenerateOptions:
    """Tests for GenerateOptions."""

    def test_defaults(self) -> None:
        """Should write per-module files to the current directory."""
        options = GenerateOptions()
        assert options.out_dir == Path(".")
        assert options.output is None
        assert options.package == "mibs"
        assert options.paths == ()
        assert not options.combined
        assert not options.to_stdout

    def test_combined_file(self) -> None:
        """Should combine everything into the output file."""
        options = GenerateOptions(output="bindings.py")
        assert options.combined
        assert not options.to_stdout

    def test_stdout(self) -> None:
        """Should select standard output for '-'."""
        options = GenerateOptions(output="-")
        assert options.combined
        assert options.to_stdout

    def test_paths_coerced(self) -> None:
        """Should accept strings and lists for paths."""
        options = GenerateOptions(out_dir="out", paths=["a", "b"])  # type: ignore[arg-type]
        assert options.out_dir == Path("out")
        assert options.paths == (Path("a"), Path("b"))

    @pytest.mark.parametrize("package", ["mibs", "my_project.mibs", "_private"])
    def test_valid_package(self, package: str) -> None:
        """Should accept dotted Python identifiers."""
        assert GenerateOptions(package=package).package == package

    @pytest.mark.parametrize("package", ["", "my-mibs", "1mibs", "mibs.", "a..b"])
    def test_invalid_package(self, package: str) -> None:
        """Should reject package names that cannot be imported."""
        with pytest.raises(ValidationError):
            GenerateOptions(package=package)

    def test_extra_field_rejected(self) -> None:
        """Should reject unknown options."""
        with pytest.raises(ValidationError):
            GenerateOptions(force=True)  # type: ignore[call-arg]
