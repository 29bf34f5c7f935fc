"""Tests for project metadata."""

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


class TestProjectMetadata:
    def test_readme_not_design_notes(self):
        project = tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))["project"]
        assert project.get("readme") != "DESIGN.md"

    def test_runtime_dependencies(self):
        project = tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))["project"]
        names = {dep.split(">")[0].split("=")[0] for dep in project["dependencies"]}
        assert names == {"streamlit", "requests", "keyring"}
