"""
Tests for the declared runtime dependencies.
"""

import re
from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SOURCE_DIRS = ("synapse", "backend")


def _declared_modules() -> list[str]:
    with open(PROJECT_ROOT / "pyproject.toml", "rb") as f:
        project = tomllib.load(f)["project"]
    names = [re.split(r"[\[<>=!~ ]", spec, maxsplit=1)[0] for spec in project["dependencies"]]
    return [name.lower().replace("-", "_") for name in names]


def _imported_modules() -> set[str]:
    pattern = re.compile(r"^\s*(?:from|import)\s+([A-Za-z_]\w*)", re.MULTILINE)
    modules = set()
    for directory in SOURCE_DIRS:
        for path in (PROJECT_ROOT / directory).rglob("*.py"):
            modules.update(pattern.findall(path.read_text(encoding="utf-8")))
    return {module.lower() for module in modules}


class TestRuntimeDependencies:
    """Every runtime dependency is imported by the application code."""

    def test_each_dependency_is_imported(self):
        unused = [name for name in _declared_modules() if name not in _imported_modules()]
        assert unused == []

    def test_core_stack_is_declared(self):
        declared = _declared_modules()
        for module in ("sqlalchemy", "pydantic_settings", "structlog", "fastapi", "alembic"):
            assert module in declared
