"""Shared fixtures and helpers for tests."""

from collections.abc import Callable
from pathlib import Path

import pytest
from tree_sitter import Parser
from tree_sitter_language_pack import get_parser

from swagger_annotator.config import BASE_PATH, AnnotatorSettings

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _no_repository_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CI's GITHUB_REPOSITORY from leaking into project-name derivation."""
    monkeypatch.delenv("GITHUB_REPOSITORY", raising=False)


@pytest.fixture
def go_parser() -> Parser:
    """Return a tree-sitter parser for Go."""
    return get_parser("go")


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Return a project root with empty request and response directories."""
    root = tmp_path / "omp-rental"
    (root / BASE_PATH / "request").mkdir(parents=True)
    (root / BASE_PATH / "response").mkdir(parents=True)
    return root


@pytest.fixture
def settings(project_root: Path) -> AnnotatorSettings:
    return AnnotatorSettings(root=project_root, project="rental")


@pytest.fixture
def write_go(project_root: Path) -> Callable[[str, str], Path]:
    """Write a Go file below internal/delivery/http and return its path."""

    def _write(relative: str, source: str) -> Path:
        path = project_root / BASE_PATH / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding="utf-8")
        return path

    return _write
