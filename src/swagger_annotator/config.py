import os
from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict

BASE_PATH = "internal/delivery/http"
PROJECT_ENV_VAR = "GITHUB_REPOSITORY"
PROJECT_NAME_PREFIX = "omp-"
DEFAULT_PROJECT_NAME = "project"
IGNORE_MARKER = "@swagger:ignore"
SEARCH_RESPONSE_TYPE = "SearchResponse"
FILE_PERMISSION = 0o644


class Variant(StrEnum):
    """Payload direction of a source directory; the value is the directory name."""

    REQUEST = "request"
    RESPONSE = "response"

    @property
    def suffix(self) -> str:
        return "Res" if self is Variant.RESPONSE else "Req"

    @property
    def item_suffix(self) -> str:
        return f"Item{self.suffix}"


SOURCE_DIRS: tuple[Variant, ...] = (Variant.REQUEST, Variant.RESPONSE)


def get_project_name(value: str) -> str:
    return value.removeprefix(PROJECT_NAME_PREFIX)


def get_project_prefix(root: Path | None = None) -> str:
    """Derive the project name from ``GITHUB_REPOSITORY`` or the root directory name."""
    repo = os.getenv(PROJECT_ENV_VAR, "")
    if repo:
        parts = repo.split("/")
        if len(parts) == 2:
            return get_project_name(parts[1])
    directory = root if root is not None else Path.cwd()
    name = directory.resolve().name
    if name:
        return get_project_name(name)
    return DEFAULT_PROJECT_NAME


class AnnotatorSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    root: Path
    project: str
    base_path: str = BASE_PATH
    source_dirs: tuple[Variant, ...] = SOURCE_DIRS

    @property
    def base_dir(self) -> Path:
        return self.root / self.base_path

    @classmethod
    def from_environment(cls, root: Path | None = None, project: str | None = None) -> "AnnotatorSettings":
        resolved_root = (root if root is not None else Path.cwd()).resolve()
        resolved_project = project if project else get_project_prefix(resolved_root)
        return cls(root=resolved_root, project=resolved_project)
