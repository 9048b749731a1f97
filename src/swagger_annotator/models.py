from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, ConfigDict


class ShapeKind(str, Enum):
    PLAIN = "plain"
    GENERIC = "generic"
    ALIAS = "alias"


class TypeShape(BaseModel):
    """Syntactic classification of one named type declaration.

    Declarations that receive no annotation (basic-type aliases, interfaces,
    pointers and so on) have no shape at all and are represented by ``None``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    kind: ShapeKind = ShapeKind.PLAIN
    base_type_name: str | None = None
    inner_type_name: str | None = None

    @property
    def is_generic_instantiation(self) -> bool:
        return self.kind is ShapeKind.GENERIC

    @property
    def is_alias(self) -> bool:
        return self.kind is ShapeKind.ALIAS


@dataclass(frozen=True)
class ProcessingError:
    path: str
    message: str

    def __str__(self) -> str:
        return f"processing {self.path}: {self.message}"


@dataclass
class ProcessingResult:
    files_processed: int = 0
    annotations_added: int = 0
    annotations_replaced: int = 0
    errors: list[ProcessingError] = field(default_factory=list)

    def add_file(self) -> None:
        self.files_processed += 1

    def add_annotation(self) -> None:
        self.annotations_added += 1

    def replace_annotation(self) -> None:
        self.annotations_replaced += 1

    def add_error(self, path: str, message: str) -> None:
        self.errors.append(ProcessingError(path=path, message=message))

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def summary(self) -> str:
        return (
            f"Processed {self.files_processed} files, "
            f"added {self.annotations_added} annotations, "
            f"replaced {self.annotations_replaced} annotations, "
            f"{len(self.errors)} errors"
        )
