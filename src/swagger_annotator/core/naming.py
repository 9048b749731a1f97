import logging
from collections.abc import Iterable

from swagger_annotator.config import SEARCH_RESPONSE_TYPE, Variant
from swagger_annotator.core.shapes import extract_type_shape
from swagger_annotator.core.syntax import Declaration
from swagger_annotator.models import TypeShape

logger = logging.getLogger(__name__)

# Zero-based line index -> annotation name (without prefix).
AnnotationPlan = dict[int, str]


def _strip_payload_suffix(name: str) -> str:
    return name.removesuffix("Response").removesuffix("Request")


def _wraps_search_response(shape: TypeShape) -> bool:
    return (shape.is_generic_instantiation or shape.is_alias) and shape.base_type_name == SEARCH_RESPONSE_TYPE


def _candidates(declarations: Iterable[Declaration], ignored: frozenset[str]) -> Iterable[Declaration]:
    return (d for d in declarations if d.exported and d.name not in ignored)


def find_search_response_inner_types(
    declarations: Iterable[Declaration], ignored: frozenset[str]
) -> frozenset[str]:
    """Collect the element types of every ``SearchResponse`` wrapper in a file."""
    inner_types = set()
    for declaration in _candidates(declarations, ignored):
        shape = extract_type_shape(declaration)
        if shape is not None and _wraps_search_response(shape) and shape.inner_type_name:
            inner_types.add(shape.inner_type_name)
    return frozenset(inner_types)


def generate_annotation_names(
    shape: TypeShape | None, variant: Variant, inner_types: frozenset[str]
) -> tuple[str | None, str | None]:
    """Return ``(primary, item)`` annotation names for a declaration.

    A ``SearchResponse`` wrapper is always a response envelope and keeps the
    ``Res`` suffix; its element type gets an item name with the file's
    variant suffix. Any other type is named after itself, as an item when some
    wrapper in the file lists it as its element type.
    """
    if shape is None:
        return None, None

    if _wraps_search_response(shape):
        primary = shape.name + Variant.RESPONSE.suffix
        item = None
        if shape.inner_type_name:
            item = _strip_payload_suffix(shape.inner_type_name) + variant.item_suffix
        return primary, item

    base = _strip_payload_suffix(shape.name)
    if shape.name in inner_types:
        return base + variant.item_suffix, None
    return base + variant.suffix, None


def _find_item_target(
    declarations: list[Declaration], name: str, ignored: frozenset[str]
) -> Declaration | None:
    for declaration in declarations:
        if declaration.name == name and name not in ignored:
            return declaration
    return None


def build_annotation_plan(
    declarations: list[Declaration],
    variant: Variant,
    ignored: frozenset[str],
    inner_types: frozenset[str],
) -> AnnotationPlan:
    """Assign annotation names to declaration end lines, in declaration order.

    The first declaration to produce a name claims it; later declarations
    producing the same name are skipped.
    """
    plan: AnnotationPlan = {}
    claimed: dict[str, int] = {}

    for declaration in _candidates(declarations, ignored):
        shape = extract_type_shape(declaration)
        primary, item = generate_annotation_names(shape, variant, inner_types)
        if shape is None or primary is None:
            continue

        if primary not in claimed:
            plan[declaration.end_row] = primary
            claimed[primary] = declaration.end_row
        elif claimed[primary] != declaration.end_row:
            logger.warning("Skipping %s: annotation name %s is already assigned", declaration.name, primary)

        if item is None or item in claimed or not shape.inner_type_name:
            continue
        target = _find_item_target(declarations, shape.inner_type_name, ignored)
        if target is not None:
            plan[target.end_row] = item
            claimed[item] = target.end_row

    return plan
