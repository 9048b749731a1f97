from tree_sitter import Node

from swagger_annotator.core.syntax import Declaration
from swagger_annotator.models import ShapeKind, TypeShape

BASIC_TYPES = frozenset(
    {
        "string",
        "bool",
        "byte",
        "rune",
        "int",
        "int32",
        "int64",
        "uint",
        "uint32",
        "uint64",
        "float32",
        "float64",
    }
)


def _text(node: Node) -> str:
    return (node.text or b"").decode("utf-8")


def _type_arguments(generic: Node) -> list[Node]:
    arguments = generic.child_by_field_name("type_arguments")
    if arguments is None:
        return []
    result = []
    for child in arguments.named_children:
        # Newer grammars wrap each argument in a type_elem (for unions).
        if child.type == "type_elem" and child.named_child_count == 1:
            child = child.named_children[0]
        result.append(child)
    return result


def _generic_shape(name: str, generic: Node) -> TypeShape | None:
    arguments = _type_arguments(generic)
    if len(arguments) != 1:
        return None

    base = generic.child_by_field_name("type")
    if base is None or base.type != "type_identifier":
        return TypeShape(name=name)

    base_name = _text(base)
    inner = arguments[0]
    return TypeShape(
        name=name,
        kind=ShapeKind.GENERIC if base_name == name else ShapeKind.ALIAS,
        base_type_name=base_name,
        inner_type_name=_text(inner) if inner.type == "type_identifier" else None,
    )


def extract_type_shape(declaration: Declaration) -> TypeShape | None:
    """Classify a declaration by the syntax of its right-hand side.

    Structs get a plain shape, single-argument generics and renames of
    non-basic named types get a generic or alias shape. Everything else,
    including aliases of basic types, has no shape and is never annotated.
    """
    type_node = declaration.type_node
    if type_node is None:
        return None

    if type_node.type == "struct_type":
        return TypeShape(name=declaration.name)

    if type_node.type == "generic_type":
        return _generic_shape(declaration.name, type_node)

    if type_node.type == "type_identifier":
        if _text(type_node) in BASIC_TYPES:
            return None
        return TypeShape(name=declaration.name, kind=ShapeKind.ALIAS)

    return None
