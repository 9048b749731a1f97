import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from tree_sitter import Node, Query, QueryCursor
from tree_sitter_language_pack import SupportedLanguage, get_language, get_parser

from swagger_annotator.errors import GoSyntaxError

logger = logging.getLogger(__name__)

_LANGUAGE: SupportedLanguage = "go"
GO_SUFFIX = ".go"


@lru_cache(maxsize=None)
def _load_query(query_type: str) -> Query:
    queries_dir = Path(__file__).parent.parent / "queries"
    query_path = queries_dir / f"{_LANGUAGE}_{query_type}.scm"
    if not query_path.exists():
        raise FileNotFoundError(f"Query file not found: {query_path}")
    query_text = query_path.read_text(encoding="utf-8")
    return Query(get_language(_LANGUAGE), query_text)


@dataclass(frozen=True)
class Comment:
    start_row: int
    end_row: int
    text: str
    standalone: bool


@dataclass(frozen=True)
class Declaration:
    """A named type declared at file scope.

    ``row`` is the line of the declared name and ``end_row`` the line holding
    the declaration's last token, where its directive lives. ``doc_row`` is
    the line a doc comment block has to end directly above.
    """

    name: str
    row: int
    end_row: int
    doc_row: int
    node: Node

    @property
    def exported(self) -> bool:
        return self.name[:1].isupper()

    @property
    def type_node(self) -> Node | None:
        return self.node.child_by_field_name("type")


@dataclass(frozen=True)
class GoFile:
    lines: list[str]
    declarations: list[Declaration]
    comments: list[Comment]


def _first_error(node: Node) -> Node:
    if node.is_error or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            return _first_error(child)
    return node


def _is_grouped(type_declaration: Node) -> bool:
    return any(child.type == "(" for child in type_declaration.children)


def _to_declaration(node: Node) -> Declaration | None:
    name_node = node.child_by_field_name("name")
    if name_node is None or name_node.text is None:
        return None
    parent = node.parent
    if parent is not None and not _is_grouped(parent):
        doc_row = parent.start_point[0]
    else:
        doc_row = node.start_point[0]
    return Declaration(
        name=name_node.text.decode("utf-8"),
        row=name_node.start_point[0],
        end_row=node.end_point[0],
        doc_row=doc_row,
        node=node,
    )


def _to_comment(node: Node, raw_lines: list[bytes]) -> Comment:
    row, column = node.start_point
    leading = raw_lines[row][:column] if row < len(raw_lines) else b""
    return Comment(
        start_row=row,
        end_row=node.end_point[0],
        text=(node.text or b"").decode("utf-8", errors="replace"),
        standalone=not leading.strip(),
    )


def parse_go_source(source: bytes) -> GoFile:
    """Parse Go source and list its file-scope type declarations and comments."""
    parser = get_parser(_LANGUAGE)
    tree = parser.parse(source)
    root = tree.root_node
    if root.has_error:
        error = _first_error(root)
        raise GoSyntaxError(error.start_point[0], error.start_point[1])

    captures = QueryCursor(_load_query("declarations")).captures(root)
    raw_lines = source.split(b"\n")

    declarations: list[Declaration] = []
    for node in sorted(captures.get("declaration", []), key=lambda n: n.start_byte):
        declaration = _to_declaration(node)
        if declaration is not None:
            declarations.append(declaration)
    comments = [
        _to_comment(node, raw_lines) for node in sorted(captures.get("comment", []), key=lambda n: n.start_byte)
    ]
    logger.debug("Parsed %d type declarations and %d comments", len(declarations), len(comments))

    return GoFile(
        lines=source.decode("utf-8").split("\n"),
        declarations=declarations,
        comments=comments,
    )
