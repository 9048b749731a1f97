"""Detection of declarations excluded from annotation by ``@swagger:ignore``.

A declaration is ignored when the marker appears in its doc comment block, on
the line of its name, or in any comment starting within one line of that
name. The one-line band tolerates trailing comments that sit next to, rather
than on, the declaration line.
"""

from swagger_annotator.config import IGNORE_MARKER
from swagger_annotator.core.syntax import Comment, Declaration, GoFile


def doc_comments(go_file: GoFile, declaration: Declaration) -> list[Comment]:
    """Return the contiguous block of standalone comments right above a declaration."""
    by_end_row = {comment.end_row: comment for comment in go_file.comments if comment.standalone}
    block: list[Comment] = []
    row = declaration.doc_row - 1
    while row in by_end_row:
        comment = by_end_row[row]
        block.append(comment)
        row = comment.start_row - 1
    block.reverse()
    return block


def is_ignored(go_file: GoFile, declaration: Declaration, marker: str = IGNORE_MARKER) -> bool:
    if any(marker in comment.text for comment in doc_comments(go_file, declaration)):
        return True

    if 0 <= declaration.row < len(go_file.lines) and marker in go_file.lines[declaration.row]:
        return True

    return any(
        marker in comment.text and declaration.row - 1 <= comment.start_row <= declaration.row + 1
        for comment in go_file.comments
    )


def find_ignored_types(go_file: GoFile, marker: str = IGNORE_MARKER) -> frozenset[str]:
    return frozenset(
        declaration.name
        for declaration in go_file.declarations
        if declaration.exported and is_ignored(go_file, declaration, marker)
    )
