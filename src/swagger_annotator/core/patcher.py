import logging
import re

from swagger_annotator.core.naming import AnnotationPlan
from swagger_annotator.models import ProcessingResult

logger = logging.getLogger(__name__)

DIRECTIVE_PATTERN = re.compile(r"//\s*@name\s+\S+")


def format_directive(prefix: str, name: str) -> str:
    return f"@name {prefix}{name}"


def _has_directive(line: str, directive: str) -> bool:
    return re.search(re.escape(directive) + r"(?!\S)", line.strip()) is not None


def _split_line_ending(line: str) -> tuple[str, str]:
    if line.endswith("\r"):
        return line[:-1], "\r"
    return line, ""


def apply_annotations(
    lines: list[str],
    plan: AnnotationPlan,
    prefix: str,
    filename: str,
    result: ProcessingResult,
) -> int:
    """Write the planned directives onto ``lines`` in place.

    Lines already carrying the expected directive are left alone, a stale
    ``// @name`` comment is replaced, and lines without one get the directive
    appended. Returns the number of changed lines.
    """
    changed = 0

    for index in sorted(plan):
        if not 0 <= index < len(lines):
            continue
        name = plan[index]
        directive = format_directive(prefix, name)
        if _has_directive(lines[index], directive):
            continue

        body, ending = _split_line_ending(lines[index])
        match = DIRECTIVE_PATTERN.search(body)
        if match is not None:
            lines[index] = f"{body[: match.start()].rstrip()} // {directive}{ending}"
            logger.info("replaced annotation in %s: %s", filename, name)
            result.replace_annotation()
        else:
            lines[index] = f"{body.rstrip()} // {directive}{ending}"
            logger.info("added annotation to %s: %s", filename, name)
            result.add_annotation()
        changed += 1

    return changed
