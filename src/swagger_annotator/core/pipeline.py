import logging
import os
import stat
import tempfile
from collections.abc import Iterator
from pathlib import Path

from swagger_annotator.config import FILE_PERMISSION, AnnotatorSettings, Variant
from swagger_annotator.core.ignore import find_ignored_types
from swagger_annotator.core.naming import build_annotation_plan, find_search_response_inner_types
from swagger_annotator.core.patcher import apply_annotations
from swagger_annotator.core.syntax import GO_SUFFIX, parse_go_source
from swagger_annotator.errors import AnnotatorError, FileProcessingError, GoSyntaxError
from swagger_annotator.models import ProcessingResult

logger = logging.getLogger(__name__)


def write_file(path: Path, lines: list[str]) -> None:
    """Replace ``path`` with ``lines`` through a temporary file in the same directory.

    Symlinks are followed so the link target is rewritten, and an existing
    file keeps its permission bits.
    """
    target = path.resolve()
    try:
        mode = stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        mode = FILE_PERMISSION

    data = "\n".join(lines).encode("utf-8")
    temp_file = tempfile.NamedTemporaryFile(
        dir=target.parent, prefix=f".{target.name}.", suffix=".tmp", delete=False
    )
    temp_path = Path(temp_file.name)
    try:
        with temp_file:
            temp_file.write(data)
        os.chmod(temp_path, mode)
        os.replace(temp_path, target)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise


def process_file(path: Path, prefix: str, variant: Variant, result: ProcessingResult) -> int:
    """Annotate one Go file and return the number of changed lines.

    The file is only rewritten when at least one line changed.
    """
    try:
        source = path.read_bytes()
    except OSError as exc:
        raise FileProcessingError(f"reading file: {exc}") from exc

    try:
        go_file = parse_go_source(source)
    except (GoSyntaxError, UnicodeDecodeError) as exc:
        raise FileProcessingError(f"parsing file: {exc}") from exc

    ignored = find_ignored_types(go_file)
    inner_types = find_search_response_inner_types(go_file.declarations, ignored)
    plan = build_annotation_plan(go_file.declarations, variant, ignored, inner_types)

    lines = list(go_file.lines)
    changed = apply_annotations(lines, plan, prefix, str(path), result)
    if changed > 0:
        try:
            write_file(path, lines)
        except OSError as exc:
            raise FileProcessingError(f"writing file: {exc}") from exc
    return changed


def version_of(settings: AnnotatorSettings, path: Path, variant: Variant) -> str | None:
    """Return the version directory a file sits in, or None if it is not inside one."""
    parts = path.relative_to(settings.base_dir / variant.value).parts
    if len(parts) < 2:
        return None
    return parts[0]


def process_source_file(
    settings: AnnotatorSettings, path: Path, variant: Variant, result: ProcessingResult
) -> None:
    version = version_of(settings, path, variant)
    if version is None:
        logger.debug("Skipping %s: not inside a version directory", path)
        return

    prefix = f"{settings.project}.{version}."
    result.add_file()
    try:
        process_file(path, prefix, variant, result)
    except AnnotatorError as exc:
        logger.debug("Failed to process %s", path, exc_info=True)
        result.add_error(str(path), str(exc))


def _raise_walk_error(error: OSError) -> None:
    raise error


def iter_go_files(directory: Path) -> Iterator[Path]:
    """Yield Go files below ``directory`` in lexical order; walk errors propagate."""
    for dirpath, dirnames, filenames in os.walk(directory, onerror=_raise_walk_error):
        dirnames.sort()
        for filename in sorted(filenames):
            if filename.endswith(GO_SUFFIX):
                yield Path(dirpath) / filename


def process_source_directories(settings: AnnotatorSettings) -> ProcessingResult:
    result = ProcessingResult()

    for variant in settings.source_dirs:
        directory = settings.base_dir / variant.value
        try:
            for path in iter_go_files(directory):
                process_source_file(settings, path, variant, result)
        except OSError as exc:
            result.add_error(str(directory), f"walking directory: {exc}")

    return result


def run(settings: AnnotatorSettings) -> ProcessingResult:
    logger.debug("Annotating %s for project %s", settings.base_dir, settings.project)
    result = process_source_directories(settings)
    logger.debug(result.summary())
    return result
