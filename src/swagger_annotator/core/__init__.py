from swagger_annotator.core.ignore import find_ignored_types
from swagger_annotator.core.naming import (
    AnnotationPlan,
    build_annotation_plan,
    find_search_response_inner_types,
    generate_annotation_names,
)
from swagger_annotator.core.patcher import apply_annotations, format_directive
from swagger_annotator.core.pipeline import process_file, process_source_directories, run
from swagger_annotator.core.shapes import extract_type_shape
from swagger_annotator.core.syntax import Comment, Declaration, GoFile, parse_go_source

__all__ = [
    "AnnotationPlan",
    "Comment",
    "Declaration",
    "GoFile",
    "apply_annotations",
    "build_annotation_plan",
    "extract_type_shape",
    "find_ignored_types",
    "find_search_response_inner_types",
    "format_directive",
    "generate_annotation_names",
    "parse_go_source",
    "process_file",
    "process_source_directories",
    "run",
]
