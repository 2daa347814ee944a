"""Codebase checks built on the scanner core."""

from .aliasing import (
    AliasFinding,
    check_aliases,
    find_aliases,
    imported_names,
    local_definitions,
)
from .comment_limits import check_comment_limit
from .destructuring import DestructuringFinding, check_destructuring, find_destructuring
from .duplicates import (
    build_location_map,
    duplicate_violations,
    find_duplicate_names,
    find_duplicates_in_sources,
)
from .function_length import check_function_length, find_long_functions
from .models import DuplicateName, FileReport, Location, Violation
from .runner import CheckRunner, RunResult
from .type_annotations import (
    TypeAnnotationFinding,
    check_inline_type_annotations,
    find_inline_type_annotations,
)

__all__ = [
    "CheckRunner",
    "RunResult",
    "Violation",
    "Location",
    "DuplicateName",
    "FileReport",
    "find_long_functions",
    "check_function_length",
    "build_location_map",
    "find_duplicate_names",
    "find_duplicates_in_sources",
    "duplicate_violations",
    "AliasFinding",
    "imported_names",
    "local_definitions",
    "find_aliases",
    "check_aliases",
    "DestructuringFinding",
    "find_destructuring",
    "check_destructuring",
    "check_comment_limit",
    "TypeAnnotationFinding",
    "find_inline_type_annotations",
    "check_inline_type_annotations",
]
