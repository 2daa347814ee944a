"""
scopescan - heuristic structural scanner for brace-delimited source code

Finds function scopes, measures each function's own lines, classifies
comments and runs codebase checks (function length, duplicate names,
aliases, destructuring, comment limits, inline type annotations) without
building a syntax tree.
"""

__version__ = "0.1.0"

from .checks import CheckRunner, RunResult, Violation
from .config import ScanConfig, load_config
from .scanning import (
    ScanContext,
    compute_own_lines,
    count_excess_comments,
    extract_comment_runs,
    extract_declared_names,
    extract_functions,
)

__all__ = [
    "extract_functions",
    "compute_own_lines",
    "extract_comment_runs",
    "count_excess_comments",
    "extract_declared_names",
    "ScanContext",
    "CheckRunner",
    "RunResult",
    "Violation",
    "ScanConfig",
    "load_config",
]
