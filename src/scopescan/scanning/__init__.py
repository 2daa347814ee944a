"""Heuristic structural scanning of brace-delimited source text."""

from .comments import (
    DEFAULT_MAX_INLINE_COMMENTS,
    countable_comment_lines,
    count_excess_comments,
    extract_comment_runs,
)
from .context import ScanContext
from .declarations import match_declaration, match_declared_name
from .lexer import LexicalTracker, LineScan, ScanState, advance, scan_lines
from .metrics import compute_own_lines
from .models import (
    CommentKind,
    CommentRun,
    DeclaredName,
    ExcessComments,
    FunctionRecord,
    PendingDefinition,
    ScopeMetric,
)
from .names import extract_declared_names
from .scopes import ScopeExtractor, extract_functions, line_depths

__all__ = [
    # Lexical state
    "ScanState",
    "LexicalTracker",
    "LineScan",
    "advance",
    "scan_lines",
    # Declarations and scopes
    "match_declaration",
    "match_declared_name",
    "ScopeExtractor",
    "extract_functions",
    "line_depths",
    "extract_declared_names",
    # Metrics
    "compute_own_lines",
    # Comments
    "DEFAULT_MAX_INLINE_COMMENTS",
    "extract_comment_runs",
    "countable_comment_lines",
    "count_excess_comments",
    # Records
    "FunctionRecord",
    "ScopeMetric",
    "PendingDefinition",
    "CommentKind",
    "CommentRun",
    "DeclaredName",
    "ExcessComments",
    # Caller-owned cache
    "ScanContext",
]
