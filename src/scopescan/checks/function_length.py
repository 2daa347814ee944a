"""Function length limit over own lines."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from ..scanning import ScanContext, ScopeMetric, compute_own_lines, extract_functions
from .models import Violation

RULE = "function-length"

DEFAULT_MAX_LINES = 30


def find_long_functions(
    text: str,
    max_lines: int = DEFAULT_MAX_LINES,
    ignored: Iterable[str] = (),
    context: Optional[ScanContext] = None,
) -> list[ScopeMetric]:
    """Functions whose own lines exceed ``max_lines``.

    Lines of nested functions count toward the nested function, not the
    enclosing one.
    """
    ignored_names = frozenset(ignored)
    return [
        metric
        for metric in compute_own_lines(extract_functions(text, context))
        if metric.own_lines > max_lines and metric.name not in ignored_names
    ]


def check_function_length(
    file: str,
    text: str,
    max_lines: int = DEFAULT_MAX_LINES,
    ignored: Iterable[str] = (),
    context: Optional[ScanContext] = None,
) -> list[Violation]:
    return [
        Violation(
            file=file,
            line=metric.start_line,
            detail=f"{metric.name} has {metric.own_lines} own lines (limit: {max_lines})",
            rule=RULE,
        )
        for metric in find_long_functions(text, max_lines, ignored, context)
    ]
