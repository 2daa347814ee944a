"""Inline comment limit per file."""

from __future__ import annotations

from typing import Optional

from ..scanning import DEFAULT_MAX_INLINE_COMMENTS, ScanContext, count_excess_comments
from .models import Violation

RULE = "excessive-comments"


def check_comment_limit(
    file: str,
    text: str,
    max_comments: int = DEFAULT_MAX_INLINE_COMMENTS,
    context: Optional[ScanContext] = None,
) -> list[Violation]:
    """At most one violation per file, at the first comment over the limit."""
    excess = count_excess_comments(text, max_comments, context)
    if excess is None:
        return []
    return [Violation(file=file, line=excess.line, detail=excess.detail, rule=RULE)]
