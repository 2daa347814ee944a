"""Declared-name extraction for cross-file duplicate detection."""

from __future__ import annotations

from typing import Optional

from .context import ScanContext
from .declarations import match_declared_name
from .lexer import ScanState, scan_lines
from .models import DeclaredName


def _declared_names(text: str) -> tuple[DeclaredName, ...]:
    names = []
    for line in scan_lines(text):
        if line.start_state is not ScanState.NORMAL:
            continue
        if line.first_token_state() is not ScanState.NORMAL:
            continue
        name = match_declared_name(line.text)
        if name is not None:
            names.append(DeclaredName(name=name, line=line.number))
    return tuple(names)


def extract_declared_names(
    text: str, context: Optional[ScanContext] = None
) -> list[DeclaredName]:
    """List named functions and function-valued bindings in file order.

    Lines that begin inside a comment or string are skipped.
    """
    if context is not None:
        return list(context.memoize("declared_names", text, _declared_names))
    return list(_declared_names(text))
