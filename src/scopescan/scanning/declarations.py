"""Line-level recognition of function declaration idioms.

Each idiom is a single regex anchored at the start of the line. Nothing looks
past the current line, so a declaration whose name and parameter list are
split across lines is not recognized, and a control-flow head such as
``if (ready) {`` has the shape of method shorthand and is taken as one.
Both blind spots are part of the heuristic and are left as-is.
"""

from __future__ import annotations

import re
from typing import Optional

IDENTIFIER = r"[a-zA-Z_$][a-zA-Z0-9_$]*"

DECLARATION_PATTERNS: tuple[re.Pattern[str], ...] = (
    # function name(
    re.compile(rf"^\s*(?:async\s+)?function\s+({IDENTIFIER})\s*\("),
    # const name = (...) => {   /   const name = async x => {
    re.compile(
        rf"^\s*(?:export\s+)?(?:const|let|var)\s+({IDENTIFIER})\s*=\s*(?:async\s+)?"
        rf"(?:\([^)]*\)|{IDENTIFIER})\s*=>\s*\{{"
    ),
    # name(...) {   Control-flow heads such as ``if (x) {`` match too.
    re.compile(rf"^\s*(?:async\s+)?(?!function\s)({IDENTIFIER})\s*\([^)]*\)\s*\{{"),
    # name: function(  /  name: async (
    re.compile(rf"^\s*({IDENTIFIER})\s*:\s*(?:async\s+)?(?:function\s*)?\("),
)

# Narrower forms used to collect declared names across files.
DECLARED_NAME_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(rf"^\s*(?:export\s+(?:default\s+)?)?(?:async\s+)?function\s+({IDENTIFIER})\s*\("),
    re.compile(
        rf"^\s*(?:export\s+)?(?:const|let|var)\s+({IDENTIFIER})\s*=\s*(?:async\s+)?"
        rf"(?:function\s*\(|\([^)]*\)\s*=>|{IDENTIFIER}\s*=>)"
    ),
)


def _first_match(patterns: tuple[re.Pattern[str], ...], line: str) -> Optional[str]:
    for pattern in patterns:
        match = pattern.match(line)
        if match:
            return match.group(1)
    return None


def match_declaration(line: str) -> Optional[str]:
    """Return the function name declared on ``line``, if any.

    The first matching idiom wins. Callers only pass lines that begin in
    normal code (not inside a string or comment).

    Example:
        >>> match_declaration("const total = (items) => {")
        'total'
        >>> match_declaration("if (ready) {")
        'if'
    """
    return _first_match(DECLARATION_PATTERNS, line)


def match_declared_name(line: str) -> Optional[str]:
    """Return the name of a named function or function-valued binding."""
    return _first_match(DECLARED_NAME_PATTERNS, line)
