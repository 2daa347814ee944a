"""Inline ``/** @type {T} */`` annotations inside function bodies.

Type annotations belong at module level or in a function's doc block; a
cast or annotation nested inside braces is reported with its depth.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..scanning import ScanState, line_depths, scan_lines
from .models import Violation

RULE = "inline-type-annotation"

INLINE_TYPE_PATTERN = re.compile(r"/\*\*\s*@type\s*\{([^}]+)\}\s*\*/")


@dataclass(frozen=True)
class TypeAnnotationFinding:
    line: int
    type_name: str
    depth: int
    code: str


def find_inline_type_annotations(text: str) -> list[TypeAnnotationFinding]:
    depths = line_depths(text)
    findings = []
    for line, depth in zip(scan_lines(text), depths):
        if depth == 0 or line.start_state is not ScanState.NORMAL:
            continue
        match = INLINE_TYPE_PATTERN.search(line.text)
        # The annotation must be a real comment, not text inside a string.
        if match and line.states[match.start()] is ScanState.BLOCK_COMMENT:
            findings.append(
                TypeAnnotationFinding(line.number, match.group(1), depth, line.text.strip())
            )
    return findings


def check_inline_type_annotations(file: str, text: str) -> list[Violation]:
    return [
        Violation(
            file=file,
            line=finding.line,
            detail=(
                f"inline @type {{{finding.type_name}}} at depth {finding.depth}; "
                "move it to module level or the function signature"
            ),
            rule=RULE,
            code=finding.code,
        )
        for finding in find_inline_type_annotations(text)
    ]
