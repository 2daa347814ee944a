"""Destructuring detection: ``const { a, b: c } = source;``.

Only ``const`` object destructuring from a plain identifier is flagged;
imports, parameters, array patterns and destructuring of calls or property
chains are left alone.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..scanning import ScanState, scan_lines
from .models import Violation

RULE = "destructuring"

DESTRUCTURING_PATTERN = re.compile(
    r"^\s*const\s+\{([^}]+)\}\s*=\s*([a-zA-Z_$][a-zA-Z0-9_$]*)\s*;?\s*$"
)


@dataclass(frozen=True)
class DestructuringFinding:
    line: int
    properties: tuple[str, ...]
    source_object: str
    code: str


def _property_names(pattern: str) -> tuple[str, ...]:
    names = []
    for part in pattern.split(","):
        part = part.strip()
        if not part:
            continue
        # { foo: renamed } and { foo = default } both destructure foo
        names.append(re.split(r"[:=]", part, maxsplit=1)[0].strip())
    return tuple(names)


def find_destructuring(text: str) -> list[DestructuringFinding]:
    findings = []
    for line in scan_lines(text):
        if line.start_state is not ScanState.NORMAL:
            continue
        if line.first_token_state() is not ScanState.NORMAL:
            continue
        match = DESTRUCTURING_PATTERN.match(line.text)
        if match:
            findings.append(
                DestructuringFinding(
                    line=line.number,
                    properties=_property_names(match.group(1)),
                    source_object=match.group(2),
                    code=line.text.strip(),
                )
            )
    return findings


def check_destructuring(file: str, text: str) -> list[Violation]:
    return [
        Violation(
            file=file,
            line=finding.line,
            detail=(
                f"destructures {', '.join(finding.properties)} from {finding.source_object}; "
                f"use {finding.source_object}.<prop> directly"
            ),
            rule=RULE,
            code=finding.code,
        )
        for finding in find_destructuring(text)
    ]
