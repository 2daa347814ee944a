"""Alias detection: bindings that only rename an existing name.

Flags ``const alias = original;`` when ``original`` is imported or defined
in the same file with ``const``, ``let``, ``var`` or ``function``. Property
reads such as ``const log = console.log;`` and call results are not aliases.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from ..scanning import ScanContext, ScanState, scan_lines
from .models import Violation

RULE = "alias"

SIMPLE_ALIAS_PATTERN = re.compile(r"^\s*const\s+(\w+)\s*=\s*([a-z_]\w*)\s*;\s*$", re.IGNORECASE)
LOCAL_DEFINITION_PATTERN = re.compile(r"^\s*(?:const|let|var|function)\s+(\w+)(?:\s*=|\s*\()")

NAMED_IMPORT_PATTERN = re.compile(r"import\s*\{([^}]+)\}\s*from")
DEFAULT_IMPORT_PATTERN = re.compile(r"import\s+([a-zA-Z_$]\w*)\s+from")
NAMESPACE_IMPORT_PATTERN = re.compile(r"import\s+\*\s+as\s+(\w+)\s+from")
_IDENTIFIER = re.compile(r"^[a-zA-Z_$]\w*$")

BUILTIN_IDENTIFIERS = frozenset({"null", "undefined", "true", "false", "NaN", "Infinity"})


@dataclass(frozen=True)
class AliasFinding:
    line: int
    new_name: str
    original_name: str
    kind: str  # "import" or "local"
    code: str


def imported_names(text: str) -> set[str]:
    """Names bound by ES module import statements."""
    names: set[str] = set()
    for line in text.split("\n"):
        named = NAMED_IMPORT_PATTERN.search(line)
        if named:
            for part in named.group(1).split(","):
                imported = re.split(r"\s+as\s+", part.strip())[-1].strip()
                if imported and _IDENTIFIER.match(imported):
                    names.add(imported)
        default = DEFAULT_IMPORT_PATTERN.search(line)
        if default:
            names.add(default.group(1))
        namespace = NAMESPACE_IMPORT_PATTERN.search(line)
        if namespace:
            names.add(namespace.group(1))
    return names


def _collect_local_definitions(text: str) -> frozenset[str]:
    names = set()
    for line in text.split("\n"):
        match = LOCAL_DEFINITION_PATTERN.match(line)
        if match:
            names.add(match.group(1))
    return frozenset(names)


def local_definitions(text: str, context: Optional[ScanContext] = None) -> frozenset[str]:
    """Names bound by a line starting with const, let, var or function.

    Any value counts, so ``const config = {...}`` defines ``config`` just
    as a function declaration does.
    """
    if context is None:
        return _collect_local_definitions(text)
    return context.memoize("local-definitions", text, _collect_local_definitions)


def find_aliases(text: str, context: Optional[ScanContext] = None) -> list[AliasFinding]:
    local = local_definitions(text, context)
    imports = imported_names(text)
    findings = []

    for line in scan_lines(text):
        if line.start_state is not ScanState.NORMAL:
            continue
        if line.first_token_state() is not ScanState.NORMAL:
            continue

        simple = SIMPLE_ALIAS_PATTERN.match(line.text)
        if not simple:
            continue
        new_name, original = simple.groups()
        if new_name == original or original in BUILTIN_IDENTIFIERS or len(original) == 1:
            continue
        if original in imports:
            kind = "import"
        elif original in local:
            kind = "local"
        else:
            continue
        findings.append(AliasFinding(line.number, new_name, original, kind, line.text.strip()))

    return findings


def check_aliases(file: str, text: str, context: Optional[ScanContext] = None) -> list[Violation]:
    return [
        Violation(
            file=file,
            line=finding.line,
            detail=f"{finding.new_name} aliases {finding.original_name} ({finding.kind})",
            rule=RULE,
            code=finding.code,
        )
        for finding in find_aliases(text, context)
    ]
