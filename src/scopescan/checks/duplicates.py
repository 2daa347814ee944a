"""Cross-file duplicate function names.

Per-file name extraction is independent and can run anywhere; merging the
results into the ``name -> locations`` map is a sequential fold owned by the
caller.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Optional

from ..scanning import DeclaredName, ScanContext, extract_declared_names
from .models import DuplicateName, Location, Violation

RULE = "duplicate-name"


def build_location_map(
    declared_by_file: Mapping[str, Sequence[DeclaredName]],
) -> dict[str, list[Location]]:
    """Fold per-file declared names into ``name -> [locations]``."""
    locations: dict[str, list[Location]] = {}
    for file, names in declared_by_file.items():
        for declared in names:
            locations.setdefault(declared.name, []).append(Location(file, declared.line))
    return locations


def find_duplicate_names(
    declared_by_file: Mapping[str, Sequence[DeclaredName]],
    allowed: Iterable[str] = (),
) -> list[DuplicateName]:
    """Names declared in at least two distinct files, sorted by name.

    A name repeated within a single file is not a cross-file duplicate.
    """
    allowed_names = frozenset(allowed)
    duplicates = []
    for name, locations in sorted(build_location_map(declared_by_file).items()):
        if name in allowed_names:
            continue
        if len({loc.file for loc in locations}) >= 2:
            duplicates.append(DuplicateName(name=name, locations=tuple(locations)))
    return duplicates


def find_duplicates_in_sources(
    sources: Mapping[str, str],
    allowed: Iterable[str] = (),
    context: Optional[ScanContext] = None,
) -> list[DuplicateName]:
    """Convenience wrapper taking ``file -> text`` directly."""
    declared = {file: extract_declared_names(text, context) for file, text in sources.items()}
    return find_duplicate_names(declared, allowed)


def duplicate_violations(duplicates: Iterable[DuplicateName]) -> list[Violation]:
    """One violation per location of every duplicated name."""
    violations = []
    for duplicate in duplicates:
        others = duplicate.file_count - 1
        for loc in duplicate.locations:
            violations.append(
                Violation(
                    file=loc.file,
                    line=loc.line,
                    detail=f"{duplicate.name} is also declared in {others} other file(s)",
                    rule=RULE,
                )
            )
    return violations
