"""Records produced by the checks layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..scanning.models import DeclaredName


@dataclass(frozen=True)
class Violation:
    """A single finding reported against a file and line.

    Attributes:
        file: File identifier the caller supplied (usually a relative path)
        line: 1-indexed line the finding points at
        detail: Human-readable description
        rule: Identifier of the check that produced it
        code: Trimmed source line, when the check has one to show
    """

    file: str
    line: int
    detail: str
    rule: str
    code: str = ""

    @property
    def location(self) -> str:
        return f"{self.file}:{self.line}"


@dataclass(frozen=True)
class Location:
    file: str
    line: int


@dataclass(frozen=True)
class DuplicateName:
    """A function name declared in two or more distinct files."""

    name: str
    locations: tuple[Location, ...]

    @property
    def file_count(self) -> int:
        return len({loc.file for loc in self.locations})


@dataclass
class FileReport:
    """Per-file output of the runner, merged by the coordinating thread.

    Attributes:
        file: File identifier
        violations: Findings of the per-file checks
        declared_names: Names feeding cross-file duplicate detection
        own_lines: Own-line counts of every function in the file
        cached: True when the report came from the result cache
    """

    file: str
    violations: list[Violation] = field(default_factory=list)
    declared_names: list[DeclaredName] = field(default_factory=list)
    own_lines: list[int] = field(default_factory=list)
    cached: bool = False
