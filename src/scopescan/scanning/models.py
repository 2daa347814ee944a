"""Structural records produced by the scanner core.

All records are frozen: once a scan produces them, nothing downstream
mutates them. Line numbers are 1-indexed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class FunctionRecord:
    """A function whose body was matched to a closing delimiter.

    Attributes:
        name: Name extracted from the declaration line
        start_line: Line of the declaration
        end_line: Line of the closing delimiter
        line_count: Inclusive span, end_line - start_line + 1
    """

    name: str
    start_line: int
    end_line: int
    line_count: int

    @classmethod
    def span(cls, name: str, start_line: int, end_line: int) -> FunctionRecord:
        """Build a record from its boundaries."""
        return cls(
            name=name,
            start_line=start_line,
            end_line=end_line,
            line_count=end_line - start_line + 1,
        )

    def contains(self, other: FunctionRecord) -> bool:
        """True if other sits strictly inside this record's span."""
        return other.start_line > self.start_line and other.end_line < self.end_line


@dataclass(frozen=True)
class ScopeMetric:
    """A FunctionRecord with the lines it owns.

    own_lines excludes the lines of functions nested inside it.
    """

    name: str
    start_line: int
    end_line: int
    line_count: int
    own_lines: int

    @property
    def record(self) -> FunctionRecord:
        return FunctionRecord(self.name, self.start_line, self.end_line, self.line_count)


class CommentKind(Enum):
    """How a comment run counts against the inline-comment limit."""

    HEADER = "header"
    INLINE = "inline"
    TYPE_ANNOTATION = "type_annotation"


@dataclass(frozen=True)
class CommentRun:
    """A contiguous comment: one block comment or consecutive line comments."""

    start_line: int
    end_line: int
    kind: CommentKind

    @property
    def line_count(self) -> int:
        return self.end_line - self.start_line + 1


@dataclass(frozen=True)
class DeclaredName:
    """A function name declared at a given line."""

    name: str
    line: int


@dataclass(frozen=True)
class ExcessComments:
    """Result of an inline-comment count that went over its limit.

    Attributes:
        line: Line of the first countable comment beyond the limit
        count: Total countable inline comment lines in the file
        limit: Threshold that was exceeded
    """

    line: int
    count: int
    limit: int

    @property
    def detail(self) -> str:
        return f"{self.count} inline comments (limit: {self.limit})"


@dataclass
class PendingDefinition:
    """A declaration seen on a line whose body has not closed yet.

    Owned exclusively by ScopeExtractor's stack. opening_depth stays None
    until the first block opening after the declaration.
    """

    name: str
    start_line: int
    opening_depth: Optional[int] = None
