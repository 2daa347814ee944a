"""Scope depth extraction: pair declarations with their closing braces."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from .context import ScanContext
from .declarations import match_declaration
from .lexer import LineScan, ScanState, scan_lines
from .models import FunctionRecord, PendingDefinition

BLOCK_OPEN = "{"
BLOCK_CLOSE = "}"


class ScopeExtractor:
    """Turns a stream of classified lines into FunctionRecords.

    A single global depth counter tracks ``{``/``}`` seen in normal code.
    Declarations push a PendingDefinition; the first block opening after it
    fixes its opening depth, and the closing brace that brings the counter
    back down from that depth finalizes it.

    When several pending definitions share an opening depth, the most
    recently pushed one is closed first, and a single closing brace closes at
    most one definition.
    """

    def __init__(self) -> None:
        self.depth = 0
        self.stack: list[PendingDefinition] = []
        self.records: list[FunctionRecord] = []

    def feed(self, line: LineScan) -> None:
        if line.start_state is ScanState.NORMAL:
            name = match_declaration(line.text)
            if name is not None:
                self.stack.append(PendingDefinition(name=name, start_line=line.number))

        for _, char in line.code_chars():
            if char == BLOCK_OPEN:
                self._open()
            elif char == BLOCK_CLOSE:
                self._close(line.number)

    def feed_all(self, lines: Iterable[LineScan]) -> list[FunctionRecord]:
        for line in lines:
            self.feed(line)
        return self.records

    def _open(self) -> None:
        self.depth += 1
        for pending in self.stack:
            if pending.opening_depth is None:
                pending.opening_depth = self.depth

    def _close(self, line_number: int) -> None:
        # Unmatched closers are ignored so depth never goes negative.
        if self.depth == 0:
            return

        for index in range(len(self.stack) - 1, -1, -1):
            pending = self.stack[index]
            if pending.opening_depth == self.depth:
                del self.stack[index]
                self.records.append(
                    FunctionRecord.span(pending.name, pending.start_line, line_number)
                )
                break

        self.depth -= 1


def extract_functions(text: str, context: Optional[ScanContext] = None) -> list[FunctionRecord]:
    """Extract function records from source text, in closing order.

    Never raises: truncated or malformed input yields whatever records were
    closed before the input ran out; definitions still pending at the end are
    discarded.
    """
    if context is not None:
        return list(context.memoize("functions", text, _extract_function_tuple))
    return ScopeExtractor().feed_all(scan_lines(text))


def _extract_function_tuple(text: str) -> tuple[FunctionRecord, ...]:
    return tuple(ScopeExtractor().feed_all(scan_lines(text)))


def line_depths(text: str) -> list[int]:
    """Brace depth in effect at the start of each line."""
    extractor = ScopeExtractor()
    depths: list[int] = []
    for line in scan_lines(text):
        depths.append(extractor.depth)
        extractor.feed(line)
    return depths
