"""Lexical state tracking for brace-delimited source text.

The tracker classifies every character of a file into one lexical context
(normal code, a quoted string, an interpolated string, or a comment) so that
the scope extractor and the comment classifier only ever react to delimiters
that are really code.

Interpolated (backtick) strings are treated as opaque: the ``${...}``
sub-expressions inside them are not tracked. A backtick nested inside such a
sub-expression closes the outer string early and desynchronizes the tracker
until the next backtick. This mirrors the behavior downstream checks are
tuned against.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ScanState(Enum):
    """Lexical context in effect at a scan position."""

    NORMAL = "normal"
    SINGLE_QUOTED = "single_quoted"
    DOUBLE_QUOTED = "double_quoted"
    INTERPOLATED = "interpolated"
    LINE_COMMENT = "line_comment"
    BLOCK_COMMENT = "block_comment"

    @property
    def is_comment(self) -> bool:
        return self in (ScanState.LINE_COMMENT, ScanState.BLOCK_COMMENT)

    @property
    def is_string(self) -> bool:
        return self in (ScanState.SINGLE_QUOTED, ScanState.DOUBLE_QUOTED, ScanState.INTERPOLATED)


_OPENERS = {
    "'": ScanState.SINGLE_QUOTED,
    '"': ScanState.DOUBLE_QUOTED,
    "`": ScanState.INTERPOLATED,
}

_CLOSERS = {state: char for char, state in _OPENERS.items()}


def advance(state: ScanState, char: str, next_char: str = "") -> tuple[ScanState, bool]:
    """Compute the state after reading one character.

    Args:
        state: State in effect before ``char``
        char: Current character
        next_char: Following character on the same line ("" at end of line)

    Returns:
        (new_state, consumes_next). consumes_next is True when ``char`` and
        ``next_char`` form a two-character marker (``//``, ``/*``, ``*/``) or
        an escape sequence, so the caller must not interpret ``next_char``.
    """
    if state is ScanState.BLOCK_COMMENT:
        if char == "*" and next_char == "/":
            return ScanState.NORMAL, True
        return state, False

    if state is ScanState.LINE_COMMENT:
        return state, False

    if state.is_string:
        if char == "\\":
            return state, bool(next_char)
        if char == _CLOSERS[state]:
            return ScanState.NORMAL, False
        return state, False

    if char == "/" and next_char == "/":
        return ScanState.LINE_COMMENT, True
    if char == "/" and next_char == "*":
        return ScanState.BLOCK_COMMENT, True
    return _OPENERS.get(char, ScanState.NORMAL), False


@dataclass(frozen=True)
class LineScan:
    """Per-character lexical classification of one line.

    ``states[i]`` is the context character ``i`` belongs to. Opening markers
    belong to the context they open and closing markers to the context they
    close, so a character is code exactly when its state is NORMAL.
    """

    number: int
    text: str
    start_state: ScanState
    end_state: ScanState
    states: tuple[ScanState, ...]

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()

    @property
    def has_code(self) -> bool:
        return any(
            state is ScanState.NORMAL and not char.isspace()
            for char, state in zip(self.text, self.states)
        )

    @property
    def has_comment(self) -> bool:
        return any(state.is_comment for state in self.states)

    def first_token_state(self) -> Optional[ScanState]:
        """State of the first non-whitespace character, if any."""
        for char, state in zip(self.text, self.states):
            if not char.isspace():
                return state
        return None

    def code_chars(self) -> Iterator[tuple[int, str]]:
        """Yield (column, char) for characters in normal code."""
        for column, (char, state) in enumerate(zip(self.text, self.states)):
            if state is ScanState.NORMAL:
                yield column, char


class LexicalTracker:
    """Carries lexical state from one line to the next.

    Line comments end at the end of their line. Quoted, interpolated and
    block-comment states carry over; an unterminated string or comment simply
    leaves the tracker open at end of input.
    """

    def __init__(self) -> None:
        self.state = ScanState.NORMAL

    def scan_line(self, text: str, number: int) -> LineScan:
        start_state = self.state
        states: list[ScanState] = []
        consumed: Optional[ScanState] = None

        for column, char in enumerate(text):
            if consumed is not None:
                states.append(consumed)
                consumed = None
                continue

            before = self.state
            next_char = text[column + 1] if column + 1 < len(text) else ""
            self.state, consumes_next = advance(before, char, next_char)
            belongs_to = self.state if before is ScanState.NORMAL else before
            states.append(belongs_to)
            if consumes_next:
                consumed = belongs_to

        if self.state is ScanState.LINE_COMMENT:
            self.state = ScanState.NORMAL

        return LineScan(
            number=number,
            text=text,
            start_state=start_state,
            end_state=self.state,
            states=tuple(states),
        )


def scan_lines(text: str) -> Iterator[LineScan]:
    """Classify every line of ``text``.

    Lines are split on ``\\n`` and numbered from 1.
    """
    tracker = LexicalTracker()
    for index, line in enumerate(text.split("\n")):
        yield tracker.scan_line(line, index + 1)
