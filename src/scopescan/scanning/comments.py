"""Comment classification: header block, inline commentary, type annotations.

A file may open with a single header comment block of any length. After it,
every comment that begins a line is either a structured type annotation
(a ``/** ... */`` doc block or ``//`` line carrying a documentation tag) or
inline commentary. Only inline commentary counts against the per-file limit.
Comments trailing code on the same line are not classified.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from .context import ScanContext
from .lexer import LineScan, ScanState, scan_lines
from .models import CommentKind, CommentRun, ExcessComments

DEFAULT_MAX_INLINE_COMMENTS = 5

DOC_TAG_PATTERN = re.compile(
    r"@(?:type|param|returns?|typedef|property|template|callback|extends|implements"
    r"|augments|enum|const|readonly|private|protected|public|abstract|override"
    r"|yields?|throws|async|generator|satisfies)\b"
)


def has_doc_tag(text: str) -> bool:
    return DOC_TAG_PATTERN.search(text) is not None


def _is_doc_block_start(text: str) -> bool:
    stripped = text.lstrip()
    return stripped.startswith("/**") and not stripped.startswith("/**/")


def _find_header(lines: Sequence[LineScan]) -> Optional[CommentRun]:
    start: Optional[int] = None
    end = 0

    for line in lines:
        if line.start_state is ScanState.BLOCK_COMMENT:
            end = line.number
            if line.has_code:
                break
            continue
        if line.is_blank:
            continue
        if line.start_state is not ScanState.NORMAL:
            break
        first = line.first_token_state()
        if first is not None and first.is_comment and not line.has_code:
            if start is None:
                start = line.number
            end = line.number
            continue
        break

    if start is None:
        return None
    return CommentRun(start_line=start, end_line=end, kind=CommentKind.HEADER)


@dataclass
class _OpenRun:
    start_line: int
    end_line: int
    doc: bool = False
    tagged: bool = False

    def kind(self) -> CommentKind:
        if self.doc and self.tagged:
            return CommentKind.TYPE_ANNOTATION
        return CommentKind.INLINE

    def close(self) -> CommentRun:
        return CommentRun(self.start_line, self.end_line, self.kind())


class CommentClassifier:
    """Walks classified lines after the header and groups comment runs."""

    def __init__(self) -> None:
        self.runs: list[CommentRun] = []
        self._block: Optional[_OpenRun] = None
        self._line_run: Optional[CommentRun] = None

    def classify(self, lines: Sequence[LineScan]) -> list[CommentRun]:
        header = _find_header(lines)
        header_end = 0
        if header is not None:
            self.runs.append(header)
            header_end = header.end_line

        for line in lines[header_end:]:
            self._feed(line)

        self._flush_line_run()
        if self._block is not None:
            self.runs.append(self._block.close())
            self._block = None
        return self.runs

    def _feed(self, line: LineScan) -> None:
        if line.start_state is ScanState.BLOCK_COMMENT:
            # Continuations of a block opened after code are skipped.
            if self._block is not None:
                self._block.end_line = line.number
                self._block.tagged = self._block.tagged or has_doc_tag(line.text)
                if line.end_state is not ScanState.BLOCK_COMMENT:
                    self.runs.append(self._block.close())
                    self._block = None
            return

        if line.start_state is not ScanState.NORMAL:
            self._flush_line_run()
            return

        first = line.first_token_state()
        if first is ScanState.LINE_COMMENT:
            kind = CommentKind.TYPE_ANNOTATION if has_doc_tag(line.text) else CommentKind.INLINE
            self._extend_line_run(line.number, kind)
            return

        self._flush_line_run()
        if first is ScanState.BLOCK_COMMENT:
            block = _OpenRun(
                start_line=line.number,
                end_line=line.number,
                doc=_is_doc_block_start(line.text),
                tagged=has_doc_tag(line.text),
            )
            if line.end_state is ScanState.BLOCK_COMMENT:
                self._block = block
            else:
                self.runs.append(block.close())

    def _extend_line_run(self, number: int, kind: CommentKind) -> None:
        run = self._line_run
        if run is not None and run.kind is kind and run.end_line == number - 1:
            self._line_run = CommentRun(run.start_line, number, kind)
            return
        self._flush_line_run()
        self._line_run = CommentRun(number, number, kind)

    def _flush_line_run(self) -> None:
        if self._line_run is not None:
            self.runs.append(self._line_run)
            self._line_run = None


def extract_comment_runs(text: str, context: Optional[ScanContext] = None) -> list[CommentRun]:
    """Classify the comments of ``text`` into runs, in file order.

    The header run, when present, is always first.
    """
    if context is not None:
        return list(context.memoize("comments", text, _classify))
    return list(_classify(text))


def _classify(text: str) -> tuple[CommentRun, ...]:
    runs = CommentClassifier().classify(list(scan_lines(text)))
    return tuple(sorted(runs, key=lambda run: run.start_line))


def countable_comment_lines(runs: Sequence[CommentRun]) -> list[int]:
    """Line numbers that count against the inline-comment limit."""
    return [
        number
        for run in runs
        if run.kind is CommentKind.INLINE
        for number in range(run.start_line, run.end_line + 1)
    ]


def count_excess_comments(
    text: str,
    threshold: int = DEFAULT_MAX_INLINE_COMMENTS,
    context: Optional[ScanContext] = None,
) -> Optional[ExcessComments]:
    """Check the countable inline comment total against ``threshold``.

    Returns:
        None when the total is within the threshold, otherwise the line of
        the first countable comment beyond it and the total count.
    """
    countable = countable_comment_lines(extract_comment_runs(text, context))
    if len(countable) <= threshold:
        return None
    return ExcessComments(line=countable[threshold], count=len(countable), limit=threshold)
