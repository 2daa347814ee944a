"""Own-line metrics for function length limits."""

from __future__ import annotations

from collections.abc import Sequence

from .models import FunctionRecord, ScopeMetric


def _nested_in(parent: FunctionRecord, records: Sequence[FunctionRecord]) -> list[FunctionRecord]:
    return [other for other in records if other is not parent and parent.contains(other)]


def compute_own_lines(records: Sequence[FunctionRecord]) -> list[ScopeMetric]:
    """Attach ``own_lines`` to each record, preserving input order.

    A record's own lines are its span minus the spans of every function
    strictly nested in it, at any depth. A grandchild is subtracted from
    its grandparent as well as from its parent, so deeply nested parents
    can end up with fewer own lines than they have uncovered lines.

    Containment is strict on both ends: a function starting or closing on
    the same line as its parent is not considered nested.

    Args:
        records: Records of a single file

    Returns:
        One ScopeMetric per record, in the same order
    """
    metrics = []
    for record in records:
        nested_lines = sum(other.line_count for other in _nested_in(record, records))
        metrics.append(
            ScopeMetric(
                name=record.name,
                start_line=record.start_line,
                end_line=record.end_line,
                line_count=record.line_count,
                own_lines=record.line_count - nested_lines,
            )
        )
    return metrics
