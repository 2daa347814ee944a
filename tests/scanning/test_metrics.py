"""Tests for own-line metrics."""

import pytest

from scopescan.scanning import FunctionRecord, compute_own_lines, extract_functions


def _span(name, start, end):
    return FunctionRecord.span(name, start, end)


class TestComputeOwnLines:
    """Own lines exclude nested functions."""

    def test_outer_owns_lines_outside_inner(self, nested_source):
        """A 10-line function with a 3-line inner function owns 7 lines."""
        metrics = {m.name: m for m in compute_own_lines(extract_functions(nested_source))}
        assert metrics["outer"].own_lines == 7
        assert metrics["inner"].own_lines == 3

    def test_order_preserved(self):
        """Output order matches input order."""
        records = [_span("b", 5, 6), _span("a", 1, 3)]
        assert [m.name for m in compute_own_lines(records)] == ["b", "a"]

    def test_leaf_owns_its_span(self):
        """A function with no children owns every line."""
        (metric,) = compute_own_lines([_span("leaf", 4, 9)])
        assert metric.own_lines == metric.line_count == 6

    def test_every_nested_record_subtracted(self):
        """Grandchildren count against every enclosing function."""
        records = [_span("c", 3, 5), _span("b", 2, 15), _span("a", 1, 20)]
        own = {m.name: m.own_lines for m in compute_own_lines(records)}
        assert own == {"a": 3, "b": 11, "c": 3}

    def test_three_levels_from_source(self):
        """A tightly wrapped chain can leave the outermost function nothing."""
        text = "function a() {\n  function b() {\n    function c() {\n    }\n  }\n}\n"
        own = {m.name: m.own_lines for m in compute_own_lines(extract_functions(text))}
        assert own == {"a": 0, "b": 2, "c": 2}

    def test_one_line_child(self):
        """A child closing on its own line is strictly nested."""
        records = [_span("child", 2, 2), _span("parent", 1, 3)]
        own = {m.name: m.own_lines for m in compute_own_lines(records)}
        assert own["parent"] == 2

    def test_shared_boundary_is_not_nesting(self):
        """Containment is strict on both ends."""
        records = [_span("inner", 1, 3), _span("outer", 1, 5)]
        own = {m.name: m.own_lines for m in compute_own_lines(records)}
        assert own["outer"] == 5

    def test_empty(self):
        """No records, no metrics."""
        assert compute_own_lines([]) == []

    def test_inputs_not_mutated(self):
        """Records are left untouched."""
        records = [_span("c", 3, 5), _span("a", 1, 20)]
        snapshot = list(records)
        compute_own_lines(records)
        assert records == snapshot

    def test_metric_exposes_record(self):
        """A metric converts back to its record."""
        record = _span("f", 2, 8)
        (metric,) = compute_own_lines([record])
        assert metric.record == record


class TestOwnershipPartition:
    """Own lines plus uncovered lines account for every line exactly once."""

    @pytest.mark.parametrize(
        "fixture_name",
        ["hello_source", "nested_source", "class_source"],
    )
    def test_partition(self, fixture_name, request):
        """Sum of own lines plus uncovered lines equals the line count."""
        text = request.getfixturevalue(fixture_name)
        records = extract_functions(text)
        total_lines = len(text.split("\n"))

        covered = set()
        for record in records:
            covered.update(range(record.start_line, record.end_line + 1))
        uncovered = total_lines - len(covered)

        own_total = sum(m.own_lines for m in compute_own_lines(records))
        assert own_total + uncovered == total_lines

    def test_partition_with_siblings(self, make_function):
        """Several siblings inside one function still partition the file."""
        text = "\n".join(
            [
                "function top() {",
                make_function("first", 4, indent="  "),
                "  const x = 1;",
                make_function("second", 3, indent="  "),
                "}",
                make_function("after", 1),
            ]
        )
        records = extract_functions(text)
        own = {m.name: m.own_lines for m in compute_own_lines(records)}
        assert own == {"top": 3, "first": 6, "second": 5, "after": 3}

        total_lines = len(text.split("\n"))
        covered = set()
        for record in records:
            covered.update(range(record.start_line, record.end_line + 1))
        assert sum(own.values()) + (total_lines - len(covered)) == total_lines
