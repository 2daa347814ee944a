"""Tests for scope depth extraction."""

import pytest

from scopescan.scanning import (
    FunctionRecord,
    ScanContext,
    compute_own_lines,
    extract_functions,
    line_depths,
)
from scopescan.scanning.lexer import scan_lines
from scopescan.scanning.scopes import ScopeExtractor


class TestExtractFunctions:
    """Pairing declarations with their closing braces."""

    def test_single_function(self, hello_source):
        """A three-line function becomes one record."""
        assert extract_functions(hello_source) == [
            FunctionRecord(name="hello", start_line=1, end_line=3, line_count=3)
        ]

    def test_nested_functions_in_closing_order(self, nested_source):
        """Inner functions close first."""
        records = extract_functions(nested_source)
        assert [(r.name, r.start_line, r.end_line) for r in records] == [
            ("inner", 3, 5),
            ("outer", 1, 10),
        ]

    def test_class_methods(self, class_source):
        """Method shorthand inside a class body is recognized."""
        records = extract_functions(class_source)
        assert [(r.name, r.start_line, r.end_line) for r in records] == [
            ("constructor", 2, 4),
            ("get", 5, 7),
        ]

    def test_one_line_function(self):
        """Opening and closing on the same line gives a one-line record."""
        (record,) = extract_functions("function a() { return 1; }")
        assert record.line_count == 1

    def test_object_literal_inside_body(self):
        """Balanced braces of object literals do not close the function."""
        text = "const build = () => {\n  const o = { a: 1 };\n  return o;\n};\n"
        assert extract_functions(text) == [FunctionRecord.span("build", 1, 4)]

    def test_body_opens_on_later_line(self):
        """The first block opening after the declaration fixes its depth."""
        text = "function late(a)\n{\n  return a;\n}\n"
        assert extract_functions(text) == [FunctionRecord.span("late", 1, 4)]

    def test_same_depth_closes_most_recent_only(self):
        """One closing brace finalizes a single pending definition."""
        text = "function a()\nfunction b() {\n}\n{\n}"
        records = extract_functions(text)
        assert [(r.name, r.start_line, r.end_line) for r in records] == [
            ("b", 2, 3),
            ("a", 1, 5),
        ]

    def test_control_flow_block_is_a_record(self):
        """An ``if`` block inside a function is taken as a nested function."""
        text = "function f() {\n  if (x) {\n    y();\n  }\n}"
        records = extract_functions(text)
        assert [(r.name, r.start_line, r.end_line) for r in records] == [
            ("if", 2, 4),
            ("f", 1, 5),
        ]
        own = {m.name: m.own_lines for m in compute_own_lines(records)}
        assert own == {"if": 3, "f": 2}

    def test_unclosed_definition_discarded(self):
        """Definitions still pending at end of input produce nothing."""
        assert extract_functions("function a() {\n  return 1;\n") == []

    def test_declaration_inside_comment_ignored(self):
        """A declaration in a block comment is not matched."""
        text = "/*\nfunction ghost() {\n}\n*/\nfunction real() {\n}\n"
        assert [r.name for r in extract_functions(text)] == ["real"]

    def test_declaration_inside_multiline_string_ignored(self):
        """A declaration on a line that starts inside a template literal is skipped."""
        text = "const t = `\nfunction ghost() {\n}\n`;\nfunction real() {\n}\n"
        assert [r.name for r in extract_functions(text)] == ["real"]

    def test_empty_and_garbage_input(self):
        """Malformed input never raises."""
        assert extract_functions("") == []
        assert extract_functions("}}}{{{\n\x00\x01 '\"`") == []


class TestStringOpacity:
    """Braces inside strings never move record boundaries."""

    BODY = 'function f() {{\n  const s = {literal};\n  return s;\n}}\n'

    @pytest.mark.parametrize(
        "literal",
        [
            '"{ not a brace }"',
            "'}}}'",
            '"{{{"',
            "`{ ${x} }`",
            '"\\"}"',
            "'/* { */'",
        ],
    )
    def test_braces_in_literals(self, literal):
        """Records match the brace-free equivalent."""
        with_braces = extract_functions(self.BODY.format(literal=literal))
        without = extract_functions(self.BODY.format(literal='""'))
        assert with_braces == without
        assert with_braces == [FunctionRecord.span("f", 1, 4)]

    def test_braces_in_comments(self):
        """Braces in comments are ignored too."""
        text = "function f() {\n  // }\n  /* } */\n  return 1;\n}\n"
        assert extract_functions(text) == [FunctionRecord.span("f", 1, 5)]


class TestDepth:
    """The global depth counter."""

    def test_unmatched_closers_ignored(self):
        """Leading closers do not drive depth negative."""
        text = "}}}\nfunction a() {\n}\n"
        assert extract_functions(text) == [FunctionRecord.span("a", 2, 3)]

    @pytest.mark.parametrize(
        "text",
        [
            "}\n}\n{",
            "} } function a() {\n}}}\n",
            "{\n}\n}\n}\n{\n",
            "'}' }\n\"{\" {",
        ],
    )
    def test_depth_never_negative(self, text):
        """Depth stays at or above zero for any input."""
        extractor = ScopeExtractor()
        for line in scan_lines(text):
            extractor.feed(line)
            assert extractor.depth >= 0
        assert all(depth >= 0 for depth in line_depths(text))

    def test_line_depths(self, nested_source):
        """Depth in effect at the start of each line."""
        assert line_depths(nested_source)[:6] == [0, 1, 1, 2, 2, 1]


class TestIdempotence:
    """Repeated scans agree."""

    def test_same_records_twice(self, nested_source):
        """Scanning the same text twice yields identical records."""
        assert extract_functions(nested_source) == extract_functions(nested_source)

    def test_context_memoizes(self, nested_source):
        """A shared context answers the second scan from its memo."""
        context = ScanContext()
        first = extract_functions(nested_source, context)
        second = extract_functions(nested_source, context)
        assert first == second
        assert context.misses == 1
        assert context.hits == 1

    def test_context_results_are_independent_lists(self, hello_source):
        """Callers may mutate what they get back without corrupting the memo."""
        context = ScanContext()
        extract_functions(hello_source, context).clear()
        assert len(extract_functions(hello_source, context)) == 1
