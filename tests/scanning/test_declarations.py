"""Tests for the line-level declaration matcher."""

import pytest

from scopescan.scanning.declarations import match_declaration, match_declared_name


class TestMatchDeclaration:
    """Declaration idioms that open a function body."""

    @pytest.mark.parametrize(
        "line, name",
        [
            ("function hello() {", "hello"),
            ("async function load(url) {", "load"),
            ("  function inner(a, b) {", "inner"),
            ("const total = (items) => {", "total"),
            ("export const run = async x => {", "run"),
            ("let $handler = async () => {", "$handler"),
            ("  render(ctx) {", "render"),
            ("  async fetchAll(ids) {", "fetchAll"),
            ("  onClick: function (event) {", "onClick"),
            ("  handler: async (req) => {", "handler"),
        ],
    )
    def test_recognized_idioms(self, line, name):
        """Each supported idiom yields the declared name."""
        assert match_declaration(line) == name

    @pytest.mark.parametrize(
        "line, keyword",
        [
            ("if (ready) {", "if"),
            ("  for (const item of items) {", "for"),
            ("while (running) {", "while"),
            ("switch (kind) {", "switch"),
            ("catch (err) {", "catch"),
        ],
    )
    def test_control_flow_heads_match_method_shorthand(self, line, keyword):
        """Control-flow heads share the method shorthand shape and are matched."""
        assert match_declaration(line) == keyword

    @pytest.mark.parametrize(
        "line",
        [
            "} catch (err) {",
            "function (event) {",
            "const value = compute(x);",
            "log(\"hi\");",
            "items.forEach((item) => {",
            "",
        ],
    )
    def test_non_declarations(self, line):
        """Closing-brace lines, anonymous functions, calls and plain bindings are not matched."""
        assert match_declaration(line) is None

    def test_multiline_parameters_not_resolved(self):
        """A declaration whose parameter list spans lines is missed."""
        assert match_declaration("const build = (a,") is None

    def test_first_idiom_wins(self):
        """Named function form takes precedence over method shorthand."""
        assert match_declaration("function go() {") == "go"


class TestMatchDeclaredName:
    """Narrower forms feeding duplicate detection."""

    @pytest.mark.parametrize(
        "line, name",
        [
            ("function helper(a) {", "helper"),
            ("export function helper(a) {", "helper"),
            ("export default function main() {", "main"),
            ("export async function save() {", "save"),
            ("const helper = function (x) {", "helper"),
            ("const double = (x) => x * 2;", "double"),
            ("let f = x => x + 1;", "f"),
            ("export const load = async (url) => {", "load"),
        ],
    )
    def test_declared_names(self, line, name):
        """Function declarations and function-valued bindings are names."""
        assert match_declared_name(line) == name

    @pytest.mark.parametrize(
        "line",
        [
            "const data = load();",
            "  render(ctx) {",
            "const config = { a: 1 };",
            "const alias = helper;",
        ],
    )
    def test_not_declared_names(self, line):
        """Method shorthand and non-function bindings are not collected."""
        assert match_declared_name(line) is None
