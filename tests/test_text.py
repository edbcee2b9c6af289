"""Tests for plain text extraction."""

from sparkmark import extract_text, parse, render


class TestExtractText:
    def test_runs_lose_delimiters(self) -> None:
        (para,) = render("a **b** *c* `d`")
        assert extract_text(para) == "a b c d"

    def test_equation_transcoded_by_default(self) -> None:
        (para,) = render("area $\\pi r^2$")
        assert extract_text(para) == "area π r²"

    def test_equation_source(self) -> None:
        (para,) = render("area $\\pi r^2$")
        assert extract_text(para, equation_source=True) == "area \\pi r^2"

    def test_list_items_joined_by_newline(self) -> None:
        (lst,) = render("- one\n- **two**")
        assert extract_text(lst) == "one\ntwo"

    def test_code_block_is_raw(self) -> None:
        (code,) = render("```\n  a\nb\n```")
        assert extract_text(code) == "  a\nb"

    def test_rule_and_blank_are_empty(self) -> None:
        rule, blank = render("---\n")
        assert extract_text(rule) == ""
        assert extract_text(blank) == ""

    def test_document(self) -> None:
        doc = parse("# T\npara\n- x")
        assert extract_text(doc) == "T\npara\nx"

    def test_single_run(self) -> None:
        (para,) = render("**bold**")
        assert extract_text(para.children[0]) == "bold"

    def test_multiline_paragraph(self) -> None:
        (para,) = render("one\ntwo")
        assert extract_text(para) == "one\ntwo"
