"""Tests for LaTeX-to-Unicode transcoding."""

import pytest

from sparkmark.transcoder import SYMBOLS, transcode


class TestStructures:
    def test_fraction(self) -> None:
        assert transcode(r"\frac{1}{2}") == "(1)/(2)"

    def test_fraction_with_unknown_macro(self) -> None:
        assert transcode(r"\frac{1}{2} + \widehat{x}") == "(1)/(2) + widehat{x}"

    def test_square_root(self) -> None:
        assert transcode(r"\sqrt{2}") == "√(2)"

    def test_nth_root(self) -> None:
        assert transcode(r"\sqrt[3]{x}") == "3√(x)"

    def test_fraction_with_symbols(self) -> None:
        assert transcode(r"\frac{\pi}{4}") == "(π)/(4)"

    def test_nested_group_left_partly_converted(self) -> None:
        assert transcode(r"\frac{a^{2}}{b}") == "frac{a^(2)}{b}"

    def test_unclosed_fractions(self) -> None:
        assert transcode(r"\frac{" * 3) == "frac{" * 3


class TestScripts:
    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("x^2", "x²"),
            ("x^n", "xⁿ"),
            ("x_1", "x₁"),
            ("a_0 + a_9", "a₀ + a₉"),
            ("x^{ab}", "x^(ab)"),
            ("a_{ij}", "a[ij]"),
            ("x^10", "x¹0"),
        ],
    )
    def test_scripts(self, source: str, expected: str) -> None:
        assert transcode(source) == expected

    def test_letter_subscript_is_left(self) -> None:
        assert transcode("x_i") == "x_i"


class TestSymbols:
    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            (r"\alpha", "α"),
            (r"\Omega", "Ω"),
            (r"\pm", "±"),
            (r"\leq", "≤"),
            (r"\rightarrow", "→"),
            (r"\infty", "∞"),
            (r"\in", "∈"),
            (r"\int", "∫"),
            (r"\sum", "Σ"),
        ],
    )
    def test_named_symbol(self, source: str, expected: str) -> None:
        assert transcode(source) == expected

    def test_adjacent_macros(self) -> None:
        assert transcode(r"\alpha\beta") == "αβ"

    def test_whole_names_only(self) -> None:
        assert transcode(r"x \in A, \infty") == "x ∈ A, ∞"

    def test_sum_with_limits(self) -> None:
        assert transcode(r"\sum_{i=1}^{n} i") == "Σ[i=1]^(n) i"

    def test_table_values_are_single_glyphs(self) -> None:
        assert all(len(glyph) == 1 for glyph in SYMBOLS.values())


class TestCleanup:
    def test_unknown_macro_loses_backslash(self) -> None:
        assert transcode(r"\mathbb{R}") == "mathbb{R}"

    def test_lone_backslashes_dropped(self) -> None:
        assert transcode(r"a \\ b \{c\}") == "a  b {c}"

    def test_plain_text_unchanged(self) -> None:
        assert transcode("E = mc") == "E = mc"

    def test_empty(self) -> None:
        assert transcode("") == ""

    @pytest.mark.parametrize("source", [r"\frac{", r"\sqrt[", "^{", "_{}", "\\"])
    def test_malformed_never_raises(self, source: str) -> None:
        assert isinstance(transcode(source), str)
