"""Tests for inline run tokenization."""

import pytest

from sparkmark.parsing.inline import InlineToken, RunKind, tokenize_inline

T = RunKind.TEXT
B = RunKind.BOLD
I = RunKind.ITALIC  # noqa: E741
C = RunKind.CODE


def _runs(text: str) -> list[tuple[RunKind, str]]:
    return [(tok.kind, tok.content) for tok in tokenize_inline(text)]


class TestBasicRuns:
    def test_plain_text_is_one_run(self) -> None:
        assert _runs("just words") == [(T, "just words")]

    def test_empty_text_has_no_runs(self) -> None:
        assert tokenize_inline("") == []

    def test_bold(self) -> None:
        assert _runs("a **b** c") == [(T, "a "), (B, "b"), (T, " c")]

    def test_italic(self) -> None:
        assert _runs("*lean*") == [(I, "lean")]

    def test_code(self) -> None:
        assert _runs("run `ls -la` now") == [(T, "run "), (C, "ls -la"), (T, " now")]

    def test_tokens_are_named_tuples(self) -> None:
        (tok,) = tokenize_inline("**x**")
        assert tok == InlineToken(kind=B, content="x")


class TestPriority:
    def test_bold_consumes_inner_stars(self) -> None:
        assert _runs("**a*b*c**") == [(B, "a*b*c")]

    def test_earliest_start_wins(self) -> None:
        assert _runs("`a **b**` **c**") == [(C, "a **b**"), (T, " "), (B, "c")]

    def test_bold_beats_italic_at_same_index(self) -> None:
        assert _runs("**x**") == [(B, "x")]

    def test_italic_before_bold(self) -> None:
        assert _runs("*a* **b**") == [(I, "a"), (T, " "), (B, "b")]

    def test_code_inside_bold_stays_literal(self) -> None:
        assert _runs("**see `x`**") == [(B, "see `x`")]

    def test_code_run_keeps_stars(self) -> None:
        assert _runs("`a*b*c`") == [(C, "a*b*c")]


class TestUnmatchedDelimiters:
    @pytest.mark.parametrize(
        "text",
        [
            "a * b",
            "**open only",
            "`open only",
            "2 * 3 = 6",
        ],
    )
    def test_unterminated_stays_text(self, text: str) -> None:
        assert _runs(text) == [(T, text)]

    def test_empty_bold_is_not_a_match(self) -> None:
        assert _runs("****") == [(T, "****")]

    def test_empty_code_is_not_a_match(self) -> None:
        assert _runs("``") == [(T, "``")]

    def test_empty_code_then_real_code(self) -> None:
        assert _runs("`` `x`") == [(T, "`"), (C, " "), (T, "x`")]

    def test_italic_star_must_stand_alone(self) -> None:
        # "**" halves are never italic delimiters
        assert _runs("a **b c") == [(T, "a **b c")]

    def test_stray_star_after_bold(self) -> None:
        assert _runs("**a** *") == [(B, "a"), (T, " *")]


class TestContentPreservation:
    @pytest.mark.parametrize(
        "text",
        [
            "a **b** *c* `d` e",
            "**a*b*c**",
            "` ` * * ** **",
            "unbalanced ** and * and `",
        ],
    )
    def test_only_delimiters_are_removed(self, text: str) -> None:
        joined = "".join(tok.content for tok in tokenize_inline(text))
        strip = str.maketrans("", "", "*`")
        assert joined.translate(strip) == text.translate(strip)


class TestUnderscoreItalic:
    def test_off_by_default(self) -> None:
        assert _runs("_note_") == [(T, "_note_")]

    def test_underscore_italic(self) -> None:
        tokens = tokenize_inline("see _note_ here", underscore_italic=True)
        assert [(t.kind, t.content) for t in tokens] == [(T, "see "), (I, "note"), (T, " here")]

    def test_doubled_underscores_are_not_delimiters(self) -> None:
        tokens = tokenize_inline("__init__", underscore_italic=True)
        assert [(t.kind, t.content) for t in tokens] == [(T, "__init__")]

    def test_earliest_of_star_and_underscore_wins(self) -> None:
        tokens = tokenize_inline("_a *b* c_ *d*", underscore_italic=True)
        assert [(t.kind, t.content) for t in tokens] == [(I, "a *b* c"), (T, " "), (I, "d")]

    def test_code_keeps_underscores(self) -> None:
        tokens = tokenize_inline("`_x_`", underscore_italic=True)
        assert [(t.kind, t.content) for t in tokens] == [(C, "_x_")]
