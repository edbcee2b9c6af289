"""Tests for the public rendering API."""

import pytest

from sparkmark import (
    Blank,
    Bold,
    Code,
    CodeBlock,
    Document,
    Equation,
    EquationForm,
    Heading,
    Italic,
    LineSpan,
    List,
    Markdown,
    Paragraph,
    RenderConfig,
    Rule,
    Text,
    parse,
    render,
)


class TestRender:
    def test_empty_input(self) -> None:
        assert render("") == ()

    def test_rejects_non_string(self) -> None:
        with pytest.raises(TypeError, match="expects str"):
            render(b"bytes")  # type: ignore[arg-type]

    def test_rejects_none(self) -> None:
        with pytest.raises(TypeError):
            render(None)  # type: ignore[arg-type]

    def test_returns_tuple_of_blocks(self) -> None:
        blocks = render("# Title\n\nBody")
        assert isinstance(blocks, tuple)
        assert [type(b) for b in blocks] == [Heading, Blank, Paragraph]

    def test_heading_levels(self) -> None:
        blocks = render("# one\n## two\n### three")
        assert [b.level for b in blocks] == [1, 2, 3]

    def test_text_using_every_private_use_character(self) -> None:
        private_use = [*range(0xE000, 0xF900), *range(0xF0000, 0xFFFFE)]
        source = "".join(map(chr, private_use)) + " $x$"
        (para,) = render(source)
        assert para.children == (Text(node_id="b0.r0", content=source),)

    def test_rule(self) -> None:
        (rule,) = render("-----")
        assert isinstance(rule, Rule)
        assert rule.span == LineSpan(0, 0)


class TestScenarios:
    def test_bold_swallows_single_stars(self) -> None:
        (para,) = render("**a*b*c**")
        assert isinstance(para, Paragraph)
        assert para.children == (Bold(node_id="b0.r0", content="a*b*c"),)

    def test_star_inside_equation_is_not_italic(self) -> None:
        (para,) = render("$x*y$ and *z*")
        eq, text, italic = para.children
        assert isinstance(eq, Equation)
        assert eq.form is EquationForm.INLINE
        assert eq.source == "x*y"
        assert text == Text(node_id="b0.r1", content=" and ")
        assert italic == Italic(node_id="b0.r2", content="z")

    def test_list_kind_change_splits_lists(self) -> None:
        first, second = render("- one\n- two\n1. three")
        assert isinstance(first, List) and isinstance(second, List)
        assert first.ordered is False
        assert [i.children[0].content for i in first.items] == ["one", "two"]
        assert second.ordered is True
        assert second.items[0].label == "1"
        assert second.items[0].children == (Text(node_id="b1.i0.r0", content="three"),)

    def test_nested_item_keeps_indent_and_trailing_space(self) -> None:
        (lst,) = render("- top\n   - nested  ")
        assert [i.indent for i in lst.items] == [0, 3]
        assert lst.items[1].children == (Text(node_id="b0.i1.r0", content="nested  "),)

    def test_unterminated_fence(self) -> None:
        (code,) = render("```js\nconsole.log(1)")
        assert isinstance(code, CodeBlock)
        assert code.language == "js"
        assert code.raw_lines == ("console.log(1)",)

    def test_transcoded_equation(self) -> None:
        (para,) = render("$\\frac{1}{2} + \\widehat{x}$")
        (eq,) = para.children
        assert eq.transcoded == "(1)/(2) + widehat{x}"
        assert eq.source == "\\frac{1}{2} + \\widehat{x}"

    def test_block_equation_in_paragraph(self) -> None:
        (para,) = render("Energy: $$E = mc^2$$")
        text, eq = para.children
        assert text.content == "Energy: "
        assert eq.form is EquationForm.BLOCK
        assert eq.transcoded == "E = mc²"


class TestEquationSplicing:
    def test_bold_is_split_around_equation(self) -> None:
        (para,) = render("**area $r^2$ total**")
        assert [type(r) for r in para.children] == [Bold, Equation, Bold]
        assert para.children[0].content == "area "
        assert para.children[2].content == " total"

    def test_italic_ending_in_equation(self) -> None:
        (para,) = render("*see $x$*")
        assert [type(r) for r in para.children] == [Italic, Equation]

    def test_equation_inside_code_is_restored(self) -> None:
        (para,) = render("run `echo $HOME$` now")
        assert para.children[1] == Code(node_id="b0.r1", content="echo $HOME$")

    def test_block_equation_inside_code_is_restored(self) -> None:
        (para,) = render("`$$a$$`")
        assert para.children == (Code(node_id="b0.r0", content="$$a$$"),)

    def test_equation_in_heading_and_list_item(self) -> None:
        heading, lst = render("# Value of $\\pi$\n- about $3$")
        assert isinstance(heading.children[1], Equation)
        assert heading.children[1].transcoded == "π"
        assert lst.items[0].children[1].source == "3"


class TestNoMarkup:
    def test_html_is_plain_text(self) -> None:
        (para,) = render("<script>alert(1)</script>")
        assert para.children == (
            Text(node_id="b0.r0", content="<script>alert(1)</script>"),
        )

    def test_links_are_plain_text(self) -> None:
        (para,) = render("[click](javascript:alert(1))")
        assert para.children[0].content == "[click](javascript:alert(1))"

    def test_html_in_code_block_is_verbatim(self) -> None:
        (code,) = render("```html\n<b>x</b>\n```")
        assert code.raw_lines == ("<b>x</b>",)


class TestIds:
    def test_block_item_and_run_ids(self) -> None:
        blocks = render("# a **b**\n- c\n- d *e*")
        heading, lst = blocks
        assert heading.node_id == "b0"
        assert [r.node_id for r in heading.children] == ["b0.r0", "b0.r1"]
        assert lst.node_id == "b1"
        assert [i.node_id for i in lst.items] == ["b1.i0", "b1.i1"]
        assert [r.node_id for r in lst.items[1].children] == ["b1.i1.r0", "b1.i1.r1"]

    def test_ids_are_unique(self) -> None:
        doc = parse("# h\n\ntext **b** $x$\n- a\n- b\n1. c\n```\nz\n```\n---")
        ids = [doc.node_id]
        for block in doc.children:
            ids.append(block.node_id)
            for item in getattr(block, "items", ()):
                ids.append(item.node_id)
                ids.extend(run.node_id for run in item.children)
            ids.extend(run.node_id for run in getattr(block, "children", ()))
        assert len(ids) == len(set(ids))

    def test_render_is_deterministic(self) -> None:
        source = "# t\n**x** $y$ `z`\n- a\n```\nq"
        assert render(source) == render(source)


class TestParse:
    def test_document_root(self) -> None:
        doc = parse("a\nb")
        assert isinstance(doc, Document)
        assert doc.node_id == "doc"
        assert doc.span == LineSpan(0, 1)

    def test_empty_document_span(self) -> None:
        doc = parse("")
        assert doc.children == ()
        assert doc.span == LineSpan(0, -1)

    def test_trailing_newline_is_a_blank_line(self) -> None:
        doc = parse("text\n")
        assert [type(b) for b in doc.children] == [Paragraph, Blank]

    def test_config_argument(self) -> None:
        (para,) = render("$x$", config=RenderConfig(equations_enabled=False))
        assert para.children == (Text(node_id="b0.r0", content="$x$"),)


class TestMarkdown:
    def test_call_matches_render(self) -> None:
        md = Markdown()
        assert md("**a** $b$") == render("**a** $b$")

    def test_digest_profile(self) -> None:
        md = Markdown(equations=False, code_fences=False)
        blocks = md("```\n# Head\ncosts $5 or $6\n```")
        assert [type(b) for b in blocks] == [Paragraph, Heading, Paragraph]
        assert blocks[2].children == (Text(node_id="b2.r0", content="costs $5 or $6\n```"),)

    def test_underscore_italic_profile(self) -> None:
        (para,) = render("read _this_ first", config=RenderConfig.digest())
        assert para.children == (
            Text(node_id="b0.r0", content="read "),
            Italic(node_id="b0.r1", content="this"),
            Text(node_id="b0.r2", content=" first"),
        )

    def test_underscores_literal_by_default(self) -> None:
        (para,) = Markdown()("read _this_ first")
        assert para.children == (Text(node_id="b0.r0", content="read _this_ first"),)

    def test_config_property(self) -> None:
        md = Markdown(equations=False)
        assert md.config == RenderConfig(equations_enabled=False, code_fences_enabled=True)

    def test_parse_returns_document(self) -> None:
        assert isinstance(Markdown().parse("x"), Document)

    def test_render_many(self) -> None:
        md = Markdown()
        results = md.render_many(["# a", "", "b"])
        assert results == [render("# a"), (), render("b")]

    def test_render_many_rejects_non_string_items(self) -> None:
        with pytest.raises(TypeError, match="expects str"):
            Markdown().render_many(["ok", 3])  # type: ignore[list-item]
