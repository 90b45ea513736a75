"""Integration tests for Markdown text to document tree conversion.

These tests run the real markdown-it-py tokenizer and plugins through the
converter and check the resulting document trees and editor JSON.
"""

import pytest

from md2doc import import_markdown, markdown_to_document, markdown_to_editor_json
from md2doc.ast import (
    BlockQuote,
    Bold,
    BulletList,
    Code,
    CodeBlock,
    Document,
    HardBreak,
    Heading,
    HorizontalRule,
    Italic,
    Link,
    ListItem,
    OrderedList,
    Paragraph,
    Strike,
    Table,
    TaskList,
    Text,
    find_violations,
    validate_document,
)
from md2doc.options import ConverterOptions, TokenizerOptions


def _only_block(markdown: str):
    doc = markdown_to_document(markdown)
    assert len(doc.content) == 1
    return doc.content[0]


@pytest.mark.integration
class TestBlocks:
    """Test block-level constructs from real Markdown."""

    def test_bullet_list(self) -> None:
        """Test a three item list keeps its items in order."""
        block = _only_block("- a\n- b\n- c")

        assert block == BulletList(
            items=[
                ListItem(content=[Paragraph(content=[Text("a")])]),
                ListItem(content=[Paragraph(content=[Text("b")])]),
                ListItem(content=[Paragraph(content=[Text("c")])]),
            ]
        )

    def test_nested_list(self) -> None:
        """Test a nested list stays inside its parent item."""
        block = _only_block("- a\n  - b\n- c")

        assert isinstance(block, BulletList)
        assert len(block.items) == 2
        first = block.items[0]
        assert first.content[0] == Paragraph(content=[Text("a")])
        assert isinstance(first.content[1], BulletList)
        assert first.content[1].items[0].content == [Paragraph(content=[Text("b")])]

    def test_ordered_list_start(self) -> None:
        """Test an ordered list keeps its start number."""
        block = _only_block("3. three\n4. four")

        assert isinstance(block, OrderedList)
        assert block.start == 3
        assert len(block.items) == 2

    def test_ordered_list_default_start(self) -> None:
        """Test an ordered list starting at one."""
        block = _only_block("1. one\n2. two")

        assert isinstance(block, OrderedList)
        assert block.start == 1

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_heading_levels(self, level: int) -> None:
        """Test every ATX heading level."""
        block = _only_block("#" * level + " Title")

        assert block == Heading(level=level, content=[Text("Title")])

    def test_fenced_code(self) -> None:
        """Test a fence keeps its language and literal content."""
        block = _only_block("```python\nprint(1)\n```")

        assert block == CodeBlock(text="print(1)\n", language="python")

    def test_fence_info_with_extra_words(self) -> None:
        """Test only the first word of the info string is the language."""
        block = _only_block("```js title=x\nlet a\n```")

        assert isinstance(block, CodeBlock)
        assert block.language == "js"

    def test_indented_code(self) -> None:
        """Test indented code has no language."""
        block = _only_block("    indented\n")

        assert block == CodeBlock(text="indented\n", language=None)

    def test_blockquote(self) -> None:
        """Test a quote wraps its paragraphs."""
        block = _only_block("> quoted")

        assert block == BlockQuote(content=[Paragraph(content=[Text("quoted")])])

    def test_horizontal_rule(self) -> None:
        """Test a thematic break between paragraphs."""
        doc = markdown_to_document("a\n\n***\n\nb")

        assert doc.content == [
            Paragraph(content=[Text("a")]),
            HorizontalRule(),
            Paragraph(content=[Text("b")]),
        ]

    def test_table(self) -> None:
        """Test header and body rows of a pipe table."""
        block = _only_block("| A | B |\n| --- | --- |\n| 1 | 2 |")

        assert isinstance(block, Table)
        assert len(block.rows) == 2
        assert [cell.header for cell in block.rows[0].cells] == [True, True]
        assert [cell.header for cell in block.rows[1].cells] == [False, False]
        assert block.rows[0].cells[0].content == [Paragraph(content=[Text("A")])]
        assert block.rows[1].cells[1].content == [Paragraph(content=[Text("2")])]

    def test_table_empty_cell(self) -> None:
        """Test an empty cell still holds one paragraph."""
        block = _only_block("| A | B |\n| --- | --- |\n| 1 |   |")

        assert isinstance(block, Table)
        assert block.rows[1].cells[1].content == [Paragraph()]

    def test_task_list(self) -> None:
        """Test checked and unchecked task items."""
        block = _only_block("- [ ] todo\n- [x] done")

        assert isinstance(block, TaskList)
        assert [item.checked for item in block.items] == [False, True]
        assert block.items[0].content == [Paragraph(content=[Text("todo")])]
        assert block.items[1].content == [Paragraph(content=[Text("done")])]

    def test_task_lists_disabled(self) -> None:
        """Test checkbox syntax stays text when task lists are off."""
        options = ConverterOptions(tokenizer=TokenizerOptions(parse_task_lists=False))

        block = markdown_to_document("- [ ] todo", options).content[0]

        assert isinstance(block, BulletList)
        assert block.items[0].content == [Paragraph(content=[Text("[ ] todo")])]

    def test_image_only_paragraph(self) -> None:
        """Test images are dropped, leaving an empty paragraph."""
        block = _only_block("![alt](pic.png)")

        assert block == Paragraph()

    def test_raw_html_block_skipped(self) -> None:
        """Test raw HTML blocks are skipped when raw markup is allowed."""
        options = ConverterOptions(tokenizer=TokenizerOptions(allow_raw_embedded_markup=True))

        doc = markdown_to_document("<div>raw</div>\n\ntext", options)

        assert doc.content == [Paragraph(content=[Text("text")])]


@pytest.mark.integration
class TestInline:
    """Test inline formatting from real Markdown."""

    def test_bold_and_plain(self) -> None:
        """Test bold text followed by plain text."""
        block = _only_block("**bold** text")

        assert block == Paragraph(content=[Text("bold", [Bold()]), Text(" text")])

    def test_italic_and_code(self) -> None:
        """Test emphasis and inline code marks."""
        block = _only_block("_it_ and `code`")

        assert block == Paragraph(content=[Text("it", [Italic()]), Text(" and "), Text("code", [Code()])])

    def test_strikethrough(self) -> None:
        """Test strikethrough becomes a strike mark."""
        block = _only_block("~~gone~~")

        assert block == Paragraph(content=[Text("gone", [Strike()])])

    def test_link(self) -> None:
        """Test an inline link carries its target."""
        block = _only_block("[site](https://example.org)")

        assert block == Paragraph(content=[Text("site", [Link(href="https://example.org")])])

    def test_bare_url_is_linked(self) -> None:
        """Test bare URLs become links."""
        block = _only_block("visit https://example.com now")

        assert block == Paragraph(
            content=[
                Text("visit "),
                Text("https://example.com", [Link(href="https://example.com")]),
                Text(" now"),
            ]
        )

    def test_bare_url_left_alone_when_disabled(self) -> None:
        """Test autolinking can be turned off."""
        options = ConverterOptions(tokenizer=TokenizerOptions(autolink_bare_urls=False))

        block = markdown_to_document("visit https://example.com now", options).content[0]

        assert block == Paragraph(content=[Text("visit https://example.com now")])

    def test_typographic_replacement(self) -> None:
        """Test typographic substitutions."""
        block = _only_block("(c) 2025")

        assert block == Paragraph(content=[Text("© 2025")])

    def test_soft_break_becomes_space(self) -> None:
        """Test lines joined by a soft break read as one run."""
        block = _only_block("one\ntwo")

        assert block == Paragraph(content=[Text("one two")])

    def test_soft_break_after_code_span(self) -> None:
        """Test the space from a soft break after code stays unformatted."""
        block = _only_block("`x`\ny")

        assert block == Paragraph(content=[Text("x", [Code()]), Text(" y")])

    def test_soft_break_after_link(self) -> None:
        """Test the space from a soft break after a link is not linked."""
        block = _only_block("[a](u)\nb")

        assert block == Paragraph(content=[Text("a", [Link(href="u")]), Text(" b")])

    def test_hard_break(self) -> None:
        """Test a trailing double space makes a hard break."""
        block = _only_block("line one  \nline two")

        assert block == Paragraph(content=[Text("line one"), HardBreak(), Text("line two")])

    def test_nested_marks_single_level(self) -> None:
        """Test nested emphasis keeps only the outer mark by default."""
        block = _only_block("***both***")

        assert isinstance(block, Paragraph)
        assert block.content == [Text("both", [Italic()])]

    def test_nested_marks_composed(self) -> None:
        """Test nested emphasis combines marks when composing."""
        options = ConverterOptions(compose_marks=True)

        block = markdown_to_document("***both***", options).content[0]

        assert block.content == [Text("both", [Italic(), Bold()])]


@pytest.mark.integration
class TestDocuments:
    """Test whole-document behaviour."""

    @pytest.mark.parametrize("source", ["", "   ", "\n\n\n"])
    def test_blank_input(self, source: str) -> None:
        """Test blank input gives the minimal document."""
        assert markdown_to_document(source) == Document.empty()

    def test_deep_quotes_with_raised_nesting_limit(self) -> None:
        """Test quotes nested deeper than the converter could once recurse."""
        options = ConverterOptions(tokenizer=TokenizerOptions(max_nesting=1000))

        result = markdown_to_editor_json(">" * 250 + " deep", options)

        node = result["content"][0]
        levels = 0
        while node["type"] == "blockquote":
            levels += 1
            node = node["content"][0]
        assert levels == 250
        assert node == {"type": "paragraph", "content": [{"type": "text", "text": "deep"}]}

    def test_sample_document_is_valid(self, sample_markdown: str) -> None:
        """Test the sample document converts to a valid tree."""
        doc = markdown_to_document(sample_markdown)

        validate_document(doc)
        kinds = [type(block).__name__ for block in doc.content]
        assert kinds == [
            "Heading",
            "Paragraph",
            "Heading",
            "BulletList",
            "OrderedList",
            "TaskList",
            "BlockQuote",
            "CodeBlock",
            "HorizontalRule",
            "Table",
        ]

    def test_sample_document_composed_is_valid(self, sample_markdown: str) -> None:
        """Test the composed mark walk also yields a valid tree."""
        doc = markdown_to_document(sample_markdown, ConverterOptions(compose_marks=True, merge_text_runs=False))

        assert find_violations(doc) == []

    def test_editor_json(self) -> None:
        """Test the editor JSON shape."""
        result = markdown_to_editor_json("# Hi\n\n- a")

        assert result == {
            "type": "doc",
            "content": [
                {"type": "heading", "attrs": {"level": 1}, "content": [{"type": "text", "text": "Hi"}]},
                {
                    "type": "bulletList",
                    "content": [
                        {
                            "type": "listItem",
                            "content": [{"type": "paragraph", "content": [{"type": "text", "text": "a"}]}],
                        }
                    ],
                },
            ],
        }

    def test_editor_json_blank_input(self) -> None:
        """Test blank input serializes to one empty paragraph."""
        assert markdown_to_editor_json("") == {"type": "doc", "content": [{"type": "paragraph", "content": []}]}


@pytest.mark.integration
class TestImport:
    """Test the import front-end with the real tokenizer."""

    def test_front_matter_and_images(self) -> None:
        """Test front matter becomes metadata and images are removed."""
        source = "---\ntitle: Weekly plan\nowner: sam\n---\n# Goals\n\n![chart](chart.png)\n\nShip it.\n"

        result = import_markdown(source, filename="plan.md")

        assert result.title == "Weekly plan"
        assert result.front_matter == {"title": "Weekly plan", "owner": "sam"}
        assert result.document.metadata == result.front_matter
        assert result.document.content == [
            Heading(level=1, content=[Text("Goals")]),
            Paragraph(content=[Text("Ship it.")]),
        ]

    def test_title_from_filename(self) -> None:
        """Test the filename stem is the fallback title."""
        result = import_markdown("text", filename="notes.md")

        assert result.title == "notes"
        assert result.front_matter == {}
