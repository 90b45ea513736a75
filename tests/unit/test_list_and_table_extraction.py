#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for list, task list and table extraction."""
import pytest
from utils import (
    bullet_list,
    close_token,
    inline,
    list_item,
    open_token,
    paragraph,
    span,
    stream,
    table,
    task_item,
    text,
)

from md2doc.ast import (
    Bold,
    BulletList,
    ListItem,
    Paragraph,
    Table,
    TableCell,
    TableRow,
    TaskItem,
    TaskList,
    Text,
)
from md2doc.options import ConverterOptions, TokenizerOptions
from md2doc.parsers._lists import ListExtractor
from md2doc.parsers._matching import TokenCursor
from md2doc.parsers.markdown import tokens_to_document


@pytest.mark.unit
class TestTaskLists:
    """Test checkbox list conversion."""

    def test_task_list(self) -> None:
        """Test unchecked and checked items."""
        tokens = bullet_list(
            task_item("open"),
            task_item("done", checked=True),
            **{"class": "contains-task-list"},
        )

        doc = tokens_to_document(tokens)

        assert doc.content == [
            TaskList(
                items=[
                    TaskItem(checked=False, content=[Paragraph(content=[Text("open")])]),
                    TaskItem(checked=True, content=[Paragraph(content=[Text("done")])]),
                ]
            )
        ]

    def test_plain_item_in_task_list(self) -> None:
        """Test that items without a checkbox become unchecked tasks."""
        tokens = bullet_list(
            task_item("task"),
            list_item(paragraph(text("plain"))),
            **{"class": "contains-task-list"},
        )

        items = tokens_to_document(tokens).content[0].items

        assert items[1] == TaskItem(checked=False, content=[Paragraph(content=[Text("plain")])])

    def test_task_lists_disabled(self) -> None:
        """Test that task markers are ignored when task lists are off."""
        options = ConverterOptions(tokenizer=TokenizerOptions(parse_task_lists=False))
        tokens = bullet_list(task_item("open"), **{"class": "contains-task-list"})

        doc = tokens_to_document(tokens, options)

        assert doc.content == [BulletList(items=[ListItem(content=[Paragraph(content=[Text(" open")])])])]

    def test_empty_task_item(self) -> None:
        """Test a task item whose text is only the checkbox."""
        tokens = bullet_list(task_item(""), **{"class": "contains-task-list"})

        item = tokens_to_document(tokens).content[0].items[0]

        assert item == TaskItem(checked=False, content=[Paragraph()])

    def test_marked_first_run_stripped(self) -> None:
        """Test that only leading whitespace is removed from the first run."""
        checkbox = task_item("x")[2].children[0]
        item = list_item(paragraph(checkbox, *span("strong", text(" bold"))), **{"class": "task-list-item"})
        tokens = bullet_list(item, **{"class": "contains-task-list"})

        paragraph_node = tokens_to_document(tokens).content[0].items[0].content[0]

        assert paragraph_node.content == [Text("bold", [Bold()])]


@pytest.mark.unit
class TestTables:
    """Test table conversion."""

    def test_header_and_body_rows(self) -> None:
        """Test header flags per section."""
        doc = tokens_to_document(table([["A", "B"]], [["1", "2"]]))

        assert doc.content == [
            Table(
                rows=[
                    TableRow(
                        cells=[
                            TableCell(header=True, content=[Paragraph(content=[Text("A")])]),
                            TableCell(header=True, content=[Paragraph(content=[Text("B")])]),
                        ]
                    ),
                    TableRow(
                        cells=[
                            TableCell(header=False, content=[Paragraph(content=[Text("1")])]),
                            TableCell(header=False, content=[Paragraph(content=[Text("2")])]),
                        ]
                    ),
                ]
            )
        ]

    def test_blank_cell(self) -> None:
        """Test that a blank cell holds an empty paragraph."""
        doc = tokens_to_document(table([["A"]], [["  "]]))

        assert doc.content[0].rows[1].cells[0].content == [Paragraph()]

    def test_cell_without_inline(self) -> None:
        """Test a cell with no inline token."""
        tokens = stream(
            [open_token("table"), open_token("tbody"), open_token("tr"), open_token("td")],
            [close_token("td"), close_token("tr"), close_token("tbody"), close_token("table")],
        )

        cell = tokens_to_document(tokens).content[0].rows[0].cells[0]

        assert cell == TableCell(header=False, content=[Paragraph()])

    def test_row_order_preserved(self) -> None:
        """Test that body rows keep source order."""
        doc = tokens_to_document(table([["H"]], [["1"], ["2"], ["3"]]))

        values = [row.cells[0].content[0].content[0].text for row in doc.content[0].rows]
        assert values == ["H", "1", "2", "3"]

    def test_th_in_body_is_not_header(self) -> None:
        """Test that the section, not the cell tag, decides the header flag."""
        tokens = stream(
            [open_token("table"), open_token("tbody"), open_token("tr"), open_token("th")],
            [inline(text("x"))],
            [close_token("th"), close_token("tr"), close_token("tbody"), close_token("table")],
        )

        assert tokens_to_document(tokens).content[0].rows[0].cells[0].header is False

    def test_row_outside_section(self) -> None:
        """Test that rows directly inside the table are body rows."""
        tokens = stream(
            [open_token("table"), open_token("tr"), open_token("td")],
            [inline(text("x"))],
            [close_token("td"), close_token("tr"), close_token("table")],
        )

        row = tokens_to_document(tokens).content[0].rows[0]

        assert row.cells == [TableCell(header=False, content=[Paragraph(content=[Text("x")])])]

    def test_formatted_cell(self) -> None:
        """Test that cell content goes through inline flattening."""
        tokens = stream(
            [open_token("table"), open_token("tbody"), open_token("tr"), open_token("td")],
            [inline(span("strong", text("b")))],
            [close_token("td"), close_token("tr"), close_token("tbody"), close_token("table")],
        )

        cell = tokens_to_document(tokens).content[0].rows[0].cells[0]

        assert cell.content == [Paragraph(content=[Text("b", [Bold()])])]

    def test_empty_table(self) -> None:
        """Test a table without rows."""
        doc = tokens_to_document([open_token("table"), close_token("table")])

        assert doc.content == [Table(rows=[])]


@pytest.mark.unit
class TestListItemSpans:
    """Test the item spans the list extractor hands back for conversion."""

    def test_items_share_span_content(self) -> None:
        """Test that filling a span's content fills the matching item."""
        tokens = bullet_list(list_item(paragraph(text("a"))), list_item(paragraph(text("b"))))
        cursor = TokenCursor(tokens)

        node, spans = ListExtractor().extract(cursor, cursor.find_close())

        assert isinstance(node, BulletList)
        assert len(spans) == 2
        spans[1].content.append(Paragraph(content=[Text("b")]))
        assert node.items[1].content == [Paragraph(content=[Text("b")])]
        assert node.items[0].content == []

    def test_span_bounds_exclude_item_tokens(self) -> None:
        """Test that each span starts inside its item and stops at the item close."""
        tokens = bullet_list(list_item(paragraph(text("a"))))
        cursor = TokenCursor(tokens)

        _, spans = ListExtractor().extract(cursor, cursor.find_close())

        assert spans[0].cursor.peek().type == "paragraph_open"
        assert spans[0].cursor.end == len(tokens) - 2

    def test_finish_fills_empty_item(self) -> None:
        """Test that an item left empty gets one empty paragraph."""
        tokens = bullet_list(list_item())
        cursor = TokenCursor(tokens)

        node, spans = ListExtractor().extract(cursor, cursor.find_close())
        spans[0].finish()

        assert node.items[0].content == [Paragraph()]

    def test_finish_strips_task_checkbox_space(self) -> None:
        """Test that a task item's text loses the space left by the checkbox."""
        tokens = bullet_list(task_item("todo"), **{"class": "contains-task-list"})
        cursor = TokenCursor(tokens)

        node, spans = ListExtractor().extract(cursor, cursor.find_close())
        spans[0].content.append(Paragraph(content=[Text(" todo")]))
        spans[0].finish()

        assert isinstance(node, TaskList)
        assert node.items[0].content == [Paragraph(content=[Text("todo")])]
