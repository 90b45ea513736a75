#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2doc/parsers/_lists.py
"""List extraction for the token tree converter.

A list span is split into its top-level items. Each item's inner span is
converted by the converter's work stack, so items can hold paragraphs, nested
lists, quotes and code at any depth.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from md2doc.ast.nodes import BulletList, ListItem, ListNode, Node, OrderedList, Paragraph, TaskItem, TaskList, Text
from md2doc.constants import (
    TASK_CHECKBOX_CLASS,
    TASK_CHECKED_MARKER,
    TASK_ITEM_CLASS,
    TASK_LIST_CLASS,
    TOKEN_HTML_INLINE,
    TOKEN_INLINE,
    TOKEN_LIST_ITEM_OPEN,
    TOKEN_ORDERED_LIST_OPEN,
)
from md2doc.parsers._matching import TokenCursor
from md2doc.tokens import Nesting, Token

logger = logging.getLogger(__name__)


def _parse_start(token: Token) -> int:
    raw = token.attr_get("start")
    if raw is None:
        return 1
    try:
        return int(raw)
    except ValueError:
        logger.debug("Ignoring non-numeric list start %r", raw)
        return 1


def _item_is_checked(cursor: TokenCursor) -> bool:
    """Read the checkbox the task list plugin puts first in the item's inline content."""
    while not cursor.at_end:
        token = cursor.peek()
        if token is not None and token.type == TOKEN_INLINE:
            for child in token.children or ():
                if child.type == TOKEN_HTML_INLINE and TASK_CHECKBOX_CLASS in child.content:
                    return TASK_CHECKED_MARKER in child.content
            return False
        cursor.advance()
    return False


def _strip_checkbox_space(content: list[Node]) -> list[Node]:
    """Drop the whitespace left in front of the item text once the checkbox is removed."""
    if not content or not isinstance(content[0], Paragraph):
        return content
    paragraph = content[0]
    if not paragraph.content or not isinstance(paragraph.content[0], Text):
        return content
    first = paragraph.content[0]
    stripped = Text(first.text.lstrip(), list(first.marks))
    return [Paragraph(content=[stripped, *paragraph.content[1:]]), *content[1:]]


@dataclass
class ItemSpan:
    """A list item whose block content is still to be converted.

    The item node already holds ``content``; the converter fills that list
    from ``cursor`` and then calls ``finish``.

    Parameters
    ----------
    cursor : TokenCursor
        The item's inner span
    content : list of Node
        The list object shared with the item node
    is_task : bool
        Whether the item carries a task checkbox

    """

    cursor: TokenCursor
    content: list[Node]
    is_task: bool = False

    def finish(self) -> None:
        """Tidy the converted content in place."""
        if self.is_task:
            self.content[:] = _strip_checkbox_space(self.content)
        if not self.content:
            self.content.append(Paragraph())


class ListExtractor:
    """Build bullet, ordered and task lists from list spans.

    Only the list and its items are created here. Each item's inner span is
    returned as an ``ItemSpan`` so the converter can fill it without recursing.

    Parameters
    ----------
    parse_task_lists : bool, default True
        Turn lists marked by the task list plugin into TaskList nodes

    """

    def __init__(self, parse_task_lists: bool = True):
        """Initialize the extractor."""
        self.parse_task_lists = parse_task_lists

    def extract(self, cursor: TokenCursor, close_index: int) -> tuple[ListNode, list[ItemSpan]]:
        """Create the list opened at the cursor position.

        Parameters
        ----------
        cursor : TokenCursor
            Cursor positioned on ``bullet_list_open`` or ``ordered_list_open``
        close_index : int
            Index of the matching close (or the span end)

        Returns
        -------
        tuple of (ListNode, list of ItemSpan)
            A BulletList, OrderedList or TaskList with one item per top-level
            ``list_item_open`` in source order, and the spans still to convert
            into those items, in the same order

        """
        open_token = cursor.peek()
        assert open_token is not None
        is_task_list = self.parse_task_lists and open_token.has_class(TASK_LIST_CLASS)

        items: list[ListItem] = []
        task_items: list[TaskItem] = []
        spans: list[ItemSpan] = []

        inner = cursor.sub_cursor(cursor.position + 1, close_index)
        while not inner.at_end:
            token = inner.peek()
            if token is None or not (token.type == TOKEN_LIST_ITEM_OPEN and token.nesting == Nesting.OPEN):
                inner.advance()
                continue

            item_close = inner.find_close()
            is_task_item = self.parse_task_lists and token.has_class(TASK_ITEM_CLASS)
            checked = _item_is_checked(inner.sub_cursor(inner.position + 1, item_close)) if is_task_item else False

            span = ItemSpan(inner.sub_cursor(inner.position + 1, item_close), [], is_task=is_task_item)
            spans.append(span)
            if is_task_list:
                task_items.append(TaskItem(checked=checked, content=span.content))
            else:
                items.append(ListItem(content=span.content))
            inner.jump_past(item_close)

        if is_task_list:
            return TaskList(items=task_items), spans
        if open_token.type == TOKEN_ORDERED_LIST_OPEN:
            return OrderedList(items=items, start=_parse_start(open_token)), spans
        return BulletList(items=items), spans


__all__ = ["ItemSpan", "ListExtractor"]
