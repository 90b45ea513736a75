#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2doc/ast/serialization.py
"""Editor JSON serialization for document trees.

This module converts document trees into the block editor's JSON content
format, the shape persisted as the initial content of a new document record.

The format nests ``{"type": ..., "content": [...]}`` objects. Node attributes
go under ``"attrs"``; text leaves carry ``"text"`` and, when formatted,
``"marks"``.

Examples
--------
Serialize a tree:

    >>> from md2doc.ast import Document, Heading, Text
    >>> from md2doc.ast.serialization import ast_to_dict
    >>>
    >>> doc = Document(content=[Heading(level=1, content=[Text("Title")])])
    >>> ast_to_dict(doc)["content"][0]
    {'type': 'heading', 'attrs': {'level': 1}, 'content': [{'type': 'text', 'text': 'Title'}]}

"""

from __future__ import annotations

import json
from typing import Any

from md2doc.ast.nodes import (
    BlockQuote,
    BulletList,
    CodeBlock,
    Document,
    HardBreak,
    Heading,
    HorizontalRule,
    Link,
    ListItem,
    Mark,
    Node,
    OrderedList,
    Paragraph,
    Table,
    TableCell,
    TableRow,
    TaskItem,
    TaskList,
    Text,
)
from md2doc.ast.visitors import NodeVisitor
from md2doc.constants import (
    EDITOR_BLOCKQUOTE,
    EDITOR_BULLET_LIST,
    EDITOR_CODE_BLOCK,
    EDITOR_DOC,
    EDITOR_HARD_BREAK,
    EDITOR_HEADING,
    EDITOR_HORIZONTAL_RULE,
    EDITOR_LIST_ITEM,
    EDITOR_ORDERED_LIST,
    EDITOR_PARAGRAPH,
    EDITOR_TABLE,
    EDITOR_TABLE_CELL,
    EDITOR_TABLE_HEADER,
    EDITOR_TABLE_ROW,
    EDITOR_TASK_ITEM,
    EDITOR_TASK_LIST,
    EDITOR_TEXT,
)


def mark_to_dict(mark: Mark) -> dict[str, Any]:
    """Serialize a single mark.

    Parameters
    ----------
    mark : Mark
        Mark to serialize

    Returns
    -------
    dict
        ``{"type": ...}`` plus ``"attrs"`` for links

    """
    result: dict[str, Any] = {"type": mark.mark_type}
    if isinstance(mark, Link):
        result["attrs"] = {"href": mark.href}
    return result


# Every node type the editor schema has a counterpart for
_EDITOR_NODE_TYPES = (
    Document,
    Heading,
    Paragraph,
    CodeBlock,
    BlockQuote,
    HorizontalRule,
    BulletList,
    OrderedList,
    ListItem,
    TaskList,
    TaskItem,
    Table,
    TableRow,
    TableCell,
    Text,
    HardBreak,
)


class EditorJsonSerializer(NodeVisitor):
    """Visitor producing editor JSON dictionaries.

    Visit methods return a container with an empty ``content`` list and queue
    its children; ``serialize`` drains that queue, so trees of any depth are
    serialized without recursion.
    """

    def __init__(self) -> None:
        """Initialize an empty work queue."""
        self._pending: list[tuple[list[dict[str, Any]], list[Node]]] = []

    def serialize(self, node: Node) -> dict[str, Any]:
        """Serialize a node and everything below it.

        Parameters
        ----------
        node : Node
            Root of the tree to serialize

        Returns
        -------
        dict
            Editor JSON representation

        Raises
        ------
        TypeError
            If the tree contains a node type the editor does not know

        """
        result = self._visit(node)
        while self._pending:
            content, children = self._pending.pop()
            content.extend(self._visit(child) for child in children)
        return result

    def _visit(self, node: Node) -> dict[str, Any]:
        if not isinstance(node, _EDITOR_NODE_TYPES):
            raise TypeError(f"Unknown node type: {type(node).__name__}")
        return node.accept(self)

    def _container(self, node_type: str, children: list[Node], attrs: dict[str, Any] | None = None) -> dict[str, Any]:
        result: dict[str, Any] = {"type": node_type}
        if attrs:
            result["attrs"] = attrs
        result["content"] = []
        self._pending.append((result["content"], list(children)))
        return result

    def visit_document(self, node: Document) -> dict[str, Any]:
        return self._container(EDITOR_DOC, node.content)

    def visit_heading(self, node: Heading) -> dict[str, Any]:
        return self._container(EDITOR_HEADING, node.content, {"level": node.level})

    def visit_paragraph(self, node: Paragraph) -> dict[str, Any]:
        return self._container(EDITOR_PARAGRAPH, node.content)

    def visit_code_block(self, node: CodeBlock) -> dict[str, Any]:
        # Blank code keeps an empty content list; the editor rejects blank text leaves
        children: list[Node] = [Text(node.text)] if node.text.strip() else []
        attrs = {"language": node.language} if node.language else None
        return self._container(EDITOR_CODE_BLOCK, children, attrs)

    def visit_block_quote(self, node: BlockQuote) -> dict[str, Any]:
        return self._container(EDITOR_BLOCKQUOTE, node.content)

    def visit_horizontal_rule(self, node: HorizontalRule) -> dict[str, Any]:
        return {"type": EDITOR_HORIZONTAL_RULE}

    def visit_bullet_list(self, node: BulletList) -> dict[str, Any]:
        return self._container(EDITOR_BULLET_LIST, list(node.items))

    def visit_ordered_list(self, node: OrderedList) -> dict[str, Any]:
        return self._container(EDITOR_ORDERED_LIST, list(node.items), {"start": node.start})

    def visit_list_item(self, node: ListItem) -> dict[str, Any]:
        return self._container(EDITOR_LIST_ITEM, node.content)

    def visit_task_list(self, node: TaskList) -> dict[str, Any]:
        return self._container(EDITOR_TASK_LIST, list(node.items))

    def visit_task_item(self, node: TaskItem) -> dict[str, Any]:
        # "checked" is always emitted, including False
        return self._container(EDITOR_TASK_ITEM, node.content, {"checked": node.checked})

    def visit_table(self, node: Table) -> dict[str, Any]:
        return self._container(EDITOR_TABLE, list(node.rows))

    def visit_table_row(self, node: TableRow) -> dict[str, Any]:
        return self._container(EDITOR_TABLE_ROW, list(node.cells))

    def visit_table_cell(self, node: TableCell) -> dict[str, Any]:
        return self._container(EDITOR_TABLE_HEADER if node.header else EDITOR_TABLE_CELL, node.content)

    def visit_text(self, node: Text) -> dict[str, Any]:
        result: dict[str, Any] = {"type": EDITOR_TEXT, "text": node.text}
        if node.marks:
            result["marks"] = [mark_to_dict(mark) for mark in node.marks]
        return result

    def visit_hard_break(self, node: HardBreak) -> dict[str, Any]:
        return {"type": EDITOR_HARD_BREAK}


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert a tree node to an editor JSON dictionary.

    Parameters
    ----------
    node : Node
        Node to convert (normally a Document)

    Returns
    -------
    dict
        Editor JSON representation

    Raises
    ------
    TypeError
        If the node is not a known document node

    """
    if not isinstance(node, Node):
        raise TypeError(f"Cannot serialize object of type {type(node).__name__}")
    return EditorJsonSerializer().serialize(node)


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Convert a tree node to an editor JSON string.

    Parameters
    ----------
    node : Node
        Node to convert
    indent : int or None, default = None
        Indentation passed to ``json.dumps``

    Returns
    -------
    str
        JSON string

    """
    return json.dumps(ast_to_dict(node), indent=indent, ensure_ascii=False)


__all__ = ["EditorJsonSerializer", "ast_to_dict", "ast_to_json", "mark_to_dict"]
