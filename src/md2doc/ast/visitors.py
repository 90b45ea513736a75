#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2doc/ast/visitors.py
"""Visitor pattern implementation for document tree traversal.

Visitors separate algorithms (pruning, validation, serialization) from the
node classes themselves. Each node's ``accept`` dispatches to the matching
``visit_*`` method.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from md2doc.ast.nodes import (
    BlockQuote,
    BulletList,
    CodeBlock,
    Document,
    HardBreak,
    Heading,
    HorizontalRule,
    ListItem,
    OrderedList,
    Paragraph,
    Table,
    TableCell,
    TableRow,
    TaskItem,
    TaskList,
    Text,
)


class NodeVisitor(ABC):
    """Abstract base class for document tree visitors.

    Subclasses implement a ``visit_*`` method for every node type. Visit
    methods return Any: None for side-effect visitors, or a result for
    transforming visitors.

    Examples
    --------
    Simple visitor that counts text runs:

        >>> class TextCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def visit_text(self, node):
        ...         self.count += 1
        ...     # ... remaining visit_* methods recurse into children

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node.

        Parameters
        ----------
        node : Document
            The document node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""
        pass

    @abstractmethod
    def visit_horizontal_rule(self, node: HorizontalRule) -> Any:
        """Visit a HorizontalRule node."""
        pass

    @abstractmethod
    def visit_bullet_list(self, node: BulletList) -> Any:
        """Visit a BulletList node."""
        pass

    @abstractmethod
    def visit_ordered_list(self, node: OrderedList) -> Any:
        """Visit an OrderedList node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_task_list(self, node: TaskList) -> Any:
        """Visit a TaskList node."""
        pass

    @abstractmethod
    def visit_task_item(self, node: TaskItem) -> Any:
        """Visit a TaskItem node."""
        pass

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""
        pass

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node."""
        pass

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_hard_break(self, node: HardBreak) -> Any:
        """Visit a HardBreak node."""
        pass
