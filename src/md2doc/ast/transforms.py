#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2doc/ast/transforms.py
"""Tree transformation utilities.

This module provides the transformer base class and the empty-text pruning
pass applied to every converted document.

Examples
--------
Remove blank text runs from a tree:

    >>> from md2doc.ast import transforms
    >>> clean = transforms.prune_empty_text(doc)

Write a custom transformer:

    >>> class UppercaseTransformer(transforms.NodeTransformer):
    ...     def visit_text(self, node):
    ...         return Text(text=node.text.upper(), marks=list(node.marks))
    >>> new_doc = UppercaseTransformer().transform(doc)

"""

from __future__ import annotations

import logging

from md2doc.ast.nodes import (
    BlockQuote,
    BulletList,
    CodeBlock,
    Document,
    HardBreak,
    Heading,
    HorizontalRule,
    ListItem,
    Node,
    OrderedList,
    Paragraph,
    Table,
    TableCell,
    TableRow,
    TaskItem,
    TaskList,
    Text,
    get_node_children,
    replace_node_children,
)
from md2doc.ast.visitors import NodeVisitor

logger = logging.getLogger(__name__)

# Nodes without children; everything else is rebuilt around its pruned children
_LEAF_TYPES = (Text, CodeBlock, HorizontalRule, HardBreak)


class NodeTransformer(NodeVisitor):
    """Base class for transforming tree nodes.

    Visit methods return a (new) node, or None to remove the node from its
    parent. The transformer builds a new tree; the input is left untouched.

    """

    def transform(self, node: Node) -> Node | None:
        """Transform a tree node.

        Parameters
        ----------
        node : Node
            Node to transform

        Returns
        -------
        Node or None
            Transformed node or None to remove

        """
        return node.accept(self)

    def _transform_children(self, children: list[Node]) -> list[Node]:
        """Transform a list of child nodes, dropping removed entries.

        Parameters
        ----------
        children : list of Node
            Children to transform

        Returns
        -------
        list of Node
            Transformed children (filtered for None values)

        """
        result = []
        for child in children:
            transformed = self.transform(child)
            if transformed is not None:
                result.append(transformed)
        return result

    def _generic_transform(self, node: Node) -> Node:
        """Transform children first, then rebuild the node around them.

        Parameters
        ----------
        node : Node
            Node to transform

        Returns
        -------
        Node
            Copy of the node with transformed children; containers are kept
            even when every child was removed

        """
        return replace_node_children(node, self._transform_children(get_node_children(node)))

    def visit_document(self, node: Document) -> Document:
        """Transform a Document node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_heading(self, node: Heading) -> Heading:
        """Transform a Heading node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_paragraph(self, node: Paragraph) -> Paragraph:
        """Transform a Paragraph node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_code_block(self, node: CodeBlock) -> CodeBlock:
        """Transform a CodeBlock node."""
        return CodeBlock(text=node.text, language=node.language)

    def visit_block_quote(self, node: BlockQuote) -> BlockQuote:
        """Transform a BlockQuote node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_horizontal_rule(self, node: HorizontalRule) -> HorizontalRule:
        """Transform a HorizontalRule node."""
        return HorizontalRule()

    def visit_bullet_list(self, node: BulletList) -> BulletList:
        """Transform a BulletList node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_ordered_list(self, node: OrderedList) -> OrderedList:
        """Transform an OrderedList node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_list_item(self, node: ListItem) -> ListItem:
        """Transform a ListItem node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_task_list(self, node: TaskList) -> TaskList:
        """Transform a TaskList node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_task_item(self, node: TaskItem) -> TaskItem:
        """Transform a TaskItem node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_table(self, node: Table) -> Table:
        """Transform a Table node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_table_row(self, node: TableRow) -> TableRow:
        """Transform a TableRow node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_table_cell(self, node: TableCell) -> TableCell:
        """Transform a TableCell node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_text(self, node: Text) -> Text | None:
        """Transform a Text node."""
        return Text(text=node.text, marks=list(node.marks))

    def visit_hard_break(self, node: HardBreak) -> HardBreak:
        """Transform a HardBreak node."""
        return HardBreak()


class EmptyTextPruner(NodeTransformer):
    """Remove empty and whitespace-only text runs from a tree.

    Children are pruned before their parent is rebuilt (post-order). Containers
    stay in place even if all their content is removed: empty containers are
    valid for the editor, empty text leaves are not.

    Examples
    --------
    >>> doc = Document(content=[Paragraph(content=[Text("  "), Text("kept")])])
    >>> EmptyTextPruner().transform(doc).content[0].content
    [Text(text='kept', marks=[])]

    """

    def __init__(self) -> None:
        """Initialize the pruner with a zero removal count."""
        self.removed = 0

    def transform(self, node: Node) -> Node | None:
        """Prune a tree of any depth without recursion.

        Nodes are listed in pre-order from an explicit stack, then rebuilt in
        reverse of that order, which visits every child before its parent.

        Parameters
        ----------
        node : Node
            Root of the tree to prune

        Returns
        -------
        Node or None
            Pruned copy, or None when the root itself is a blank text run

        """
        order: list[Node] = []
        pending = [node]
        while pending:
            current = pending.pop()
            order.append(current)
            pending.extend(get_node_children(current))

        rebuilt: dict[int, Node | None] = {}
        for current in reversed(order):
            if isinstance(current, _LEAF_TYPES):
                rebuilt[id(current)] = current.accept(self)
                continue
            kept = [rebuilt[id(child)] for child in get_node_children(current)]
            rebuilt[id(current)] = replace_node_children(current, [child for child in kept if child is not None])
        return rebuilt[id(node)]

    def visit_text(self, node: Text) -> Text | None:
        """Drop blank runs, keep everything else."""
        if node.is_blank():
            self.removed += 1
            return None
        return super().visit_text(node)


def prune_empty_text(document: Document) -> Document:
    """Return a copy of the document without empty text runs.

    Parameters
    ----------
    document : Document
        Finished document tree

    Returns
    -------
    Document
        Pruned copy; the input is not modified

    """
    pruner = EmptyTextPruner()
    result = pruner.transform(document)
    if pruner.removed:
        logger.debug("Pruned %d empty text run(s)", pruner.removed)
    return result  # type: ignore[return-value]


__all__ = ["NodeTransformer", "EmptyTextPruner", "prune_empty_text"]
