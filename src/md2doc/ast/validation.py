#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2doc/ast/validation.py
"""Structural checks for finished document trees.

The converter guarantees these properties for everything it returns. The
checks exist so callers that assemble or edit trees by hand can verify them
before handing a tree to the editor.

"""

from __future__ import annotations

from md2doc.ast.nodes import (
    BLOCK_NODE_TYPES,
    INLINE_NODE_TYPES,
    BlockQuote,
    Document,
    HardBreak,
    Heading,
    ListItem,
    Node,
    Paragraph,
    Table,
    TableCell,
    TaskItem,
    Text,
    get_node_children,
)
from md2doc.exceptions import TreeValidationError

# Containers whose content is inline leaves
_INLINE_CONTAINERS = (Heading, Paragraph)
# Containers whose content is block nodes
_BLOCK_CONTAINERS = (Document, BlockQuote, ListItem, TaskItem, TableCell)


def _spell_path(path: tuple | None) -> str:
    # A path is a (parent path, segment) chain; spelled out only for violations
    segments = []
    while path is not None:
        path, segment = path
        segments.append(segment)
    return "/".join(reversed(segments))


def _check_node(node: Node) -> list[tuple[str, str]]:
    """Check one node and its direct children, without descending further.

    Returns ``(suffix, message)`` pairs; the suffix indexes a child or is empty.
    """
    problems: list[tuple[str, str]] = []
    if isinstance(node, Text) and node.is_blank():
        problems.append(("", "empty or whitespace-only text run"))

    if isinstance(node, (ListItem, TaskItem)) and not node.content:
        problems.append(("", "list item has no content"))

    children = get_node_children(node)

    if isinstance(node, _INLINE_CONTAINERS):
        for i, child in enumerate(children):
            if not isinstance(child, INLINE_NODE_TYPES):
                problems.append((f"[{i}]", f"block node {type(child).__name__} inside inline content"))
    elif isinstance(node, _BLOCK_CONTAINERS):
        for i, child in enumerate(children):
            if isinstance(child, HardBreak):
                problems.append((f"[{i}]", "hard break used as block content"))
            elif not isinstance(child, BLOCK_NODE_TYPES):
                problems.append((f"[{i}]", f"unexpected {type(child).__name__} in block content"))

    if isinstance(node, Table):
        for i, row in enumerate(node.rows):
            if len({cell.header for cell in row.cells}) > 1:
                problems.append((f"[{i}]", "row mixes header and body cells"))
    return problems


def _check_tree(root: Node, violations: list[str]) -> None:
    # Depth-first in document order from an explicit stack, so depth is unbounded
    pending: list[tuple[Node, tuple]] = [(root, (None, type(root).__name__))]
    while pending:
        node, path = pending.pop()
        problems = _check_node(node)
        if problems:
            spelled = _spell_path(path)
            violations.extend(f"{spelled}{suffix}: {message}" for suffix, message in problems)
        children = get_node_children(node)
        for i in range(len(children) - 1, -1, -1):
            child = children[i]
            pending.append((child, (path, f"{type(child).__name__}[{i}]")))


def find_violations(document: Document) -> list[str]:
    """Collect every structural invariant the tree breaks.

    Parameters
    ----------
    document : Document
        Tree to check

    Returns
    -------
    list of str
        One entry per violation, each prefixed with the node path; empty when
        the tree is valid

    """
    violations: list[str] = []
    if not isinstance(document, Document):
        return [f"root is {type(document).__name__}, expected Document"]
    if not document.content:
        violations.append("Document: root content is empty")
    _check_tree(document, violations)
    return violations


def validate_document(document: Document) -> None:
    """Raise if the tree breaks a structural invariant.

    Parameters
    ----------
    document : Document
        Tree to check

    Raises
    ------
    TreeValidationError
        If any violation is found; ``violations`` lists all of them

    """
    violations = find_violations(document)
    if violations:
        raise TreeValidationError(
            f"Document tree has {len(violations)} structural violation(s): {violations[0]}",
            violations=violations,
        )


__all__ = ["find_violations", "validate_document"]
