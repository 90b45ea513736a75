#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2doc/ast/__init__.py
"""Document tree module for the block editor's rich-document format.

The module consists of several components:

- nodes: node and mark classes representing document structure
- visitors: Visitor pattern implementation for tree traversal
- transforms: tree transformation utilities (empty text pruning)
- serialization: editor JSON output
- validation: structural invariant checks

Examples
--------
Basic usage:

    >>> from md2doc.ast import Bold, Document, Paragraph, Text, ast_to_dict
    >>>
    >>> doc = Document(content=[
    ...     Paragraph(content=[Text("Hello "), Text("world", marks=[Bold()])])
    ... ])
    >>> ast_to_dict(doc)["type"]
    'doc'

"""

from __future__ import annotations

from md2doc.ast.nodes import (
    BLOCK_NODE_TYPES,
    INLINE_NODE_TYPES,
    BlockQuote,
    Bold,
    BulletList,
    Code,
    CodeBlock,
    Document,
    HardBreak,
    Heading,
    HorizontalRule,
    InlineNode,
    Italic,
    Link,
    ListItem,
    ListNode,
    Mark,
    Node,
    OrderedList,
    Paragraph,
    Strike,
    Table,
    TableCell,
    TableRow,
    TaskItem,
    TaskList,
    Text,
    get_node_children,
    replace_node_children,
)
from md2doc.ast.serialization import ast_to_dict, ast_to_json
from md2doc.ast.transforms import EmptyTextPruner, NodeTransformer, prune_empty_text
from md2doc.ast.validation import find_violations, validate_document
from md2doc.ast.visitors import NodeVisitor

__all__ = [
    # Marks
    "Mark",
    "Bold",
    "Italic",
    "Strike",
    "Code",
    "Link",
    # Nodes
    "Node",
    "Document",
    "Heading",
    "Paragraph",
    "CodeBlock",
    "BlockQuote",
    "HorizontalRule",
    "BulletList",
    "OrderedList",
    "ListItem",
    "TaskList",
    "TaskItem",
    "Table",
    "TableRow",
    "TableCell",
    "Text",
    "HardBreak",
    "InlineNode",
    "ListNode",
    "BLOCK_NODE_TYPES",
    "INLINE_NODE_TYPES",
    "get_node_children",
    "replace_node_children",
    # Visitors and transforms
    "NodeVisitor",
    "NodeTransformer",
    "EmptyTextPruner",
    "prune_empty_text",
    # Serialization
    "ast_to_dict",
    "ast_to_json",
    # Validation
    "find_violations",
    "validate_document",
]
