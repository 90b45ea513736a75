#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2doc/ast/nodes.py
"""Document tree node classes.

This module defines the node hierarchy of the rich-document tree handed to the
block editor. Each node represents a structural or inline element.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes represent structural document elements:
    - Document, Heading, Paragraph, CodeBlock, BlockQuote, HorizontalRule
    - BulletList, OrderedList, ListItem, TaskList, TaskItem
    - Table, TableRow, TableCell

Inline nodes are leaves:
    - Text (carrying its marks), HardBreak

Formatting is not a node of its own: bold, italic, strike, code and links are
marks attached to Text leaves.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Any, Optional, Union

from md2doc.constants import MAX_HEADING_LEVEL, MIN_HEADING_LEVEL

# ============================================================================
# Marks
# ============================================================================


@dataclass(frozen=True)
class Mark:
    """Base class for inline formatting marks.

    Marks are immutable and compare by type and attributes, so two ``Bold()``
    instances are equal and a mark list can be compared directly.
    """

    @property
    def mark_type(self) -> str:
        """Return the editor name of this mark."""
        raise NotImplementedError


@dataclass(frozen=True)
class Bold(Mark):
    """Bold (strong) formatting."""

    @property
    def mark_type(self) -> str:
        return "bold"


@dataclass(frozen=True)
class Italic(Mark):
    """Italic (emphasis) formatting."""

    @property
    def mark_type(self) -> str:
        return "italic"


@dataclass(frozen=True)
class Strike(Mark):
    """Strikethrough formatting."""

    @property
    def mark_type(self) -> str:
        return "strike"


@dataclass(frozen=True)
class Code(Mark):
    """Inline code formatting."""

    @property
    def mark_type(self) -> str:
        return "code"


@dataclass(frozen=True)
class Link(Mark):
    """Hyperlink mark.

    Parameters
    ----------
    href : str
        Link target

    """

    href: str = ""

    @property
    def mark_type(self) -> str:
        return "link"


class Node(ABC):
    """Base class for all tree nodes.

    All document nodes inherit from this base class and support the visitor
    pattern for traversal, transformation and serialization.

    """

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    content : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata (front matter values)

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def empty(cls, metadata: Optional[dict[str, Any]] = None) -> Document:
        """Create the minimal valid document: one empty paragraph.

        The editor requires the root content to be non-empty, so this is the
        result for empty input.

        Parameters
        ----------
        metadata : dict or None, default = None
            Document-level metadata

        Returns
        -------
        Document
            Document whose only child is an empty Paragraph

        """
        return cls(content=[Paragraph()], metadata=dict(metadata or {}))

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_document method

        Returns
        -------
        Any
            Result from visitor.visit_document(self)

        """
        return visitor.visit_document(self)


@dataclass
class Heading(Node):
    """Heading node with level 1-6.

    Parameters
    ----------
    level : int
        Heading level (1-6)
    content : list of Node, default = empty list
        Inline leaves of the heading

    Raises
    ------
    ValueError
        If level is outside 1-6

    """

    level: int
    content: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate heading level."""
        if not MIN_HEADING_LEVEL <= self.level <= MAX_HEADING_LEVEL:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading."""
        return visitor.visit_heading(self)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline leaves.

    Parameters
    ----------
    content : list of Node, default = empty list
        Text and HardBreak leaves

    """

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class CodeBlock(Node):
    """Code block node with optional language.

    Parameters
    ----------
    text : str
        Code content (not parsed as markup)
    language : str or None, default = None
        Language taken from the fence info string

    """

    text: str = ""
    language: Optional[str] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block."""
        return visitor.visit_code_block(self)


@dataclass
class BlockQuote(Node):
    """Block quote node containing other block elements.

    Parameters
    ----------
    content : list of Node, default = empty list
        Block-level nodes in the quote

    """

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this block quote."""
        return visitor.visit_block_quote(self)


@dataclass
class HorizontalRule(Node):
    """Horizontal rule (thematic break)."""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this rule."""
        return visitor.visit_horizontal_rule(self)


@dataclass
class ListItem(Node):
    """List item node containing block content.

    Parameters
    ----------
    content : list of Node, default = empty list
        Block-level nodes in the item (paragraphs, nested lists, ...)

    """

    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self)


@dataclass
class BulletList(Node):
    """Unordered list.

    Parameters
    ----------
    items : list of ListItem, default = empty list
        List items in source order

    """

    items: list[ListItem] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list."""
        return visitor.visit_bullet_list(self)


@dataclass
class OrderedList(Node):
    """Numbered list.

    Parameters
    ----------
    items : list of ListItem, default = empty list
        List items in source order
    start : int, default = 1
        Number of the first item

    """

    items: list[ListItem] = field(default_factory=list)
    start: int = 1

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list."""
        return visitor.visit_ordered_list(self)


@dataclass
class TaskItem(Node):
    """Checkbox list item.

    Parameters
    ----------
    checked : bool, default = False
        Whether the checkbox is ticked
    content : list of Node, default = empty list
        Block-level nodes in the item

    """

    checked: bool = False
    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this task item."""
        return visitor.visit_task_item(self)


@dataclass
class TaskList(Node):
    """List of checkbox items.

    Parameters
    ----------
    items : list of TaskItem, default = empty list
        Task items in source order

    """

    items: list[TaskItem] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this task list."""
        return visitor.visit_task_list(self)


@dataclass
class TableCell(Node):
    """Table cell containing block content (normally one paragraph).

    Parameters
    ----------
    header : bool, default = False
        True for cells of a header row
    content : list of Node, default = empty list
        Block-level nodes in the cell

    """

    header: bool = False
    content: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table cell."""
        return visitor.visit_table_cell(self)


@dataclass
class TableRow(Node):
    """Table row.

    Parameters
    ----------
    cells : list of TableCell, default = empty list
        Cells in column order

    """

    cells: list[TableCell] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table row."""
        return visitor.visit_table_row(self)


@dataclass
class Table(Node):
    """Table node; header rows come first and are flagged on their cells.

    Parameters
    ----------
    rows : list of TableRow, default = empty list
        Header and body rows in source order

    """

    rows: list[TableRow] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table."""
        return visitor.visit_table(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Text run with its formatting marks.

    Parameters
    ----------
    text : str
        Text content
    marks : list of Mark, default = empty list
        Marks applying to the whole run, outermost first

    """

    text: str
    marks: list[Mark] = field(default_factory=list)

    def is_blank(self) -> bool:
        """Return True if the run has no visible characters."""
        return not self.text.strip()

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text run."""
        return visitor.visit_text(self)


@dataclass
class HardBreak(Node):
    """Explicit line break inside inline content."""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this line break."""
        return visitor.visit_hard_break(self)


InlineNode = Union[Text, HardBreak]
ListNode = Union[BulletList, OrderedList, TaskList]

BLOCK_NODE_TYPES: tuple[type[Node], ...] = (
    Heading,
    Paragraph,
    CodeBlock,
    BlockQuote,
    HorizontalRule,
    BulletList,
    OrderedList,
    TaskList,
    Table,
)
INLINE_NODE_TYPES: tuple[type[Node], ...] = (Text, HardBreak)


def get_node_children(node: Node) -> list[Node]:
    """Get all child nodes from a node.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        List of child nodes (empty list for leaves)

    Examples
    --------
    >>> heading = Heading(level=1, content=[Text("Hello"), Text("world", marks=[Bold()])])
    >>> len(get_node_children(heading))
    2

    """
    if isinstance(
        node, (Document, Heading, Paragraph, BlockQuote, ListItem, TaskItem, TableCell)
    ):
        return list(node.content)

    if isinstance(node, (BulletList, OrderedList, TaskList)):
        return list(node.items)

    if isinstance(node, Table):
        return list(node.rows)

    if isinstance(node, TableRow):
        return list(node.cells)

    return []


def replace_node_children(node: Node, new_children: list[Node]) -> Node:
    """Create a copy of a node with replaced children.

    Parameters
    ----------
    node : Node
        The node to copy and modify
    new_children : list of Node
        New children to use in the copy

    Returns
    -------
    Node
        New node of the same type with the children replaced

    Raises
    ------
    ValueError
        If the node type doesn't support children

    """
    if isinstance(node, Document):
        return replace(node, content=new_children, metadata=node.metadata.copy())

    if isinstance(node, (Heading, Paragraph, BlockQuote, ListItem, TaskItem, TableCell)):
        return replace(node, content=new_children)

    if isinstance(node, (BulletList, OrderedList, TaskList)):
        return replace(node, items=new_children)

    if isinstance(node, Table):
        return replace(node, rows=new_children)

    if isinstance(node, TableRow):
        return replace(node, cells=new_children)

    raise ValueError(f"Node type {type(node).__name__} does not have children")
