#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2doc/parsers/_inline.py
"""Inline token flattening.

The editor has no nested inline structure: formatting is a list of marks on
each text leaf. This module turns the children of an ``inline`` token into a
flat sequence of ``Text`` and ``HardBreak`` leaves.

Two strategies are available:

- single level (default): a formatting span marks its direct text children
  with its own mark only. Nested spans, breaks and code inside a span are
  dropped.
- composed: a mark stack is kept while walking the children, so nested spans
  combine their marks and everything inside a span is kept.

"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from md2doc.ast.nodes import Bold, Code, HardBreak, InlineNode, Italic, Link, Mark, Strike, Text
from md2doc.constants import CLOSE_SUFFIX, OPEN_SUFFIX, TOKEN_CODE_INLINE, TOKEN_HARDBREAK, TOKEN_SOFTBREAK, TOKEN_TEXT
from md2doc.tokens import Nesting, Token

logger = logging.getLogger(__name__)


def _link_mark(token: Token) -> Mark:
    return Link(href=token.attr_get("href") or "")


# Span family name -> mark factory taking the opening token
MARK_FAMILIES: dict[str, Callable[[Token], Mark]] = {
    "strong": lambda token: Bold(),
    "em": lambda token: Italic(),
    "s": lambda token: Strike(),
    "link": _link_mark,
}


def _span_family(token: Token, suffix: str) -> Optional[str]:
    if not token.type.endswith(suffix):
        return None
    family = token.type[: -len(suffix)]
    return family if family in MARK_FAMILIES else None


class InlineMarkExtractor:
    """Convert inline token children into marked text leaves.

    Parameters
    ----------
    compose_marks : bool, default False
        Use the mark-stack walk instead of single-level marking

    Examples
    --------
    >>> from md2doc.tokens import Nesting, Token
    >>> children = [
    ...     Token("strong_open", Nesting.OPEN, markup="**"),
    ...     Token("text", content="x"),
    ...     Token("strong_close", Nesting.CLOSE, markup="**"),
    ... ]
    >>> InlineMarkExtractor().extract(children)
    [Text(text='x', marks=[Bold()])]

    """

    def __init__(self, compose_marks: bool = False):
        """Initialize the extractor."""
        self.compose_marks = compose_marks

    def extract(self, children: Optional[Sequence[Token]]) -> list[InlineNode]:
        """Flatten inline children into leaves.

        Parameters
        ----------
        children : sequence of Token or None
            Children of an ``inline`` token

        Returns
        -------
        list of InlineNode
            ``Text`` and ``HardBreak`` leaves in source order

        """
        if not children:
            return []
        if self.compose_marks:
            return self._extract_composed(children)
        return self._extract_single_level(children)

    def _extract_single_level(self, children: Sequence[Token]) -> list[InlineNode]:
        nodes: list[InlineNode] = []
        i = 0
        while i < len(children):
            child = children[i]

            family = _span_family(child, OPEN_SUFFIX) if child.nesting == Nesting.OPEN else None
            if family is not None:
                mark = MARK_FAMILIES[family](child)
                close_index = self._find_span_close(children, i, family + CLOSE_SUFFIX)
                for inner in children[i + 1 : close_index]:
                    if inner.type == TOKEN_TEXT and inner.content:
                        nodes.append(Text(inner.content, [mark]))
                i = close_index + 1
                continue

            if child.type == TOKEN_TEXT:
                if child.content.strip():
                    nodes.append(Text(child.content))
            elif child.type == TOKEN_CODE_INLINE:
                if child.content.strip():
                    nodes.append(Text(child.content, [Code()]))
            elif child.type == TOKEN_HARDBREAK:
                nodes.append(HardBreak())
            elif child.type == TOKEN_SOFTBREAK:
                nodes.append(Text(" "))
            else:
                logger.debug("Skipping inline token %s", child.type)
            i += 1

        return nodes

    @staticmethod
    def _find_span_close(children: Sequence[Token], open_index: int, close_type: str) -> int:
        """Return the first close of the span's family, or the children length."""
        for index in range(open_index + 1, len(children)):
            if children[index].type == close_type:
                return index
        return len(children)

    def _extract_composed(self, children: Sequence[Token]) -> list[InlineNode]:
        nodes: list[InlineNode] = []
        # (family, mark) pairs, outermost first
        stack: list[tuple[str, Mark]] = []

        for child in children:
            marks = [mark for _, mark in stack]

            if child.nesting == Nesting.OPEN and (family := _span_family(child, OPEN_SUFFIX)) is not None:
                stack.append((family, MARK_FAMILIES[family](child)))
            elif child.nesting == Nesting.CLOSE and (family := _span_family(child, CLOSE_SUFFIX)) is not None:
                # Pop the innermost open span of this family; stray closes are ignored
                for depth in range(len(stack) - 1, -1, -1):
                    if stack[depth][0] == family:
                        del stack[depth]
                        break
            elif child.type == TOKEN_TEXT:
                if child.content and (marks or child.content.strip()):
                    nodes.append(Text(child.content, marks))
            elif child.type == TOKEN_CODE_INLINE:
                if child.content.strip():
                    nodes.append(Text(child.content, marks + [Code()]))
            elif child.type == TOKEN_HARDBREAK:
                nodes.append(HardBreak())
            elif child.type == TOKEN_SOFTBREAK:
                nodes.append(Text(" ", marks))
            else:
                logger.debug("Skipping inline token %s", child.type)

        return nodes


def coalesce_text_runs(nodes: Sequence[InlineNode]) -> list[InlineNode]:
    """Merge adjacent text runs.

    A run is merged into the preceding run only when both carry equal marks.
    An unmarked whitespace-only run (a collapsed soft break) after a marked
    run therefore stays separate and absorbs the next unmarked run, so the
    space never picks up code, link or emphasis marks. Hard breaks end a run.

    Parameters
    ----------
    nodes : sequence of InlineNode
        Leaves as produced by ``InlineMarkExtractor``

    Returns
    -------
    list of InlineNode
        New list; the input leaves are not modified

    Examples
    --------
    >>> coalesce_text_runs([Text("one"), Text(" "), Text("two")])
    [Text(text='one two', marks=[])]

    """
    result: list[InlineNode] = []
    for node in nodes:
        previous = result[-1] if result else None
        if isinstance(node, Text) and isinstance(previous, Text):
            if node.marks == previous.marks:
                result[-1] = Text(previous.text + node.text, list(previous.marks))
                continue
        result.append(node)
    return result


__all__ = ["InlineMarkExtractor", "MARK_FAMILIES", "coalesce_text_runs"]
