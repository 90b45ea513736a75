#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2doc/parsers/markdown.py
"""Markdown token stream to document tree converter.

This module provides the conversion from a flat Markdown token stream to the
nested document tree the block editor consumes. Structural spans are matched
open-to-close and converted from an explicit work stack; inline content is
flattened into marked text runs; the finished tree is pruned of empty text.

The converter never raises for malformed streams. Unknown tokens are skipped,
unclosed spans run to the end of their enclosing span, and empty list items,
quotes and cells are filled with an empty paragraph.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Optional, Sequence

from md2doc.ast import (
    BlockQuote,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    InlineNode,
    Node,
    Paragraph,
    ast_to_dict,
    prune_empty_text,
)
from md2doc.constants import (
    MAX_HEADING_LEVEL,
    MIN_HEADING_LEVEL,
    TOKEN_BLOCKQUOTE_OPEN,
    TOKEN_BULLET_LIST_OPEN,
    TOKEN_CODE_BLOCK,
    TOKEN_FENCE,
    TOKEN_HEADING_OPEN,
    TOKEN_HR,
    TOKEN_INLINE,
    TOKEN_ORDERED_LIST_OPEN,
    TOKEN_PARAGRAPH_OPEN,
    TOKEN_TABLE_OPEN,
)
from md2doc.options.markdown import ConverterOptions
from md2doc.parsers._inline import InlineMarkExtractor, coalesce_text_runs
from md2doc.parsers._lists import ListExtractor
from md2doc.parsers._matching import TokenCursor
from md2doc.parsers._tables import TableExtractor
from md2doc.parsers.base import BaseConverter
from md2doc.tokens import MarkdownItTokenizer, Nesting, Token, Tokenizer

logger = logging.getLogger(__name__)


def _heading_level(tag: str) -> int:
    """Read the level from an ``h1``..``h6`` tag, clamped to the valid range."""
    try:
        level = int(tag.lstrip("hH"))
    except ValueError:
        return MIN_HEADING_LEVEL
    return max(MIN_HEADING_LEVEL, min(MAX_HEADING_LEVEL, level))


def _code_language(info: str) -> Optional[str]:
    # First word only; the rest of the info string (titles, flags) is not a language
    parts = info.split(maxsplit=1)
    return parts[0] if parts else None


def _fill_empty(content: list[Node]) -> None:
    if not content:
        content.append(Paragraph())


@dataclass
class _SpanFrame:
    """A span being converted into the ``content`` list of an existing node."""

    cursor: TokenCursor
    content: list[Node]
    on_finish: Optional[Callable[[], None]] = None

    def finish(self) -> None:
        if self.on_finish is not None:
            self.on_finish()


class TokenTreeConverter(BaseConverter):
    """Convert a Markdown token stream into a document tree.

    Parameters
    ----------
    options : ConverterOptions or None, default = None
        Converter configuration

    Examples
    --------
    Convert text with the default tokenizer:

        >>> converter = TokenTreeConverter()
        >>> doc = converter.parse("# Hello\\n\\nThis is **bold**.")

    Convert tokens from any tokenizer:

        >>> doc = TokenTreeConverter().convert(my_tokenizer.tokenize(text))

    With options:

        >>> options = ConverterOptions(compose_marks=True)
        >>> doc = TokenTreeConverter(options).parse("***both***")

    """

    def __init__(self, options: ConverterOptions | None = None):
        """Initialize the converter with options."""
        BaseConverter._validate_options_type(options, ConverterOptions, "markdown")
        options = options or ConverterOptions()
        super().__init__(options)
        self.options: ConverterOptions = options
        self._inline = InlineMarkExtractor(compose_marks=options.compose_marks)
        self._lists = ListExtractor(parse_task_lists=options.tokenizer.parse_task_lists)
        self._tables = TableExtractor(self._convert_inline)

    def convert(self, tokens: Sequence[Token]) -> Document:
        """Convert a token stream into a pruned document tree.

        Parameters
        ----------
        tokens : sequence of Token
            Flat token stream in document order

        Returns
        -------
        Document
            Document with at least one block and no empty text runs

        """
        content = self._convert_span(TokenCursor(tokens)) if tokens else []
        document = Document(content=content) if content else Document.empty()
        document = prune_empty_text(document)
        logger.debug("Converted %d tokens into %d top-level block(s)", len(tokens), len(document.content))
        return document

    def parse(self, text: str, tokenizer: Tokenizer | None = None) -> Document:
        """Tokenize Markdown text and convert it.

        Parameters
        ----------
        text : str
            Markdown source
        tokenizer : Tokenizer or None, default = None
            Tokenizer to use; defaults to ``MarkdownItTokenizer`` configured
            from ``options.tokenizer``

        Returns
        -------
        Document
            Converted document

        """
        tokenizer = tokenizer or MarkdownItTokenizer(self.options.tokenizer)
        return self.convert(tokenizer.tokenize(text))

    def _convert_span(self, cursor: TokenCursor) -> list[Node]:
        """Convert every block in the cursor's span, advancing the cursor to its end.

        Nested quotes and list items are converted from an explicit stack of
        frames rather than by recursion, so nesting depth is bounded only by
        memory.
        """
        blocks: list[Node] = []
        stack = [_SpanFrame(cursor, blocks)]
        while stack:
            frame = stack[-1]
            if frame.cursor.at_end:
                stack.pop()
                frame.finish()
                continue
            # Children go on top in reverse so the first one is converted first
            stack.extend(reversed(self._convert_block(frame.cursor, frame.content)))
        return blocks

    def _convert_block(self, cursor: TokenCursor, out: list[Node]) -> list[_SpanFrame]:
        """Convert the block at the cursor, append it to ``out`` and move past it.

        Tokens that do not start a block are skipped. Returns the frames for
        any inner spans the new block still has to be filled from.
        """
        token = cursor.peek()
        assert token is not None
        token_type = token.type

        if token.nesting == Nesting.CLOSE:
            logger.debug("Skipping stray %s at token %d", token_type, cursor.position)
            cursor.advance()
            return []

        if token_type == TOKEN_HEADING_OPEN:
            out.append(self._process_heading(cursor))
        elif token_type == TOKEN_PARAGRAPH_OPEN:
            out.append(self._process_paragraph(cursor))
        elif token_type in (TOKEN_BULLET_LIST_OPEN, TOKEN_ORDERED_LIST_OPEN):
            close_index = cursor.find_close()
            node, spans = self._lists.extract(cursor, close_index)
            cursor.jump_past(close_index)
            out.append(node)
            return [_SpanFrame(span.cursor, span.content, span.finish) for span in spans]
        elif token_type == TOKEN_BLOCKQUOTE_OPEN:
            return [self._process_block_quote(cursor, out)]
        elif token_type in (TOKEN_FENCE, TOKEN_CODE_BLOCK):
            cursor.advance()
            out.append(CodeBlock(text=token.content, language=_code_language(token.info)))
        elif token_type == TOKEN_HR:
            cursor.advance()
            out.append(HorizontalRule())
        elif token_type == TOKEN_TABLE_OPEN:
            close_index = cursor.find_close()
            out.append(self._tables.extract(cursor, close_index))
            cursor.jump_past(close_index)
        else:
            logger.debug("Skipping %s at token %d", token_type, cursor.position)
            cursor.advance()
        return []

    def _inline_after_open(self, cursor: TokenCursor, close_index: int) -> list[InlineNode]:
        """Convert the inline token following the opening token, if it lies inside the span."""
        inline = cursor.peek(1)
        if inline is None or inline.type != TOKEN_INLINE or cursor.position + 1 >= close_index:
            return []
        return self._convert_inline(inline.children)

    def _convert_inline(self, children: Optional[Sequence[Token]]) -> list[InlineNode]:
        leaves = self._inline.extract(children)
        if self.options.merge_text_runs:
            leaves = coalesce_text_runs(leaves)
        return leaves

    def _process_heading(self, cursor: TokenCursor) -> Heading:
        token = cursor.peek()
        assert token is not None
        close_index = cursor.find_close()
        heading = Heading(level=_heading_level(token.tag), content=list(self._inline_after_open(cursor, close_index)))
        cursor.jump_past(close_index)
        return heading

    def _process_paragraph(self, cursor: TokenCursor) -> Paragraph:
        close_index = cursor.find_close()
        paragraph = Paragraph(content=list(self._inline_after_open(cursor, close_index)))
        cursor.jump_past(close_index)
        return paragraph

    def _process_block_quote(self, cursor: TokenCursor, out: list[Node]) -> _SpanFrame:
        close_index = cursor.find_close()
        quote = BlockQuote(content=[])
        out.append(quote)
        inner = cursor.sub_cursor(cursor.position + 1, close_index)
        frame = _SpanFrame(inner, quote.content, partial(_fill_empty, quote.content))
        cursor.jump_past(close_index)
        return frame


def tokens_to_document(tokens: Sequence[Token], options: ConverterOptions | None = None) -> Document:
    """Convert a token stream into a document tree.

    Parameters
    ----------
    tokens : sequence of Token
        Flat token stream in document order
    options : ConverterOptions or None, default = None
        Converter configuration

    Returns
    -------
    Document
        Pruned document with at least one block

    """
    return TokenTreeConverter(options).convert(tokens)


def markdown_to_document(
    text: str, options: ConverterOptions | None = None, tokenizer: Tokenizer | None = None
) -> Document:
    """Tokenize and convert Markdown text into a document tree.

    Parameters
    ----------
    text : str
        Markdown source
    options : ConverterOptions or None, default = None
        Converter configuration (including tokenizer options)
    tokenizer : Tokenizer or None, default = None
        Tokenizer to use instead of the default markdown-it-py adapter

    Returns
    -------
    Document
        Pruned document with at least one block

    Examples
    --------
        >>> doc = markdown_to_document("- a\\n- b\\n- c")
        >>> len(doc.content[0].items)
        3

    """
    return TokenTreeConverter(options).parse(text, tokenizer=tokenizer)


def markdown_to_editor_json(text: str, options: ConverterOptions | None = None) -> dict[str, Any]:
    """Convert Markdown text straight to editor JSON.

    Parameters
    ----------
    text : str
        Markdown source
    options : ConverterOptions or None, default = None
        Converter configuration

    Returns
    -------
    dict
        Editor JSON ``{"type": "doc", "content": [...]}``

    """
    return ast_to_dict(markdown_to_document(text, options))


__all__ = ["TokenTreeConverter", "markdown_to_document", "markdown_to_editor_json", "tokens_to_document"]
