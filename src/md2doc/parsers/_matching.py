#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2doc/parsers/_matching.py
"""Open/close token matching and the shared token cursor.

Every structural span is located by matching an opening token to its closing
counterpart while counting nested tokens of the same type. Nested conversion
works on sub-spans of the one token list through ``TokenCursor`` views, so no
slice of the stream is ever copied.

"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from md2doc.tokens import Nesting, Token, closing_type

logger = logging.getLogger(__name__)


def find_matching_close(tokens: Sequence[Token], open_index: int, end: Optional[int] = None) -> int:
    """Find the index of the token that closes ``tokens[open_index]``.

    Nested opening tokens of the same type increase the depth; closing tokens
    of the counterpart type decrease it.

    Parameters
    ----------
    tokens : sequence of Token
        Token stream
    open_index : int
        Index of the opening token
    end : int or None, default = None
        Exclusive end of the span to search; defaults to the stream length

    Returns
    -------
    int
        Index of the matching close, or ``end`` when the span runs out before
        the token is closed (the remainder then belongs to the opening token)

    Examples
    --------
    >>> from md2doc.tokens import Nesting, Token
    >>> stream = [
    ...     Token("blockquote_open", Nesting.OPEN),
    ...     Token("blockquote_open", Nesting.OPEN),
    ...     Token("blockquote_close", Nesting.CLOSE),
    ...     Token("blockquote_close", Nesting.CLOSE),
    ... ]
    >>> find_matching_close(stream, 0)
    3

    """
    if end is None:
        end = len(tokens)
    open_type = tokens[open_index].type
    close_type = closing_type(open_type)

    depth = 1
    for index in range(open_index + 1, end):
        token = tokens[index]
        if token.type == open_type and token.nesting == Nesting.OPEN:
            depth += 1
        elif token.type == close_type and token.nesting == Nesting.CLOSE:
            depth -= 1
            if depth == 0:
                return index

    logger.warning("Unmatched %s at token %d; consuming to end of span (%d)", open_type, open_index, end)
    return end


class TokenCursor:
    """A position within a span ``[start, end)`` of a shared token list.

    Parameters
    ----------
    tokens : sequence of Token
        The whole token stream; never copied
    start : int, default 0
        First index of the span
    end : int or None, default = None
        Exclusive end of the span; defaults to the stream length

    """

    def __init__(self, tokens: Sequence[Token], start: int = 0, end: Optional[int] = None):
        """Initialize the cursor at the start of the span."""
        self.tokens = tokens
        self.end = len(tokens) if end is None else min(end, len(tokens))
        self.position = start

    def __repr__(self) -> str:
        return f"TokenCursor(position={self.position}, end={self.end})"

    @property
    def at_end(self) -> bool:
        """True once the cursor has left the span."""
        return self.position >= self.end

    def peek(self, offset: int = 0) -> Optional[Token]:
        """Return the token ``offset`` positions ahead, or None outside the span."""
        index = self.position + offset
        if 0 <= index < self.end:
            return self.tokens[index]
        return None

    def advance(self, n: int = 1) -> None:
        """Move forward by ``n`` tokens."""
        self.position += n

    def jump_past(self, index: int) -> None:
        """Move to the token after ``index``."""
        self.position = index + 1

    def find_close(self) -> int:
        """Return the index closing the token at the cursor, bounded by the span."""
        return find_matching_close(self.tokens, self.position, self.end)

    def sub_cursor(self, start: int, end: int) -> TokenCursor:
        """Return a cursor over ``[start, end)`` of the same token list.

        The sub-span is clamped to this cursor's own end.
        """
        return TokenCursor(self.tokens, start, min(end, self.end))


__all__ = ["TokenCursor", "find_matching_close"]
