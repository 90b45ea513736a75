#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2doc/tokens.py
"""Token model and tokenizer adapters.

The converter consumes a flat token stream: paired opening/closing tokens for
block structure, ``inline`` tokens whose ``children`` hold the inline stream,
and self-contained tokens such as fences and rules. This module defines that
token model, the ``Tokenizer`` protocol any tokenizer must satisfy, and the
default adapter built on markdown-it-py.

Examples
--------
Tokenize with the default tokenizer:

    >>> from md2doc.tokens import tokenize
    >>> [t.type for t in tokenize("# Title")]
    ['heading_open', 'inline', 'heading_close']

Build tokens by hand (useful for tests and custom tokenizers):

    >>> from md2doc.tokens import Nesting, Token
    >>> Token("paragraph_open", Nesting.OPEN, tag="p").is_open
    True

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Mapping, Optional, Protocol, runtime_checkable

from md2doc.constants import CLOSE_SUFFIX, DEPS_TOKENIZER, OPEN_SUFFIX
from md2doc.exceptions import InvalidOptionsError
from md2doc.options.markdown import TokenizerOptions
from md2doc.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)


class Nesting(IntEnum):
    """Nesting direction of a token."""

    OPEN = 1
    SELF = 0
    CLOSE = -1


@dataclass(frozen=True)
class Token:
    """A single token of the flat stream.

    Parameters
    ----------
    type : str
        Token type, e.g. ``paragraph_open``, ``inline``, ``fence``
    nesting : Nesting
        OPEN for opening tokens, CLOSE for their counterparts, SELF otherwise
    tag : str, default ""
        HTML tag name the token corresponds to (``h2``, ``p``, ``code``)
    content : str, default ""
        Literal text for text, code and inline tokens
    info : str, default ""
        Fence info string (language and options)
    attrs : Mapping[str, str], default {}
        Token attributes such as ``href``, ``start`` or ``class``
    children : tuple of Token or None, default None
        Inline stream of an ``inline`` token
    markup : str, default ""
        Source markup that produced the token (``**``, ``~~``, ``linkify``)

    """

    type: str
    nesting: Nesting = Nesting.SELF
    tag: str = ""
    content: str = ""
    info: str = ""
    attrs: Mapping[str, str] = field(default_factory=dict)
    children: Optional[tuple[Token, ...]] = None
    markup: str = ""

    def attr_get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return an attribute value, or ``default`` when it is absent."""
        return self.attrs.get(name, default)

    def has_class(self, class_name: str) -> bool:
        """Return True if the ``class`` attribute lists ``class_name``."""
        return class_name in (self.attr_get("class") or "").split()

    @property
    def is_open(self) -> bool:
        return self.nesting == Nesting.OPEN

    @property
    def is_close(self) -> bool:
        return self.nesting == Nesting.CLOSE


def closing_type(open_type: str) -> str:
    """Return the closing counterpart of an opening token type.

    Parameters
    ----------
    open_type : str
        Opening token type such as ``bullet_list_open``

    Returns
    -------
    str
        ``bullet_list_close`` for ``bullet_list_open``; types without the
        ``_open`` suffix are returned with ``_close`` appended

    """
    if open_type.endswith(OPEN_SUFFIX):
        return open_type[: -len(OPEN_SUFFIX)] + CLOSE_SUFFIX
    return open_type + CLOSE_SUFFIX


@runtime_checkable
class Tokenizer(Protocol):
    """Anything that turns Markdown text into a flat token list."""

    def tokenize(self, text: str) -> list[Token]:
        """Tokenize ``text`` into tokens in document order."""
        ...


def _from_markdown_it(token: Any) -> Token:
    children = None
    if token.children is not None:
        children = tuple(_from_markdown_it(child) for child in token.children)
    attrs = {str(key): str(value) for key, value in (token.attrs or {}).items()}
    return Token(
        type=token.type,
        nesting=Nesting(token.nesting),
        tag=token.tag or "",
        content=token.content or "",
        info=token.info or "",
        attrs=attrs,
        children=children,
        markup=token.markup or "",
    )


class MarkdownItTokenizer:
    """Tokenizer backed by markdown-it-py.

    Uses the CommonMark preset with raw HTML controlled by
    ``allow_raw_embedded_markup``, bare URL linking through linkify-it-py,
    typographic replacements and smart quotes, GFM tables and strikethrough,
    and task lists from mdit-py-plugins.

    Parameters
    ----------
    options : TokenizerOptions or None, default = None
        Tokenizer configuration

    Raises
    ------
    InvalidOptionsError
        If options is not a TokenizerOptions instance

    """

    def __init__(self, options: TokenizerOptions | None = None):
        """Initialize the tokenizer with its options."""
        if options is not None and not isinstance(options, TokenizerOptions):
            raise InvalidOptionsError(
                converter_name="markdown tokenizer",
                expected_type=TokenizerOptions,
                received_type=type(options),
            )
        self.options: TokenizerOptions = options or TokenizerOptions()

    def _build_parser(self) -> Any:
        from markdown_it import MarkdownIt
        from mdit_py_plugins.tasklists import tasklists_plugin

        opts = self.options
        md = MarkdownIt(
            "commonmark",
            {
                "html": opts.allow_raw_embedded_markup,
                "linkify": opts.autolink_bare_urls,
                "typographer": opts.typographic_substitutions,
                "maxNesting": opts.max_nesting,
            },
        )

        rules = []
        if opts.parse_tables:
            rules.append("table")
        if opts.parse_strikethrough:
            rules.append("strikethrough")
        if opts.autolink_bare_urls:
            rules.append("linkify")
        if opts.typographic_substitutions:
            rules.extend(["replacements", "smartquotes"])
        if rules:
            md.enable(rules)

        if opts.parse_task_lists:
            md.use(tasklists_plugin)
        return md

    @requires_dependencies("markdown tokenizer", DEPS_TOKENIZER)
    def tokenize(self, text: str) -> list[Token]:
        """Tokenize Markdown text.

        Parameters
        ----------
        text : str
            Markdown source

        Returns
        -------
        list of Token
            Tokens in document order

        Raises
        ------
        DependencyError
            If markdown-it-py or its plugins are not installed

        """
        md = self._build_parser()
        tokens = [_from_markdown_it(token) for token in md.parse(text)]
        logger.debug("Tokenized %d characters into %d tokens", len(text), len(tokens))
        return tokens


def tokenize(text: str, options: TokenizerOptions | None = None) -> list[Token]:
    """Tokenize Markdown text with the default tokenizer.

    Parameters
    ----------
    text : str
        Markdown source
    options : TokenizerOptions or None, default = None
        Tokenizer configuration

    Returns
    -------
    list of Token
        Tokens in document order

    """
    return MarkdownItTokenizer(options).tokenize(text)


__all__ = ["MarkdownItTokenizer", "Nesting", "Token", "Tokenizer", "closing_type", "tokenize"]
