"""Token stream builders for md2doc tests.

The helpers produce token lists shaped like markdown-it-py output so converter
tests can be written without a tokenizer.
"""

from md2doc.tokens import Nesting, Token


def open_token(token_type: str, tag: str = "", **attrs: str) -> Token:
    """Build an opening token; ``token_type`` is given without the suffix."""
    return Token(f"{token_type}_open", Nesting.OPEN, tag=tag, attrs=dict(attrs))


def close_token(token_type: str, tag: str = "") -> Token:
    """Build a closing token; ``token_type`` is given without the suffix."""
    return Token(f"{token_type}_close", Nesting.CLOSE, tag=tag)


def text(content: str) -> Token:
    return Token("text", content=content)


def softbreak() -> Token:
    return Token("softbreak", tag="br")


def hardbreak() -> Token:
    return Token("hardbreak", tag="br")


def code_inline(content: str) -> Token:
    return Token("code_inline", tag="code", content=content, markup="`")


def span(family: str, *children: Token, **attrs: str) -> list[Token]:
    """Wrap inline children in a formatting span (``strong``, ``em``, ``s``, ``link``)."""
    return [open_token(family, **attrs), *children, close_token(family)]


def inline(*children) -> Token:
    """Build an inline token; children may be tokens or lists of tokens."""
    flat: list[Token] = []
    for child in children:
        if isinstance(child, list):
            flat.extend(child)
        else:
            flat.append(child)
    return Token("inline", content="".join(c.content for c in flat), children=tuple(flat))


def paragraph(*children) -> list[Token]:
    return [open_token("paragraph", "p"), inline(*children), close_token("paragraph", "p")]


def heading(level: int, *children) -> list[Token]:
    tag = f"h{level}"
    return [open_token("heading", tag), inline(*children), close_token("heading", tag)]


def _block(token_type: str, tag: str, parts: tuple, **attrs: str) -> list[Token]:
    """Wrap block token lists in an open/close pair."""
    return [open_token(token_type, tag, **attrs), *[t for part in parts for t in part], close_token(token_type, tag)]


def list_item(*blocks: list[Token], **attrs: str) -> list[Token]:
    return _block("list_item", "li", blocks, **attrs)


def bullet_list(*items: list[Token], **attrs: str) -> list[Token]:
    return _block("bullet_list", "ul", items, **attrs)


def ordered_list(*items: list[Token], **attrs: str) -> list[Token]:
    return _block("ordered_list", "ol", items, **attrs)


def task_item(content: str, checked: bool = False) -> list[Token]:
    """Build a list item the way the task list plugin rewrites ``- [ ] content``."""
    checked_attr = 'checked="checked" ' if checked else ""
    checkbox = Token(
        "html_inline",
        content=f'<input class="task-list-item-checkbox" {checked_attr}disabled="disabled" type="checkbox">',
    )
    return list_item(paragraph(checkbox, text(" " + content)), **{"class": "task-list-item"})


def blockquote(*blocks: list[Token]) -> list[Token]:
    return _block("blockquote", "blockquote", blocks)


def fence(content: str, info: str = "") -> list[Token]:
    return [Token("fence", tag="code", content=content, info=info, markup="```")]


def hr() -> list[Token]:
    return [Token("hr", tag="hr", markup="---")]


def table(header: list[list[str]], body: list[list[str]]) -> list[Token]:
    """Build a table from rows of plain cell strings."""

    def rows(section: str, cell: str, data: list[list[str]]) -> list[Token]:
        tokens = [open_token(section, section)]
        for row in data:
            tokens.append(open_token("tr", "tr"))
            for value in row:
                tokens.extend([open_token(cell, cell), inline(text(value)), close_token(cell, cell)])
            tokens.append(close_token("tr", "tr"))
        tokens.append(close_token(section, section))
        return tokens

    return _block("table", "table", (rows("thead", "th", header), rows("tbody", "td", body)))


def stream(*blocks: list[Token]) -> list[Token]:
    """Concatenate block token lists into one stream."""
    return [t for block in blocks for t in block]
