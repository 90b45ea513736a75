#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2doc/parsers/_tables.py
"""Table extraction for the token tree converter."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from md2doc.ast.nodes import InlineNode, Paragraph, Table, TableCell, TableRow
from md2doc.constants import (
    TOKEN_INLINE,
    TOKEN_TBODY_OPEN,
    TOKEN_TD_OPEN,
    TOKEN_TH_OPEN,
    TOKEN_THEAD_OPEN,
    TOKEN_TR_OPEN,
)
from md2doc.parsers._matching import TokenCursor
from md2doc.tokens import Nesting, Token

logger = logging.getLogger(__name__)

# Converts the children of an inline token into leaves
InlineConverter = Callable[[Optional[Sequence[Token]]], list[InlineNode]]


def _is_open(token: Optional[Token], token_type: str) -> bool:
    return token is not None and token.type == token_type and token.nesting == Nesting.OPEN


class TableExtractor:
    """Build tables from table spans.

    Rows inside ``thead`` produce header cells, all other rows produce body
    cells. Each cell holds exactly one paragraph with the cell's inline content.

    Parameters
    ----------
    convert_inline : callable
        Converts inline token children into leaves

    """

    def __init__(self, convert_inline: InlineConverter):
        """Initialize the extractor."""
        self.convert_inline = convert_inline

    def extract(self, cursor: TokenCursor, close_index: int) -> Table:
        """Convert the table opened at the cursor position.

        Parameters
        ----------
        cursor : TokenCursor
            Cursor positioned on ``table_open``
        close_index : int
            Index of the matching close (or the span end)

        Returns
        -------
        Table
            Header rows first, then body rows, in source order

        """
        rows: list[TableRow] = []
        inner = cursor.sub_cursor(cursor.position + 1, close_index)
        while not inner.at_end:
            token = inner.peek()
            if _is_open(token, TOKEN_THEAD_OPEN) or _is_open(token, TOKEN_TBODY_OPEN):
                section_close = inner.find_close()
                header = token.type == TOKEN_THEAD_OPEN  # type: ignore[union-attr]
                rows.extend(self._extract_rows(inner.sub_cursor(inner.position + 1, section_close), header))
                inner.jump_past(section_close)
            elif _is_open(token, TOKEN_TR_OPEN):
                # Rows outside any section are body rows
                row_close = inner.find_close()
                rows.append(self._extract_row(inner, row_close, header=False))
                inner.jump_past(row_close)
            else:
                inner.advance()

        logger.debug("Extracted table with %d row(s)", len(rows))
        return Table(rows=rows)

    def _extract_rows(self, section: TokenCursor, header: bool) -> list[TableRow]:
        rows = []
        while not section.at_end:
            if _is_open(section.peek(), TOKEN_TR_OPEN):
                row_close = section.find_close()
                rows.append(self._extract_row(section, row_close, header))
                section.jump_past(row_close)
            else:
                section.advance()
        return rows

    def _extract_row(self, cursor: TokenCursor, row_close: int, header: bool) -> TableRow:
        cells = []
        row = cursor.sub_cursor(cursor.position + 1, row_close)
        while not row.at_end:
            token = row.peek()
            if _is_open(token, TOKEN_TH_OPEN) or _is_open(token, TOKEN_TD_OPEN):
                cell_close = row.find_close()
                cells.append(TableCell(header=header, content=[self._cell_paragraph(row, cell_close)]))
                row.jump_past(cell_close)
            else:
                row.advance()
        return TableRow(cells=cells)

    def _cell_paragraph(self, row: TokenCursor, cell_close: int) -> Paragraph:
        inline = row.peek(1)
        if inline is None or inline.type != TOKEN_INLINE or row.position + 1 >= cell_close:
            return Paragraph()
        return Paragraph(content=list(self.convert_inline(inline.children)))


__all__ = ["InlineConverter", "TableExtractor"]
