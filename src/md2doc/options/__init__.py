#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for md2doc.

Options are frozen dataclasses; use ``create_updated`` to derive a modified
copy.
"""

from __future__ import annotations

from md2doc.options.base import BaseConverterOptions, CloneFrozenMixin
from md2doc.options.markdown import ConverterOptions, ImportOptions, TokenizerOptions

__all__ = [
    "BaseConverterOptions",
    "CloneFrozenMixin",
    "ConverterOptions",
    "ImportOptions",
    "TokenizerOptions",
]
