#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2doc/parsers/__init__.py
"""Token stream converters producing document trees."""

from md2doc.parsers.base import BaseConverter
from md2doc.parsers.markdown import (
    TokenTreeConverter,
    markdown_to_document,
    markdown_to_editor_json,
    tokens_to_document,
)

__all__ = [
    "BaseConverter",
    "TokenTreeConverter",
    "markdown_to_document",
    "markdown_to_editor_json",
    "tokens_to_document",
]
