"""md2doc - Convert Markdown into block editor documents.

md2doc turns Markdown, tokenized into a flat stream of open/close tokens, into
the nested rich-document tree a block-based editor consumes. Structural spans
are matched into a tree, lists and tables are rebuilt, inline formatting is
flattened into marked text runs, and every result is a valid, non-empty
document free of empty text.

Key Features
------------
- Token stream to tree conversion that never fails on malformed input
- Pluggable tokenizer behind a small protocol, with a markdown-it-py default
- Bullet, ordered and task lists, tables, quotes, code and rules
- Editor JSON serialization of the finished tree
- Import front-end with front matter, image stripping and title derivation

Requirements
------------
- Python 3.10+
- markdown-it-py, linkify-it-py and mdit-py-plugins for the default tokenizer

Examples
--------
Convert Markdown text:

    >>> from md2doc import markdown_to_document
    >>> doc = markdown_to_document("# Title\\n\\nSome **bold** text.")

Get the editor JSON directly:

    >>> from md2doc import markdown_to_editor_json
    >>> markdown_to_editor_json("Hello")["type"]
    'doc'

Import Markdown text with front matter:

    >>> from md2doc import import_markdown
    >>> result = import_markdown("---\\ntitle: Notes\\n---\\nBody", filename="notes.md")
    >>> result.title
    'Notes'

See Also
--------
md2doc.ast : document tree node definitions and utilities
md2doc.tokens : token model and tokenizer protocol

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "md2doc requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from md2doc.ast import Document, ast_to_dict, ast_to_json, validate_document
from md2doc.exceptions import (
    DependencyError,
    InvalidFileError,
    InvalidOptionsError,
    Md2DocError,
    TreeValidationError,
    ValidationError,
)
from md2doc.importer import ImportResult, MarkdownImporter, import_markdown
from md2doc.options import ConverterOptions, ImportOptions, TokenizerOptions
from md2doc.parsers.markdown import (
    TokenTreeConverter,
    markdown_to_document,
    markdown_to_editor_json,
    tokens_to_document,
)
from md2doc.tokens import MarkdownItTokenizer, Nesting, Token, Tokenizer

__all__ = [
    "__version__",
    # Conversion
    "tokens_to_document",
    "markdown_to_document",
    "markdown_to_editor_json",
    "import_markdown",
    "TokenTreeConverter",
    "MarkdownImporter",
    "ImportResult",
    # Tokens
    "Token",
    "Nesting",
    "Tokenizer",
    "MarkdownItTokenizer",
    # Tree
    "Document",
    "ast_to_dict",
    "ast_to_json",
    "validate_document",
    # Options
    "TokenizerOptions",
    "ConverterOptions",
    "ImportOptions",
    # Exceptions
    "Md2DocError",
    "ValidationError",
    "InvalidOptionsError",
    "InvalidFileError",
    "TreeValidationError",
    "DependencyError",
]
