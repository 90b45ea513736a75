#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for md2doc.

This module centralizes the token type names, default option values and
editor JSON type names used across the package.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Tokenizer Defaults - Options handed to the Markdown tokenizer
3. Converter Defaults - Tree-building behavior
4. Import Defaults - File validation and front matter handling
5. Token Vocabulary - Token type names the converter dispatches on
6. Editor JSON Vocabulary - Node and mark type names in serialized output
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

MarkType = Literal["bold", "italic", "strike", "code", "link"]

# =============================================================================
# Tokenizer Defaults
# =============================================================================

DEFAULT_ALLOW_RAW_EMBEDDED_MARKUP = False
DEFAULT_AUTOLINK_BARE_URLS = True
DEFAULT_TYPOGRAPHIC_SUBSTITUTIONS = True
DEFAULT_PARSE_TABLES = True
DEFAULT_PARSE_STRIKETHROUGH = True
DEFAULT_PARSE_TASK_LISTS = True

# markdown-it's own default for the "default" preset; bounds recursion depth
DEFAULT_MAX_NESTING = 100

# (install_name, import_name, version_spec)
DEPS_TOKENIZER = [
    ("markdown-it-py", "markdown_it", ">=3.0.0"),
    ("linkify-it-py", "linkify_it", ""),
    ("mdit-py-plugins", "mdit_py_plugins", ""),
]

# =============================================================================
# Converter Defaults
# =============================================================================

DEFAULT_COMPOSE_MARKS = False
DEFAULT_MERGE_TEXT_RUNS = True

MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6

# =============================================================================
# Import Defaults
# =============================================================================

DEFAULT_MAX_FILE_SIZE_MB = 10
DEFAULT_ALLOWED_EXTENSIONS: tuple[str, ...] = (".md",)
DEFAULT_STRIP_IMAGES = True
DEFAULT_PARSE_FRONT_MATTER = True
DEFAULT_TITLE = "Untitled"

FRONT_MATTER_DELIMITER = "---"

# =============================================================================
# Token Vocabulary
# =============================================================================

TOKEN_INLINE = "inline"
TOKEN_TEXT = "text"
TOKEN_HEADING_OPEN = "heading_open"
TOKEN_PARAGRAPH_OPEN = "paragraph_open"
TOKEN_BULLET_LIST_OPEN = "bullet_list_open"
TOKEN_ORDERED_LIST_OPEN = "ordered_list_open"
TOKEN_LIST_ITEM_OPEN = "list_item_open"
TOKEN_BLOCKQUOTE_OPEN = "blockquote_open"
TOKEN_FENCE = "fence"
TOKEN_CODE_BLOCK = "code_block"
TOKEN_HR = "hr"
TOKEN_TABLE_OPEN = "table_open"
TOKEN_THEAD_OPEN = "thead_open"
TOKEN_TBODY_OPEN = "tbody_open"
TOKEN_TR_OPEN = "tr_open"
TOKEN_TH_OPEN = "th_open"
TOKEN_TD_OPEN = "td_open"
TOKEN_CODE_INLINE = "code_inline"
TOKEN_HARDBREAK = "hardbreak"
TOKEN_SOFTBREAK = "softbreak"
TOKEN_HTML_INLINE = "html_inline"

OPEN_SUFFIX = "_open"
CLOSE_SUFFIX = "_close"

# Task list markers written by mdit-py-plugins' tasklists plugin
TASK_LIST_CLASS = "contains-task-list"
TASK_ITEM_CLASS = "task-list-item"
TASK_CHECKBOX_CLASS = "task-list-item-checkbox"
TASK_CHECKED_MARKER = 'checked="checked"'

# =============================================================================
# Editor JSON Vocabulary
# =============================================================================

EDITOR_DOC = "doc"
EDITOR_HEADING = "heading"
EDITOR_PARAGRAPH = "paragraph"
EDITOR_BULLET_LIST = "bulletList"
EDITOR_ORDERED_LIST = "orderedList"
EDITOR_LIST_ITEM = "listItem"
EDITOR_TASK_LIST = "taskList"
EDITOR_TASK_ITEM = "taskItem"
EDITOR_BLOCKQUOTE = "blockquote"
EDITOR_CODE_BLOCK = "codeBlock"
EDITOR_HORIZONTAL_RULE = "horizontalRule"
EDITOR_TABLE = "table"
EDITOR_TABLE_ROW = "tableRow"
EDITOR_TABLE_HEADER = "tableHeader"
EDITOR_TABLE_CELL = "tableCell"
EDITOR_TEXT = "text"
EDITOR_HARD_BREAK = "hardBreak"
