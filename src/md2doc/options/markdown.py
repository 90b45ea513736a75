#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown tokenizing, tree building and import.

This module defines the three option groups of the conversion pipeline.
"""
# src/md2doc/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field

from md2doc.constants import (
    DEFAULT_ALLOW_RAW_EMBEDDED_MARKUP,
    DEFAULT_ALLOWED_EXTENSIONS,
    DEFAULT_AUTOLINK_BARE_URLS,
    DEFAULT_COMPOSE_MARKS,
    DEFAULT_MAX_FILE_SIZE_MB,
    DEFAULT_MAX_NESTING,
    DEFAULT_MERGE_TEXT_RUNS,
    DEFAULT_PARSE_FRONT_MATTER,
    DEFAULT_PARSE_STRIKETHROUGH,
    DEFAULT_PARSE_TABLES,
    DEFAULT_PARSE_TASK_LISTS,
    DEFAULT_STRIP_IMAGES,
    DEFAULT_TYPOGRAPHIC_SUBSTITUTIONS,
)
from md2doc.options.base import BaseConverterOptions, CloneFrozenMixin


@dataclass(frozen=True)
class TokenizerOptions(CloneFrozenMixin):
    """Configuration handed to the Markdown tokenizer.

    Parameters
    ----------
    allow_raw_embedded_markup : bool, default False
        Whether raw HTML in the source is recognized as markup. The converter
        skips raw markup tokens either way.
    autolink_bare_urls : bool, default True
        Turn bare URLs (``https://example.com``) into links.
    typographic_substitutions : bool, default True
        Apply smart quotes and replacements such as ``(c)`` and ``--``.
    parse_tables : bool, default True
        Recognize GFM pipe tables.
    parse_strikethrough : bool, default True
        Recognize ``~~strikethrough~~`` spans.
    parse_task_lists : bool, default True
        Recognize ``- [ ]`` / ``- [x]`` task list items.
    max_nesting : int, default 100
        Maximum block nesting depth the tokenizer descends into. markdown-it-py
        parses nested blocks recursively, so values of a few hundred or more
        can exceed the interpreter recursion limit while tokenizing; the
        converter itself has no depth limit.

    """

    allow_raw_embedded_markup: bool = field(
        default=DEFAULT_ALLOW_RAW_EMBEDDED_MARKUP,
        metadata={"help": "Recognize raw HTML in the source as markup", "importance": "security"},
    )
    autolink_bare_urls: bool = field(
        default=DEFAULT_AUTOLINK_BARE_URLS,
        metadata={"help": "Convert bare URLs in text into links", "importance": "core"},
    )
    typographic_substitutions: bool = field(
        default=DEFAULT_TYPOGRAPHIC_SUBSTITUTIONS,
        metadata={"help": "Apply smart quotes and typographic replacements", "importance": "core"},
    )
    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES,
        metadata={"help": "Parse table syntax (GFM pipe tables)", "importance": "core"},
    )
    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={"help": "Parse strikethrough syntax (~~text~~)", "importance": "core"},
    )
    parse_task_lists: bool = field(
        default=DEFAULT_PARSE_TASK_LISTS,
        metadata={"help": "Parse task list checkboxes (- [ ] and - [x])", "importance": "core"},
    )
    max_nesting: int = field(
        default=DEFAULT_MAX_NESTING,
        metadata={"help": "Maximum block nesting depth", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If max_nesting is not positive.

        """
        if self.max_nesting <= 0:
            raise ValueError(f"max_nesting must be positive, got {self.max_nesting}")


@dataclass(frozen=True)
class ConverterOptions(BaseConverterOptions):
    """Configuration options for token-stream-to-tree conversion.

    Parameters
    ----------
    tokenizer : TokenizerOptions
        Options for the default tokenizer, used when the converter is given
        Markdown text rather than tokens.
    compose_marks : bool, default False
        When False, a formatting span marks only its direct text children with
        its own mark, and nested spans do not combine. When True, nested spans
        accumulate their marks (``***x***`` becomes bold and italic) and breaks
        and code spans inside formatting are kept.
    merge_text_runs : bool, default True
        Merge adjacent text runs that carry the same marks, and fold unmarked
        whitespace runs (such as collapsed soft breaks) into the preceding run
        so the space survives pruning.

    """

    tokenizer: TokenizerOptions = field(
        default_factory=TokenizerOptions,
        metadata={"help": "Tokenizer configuration", "importance": "core"},
    )
    compose_marks: bool = field(
        default=DEFAULT_COMPOSE_MARKS,
        metadata={"help": "Compose marks of nested formatting spans", "importance": "advanced"},
    )
    merge_text_runs: bool = field(
        default=DEFAULT_MERGE_TEXT_RUNS,
        metadata={
            "help": "Merge adjacent text runs with equal marks and keep collapsed soft-break spaces",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate options by calling parent validation."""
        super().__post_init__()


@dataclass(frozen=True)
class ImportOptions(CloneFrozenMixin):
    """Configuration options for importing Markdown files as documents.

    Parameters
    ----------
    converter : ConverterOptions
        Options for the tree conversion step.
    max_file_size_mb : float, default 10
        Largest accepted file, in megabytes.
    allowed_extensions : tuple of str, default (".md",)
        Accepted file name extensions, compared case-insensitively.
    strip_images : bool, default True
        Remove Markdown images and ``<img>`` tags before conversion.
    parse_front_matter : bool, default True
        Read a leading ``---`` YAML block as document metadata.

    """

    converter: ConverterOptions = field(
        default_factory=ConverterOptions,
        metadata={"help": "Tree conversion options", "importance": "core"},
    )
    max_file_size_mb: float = field(
        default=DEFAULT_MAX_FILE_SIZE_MB,
        metadata={"help": "Maximum accepted file size in megabytes", "importance": "security"},
    )
    allowed_extensions: tuple[str, ...] = field(
        default=DEFAULT_ALLOWED_EXTENSIONS,
        metadata={"help": "Accepted file extensions", "importance": "core"},
    )
    strip_images: bool = field(
        default=DEFAULT_STRIP_IMAGES,
        metadata={"help": "Remove images before conversion", "importance": "core"},
    )
    parse_front_matter: bool = field(
        default=DEFAULT_PARSE_FRONT_MATTER,
        metadata={
            "help": "Parse YAML front matter at document start",
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If max_file_size_mb is not positive or no extension is allowed.

        """
        if self.max_file_size_mb <= 0:
            raise ValueError(f"max_file_size_mb must be positive, got {self.max_file_size_mb}")
        if not self.allowed_extensions:
            raise ValueError("allowed_extensions must name at least one extension")
