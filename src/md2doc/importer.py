#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2doc/importer.py
"""Markdown file import front-end.

Prepares Markdown files for conversion the way the document import flow does:
files are checked by extension and size, a leading YAML front matter block is
split off as metadata, images are removed (the editor stores them separately),
and a title is picked for the new document.

Examples
--------
Import a file:

    >>> from md2doc.importer import MarkdownImporter
    >>> result = MarkdownImporter().import_file("notes.md")
    >>> result.title
    'notes'

Import text with front matter:

    >>> result = import_markdown("---\\ntitle: Plan\\n---\\n# Goals\\n")
    >>> result.title, result.front_matter
    ('Plan', {'title': 'Plan'})

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from md2doc.ast import Document
from md2doc.constants import DEFAULT_TITLE, FRONT_MATTER_DELIMITER
from md2doc.exceptions import InvalidFileError, InvalidOptionsError
from md2doc.options.markdown import ImportOptions
from md2doc.parsers.markdown import TokenTreeConverter
from md2doc.tokens import Tokenizer
from md2doc.utils.decorators import debug_timer

logger = logging.getLogger(__name__)

_MARKDOWN_IMAGE_RE = re.compile(r"!\[[^\]]*\]\([^)]+\)")
_HTML_IMAGE_RE = re.compile(r"<img[^>]*>", re.IGNORECASE)
_EXTRA_BLANK_LINES_RE = re.compile(r"\n\s*\n\s*\n")

_BYTES_PER_MB = 1024 * 1024


@dataclass
class ImportResult:
    """Outcome of importing one Markdown document.

    Parameters
    ----------
    title : str
        Title for the new document
    document : Document
        Converted document tree; its metadata holds the front matter
    front_matter : dict
        Parsed front matter values (empty when there was none)

    """

    title: str
    document: Document
    front_matter: dict[str, Any] = field(default_factory=dict)


class MarkdownImporter:
    """Validate, clean and convert Markdown files.

    Parameters
    ----------
    options : ImportOptions or None, default = None
        Import configuration
    tokenizer : Tokenizer or None, default = None
        Tokenizer to use instead of the default markdown-it-py adapter

    """

    def __init__(self, options: ImportOptions | None = None, tokenizer: Tokenizer | None = None):
        """Initialize the importer with options."""
        if options is not None and not isinstance(options, ImportOptions):
            raise InvalidOptionsError(
                converter_name="markdown importer",
                expected_type=ImportOptions,
                received_type=type(options),
            )
        self.options: ImportOptions = options or ImportOptions()
        self.tokenizer = tokenizer
        self._converter = TokenTreeConverter(self.options.converter)

    def validate_file(self, name: str, size_bytes: int) -> None:
        """Check a file's extension and size before reading it.

        Parameters
        ----------
        name : str
            File name or path
        size_bytes : int
            File size in bytes

        Raises
        ------
        InvalidFileError
            If the extension is not allowed or the file is too large

        """
        lowered = name.lower()
        if not any(lowered.endswith(ext.lower()) for ext in self.options.allowed_extensions):
            allowed = ", ".join(self.options.allowed_extensions)
            raise InvalidFileError(f"Only {allowed} files are accepted", file_path=name)

        max_bytes = self.options.max_file_size_mb * _BYTES_PER_MB
        if size_bytes > max_bytes:
            raise InvalidFileError(
                f"File must not exceed {self.options.max_file_size_mb:g} MB ({size_bytes} bytes given)",
                file_path=name,
            )

    def split_front_matter(self, text: str) -> tuple[dict[str, Any], str]:
        """Split a leading ``---`` YAML block from the body.

        Parameters
        ----------
        text : str
            Markdown source

        Returns
        -------
        tuple[dict, str]
            (front_matter, body). Without a complete block the front matter is
            empty and the body is the unchanged text. A block that is not valid
            YAML, or not a mapping, yields empty front matter but is still
            removed from the body.

        """
        if not (text.startswith(FRONT_MATTER_DELIMITER + "\n") or text.startswith(FRONT_MATTER_DELIMITER + "\r\n")):
            return {}, text

        lines = text.splitlines(keepends=True)
        end_index = -1
        for i in range(1, len(lines)):
            if lines[i].strip() == FRONT_MATTER_DELIMITER:
                end_index = i
                break

        if end_index <= 0:
            return {}, text

        yaml_content = "".join(lines[1:end_index])
        body = "".join(lines[end_index + 1 :])

        try:
            data = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            logger.warning("Failed to parse front matter: %s", e)
            return {}, body

        if not isinstance(data, dict):
            if data is not None:
                logger.warning("Ignoring front matter of type %s; expected a mapping", type(data).__name__)
            return {}, body

        return {str(key): value for key, value in data.items()}, body

    @staticmethod
    def strip_images(text: str) -> str:
        """Remove Markdown and HTML images.

        Parameters
        ----------
        text : str
            Markdown source

        Returns
        -------
        str
            Text without ``![alt](url)`` images and ``<img>`` tags, with the
            blank line runs they leave collapsed, trimmed

        """
        text = _MARKDOWN_IMAGE_RE.sub("", text)
        text = _HTML_IMAGE_RE.sub("", text)
        text = _EXTRA_BLANK_LINES_RE.sub("\n\n", text)
        return text.strip()

    @staticmethod
    def derive_title(front_matter: dict[str, Any], filename: Optional[str] = None) -> str:
        """Pick the title for an imported document.

        Parameters
        ----------
        front_matter : dict
            Parsed front matter
        filename : str or None, default = None
            Source file name

        Returns
        -------
        str
            The front matter ``title`` when non-blank, else the file name
            without its extension, else ``"Untitled"``

        """
        title = front_matter.get("title")
        if title is not None and str(title).strip():
            return str(title).strip()
        if filename:
            stem = Path(filename).stem.strip()
            if stem:
                return stem
        return DEFAULT_TITLE

    def import_text(self, text: str, filename: Optional[str] = None) -> ImportResult:
        """Convert Markdown text into a titled document.

        Parameters
        ----------
        text : str
            Markdown source
        filename : str or None, default = None
            Source file name, used for the title fallback

        Returns
        -------
        ImportResult
            Title, document and front matter

        """
        front_matter: dict[str, Any] = {}
        body = text
        if self.options.parse_front_matter:
            front_matter, body = self.split_front_matter(text)
        if self.options.strip_images:
            body = self.strip_images(body)

        with debug_timer(logger, f"Import ({filename or 'text'})"):
            document = self._converter.parse(body, tokenizer=self.tokenizer)
        document.metadata = dict(front_matter)

        return ImportResult(
            title=self.derive_title(front_matter, filename),
            document=document,
            front_matter=front_matter,
        )

    def import_file(self, path: Union[str, Path]) -> ImportResult:
        """Validate, read and convert a Markdown file.

        Parameters
        ----------
        path : str or Path
            File to import

        Returns
        -------
        ImportResult
            Title, document and front matter

        Raises
        ------
        InvalidFileError
            If the file fails validation, cannot be read or is not UTF-8 text

        """
        path = Path(path)
        try:
            size = path.stat().st_size
        except OSError as e:
            raise InvalidFileError(f"Cannot access file: {e}", file_path=str(path), original_error=e) from e

        self.validate_file(path.name, size)

        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise InvalidFileError("File is not valid UTF-8 text", file_path=str(path), original_error=e) from e
        except OSError as e:
            raise InvalidFileError(f"Cannot read file: {e}", file_path=str(path), original_error=e) from e

        logger.debug("Read %d bytes from %s", size, path)
        return self.import_text(text, filename=path.name)


def import_markdown(text: str, filename: Optional[str] = None, options: ImportOptions | None = None) -> ImportResult:
    """Import Markdown text as a titled document.

    Parameters
    ----------
    text : str
        Markdown source
    filename : str or None, default = None
        Source file name, used for the title fallback
    options : ImportOptions or None, default = None
        Import configuration

    Returns
    -------
    ImportResult
        Title, document and front matter

    """
    return MarkdownImporter(options).import_text(text, filename=filename)


__all__ = ["ImportResult", "MarkdownImporter", "import_markdown"]
