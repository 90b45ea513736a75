#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2doc/parsers/base.py
"""Base classes for document tree converters.

This module defines the abstract base class token-stream converters inherit
from, giving every converter the same options handling and entry point.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Sequence

from md2doc.ast import Document
from md2doc.exceptions import InvalidOptionsError
from md2doc.options.base import BaseConverterOptions
from md2doc.tokens import Token

logger = logging.getLogger(__name__)


class BaseConverter(ABC):
    """Abstract base class for token-stream converters.

    Parameters
    ----------
    options : BaseConverterOptions or None, default = None
        Converter options

    Examples
    --------
    Creating a custom converter:

        >>> from md2doc.parsers.base import BaseConverter
        >>> from md2doc.ast import Document
        >>>
        >>> class NullConverter(BaseConverter):
        ...     def convert(self, tokens):
        ...         return Document.empty()

    """

    def __init__(self, options: BaseConverterOptions | None = None):
        """Initialize the converter with optional configuration."""
        self.options: BaseConverterOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseConverterOptions | None, expected_type: type, converter_name: str) -> None:
        """Validate that options are of the correct type for this converter.

        Parameters
        ----------
        options : BaseConverterOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        converter_name : str
            Name of the converter (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=converter_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def convert(self, tokens: Sequence[Token]) -> Document:
        """Convert a token stream into a document tree.

        Implementations never raise for malformed streams; they return the
        best tree they can build.

        Parameters
        ----------
        tokens : sequence of Token
            Flat token stream in document order

        Returns
        -------
        Document
            Document with at least one block

        """
        pass
