#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2doc/options/base.py
"""Shared base classes for md2doc option dataclasses.

Option objects are frozen so that converters, tokenizers and importers can be
shared between callers. Changes are made by deriving a new object.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Derive modified copies of a frozen options object."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy with the given fields replaced.

        Parameters
        ----------
        **kwargs : Any
            Replacement values keyed by field name

        Returns
        -------
        Self
            New options object; ``__post_init__`` validation runs again

        Examples
        --------
        >>> from md2doc.options import ConverterOptions
        >>> ConverterOptions().create_updated(compose_marks=True).compose_marks
        True

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseConverterOptions(CloneFrozenMixin):
    """Base class for the options a tree converter accepts.

    ``BaseConverter`` checks incoming options against a subclass of this type.
    Subclasses add fields with a ``"help"`` metadata entry and check value
    ranges in ``__post_init__``, calling this implementation first.

    """

    def __post_init__(self) -> None:
        """Hook for range checks; the base class has no fields to check."""
