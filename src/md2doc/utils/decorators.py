#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2doc/utils/decorators.py
"""Decorators and context managers shared by md2doc components.

``requires_dependencies`` guards code that imports optional third-party
libraries lazily, such as the markdown-it-py tokenizer. ``debug_timer`` logs
how long a block took when DEBUG logging is on.
"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Iterator, Optional, Sequence

from md2doc.exceptions import DependencyError
from md2doc.utils.packages import check_version_requirement

# (install name, import name, version specifier or "")
PackageRequirement = tuple[str, str, str]


def _check_packages(
    packages: Sequence[PackageRequirement],
) -> tuple[list[tuple[str, str]], list[tuple[str, str, str]], Optional[ImportError]]:
    """Import each package and compare its version with the requirement.

    Returns the missing packages, the version mismatches and the first import
    error encountered.
    """
    missing: list[tuple[str, str]] = []
    mismatches: list[tuple[str, str, str]] = []
    first_error: Optional[ImportError] = None

    for install_name, import_name, version_spec in packages:
        try:
            importlib.import_module(import_name)
        except ImportError as e:
            missing.append((install_name, version_spec))
            first_error = first_error or e
            continue

        if version_spec:
            satisfied, installed = check_version_requirement(install_name, version_spec)
            if not satisfied:
                mismatches.append((install_name, version_spec, installed or "unknown"))

    return missing, mismatches, first_error


def requires_dependencies(converter_name: str, packages: Sequence[PackageRequirement]) -> Callable:
    """Make a function check its third-party packages before it runs.

    Parameters
    ----------
    converter_name : str
        Component name used in the error message, e.g. ``"markdown tokenizer"``
    packages : sequence of (install_name, import_name, version_spec)
        Packages to check. ``version_spec`` is a PEP 440 specifier such as
        ``">=3.0.0"``, or ``""`` to accept any installed version.

    Returns
    -------
    Callable
        Decorator for the guarded function

    Raises
    ------
    DependencyError
        At call time, listing every missing package and version mismatch

    Examples
    --------
        >>> @requires_dependencies("markdown tokenizer", [("markdown-it-py", "markdown_it", ">=3.0.0")])
        ... def tokenize(self, text):
        ...     from markdown_it import MarkdownIt
        ...     return MarkdownIt().parse(text)

    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing, mismatches, first_error = _check_packages(packages)
            if missing or mismatches:
                raise DependencyError(
                    converter_name=converter_name,
                    missing_packages=missing,
                    version_mismatches=mismatches,
                    original_import_error=first_error,
                ) from first_error
            return func(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Iterator[None]:
    """Log the duration of the enclosed block at DEBUG level.

    Parameters
    ----------
    logger : logging.Logger
        Logger receiving the timing message
    operation : str
        Label for the timed block, e.g. ``"Import (notes.md)"``

    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return

    started = time.perf_counter()
    yield
    logger.debug("%s completed in %.3fs", operation, time.perf_counter() - started)
