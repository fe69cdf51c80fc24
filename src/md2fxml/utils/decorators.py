#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2fxml/utils/decorators.py
"""Utility decorators for md2fxml parsers, renderers and loaders."""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Tuple

from md2fxml.exceptions import DependencyError
from md2fxml.utils.packages import check_version_requirement


def _find_dependency_problems(
    packages: List[Tuple[str, str, str]],
) -> Tuple[List[Tuple[str, str]], List[Tuple[str, str, str]], ImportError | None]:
    """Return the missing packages, the version mismatches and the first import error."""
    missing: List[Tuple[str, str]] = []
    mismatched: List[Tuple[str, str, str]] = []
    first_error: ImportError | None = None

    for install_name, import_name, version_spec in packages:
        try:
            importlib.import_module(import_name)
        except ImportError as e:
            missing.append((install_name, version_spec))
            first_error = first_error or e
            continue

        if not version_spec:
            continue
        satisfied, installed_version = check_version_requirement(install_name, version_spec)
        if not satisfied:
            mismatched.append((install_name, version_spec, installed_version or "unknown"))

    return missing, mismatched, first_error


def requires_dependencies(converter_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Refuse to run the decorated method unless ``packages`` are importable.

    The check runs on every call, so a package installed after import time
    is picked up.

    Parameters
    ----------
    converter_name : str
        Component name used in the error message, e.g. ``"markdown"``
    packages : list of tuple
        ``(install_name, import_name, version_spec)`` triples; an empty
        ``version_spec`` skips the version check

    Raises
    ------
    DependencyError
        If a package fails to import or its installed version is outside
        ``version_spec``

    Examples
    --------
        >>> @requires_dependencies("loader", [("defusedxml", "defusedxml", "")])
        ... def load(self, markup):
        ...     import defusedxml.ElementTree

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing, mismatched, first_error = _find_dependency_problems(packages)
            if missing or mismatched:
                raise DependencyError(
                    converter_name=converter_name,
                    missing_packages=missing,
                    version_mismatches=mismatched,
                    original_import_error=first_error,
                ) from first_error
            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Time the enclosed block and log the result at DEBUG level.

    Zero overhead when DEBUG logging is disabled.

    Examples
    --------
        >>> with debug_timer(logger, "Rendering (fxml)"):
        ...     markup = renderer.render_to_string(doc)

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.4f}s")
    else:
        yield
