#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2fxml/options/base.py
"""Base classes for parser and renderer options.

Options are frozen dataclasses: build a modified copy with
:meth:`CloneFrozenMixin.create_updated` instead of mutating in place.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> Self:
        """Build options from a mapping such as a loaded config table.

        Raises
        ------
        ValueError
            If the mapping contains keys that are not option fields

        """
        known = {f.name for f in fields(cls)}  # type: ignore[arg-type]
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f"Unknown {cls.__name__} field(s): {', '.join(unknown)}")
        return cls(**dict(values))


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Notes
    -----
    Subclasses define format-specific rendering options as frozen dataclass fields.

    """

    def __post_init__(self) -> None:
        """Validate field values; subclasses extend this."""


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Notes
    -----
    Subclasses define format-specific parsing options as frozen dataclass fields.

    """

    def __post_init__(self) -> None:
        """Validate field values; subclasses extend this."""
