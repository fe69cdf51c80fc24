#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2fxml/renderers/_render_context.py
"""Typed context frames pushed and popped while walking the AST.

Each frame lives exactly as long as the construct that pushed it. Lookups
go to the innermost frame of the wanted type, so nested lists and tables
never see each other's counters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TypeVar, Union

from md2fxml.exceptions import RenderingError
from md2fxml.renderers._table_layout import TableContext


@dataclass
class ListContext:
    """Numbering state of the list being rendered."""

    next_ordinal: int = 1
    is_ordered: bool = False

    def take_prefix(self, bullet_prefix: str) -> str:
        """Return the prefix for the next item, advancing the ordinal of ordered lists."""
        if not self.is_ordered:
            return bullet_prefix
        prefix = f"{self.next_ordinal}. "
        self.next_ordinal += 1
        return prefix


@dataclass(frozen=True)
class LinkContext:
    """Sanitized target of the link or image being rendered."""

    href: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return bool(self.href and self.href.strip())


RenderContext = Union[ListContext, TableContext, LinkContext]
FrameT = TypeVar("FrameT", ListContext, TableContext, LinkContext)


class RenderContextStack:
    """Stack of render context frames owned by one renderer invocation."""

    def __init__(self) -> None:
        self._frames: list[RenderContext] = []

    def __len__(self) -> int:
        return len(self._frames)

    def push(self, frame: FrameT) -> FrameT:
        self._frames.append(frame)
        return frame

    def pop(self, frame: RenderContext) -> None:
        """Pop ``frame``, which must be the top of the stack.

        Raises
        ------
        RenderingError
            If ``frame`` is not the top frame

        """
        if not self._frames or self._frames[-1] is not frame:
            raise RenderingError(
                f"Render context {type(frame).__name__} popped out of order", rendering_stage="context"
            )
        self._frames.pop()

    def innermost(self, frame_type: type[FrameT]) -> Optional[FrameT]:
        """Return the innermost frame of ``frame_type``, or None."""
        for frame in reversed(self._frames):
            if isinstance(frame, frame_type):
                return frame
        return None

    def clear(self) -> None:
        self._frames.clear()
