#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2fxml/renderers/_text_flow.py
"""State machine deciding when inline content needs a flow or a run.

Inline content is emitted as ``Text`` runs inside a ``TextFlow`` container.
Adjacent inline leaves share one open run, line breaks terminate the whole
flow, and style changes re-open the run. :class:`TextFlowCoordinator` owns
those open/close decisions so the individual render rules never have to
re-derive them.

States
------
CLOSED
    No container is open (initial and terminal state).
OPENED
    A flow container is open with no run inside it.
CONTINUING
    A flow container is open and a run inside it is open.

"""

from __future__ import annotations

from enum import Enum
from typing import Mapping, Optional

from md2fxml.constants import TAG_TEXT, TAG_TEXT_FLOW
from md2fxml.renderers._markup_writer import MarkupEmitter


class TextFlowStatus(Enum):
    """Status of the flow container and run."""

    CLOSED = "closed"
    OPENED = "opened"
    CONTINUING = "continuing"


class TextFlowCoordinator:
    """Emit ``TextFlow``/``Text`` open and close events without imbalance.

    Parameters
    ----------
    emitter : MarkupEmitter
        Sink receiving the open/close events

    """

    def __init__(self, emitter: MarkupEmitter) -> None:
        self._emitter = emitter
        self._status = TextFlowStatus.CLOSED
        self.flows_opened = 0
        self.flows_closed = 0

    @property
    def status(self) -> TextFlowStatus:
        """Current state of the machine."""
        return self._status

    def _emit_open_flow(self) -> None:
        self._emitter.open_tag(TAG_TEXT_FLOW)
        self._emitter.line()
        self.flows_opened += 1

    def _emit_close_flow(self) -> None:
        self._emitter.close_tag(TAG_TEXT_FLOW)
        self._emitter.line()
        self.flows_closed += 1

    def _emit_close_run(self) -> None:
        self._emitter.close_tag(TAG_TEXT)
        self._emitter.line()

    def open_flow(self) -> None:
        """Make sure a flow container is open and no run is open inside it."""
        if self._status is TextFlowStatus.CLOSED:
            self._emit_open_flow()
        elif self._status is TextFlowStatus.CONTINUING:
            self._emit_close_run()
        self._status = TextFlowStatus.OPENED

    def close_flow(self) -> None:
        """Close the open run (if any) and the flow container (if any)."""
        if self._status is TextFlowStatus.CONTINUING:
            self._emit_close_run()
            self._emit_close_flow()
        elif self._status is TextFlowStatus.OPENED:
            self._emit_close_flow()
        self._status = TextFlowStatus.CLOSED

    def open_run(self, attrs: Optional[Mapping[str, str]] = None) -> None:
        """Open a new run with ``attrs``, closing or opening whatever is needed first."""
        if self._status is TextFlowStatus.CONTINUING:
            self._emit_close_run()
        elif self._status is TextFlowStatus.CLOSED:
            self._emit_open_flow()
        self._emitter.open_tag(TAG_TEXT, attrs)
        self._status = TextFlowStatus.CONTINUING

    def close_run(self) -> None:
        """Close the open run; no-op when none is open."""
        if self._status is TextFlowStatus.CONTINUING:
            self._emit_close_run()
            self._status = TextFlowStatus.OPENED

    def is_continuing(self) -> bool:
        """Return whether a run is currently open."""
        return self._status is TextFlowStatus.CONTINUING
