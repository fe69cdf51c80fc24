#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2fxml/widgets.py
"""Minimal widget tree instantiated from FXML markup.

These classes model the handful of JavaFX controls the renderer emits, with
just enough behaviour for the post-layout pass and the document controller:
an observable ``max_width``, free-form ``user_data``, column constraints on
grids and mouse-click event handlers.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Iterator, Optional, TypeVar

from md2fxml.constants import ATTR_GRID_COLUMN, ATTR_GRID_ROW, ATTR_ON_CLICK

WidgetT = TypeVar("WidgetT", bound="Widget")
MaxWidthListener = Callable[["Widget", Optional[float], Optional[float]], None]
EventHandler = Callable[["WidgetEvent"], None]


@dataclass(frozen=True)
class WidgetEvent:
    """An event delivered to a widget's handlers."""

    source: Widget
    event_type: str


class Widget:
    """Base class for all widgets.

    Parameters
    ----------
    properties : dict, optional
        Attributes from the markup that have no dedicated handling, stored
        as strings

    Attributes
    ----------
    children : list of Widget
        Child widgets in document order
    parent : Widget or None
        Containing widget
    fx_id : str or None
        Identifier the loader uses to inject the widget into a controller
    user_data : Any
        Arbitrary data attached to the widget

    """

    type_name: ClassVar[str] = "Widget"
    accepts_children: ClassVar[bool] = True

    def __init__(self, properties: Optional[dict[str, str]] = None) -> None:
        self.properties: dict[str, str] = dict(properties or {})
        self.children: list[Widget] = []
        self.parent: Optional[Widget] = None
        self.fx_id: Optional[str] = None
        self.user_data: Any = None
        self._max_width: Optional[float] = None
        self._max_width_listeners: list[MaxWidthListener] = []
        self._event_handlers: dict[str, list[EventHandler]] = {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(children={len(self.children)})"

    def add_child(self, child: WidgetT) -> WidgetT:
        if not self.accepts_children:
            raise TypeError(f"{self.type_name} cannot contain child widgets")
        child.parent = self
        self.children.append(child)
        return child

    def iter_tree(self) -> Iterator[Widget]:
        """Yield this widget and all of its descendants in document order."""
        yield self
        for child in self.children:
            yield from child.iter_tree()

    def find_all(self, widget_type: type[WidgetT]) -> list[WidgetT]:
        """Return every widget of ``widget_type`` in this subtree."""
        return [widget for widget in self.iter_tree() if isinstance(widget, widget_type)]

    @property
    def max_width(self) -> Optional[float]:
        return self._max_width

    @max_width.setter
    def max_width(self, value: Optional[float]) -> None:
        old_value = self._max_width
        self._max_width = value
        if old_value != value:
            for listener in list(self._max_width_listeners):
                listener(self, old_value, value)

    def add_max_width_listener(self, listener: MaxWidthListener) -> None:
        """Register ``listener(widget, old_value, new_value)`` for max width changes."""
        self._max_width_listeners.append(listener)

    def add_event_handler(self, event_type: str, handler: EventHandler) -> None:
        self._event_handlers.setdefault(event_type, []).append(handler)

    def fire_event(self, event_type: str) -> WidgetEvent:
        """Deliver a new event of ``event_type`` to this widget's handlers and return it."""
        event = WidgetEvent(source=self, event_type=event_type)
        for handler in list(self._event_handlers.get(event_type, ())):
            handler(event)
        return event

    def click(self) -> WidgetEvent:
        """Simulate a mouse click on this widget."""
        return self.fire_event(ATTR_ON_CLICK)


class VBox(Widget):
    type_name = "VBox"


class HBox(Widget):
    type_name = "HBox"


class TextFlow(Widget):
    type_name = "TextFlow"


class Text(Widget):
    """A run of text with uniform style."""

    type_name = "Text"
    accepts_children = False

    def __init__(self, properties: Optional[dict[str, str]] = None, text: str = "") -> None:
        super().__init__(properties)
        self.text = text

    def __repr__(self) -> str:
        return f"Text({self.text!r})"


class TextArea(Widget):
    """Read-only multi-line text area used for code blocks."""

    type_name = "TextArea"
    accepts_children = False

    def __init__(self, properties: Optional[dict[str, str]] = None) -> None:
        super().__init__(properties)
        self.text = ""
        self.payload_decoded = False

    @property
    def editable(self) -> bool:
        return self.properties.get("editable", "true").lower() != "false"


class Separator(Widget):
    type_name = "Separator"
    accepts_children = False


@dataclass
class ColumnConstraints:
    """Width constraints of one grid column.

    ``min_width`` carries the column's width fraction until the post-layout
    pass derives ``max_width`` from it.
    """

    min_width: float = 0.0
    max_width: Optional[float] = None


class GridPane(Widget):
    type_name = "GridPane"

    def __init__(self, properties: Optional[dict[str, str]] = None) -> None:
        super().__init__(properties)
        self.column_constraints: list[ColumnConstraints] = []

    def cell_at(self, row: int, column: int) -> Optional[Widget]:
        """Return the child placed at ``(row, column)``, if any."""
        for child in self.children:
            placement = (child.properties.get(ATTR_GRID_ROW), child.properties.get(ATTR_GRID_COLUMN))
            if placement == (str(row), str(column)):
                return child
        return None


WIDGET_TYPES: dict[str, type[Widget]] = {
    cls.type_name: cls for cls in (VBox, HBox, TextFlow, Text, TextArea, Separator, GridPane)
}
