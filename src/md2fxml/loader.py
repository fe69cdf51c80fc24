#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2fxml/loader.py
"""Instantiate a widget tree from FXML markup.

:class:`FxmlLoader` plays the part of the downstream markup loader: it
parses the markup with ``defusedxml`` (DTDs and entity declarations are
refused), builds :mod:`md2fxml.widgets` objects, applies property elements,
injects ``fx:id`` targets into a controller and binds ``#handler`` event
attributes to controller methods.

Every failure is reported as :class:`~md2fxml.exceptions.MarkupLoadError`.

"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Protocol
from xml.etree.ElementTree import Element, ParseError

from md2fxml.constants import (
    ATTR_ON_CLICK,
    ATTR_USER_DATA,
    DEPS_LOADER,
    FXML_NAMESPACE,
    PROP_COLUMN_CONSTRAINTS,
    PROP_USER_DATA,
    TAG_COLUMN_CONSTRAINTS,
)
from md2fxml.exceptions import MarkupLoadError
from md2fxml.utils.decorators import debug_timer, requires_dependencies
from md2fxml.widgets import WIDGET_TYPES, ColumnConstraints, GridPane, Text, Widget, WidgetEvent

logger = logging.getLogger(__name__)

_FX_ID = f"{{{FXML_NAMESPACE}}}id"
_EVENT_ATTRIBUTES = frozenset({ATTR_ON_CLICK})


class FxmlController(Protocol):
    """What the loader needs from a controller.

    ``fx_fields`` names the attributes the loader may inject widgets into.
    """

    fx_fields: tuple[str, ...]

    def resolve_handler(self, name: str) -> Optional[Callable[[WidgetEvent], None]]: ...


def _parse_float(value: Optional[str], attribute: str) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except ValueError as e:
        raise MarkupLoadError(f"Invalid number for {attribute}: {value!r}", original_error=e) from e


class FxmlLoader:
    """Load FXML markup into widgets.

    Parameters
    ----------
    controller : FxmlController or None, default None
        Receives ``fx:id`` injections and resolves event handlers. Without a
        controller, markup that references a handler fails to load.

    Examples
    --------
        >>> root = FxmlLoader().load('<VBox><Separator/></VBox>')
        >>> root.children
        [Separator(children=0)]

    """

    def __init__(self, controller: Optional[FxmlController] = None) -> None:
        self.controller = controller

    @requires_dependencies("loader", DEPS_LOADER)
    def load(self, markup: str) -> Widget:
        """Parse ``markup`` and return the root widget.

        Raises
        ------
        MarkupLoadError
            If the markup is malformed, uses forbidden XML constructs, names
            an unknown element or property, or references a handler the
            controller cannot resolve

        """
        from defusedxml import DefusedXmlException
        from defusedxml.ElementTree import fromstring

        with debug_timer(logger, "Loading (fxml)"):
            try:
                root_element = fromstring(markup)
            except (ParseError, DefusedXmlException) as e:
                raise MarkupLoadError(f"Failed to parse markup: {e}", original_error=e) from e

            root = self._build(root_element)

        logger.debug(f"Loaded widget tree with {sum(1 for _ in root.iter_tree())} widget(s)")
        return root

    def _build(self, element: Element) -> Widget:
        widget_type = WIDGET_TYPES.get(element.tag)
        if widget_type is None:
            raise MarkupLoadError(f"Unknown element <{element.tag}>")

        widget = widget_type()
        self._apply_attributes(widget, element)

        if isinstance(widget, Text):
            if len(element):
                raise MarkupLoadError("<Text> cannot contain elements")
            widget.text = element.text or ""
            return widget

        self._reject_stray_text(element.text, element.tag)
        for child in element:
            if child.tag[:1].islower():
                self._apply_property_element(widget, child)
            else:
                try:
                    widget.add_child(self._build(child))
                except TypeError as e:
                    raise MarkupLoadError(str(e), original_error=e) from e
            self._reject_stray_text(child.tail, element.tag)
        return widget

    @staticmethod
    def _reject_stray_text(text: Optional[str], tag: str) -> None:
        if text and text.strip():
            raise MarkupLoadError(f"Unexpected text inside <{tag}>: {text.strip()[:40]!r}")

    def _apply_attributes(self, widget: Widget, element: Element) -> None:
        for name, value in element.attrib.items():
            if name == _FX_ID:
                widget.fx_id = value
                self._inject(value, widget)
            elif name.startswith("{"):
                continue
            elif name == ATTR_USER_DATA:
                widget.user_data = value
            elif name in _EVENT_ATTRIBUTES:
                widget.add_event_handler(name, self._resolve_handler(value))
            else:
                widget.properties[name] = value

    def _apply_property_element(self, widget: Widget, element: Element) -> None:
        if element.tag == PROP_USER_DATA:
            widget.user_data = element.text or ""
        elif element.tag == PROP_COLUMN_CONSTRAINTS and isinstance(widget, GridPane):
            for constraint in element:
                if constraint.tag != TAG_COLUMN_CONSTRAINTS:
                    raise MarkupLoadError(f"Unexpected <{constraint.tag}> in <{PROP_COLUMN_CONSTRAINTS}>")
                widget.column_constraints.append(
                    ColumnConstraints(
                        min_width=_parse_float(constraint.get("minWidth"), "minWidth") or 0.0,
                        max_width=_parse_float(constraint.get("maxWidth"), "maxWidth"),
                    )
                )
        else:
            raise MarkupLoadError(f"Unknown property <{element.tag}> on {widget.type_name}")

    def _inject(self, fx_id: str, widget: Widget) -> None:
        if self.controller is not None and fx_id in self.controller.fx_fields:
            setattr(self.controller, fx_id, widget)

    def _resolve_handler(self, reference: str) -> Callable[[WidgetEvent], Any]:
        if not reference.startswith("#"):
            raise MarkupLoadError(f"Event handler reference must start with '#': {reference!r}")
        name = reference[1:]
        handler = self.controller.resolve_handler(name) if self.controller is not None else None
        if handler is None:
            raise MarkupLoadError(f"Controller method not found: {name!r}")
        return handler
