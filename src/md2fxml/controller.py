#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2fxml/controller.py
"""Controller bound to a loaded FXML document.

The loader injects the root ``VBox`` (``fx:id="body"``) into
:class:`DocumentController` and binds hyperlink runs to
:meth:`DocumentController.handle_hyperlink_click`.

The URL handed to the hyperlink consumer has already passed the renderer's
URL sanitizer, but it may still be a relative path or any scheme the
sanitizer allows; consumers decide what to open.

"""

from __future__ import annotations

import logging
from typing import Callable, ClassVar, Optional

from md2fxml.constants import DEFAULT_HYPERLINK_HANDLER
from md2fxml.layout import PostLayoutProcessor
from md2fxml.widgets import VBox, Widget, WidgetEvent

logger = logging.getLogger(__name__)

HyperlinkConsumer = Callable[[str], None]


class DocumentController:
    """Owns the body of a loaded document and reacts to its events.

    Parameters
    ----------
    hyperlink_consumer : callable or None, default None
        Called with the URL of every clicked hyperlink
    hyperlink_handler : str, default "handleHyperlinkClick"
        Handler name hyperlink runs reference in the markup

    Attributes
    ----------
    body : VBox or None
        Root of the document, injected by the loader

    Examples
    --------
        >>> controller = DocumentController(hyperlink_consumer=print)
        >>> root = FxmlLoader(controller).load(markup)
        >>> controller.attach()

    """

    fx_fields: ClassVar[tuple[str, ...]] = ("body",)

    def __init__(
        self,
        hyperlink_consumer: Optional[HyperlinkConsumer] = None,
        hyperlink_handler: str = DEFAULT_HYPERLINK_HANDLER,
    ) -> None:
        self.body: Optional[VBox] = None
        self.hyperlink_consumer = hyperlink_consumer
        self.hyperlink_handler = hyperlink_handler
        self._attached = False
        self._layout: Optional[PostLayoutProcessor] = None

    def set_hyperlink_consumer(self, consumer: Optional[HyperlinkConsumer]) -> None:
        self.hyperlink_consumer = consumer

    def resolve_handler(self, name: str) -> Optional[Callable[[WidgetEvent], None]]:
        """Return the handler method bound to ``#name`` in markup, if any."""
        if name == self.hyperlink_handler:
            return self.handle_hyperlink_click
        return None

    def handle_hyperlink_click(self, event: WidgetEvent) -> None:
        url = event.source.user_data
        if isinstance(url, str) and self.hyperlink_consumer is not None:
            logger.debug(f"Hyperlink clicked: {url}")
            self.hyperlink_consumer(url)

    @property
    def is_attached(self) -> bool:
        return self._attached

    def attach(self) -> None:
        """Run the post-layout work once the tree is attached.

        Decodes code block payloads, starts following the body's max width
        and resolves column widths right away if that width is already
        known. Calling it again does nothing.
        """
        if self._attached or self.body is None:
            return
        self._attached = True
        self._layout = PostLayoutProcessor(self.body)
        self._layout.decode_code_payloads()
        self.body.add_max_width_listener(self._on_body_max_width)
        if self.body.max_width is not None and self.body.max_width > 0.0:
            self._layout.resolve_column_widths(self.body.max_width)

    def on_resize(self, width: float) -> None:
        """Handle the container being resized to ``width``."""
        if self.body is None:
            return
        self.body.max_width = width

    def _on_body_max_width(self, widget: Widget, old_value: Optional[float], new_value: Optional[float]) -> None:
        if self._layout is not None and new_value is not None and new_value > 0.0:
            self._layout.resolve_column_widths(new_value)
