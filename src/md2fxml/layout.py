#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2fxml/layout.py
"""Post-layout pass over a loaded widget tree.

Two things cannot be finished while markup is generated. Code block text is
carried as an encoded payload in ``user_data`` and has to be installed on
the live text area, and table columns only know their width fraction until
the container width is known. :class:`PostLayoutProcessor` does both.

"""

from __future__ import annotations

import logging

from md2fxml.utils.encoding import decode_payload
from md2fxml.widgets import GridPane, TextArea, Widget

logger = logging.getLogger(__name__)


class PostLayoutProcessor:
    """Finish a widget tree loaded from FXML markup.

    Parameters
    ----------
    root : Widget
        Root of the loaded tree

    """

    def __init__(self, root: Widget) -> None:
        self.root = root

    def decode_code_payloads(self) -> int:
        """Install the decoded text of every code block that has not been decoded yet.

        Returns
        -------
        int
            Number of payloads decoded by this call

        Raises
        ------
        PayloadIntegrityError
            If a payload does not decode

        """
        decoded = 0
        for text_area in self.root.find_all(TextArea):
            if text_area.payload_decoded or not isinstance(text_area.user_data, str):
                continue
            text_area.text = decode_payload(text_area.user_data)
            text_area.payload_decoded = True
            decoded += 1
        if decoded:
            logger.debug(f"Decoded {decoded} code block payload(s)")
        return decoded

    def resolve_column_widths(self, available_width: float) -> None:
        """Set each column's max width to its fraction of ``available_width``.

        Columns whose fraction is not positive are left alone, and so is the
        whole tree when ``available_width`` is not positive.
        """
        if available_width <= 0.0:
            return
        for grid in self.root.find_all(GridPane):
            for constraints in grid.column_constraints:
                if constraints.min_width > 0.0:
                    constraints.max_width = constraints.min_width * available_width
