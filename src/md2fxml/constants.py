#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2fxml/constants.py
"""Constants and style prefabs for md2fxml.

The style prefabs are the attribute sets applied to emitted FXML elements.
Each prefab is a plain ``str -> str`` mapping; renderers copy them before
merging so the module-level dicts are never mutated.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# Dependencies as (install_name, import_name, version_spec)
DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]
DEPS_LOADER = [("defusedxml", "defusedxml", "")]

FXML_NAMESPACE = "http://javafx.com/fxml/1"

FXML_PROLOGUE = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    "<?import javafx.scene.control.*?>\n"
    "<?import javafx.scene.layout.*?>\n"
    "<?import javafx.scene.shape.*?>\n"
    "<?import javafx.scene.text.*?>\n"
    "<?import java.lang.*?>\n"
)

# Element names
TAG_DOCUMENT = "VBox"
TAG_VBOX = "VBox"
TAG_HBOX = "HBox"
TAG_TEXT_FLOW = "TextFlow"
TAG_TEXT = "Text"
TAG_TEXT_AREA = "TextArea"
TAG_SEPARATOR = "Separator"
TAG_GRID = "GridPane"
TAG_COLUMN_CONSTRAINTS = "ColumnConstraints"
PROP_USER_DATA = "userData"
PROP_COLUMN_CONSTRAINTS = "columnConstraints"

# Attribute names
ATTR_GRID_ROW = "GridPane.rowIndex"
ATTR_GRID_COLUMN = "GridPane.columnIndex"
ATTR_ALIGNMENT = "alignment"
ATTR_ON_CLICK = "onMouseClicked"
ATTR_USER_DATA = "userData"
# The column width fraction travels in minWidth until the container width is known
ATTR_WIDTH_FRACTION = "minWidth"

DEFAULT_BULLET_PREFIX = "· "
DEFAULT_IMAGE_PREFIX = "! "
DEFAULT_HYPERLINK_HANDLER = "handleHyperlinkClick"
DEFAULT_WIDTH_PRECISION = 6
DEFAULT_WIDE_CHAR_WIDTH = 2

CELL_ALIGNMENTS: Mapping[str | None, str] = MappingProxyType(
    {
        "left": "CENTER_LEFT",
        "center": "CENTER",
        "right": "CENTER_RIGHT",
        None: "CENTER_LEFT",
    }
)


def _prefab(**attrs: str) -> Mapping[str, str]:
    return MappingProxyType(dict(attrs))


PREFAB_DOCUMENT = MappingProxyType(
    {
        "xmlns:fx": FXML_NAMESPACE,
        "fx:id": "body",
        "spacing": "7.5",
        "style": "-fx-font-size:13px;-fx-font-weight:normal;-fx-padding:10px;-fx-wrap-text:true;",
    }
)
PREFAB_H1 = _prefab(style="-fx-font-size:21px;-fx-font-weight:bold;")
PREFAB_H2 = _prefab(style="-fx-font-size:19px;-fx-font-weight:bold;")
PREFAB_H3 = _prefab(style="-fx-font-size:17px;-fx-font-weight:bold;")
PREFAB_H4 = _prefab(style="-fx-font-size:15px;-fx-font-weight:bold;")
PREFAB_BLOCK_QUOTE = _prefab(
    spacing="7.5",
    style="-fx-background-color:#2481;-fx-background-radius:2.5px;"
    "-fx-border-color:#2488;-fx-border-width:0 0 0 2.5px;-fx-border-radius:2.5px;"
    "-fx-padding:10px;",
)
PREFAB_EMPHASIS = _prefab(style="-fx-font-weight:normal;-fx-font-style:oblique;")
PREFAB_STRONG_EMPHASIS = _prefab(style="-fx-font-weight:bold;-fx-font-style:normal;")
PREFAB_STRIKETHROUGH = _prefab(style="-fx-strikethrough:true;")
PREFAB_TEXT = _prefab()
PREFAB_CODE_BLOCK = _prefab(
    editable="false",
    style="-fx-background-color:#2481;-fx-background-radius:7.5px;"
    "-fx-border-color:#2484;-fx-border-width:1px;-fx-border-radius:7.5px;"
    "-fx-padding:10px;-fx-font-family:monospace;-fx-font-size:13px;",
)
PREFAB_HYPERLINK = _prefab(fill="#248F", underline="true")
PREFAB_LIST_BLOCK_OUTER = _prefab(style="-fx-padding:0 5px;")
PREFAB_LIST_BLOCK_INNER = _prefab(style="-fx-padding:0 10px;")
PREFAB_TABLE = _prefab(style="-fx-padding:10px 5px;-fx-hgap:0;-fx-vgap:0;")
PREFAB_TABLE_CELL = _prefab(
    style="-fx-padding:5px 10px;-fx-border-color:#2482;-fx-border-width:1px;-fx-border-radius:0;"
)

HEADING_PREFABS: tuple[Mapping[str, str], ...] = (PREFAB_H1, PREFAB_H2, PREFAB_H3, PREFAB_H4)

# URL safety
DANGEROUS_SCHEMES = frozenset(
    {
        "javascript:",
        "vbscript:",
        "data:text/html",
        "data:text/javascript",
        "data:application/javascript",
        "data:application/x-javascript",
    }
)
SAFE_LINK_SCHEMES = frozenset({"http", "https", "mailto", "ftp", "ftps", "tel"})
SAFE_IMAGE_DATA_PREFIX = "data:image/"

# Config discovery
CONFIG_ENV_VAR = "MD2FXML_CONFIG"
CONFIG_FILENAMES = (".md2fxml.toml", ".md2fxml.yaml", ".md2fxml.yml", ".md2fxml.json", "pyproject.toml")
