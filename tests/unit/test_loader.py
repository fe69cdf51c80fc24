#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_loader.py
"""Unit tests for the FXML widget loader."""

import pytest

from md2fxml.exceptions import MarkupLoadError
from md2fxml.loader import FxmlLoader
from md2fxml.widgets import GridPane, Separator, Text, TextArea, TextFlow, VBox

NS = 'xmlns:fx="http://javafx.com/fxml/1"'


class RecordingController:
    fx_fields = ("body",)

    def __init__(self):
        self.body = None
        self.events = []

    def resolve_handler(self, name):
        if name == "onLink":
            return self.events.append
        return None


@pytest.mark.unit
class TestLoading:
    """Tests for building widgets from markup."""

    def test_basic_tree(self):
        root = FxmlLoader().load("<VBox><TextFlow><Text>a &amp; b</Text></TextFlow>\n<Separator/></VBox>")

        assert isinstance(root, VBox)
        flow, separator = root.children
        assert isinstance(flow, TextFlow)
        assert isinstance(separator, Separator)
        assert flow.children[0].text == "a & b"

    def test_prologue_accepted(self):
        markup = '<?xml version="1.0" encoding="UTF-8"?>\n<?import javafx.scene.text.*?>\n<VBox/>\n'
        assert isinstance(FxmlLoader().load(markup), VBox)

    def test_attributes_become_properties(self):
        root = FxmlLoader().load('<VBox spacing="7.5" style="-fx-padding:10px;"/>')
        assert root.properties == {"spacing": "7.5", "style": "-fx-padding:10px;"}

    def test_user_data_attribute_and_property(self):
        root = FxmlLoader().load(
            '<VBox><Text userData="https://a.test">x</Text><TextArea><userData> QUJD </userData></TextArea></VBox>'
        )
        text, area = root.children

        assert text.user_data == "https://a.test"
        assert isinstance(area, TextArea)
        assert area.user_data == " QUJD "

    def test_column_constraints(self):
        root = FxmlLoader().load(
            "<GridPane><columnConstraints>"
            '<ColumnConstraints minWidth="0.25"/><ColumnConstraints minWidth="0.75" maxWidth="300"/>'
            "</columnConstraints></GridPane>"
        )

        assert isinstance(root, GridPane)
        assert [(c.min_width, c.max_width) for c in root.column_constraints] == [(0.25, None), (0.75, 300.0)]

    def test_fx_id_injected_into_controller(self):
        controller = RecordingController()
        root = FxmlLoader(controller).load(f'<VBox {NS} fx:id="body"/>')

        assert controller.body is root
        assert root.fx_id == "body"

    def test_fx_id_outside_fields_not_injected(self):
        controller = RecordingController()
        root = FxmlLoader(controller).load(f'<VBox {NS} fx:id="other"/>')

        assert controller.body is None
        assert not hasattr(controller, "other")
        assert root.fx_id == "other"

    def test_handler_bound(self):
        controller = RecordingController()
        root = FxmlLoader(controller).load('<TextFlow><Text onMouseClicked="#onLink">x</Text></TextFlow>')

        event = root.children[0].click()
        assert controller.events == [event]


@pytest.mark.unit
class TestLoadErrors:
    """Tests for markup the loader rejects."""

    @pytest.mark.parametrize(
        "markup, message",
        [
            ("<VBox>", "Failed to parse markup"),
            ("<Button/>", "Unknown element <Button>"),
            ("<VBox>stray</VBox>", "Unexpected text inside <VBox>"),
            ("<VBox><Separator/>tail</VBox>", "Unexpected text inside <VBox>"),
            ("<TextFlow><Text><Text/></Text></TextFlow>", "<Text> cannot contain elements"),
            ("<Separator><VBox/></Separator>", "cannot contain child widgets"),
            ("<VBox><padding/></VBox>", "Unknown property <padding> on VBox"),
            ("<VBox><columnConstraints/></VBox>", "Unknown property <columnConstraints> on VBox"),
            (
                "<GridPane><columnConstraints><VBox/></columnConstraints></GridPane>",
                "Unexpected <VBox> in <columnConstraints>",
            ),
            (
                '<GridPane><columnConstraints><ColumnConstraints minWidth="wide"/></columnConstraints></GridPane>',
                "Invalid number for minWidth",
            ),
        ],
    )
    def test_rejected(self, markup, message):
        with pytest.raises(MarkupLoadError, match=message):
            FxmlLoader().load(markup)

    def test_entity_declarations_refused(self):
        markup = '<!DOCTYPE VBox [<!ENTITY x "boom">]><VBox>&x;</VBox>'
        with pytest.raises(MarkupLoadError):
            FxmlLoader().load(markup)

    def test_handler_requires_hash(self):
        with pytest.raises(MarkupLoadError, match="must start with '#'"):
            FxmlLoader(RecordingController()).load('<Text onMouseClicked="onLink">x</Text>')

    def test_unknown_handler(self):
        with pytest.raises(MarkupLoadError, match="Controller method not found: 'missing'"):
            FxmlLoader(RecordingController()).load('<Text onMouseClicked="#missing">x</Text>')

    def test_handler_without_controller(self):
        with pytest.raises(MarkupLoadError, match="Controller method not found"):
            FxmlLoader().load('<Text onMouseClicked="#onLink">x</Text>')

    def test_text_root_allowed(self):
        assert isinstance(FxmlLoader().load("<Text>solo</Text>"), Text)
