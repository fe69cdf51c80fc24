#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_text_flow.py
"""Unit tests for the text flow state machine."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from md2fxml.renderers._markup_writer import MarkupEmitter
from md2fxml.renderers._text_flow import TextFlowCoordinator, TextFlowStatus


def _coordinator():
    emitter = MarkupEmitter()
    return emitter, TextFlowCoordinator(emitter)


@pytest.mark.unit
class TestTransitions:
    """Tests for each state transition and what it emits."""

    def test_initial_state(self):
        _, flow = _coordinator()
        assert flow.status is TextFlowStatus.CLOSED
        assert not flow.is_continuing()

    def test_open_flow_from_closed(self):
        emitter, flow = _coordinator()
        flow.open_flow()
        assert emitter.getvalue() == "<TextFlow>\n"
        assert flow.status is TextFlowStatus.OPENED

    def test_open_flow_when_opened_emits_nothing(self):
        emitter, flow = _coordinator()
        flow.open_flow()
        flow.open_flow()
        assert emitter.getvalue() == "<TextFlow>\n"

    def test_open_flow_when_continuing_closes_run(self):
        emitter, flow = _coordinator()
        flow.open_run()
        flow.open_flow()
        assert emitter.getvalue() == "<TextFlow>\n<Text></Text>\n"
        assert flow.status is TextFlowStatus.OPENED

    def test_open_run_from_closed_opens_flow(self):
        emitter, flow = _coordinator()
        flow.open_run({"style": "s"})
        assert emitter.getvalue() == '<TextFlow>\n<Text style="s">'
        assert flow.is_continuing()

    def test_open_run_when_continuing_closes_previous(self):
        emitter, flow = _coordinator()
        flow.open_run()
        emitter.text("a")
        flow.open_run({"fill": "red"})
        emitter.text("b")
        assert emitter.getvalue() == '<TextFlow>\n<Text>a</Text>\n<Text fill="red">b'

    def test_close_run_when_not_continuing_is_noop(self):
        emitter, flow = _coordinator()
        flow.open_flow()
        flow.close_run()
        assert emitter.getvalue() == "<TextFlow>\n"
        assert flow.status is TextFlowStatus.OPENED

    def test_close_flow_from_continuing(self):
        emitter, flow = _coordinator()
        flow.open_run()
        emitter.text("x")
        flow.close_flow()
        assert emitter.getvalue() == "<TextFlow>\n<Text>x</Text>\n</TextFlow>\n"
        assert flow.status is TextFlowStatus.CLOSED

    def test_close_flow_from_opened(self):
        emitter, flow = _coordinator()
        flow.open_flow()
        flow.close_flow()
        assert emitter.getvalue() == "<TextFlow>\n</TextFlow>\n"

    def test_close_flow_when_closed_is_noop(self):
        emitter, flow = _coordinator()
        flow.close_flow()
        assert emitter.getvalue() == ""
        assert flow.flows_closed == 0


_OPERATIONS = st.lists(st.sampled_from(["open_flow", "close_flow", "open_run", "close_run"]), max_size=40)


@pytest.mark.unit
class TestBalanceProperties:
    """Property-based tests: any event sequence ending in close_flow is balanced."""

    @given(_OPERATIONS)
    def test_flows_balanced_after_final_close(self, operations):
        emitter, flow = _coordinator()
        for operation in operations:
            getattr(flow, operation)()
        flow.close_flow()

        markup = emitter.getvalue()
        assert flow.flows_opened == flow.flows_closed
        assert markup.count("<TextFlow>") == markup.count("</TextFlow>")
        assert markup.count("<Text>") == markup.count("</Text>")
        assert flow.status is TextFlowStatus.CLOSED

    @given(_OPERATIONS)
    def test_runs_only_inside_flows(self, operations):
        _, flow = _coordinator()
        for operation in operations:
            getattr(flow, operation)()
            depth = flow.flows_opened - flow.flows_closed
            assert depth in (0, 1)
            if flow.status is TextFlowStatus.CONTINUING:
                assert depth == 1
