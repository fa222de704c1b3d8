"""Tests for the role mapper."""

from __future__ import annotations

import pytest
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage, ToolMessage

from chat_gateway.messages import map_messages, to_turn
from chat_gateway.schemas import IncomingMessage


class TestToTurn:
    def test_system(self):
        turn = to_turn("system", "be brief")
        assert isinstance(turn, SystemMessage)
        assert turn.content == "be brief"

    def test_assistant_has_content_and_no_tool_calls(self):
        turn = to_turn("assistant", "earlier answer")
        assert isinstance(turn, AIMessage)
        assert turn.content == "earlier answer"
        assert turn.tool_calls == []

    def test_tool_has_empty_call_id(self):
        turn = to_turn("tool", "42")
        assert isinstance(turn, ToolMessage)
        assert turn.content == "42"
        assert turn.tool_call_id == ""

    @pytest.mark.parametrize("role", ["user", "", "User", "SYSTEM", "assistent", "moderator"])
    def test_everything_else_is_user(self, role):
        turn = to_turn(role, "text")
        assert isinstance(turn, HumanMessage)
        assert turn.content == "text"

    def test_empty_content_is_accepted(self):
        assert to_turn("user", "").content == ""


class TestMapMessages:
    def test_preserves_length_and_order(self):
        raw = [
            IncomingMessage(role="system", content="s"),
            IncomingMessage(role="user", content="u1"),
            IncomingMessage(role="assistant", content="a"),
            IncomingMessage(role="tool", content="t"),
            IncomingMessage(role="whatever", content="u2"),
        ]
        turns = map_messages(raw)

        assert len(turns) == len(raw)
        assert [type(t) for t in turns] == [
            SystemMessage,
            HumanMessage,
            AIMessage,
            ToolMessage,
            HumanMessage,
        ]
        assert [t.content for t in turns] == ["s", "u1", "a", "t", "u2"]

    def test_empty_input(self):
        assert map_messages([]) == []

    def test_mapping_twice_gives_same_result(self):
        raw = [IncomingMessage(role="user", content="hi"), IncomingMessage(role="assistant", content="yo")]
        assert map_messages(raw) == map_messages(raw)
