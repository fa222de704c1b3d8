"""Map wire-level chat messages onto LangChain message types."""

from __future__ import annotations

from typing import Iterable

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage, ToolMessage

from .schemas import IncomingMessage


def to_turn(role: str, content: str) -> BaseMessage:
    """Build a conversation turn for ``role``.

    Matching is exact and case-sensitive. Unknown roles (including ``"user"``
    and the empty string) become user turns.
    """
    if role == "system":
        return SystemMessage(content=content)
    if role == "assistant":
        return AIMessage(content=content, tool_calls=[])
    if role == "tool":
        return ToolMessage(content=content, tool_call_id="")
    return HumanMessage(content=content)


def map_messages(raw: Iterable[IncomingMessage]) -> list[BaseMessage]:
    return [to_turn(message.role, message.content) for message in raw]
