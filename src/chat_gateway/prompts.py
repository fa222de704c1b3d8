"""Fixed system directive prepended to every conversation."""

from __future__ import annotations

from typing import Sequence

from langchain_core.messages import BaseMessage, SystemMessage

DEFAULT_SYSTEM_PROMPT = (
    "You are a helpful assistant.\n"
    "Answer user questions clearly and concisely."
)


def with_system_prompt(
    turns: Sequence[BaseMessage],
    directive: str = DEFAULT_SYSTEM_PROMPT,
) -> list[BaseMessage]:
    """Return a new conversation starting with the directive turn.

    Any system turn already present in ``turns`` is kept as-is after the
    directive; nothing is merged.
    """
    return [SystemMessage(content=directive), *turns]
