"""Stateless HTTP chat gateway in front of a hosted language model."""

from .gateway import InferenceGateway, chat
from .messages import map_messages, to_turn
from .prompts import DEFAULT_SYSTEM_PROMPT, with_system_prompt

__all__ = [
    "DEFAULT_SYSTEM_PROMPT",
    "InferenceGateway",
    "chat",
    "map_messages",
    "to_turn",
    "with_system_prompt",
]
