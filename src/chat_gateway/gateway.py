"""Single call to the external chat model."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Sequence

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from .config import Settings, get_settings
from .prompts import DEFAULT_SYSTEM_PROMPT, with_system_prompt

logger = logging.getLogger(__name__)


def build_model(settings: Settings) -> ChatGoogleGenerativeAI:
    """Instantiate the configured Gemini chat model."""
    if not settings.google_api_key:
        raise RuntimeError("No Gemini API key configured (GOOGLE_API_KEY)")
    return ChatGoogleGenerativeAI(
        model=settings.llm_model,
        api_key=settings.google_api_key,
        max_retries=0,
    )


def _extract_text(response: Any) -> str:
    content = getattr(response, "content", None)
    if isinstance(content, str):
        return content
    if isinstance(content, list) and content:
        part = content[0]
        return part.get("text", str(part)) if isinstance(part, dict) else str(part)
    return str(content) if content else ""


class InferenceGateway:
    """Sends a conversation to the model and returns the reply text.

    No retries and no timeout are applied here. Exceptions raised by the
    model propagate to the caller unchanged.
    """

    def __init__(self, model: BaseChatModel, system_prompt: str = DEFAULT_SYSTEM_PROMPT) -> None:
        self.model = model
        self.system_prompt = system_prompt

    @classmethod
    def from_settings(cls, settings: Settings) -> "InferenceGateway":
        return cls(build_model(settings), system_prompt=settings.system_prompt)

    async def chat(self, turns: Sequence[BaseMessage]) -> str:
        logger.info("[CHAT] chat() called with %d messages", len(turns))
        conversation = with_system_prompt(turns, self.system_prompt)

        logger.info("[CHAT] Sending %d messages to model", len(conversation))
        response = await self.model.ainvoke(conversation)
        logger.debug("[CHAT] Model replied: %r", response)

        text = _extract_text(response)
        logger.info("[CHAT] Returning text: %s", text)
        return text


@lru_cache
def default_gateway() -> InferenceGateway:
    """Process-wide gateway built from settings on first use."""
    return InferenceGateway.from_settings(get_settings())


async def chat(turns: Sequence[BaseMessage], gateway: InferenceGateway | None = None) -> str:
    """Programmatic entry point that bypasses HTTP and JSON decoding."""
    return await (gateway or default_gateway()).chat(turns)
