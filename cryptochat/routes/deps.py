"""Dependency providers for the chat routes."""

from functools import partial
from typing import Callable

from fastapi import Depends

from cryptochat.core.config import Settings, get_settings
from cryptochat.services.chat_service import ChatRequestHandler
from cryptochat.services.llm.base import LLMClient
from cryptochat.services.llm.llm_factory import get_llm


def get_llm_factory(settings: Settings = Depends(get_settings)) -> Callable[[str], LLMClient]:
    return partial(get_llm, settings=settings)


def get_chat_handler(
    settings: Settings = Depends(get_settings),
    llm_factory: Callable[[str], LLMClient] = Depends(get_llm_factory),
) -> ChatRequestHandler:
    return ChatRequestHandler(
        api_key=settings.ANTHROPIC_API_KEY,
        llm_factory=llm_factory,
        max_tokens=settings.LLM_MAX_TOKENS,
        max_history=settings.LLM_MAX_HISTORY,
    )
