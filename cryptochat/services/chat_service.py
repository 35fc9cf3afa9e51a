from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from pydantic import ValidationError

from cryptochat.core.errors import (
    ClientInputError,
    ConfigurationError,
    MethodNotAllowedError,
    UpstreamGenericError,
    UpstreamRateLimitError,
)
from cryptochat.routes.schemas import (
    MESSAGE_REQUIRED,
    ChatRequest,
    ChatResponse,
    ChatTurn,
    Usage,
)
from cryptochat.services.llm.anthropic_client import is_rate_limit_text
from cryptochat.services.llm.base import ChatMsg, Completion, LLMClient, LLMRateLimitError
from cryptochat.services.prompts import SYSTEM_PROMPT


logger = logging.getLogger(__name__)

MAX_HISTORY = 10
MAX_TOKENS = 1024
ALLOWED_ROLES = {"user", "assistant"}


# --------- HISTORY ---------

def _role_ok(role: Any) -> bool:
    return isinstance(role, str) and role in ALLOWED_ROLES


def normalize_history(history: Iterable[Any] | None, limit: int = MAX_HISTORY) -> list[ChatMsg]:
    """
    Trailing `limit` turns, oldest first, with unknown roles and non-object
    entries dropped. Content is copied verbatim.
    The window is taken before filtering, so fewer than `limit` may survive.
    """
    rows = list(history or [])
    if limit <= 0:
        return []
    rows = rows[-limit:]

    out: list[ChatMsg] = []
    for turn in rows:
        if isinstance(turn, ChatTurn):
            role, content = turn.role, turn.content
        elif isinstance(turn, dict):
            role, content = turn.get("role"), turn.get("content")
        else:
            continue
        if not _role_ok(role):
            continue
        out.append({"role": role, "content": content})
    return out


def build_upstream_messages(
    message: str,
    history: Iterable[Any] | None = None,
    limit: int = MAX_HISTORY,
) -> list[ChatMsg]:
    messages = normalize_history(history, limit=limit)
    messages.append({"role": "user", "content": message.strip()})
    return messages


def first_text(completion: Completion) -> str:
    for block in completion.content:
        if block.type == "text":
            return block.text or ""
    return ""


# --------- REQUEST PARSING ---------

def _client_error_from(exc: ValidationError) -> ClientInputError:
    for err in exc.errors():
        if err.get("type") == "json_invalid":
            return ClientInputError()
        loc = err.get("loc") or ()
        if loc and loc[0] == "message":
            if err.get("type") == "message_too_long":
                return ClientInputError(err["msg"])
            return ClientInputError(MESSAGE_REQUIRED)
    return ClientInputError()


def parse_chat_request(body: bytes | str) -> ChatRequest:
    try:
        return ChatRequest.model_validate_json(body)
    except ValidationError as exc:
        raise _client_error_from(exc) from None


# --------- MAIN HANDLER ---------

class ChatRequestHandler:
    """
    One chat turn: method check, credential check, body validation,
    history trimming, a single upstream call and reply extraction.

    Every failure is raised as a ChatError subclass; the web layer renders it.
    """

    def __init__(
        self,
        api_key: str | None,
        llm_factory: Callable[[str], LLMClient],
        *,
        system_prompt: str = SYSTEM_PROMPT,
        max_tokens: int = MAX_TOKENS,
        max_history: int = MAX_HISTORY,
    ):
        self.api_key = api_key
        self.llm_factory = llm_factory
        self.system_prompt = system_prompt
        self.max_tokens = max_tokens
        self.max_history = max_history

    async def handle(self, method: str, body: bytes | str) -> ChatResponse:
        if (method or "").upper() != "POST":
            raise MethodNotAllowedError()

        if not self.api_key:
            raise ConfigurationError()

        payload = parse_chat_request(body)
        messages = build_upstream_messages(payload.message, payload.history, limit=self.max_history)

        try:
            llm = self.llm_factory(self.api_key)
            completion = await llm.complete(self.system_prompt, messages, self.max_tokens)
        except LLMRateLimitError as exc:
            logger.warning("Upstream rate limited: %s", exc)
            raise UpstreamRateLimitError() from exc
        except Exception as exc:
            if is_rate_limit_text(str(exc)):
                logger.warning("Upstream rate limited: %s", exc)
                raise UpstreamRateLimitError() from exc
            logger.exception("Claude call failed")
            raise UpstreamGenericError() from exc

        return ChatResponse(
            response=first_text(completion),
            usage=Usage(
                input_tokens=completion.usage.input_tokens,
                output_tokens=completion.usage.output_tokens,
            ),
        )
