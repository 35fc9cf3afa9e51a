import logging
import time

import anthropic
from anthropic import AsyncAnthropic

from cryptochat.services.llm.base import (
    ChatMsg,
    Completion,
    ContentBlock,
    LLMClient,
    LLMError,
    LLMRateLimitError,
    TokenUsage,
)

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-sonnet-4-20250514"


def is_rate_limit_text(text: str) -> bool:
    return "rate_limit" in (text or "")


class AnthropicClient(LLMClient):
    def __init__(self, api_key: str, model: str | None = None, client: AsyncAnthropic | None = None):
        if not api_key:
            raise RuntimeError("ANTHROPIC_API_KEY not set")
        self.model = model or DEFAULT_MODEL
        # single attempt per request: SDK retries off
        self.client = client or AsyncAnthropic(api_key=api_key, max_retries=0)

    async def complete(self, system_prompt: str, messages: list[ChatMsg], max_tokens: int) -> Completion:
        t0 = time.time()
        try:
            resp = await self.client.messages.create(
                model=self.model,
                max_tokens=max_tokens,
                system=system_prompt,
                messages=messages,
            )
        except anthropic.RateLimitError as exc:
            raise LLMRateLimitError(str(exc)) from exc
        except anthropic.APIError as exc:
            # streamed/overloaded errors can carry the rate limit only in the body text
            if is_rate_limit_text(str(exc)):
                raise LLMRateLimitError(str(exc)) from exc
            raise LLMError(str(exc)) from exc
        latency_s = time.time() - t0

        usage = getattr(resp, "usage", None)
        input_tokens = getattr(usage, "input_tokens", None) or 0
        output_tokens = getattr(usage, "output_tokens", None) or 0
        logger.info(
            "Claude latency=%.2fs input_tokens=%s output_tokens=%s",
            latency_s,
            input_tokens,
            output_tokens,
        )

        return Completion(
            content=[
                ContentBlock(type=block.type, text=getattr(block, "text", None))
                for block in resp.content
            ],
            usage=TokenUsage(input_tokens=input_tokens, output_tokens=output_tokens),
        )
