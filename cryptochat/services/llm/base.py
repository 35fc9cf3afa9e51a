from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Dict, Optional

from pydantic import BaseModel, Field

ChatMsg = Dict[str, str]  # {"role": "...", "content": "..."}


class LLMError(Exception):
    """Upstream model call failed."""


class LLMRateLimitError(LLMError):
    """Upstream model rejected the call because of rate limiting."""


class ContentBlock(BaseModel):
    type: str
    text: Optional[str] = None


class TokenUsage(BaseModel):
    input_tokens: int = 0
    output_tokens: int = 0


class Completion(BaseModel):
    content: List[ContentBlock] = Field(default_factory=list)
    usage: TokenUsage = Field(default_factory=TokenUsage)


class LLMClient(ABC):
    @abstractmethod
    async def complete(self, system_prompt: str, messages: List[ChatMsg], max_tokens: int) -> Completion:
        """
        messages example:
          [{"role":"user","content":"hi"}, {"role":"assistant","content":"hello"}]
        The system prompt travels separately, never as a role in messages.
        Raises LLMRateLimitError / LLMError on upstream failure.
        """
        raise NotImplementedError
