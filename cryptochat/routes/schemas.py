from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

MESSAGE_MAX_CHARS = 2000

MESSAGE_REQUIRED = "Message is required"
MESSAGE_TOO_LONG = f"Message too long (max {MESSAGE_MAX_CHARS} characters)"


class ChatTurn(BaseModel):
    # unvalidated: unknown roles are dropped during normalization, content is forwarded as-is
    role: Any = None
    content: Any = None


class ChatRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: str
    # entries stay raw until the history window is taken
    history: list[Any] = Field(default_factory=list)

    @field_validator("message", mode="before")
    @classmethod
    def _check_message(cls, v):
        # presence on the trimmed value first, then length on the raw value
        if not isinstance(v, str) or not v.strip():
            raise PydanticCustomError("message_required", MESSAGE_REQUIRED)
        if len(v) > MESSAGE_MAX_CHARS:
            raise PydanticCustomError("message_too_long", MESSAGE_TOO_LONG)
        return v

    @field_validator("history", mode="before")
    @classmethod
    def _null_history(cls, v):
        return [] if v is None else v


class Usage(BaseModel):
    input_tokens: int
    output_tokens: int


class ChatResponse(BaseModel):
    response: str
    usage: Usage


class ErrorResponse(BaseModel):
    error: str
