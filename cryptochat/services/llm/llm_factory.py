from cryptochat.core.config import Settings
from cryptochat.services.llm.anthropic_client import AnthropicClient
from cryptochat.services.llm.base import LLMClient


def get_llm(api_key: str, settings: Settings) -> LLMClient:
    return AnthropicClient(api_key=api_key, model=settings.ANTHROPIC_MODEL)
