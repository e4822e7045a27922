"""
Type definitions for remote scoring providers.
"""
from typing import Literal, Union


class ProviderConfig:
    """Base configuration for LLM providers."""
    api_key: str
    model: str
    timeout: float

    def __init__(self, api_key: str, model: str, timeout: float = 30.0):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout


class AnthropicConfig(ProviderConfig):
    """Configuration for Anthropic provider."""

    def __init__(self, api_key: str, model: str = "claude-sonnet-4-20250514", timeout: float = 30.0):
        super().__init__(api_key, model, timeout)


class OpenAIConfig(ProviderConfig):
    """Configuration for OpenAI provider."""

    def __init__(self, api_key: str, model: str = "gpt-4o-mini", timeout: float = 30.0):
        super().__init__(api_key, model, timeout)


class GeminiConfig(ProviderConfig):
    """Configuration for Google's Gemini provider."""

    def __init__(self, api_key: str, model: str = "gemini-2.0-flash", timeout: float = 30.0):
        super().__init__(api_key, model, timeout)


# Detection priority order
ProviderType = Literal["anthropic", "openai", "gemini"]


class LLMProvider:
    """LLM provider configuration."""
    type: ProviderType
    config: Union[AnthropicConfig, OpenAIConfig, GeminiConfig]

    def __init__(self, type: ProviderType, config: Union[AnthropicConfig, OpenAIConfig, GeminiConfig]):
        self.type = type
        self.config = config

    def __repr__(self) -> str:
        return f"LLMProvider(type={self.type!r}, model={self.config.model!r})"


class GenerationOptions:
    """Options for remote scoring requests."""
    temperature: float
    max_tokens: int

    def __init__(
        self,
        temperature: float = 0.7,
        max_tokens: int = 1024,
    ):
        self.temperature = temperature
        self.max_tokens = max_tokens
