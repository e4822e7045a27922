"""
Optional remote LLM scoring and hook rewriting.
"""

from ..types.providers import GenerationOptions
from .core import (
    SYSTEM_PROMPT,
    TextGenerationError,
    analyze_with_provider,
    build_user_message,
    create_provider_from_settings,
    generate_analysis_text,
    parse_analysis_response,
    strip_code_fences,
)
from .rewrite import (
    REWRITE_PROMPT,
    build_rewrite_message,
    parse_rewrite_response,
    rewrite_with_provider,
)

__all__ = [
    "SYSTEM_PROMPT",
    "REWRITE_PROMPT",
    "TextGenerationError",
    "GenerationOptions",
    "analyze_with_provider",
    "build_user_message",
    "build_rewrite_message",
    "create_provider_from_settings",
    "generate_analysis_text",
    "parse_analysis_response",
    "parse_rewrite_response",
    "rewrite_with_provider",
    "strip_code_fences",
]
