"""
Remote hook rewriting.

Asks the configured provider for three alternative openings, each in a
different hook style. Failures surface as TextGenerationError, like the
remote analysis in core.py.
"""
import json
import logging
from typing import List, Optional, Union

from pydantic import ValidationError

from ..types.providers import GenerationOptions, LLMProvider
from ..types.scoring import (
    MAX_HOOK_REWRITES,
    ContentType,
    HookRewrite,
    SmartAnalysisResult,
)
from .core import (
    CONTENT_TYPE_LABELS,
    TextGenerationError,
    generate_analysis_text,
    strip_code_fences,
)

logger = logging.getLogger(__name__)


REWRITE_PROMPT = """You are an expert content strategist specializing in viral hooks and attention-grabbing openers.

Given the original content and its analysis, rewrite ONLY the hook (first 1-3 sentences) to be dramatically more compelling.

Return ONLY a valid JSON object (no markdown, no code fences):
{
  "rewrites": [
    {
      "style": "<style name, e.g. Curiosity Gap, Bold Claim, Story Hook>",
      "hook": "<the rewritten hook, 1-3 sentences>",
      "why": "<1 sentence explaining why this works better>"
    }
  ]
}

Generate exactly 3 rewrites, each using a different psychological hook style.
Be specific to the content. Don't be generic. Match the author's voice but amplify it."""

# Rewrites want more variety than scoring, in a shorter reply
REWRITE_TEMPERATURE = 0.8
REWRITE_MAX_TOKENS = 512


def build_rewrite_message(
    text: str,
    content_type: Union[ContentType, str, None],
    analysis: Optional[SmartAnalysisResult] = None,
) -> str:
    """User message carrying the hook score and feedback when known."""
    label = CONTENT_TYPE_LABELS[ContentType.parse(content_type)]
    if analysis is not None:
        score = str(analysis.hook_strength.score)
        feedback = analysis.hook_strength.feedback or "none"
    else:
        score, feedback = "unknown", "none"

    return (
        f"Content type: {label}\n"
        f"Hook score: {score}/100\n"
        f"Hook feedback: {feedback}\n"
        f"\n"
        f"Original content:\n"
        f"{text}"
    )


def parse_rewrite_response(raw: str) -> List[HookRewrite]:
    """
    Parse a provider reply into at most three hook rewrites.

    Raises:
        TextGenerationError: If the reply is not a JSON object with a
            non-empty "rewrites" list of style/hook/why objects.
    """
    try:
        data = json.loads(strip_code_fences(raw))
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")
        items = data["rewrites"]
        if not isinstance(items, list) or not items:
            raise ValueError("no rewrites in reply")
        return [HookRewrite.model_validate(item) for item in items[:MAX_HOOK_REWRITES]]
    except (ValueError, TypeError, KeyError, ValidationError) as e:
        raise TextGenerationError(f"Malformed rewrite response: {str(e)}") from e


def rewrite_with_provider(
    text: str,
    content_type: Union[ContentType, str, None],
    provider: LLMProvider,
    analysis: Optional[SmartAnalysisResult] = None,
    options: Optional[GenerationOptions] = None,
) -> List[HookRewrite]:
    """
    Ask a remote provider for hook rewrites.

    Raises:
        TextGenerationError: On any provider or parsing failure.
    """
    options = options or GenerationOptions(
        temperature=REWRITE_TEMPERATURE,
        max_tokens=REWRITE_MAX_TOKENS,
    )
    logger.info(f"Requesting hook rewrites from {provider.type} ({provider.config.model})")
    raw = generate_analysis_text(
        build_rewrite_message(text, content_type, analysis),
        provider,
        options,
        system_prompt=REWRITE_PROMPT,
    )
    return parse_rewrite_response(raw)
