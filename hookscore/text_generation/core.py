"""
Remote LLM scoring.

Sends content to a configured provider (Anthropic, OpenAI or Gemini) and
parses the JSON reply into a SmartAnalysisResult. Every failure surfaces
as TextGenerationError so that callers can fall back to the heuristic
engine.
"""
import json
import logging
import math
import re
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from ..config import Settings, get_settings
from ..scoring.text import clamp, round_half_up
from ..types.providers import (
    AnthropicConfig,
    GeminiConfig,
    GenerationOptions,
    LLMProvider,
    OpenAIConfig,
)
from ..types.scoring import SCORE_CEILING, SCORE_FLOOR, ContentType, SmartAnalysisResult

logger = logging.getLogger(__name__)


SYSTEM_PROMPT = """You are an expert content analyst who helps personal brands improve their online writing. You specialize in viral content mechanics, copywriting psychology, and audience growth.

Analyze the given content and return ONLY a valid JSON object (no markdown, no code fences) with this exact structure:

{
  "overallScore": <number 1-100>,
  "hookStrength": {
    "score": <number 1-100>,
    "feedback": "<2-3 sentences. Be specific about what works or doesn't in the opening. Reference the actual words used.>"
  },
  "structure": {
    "score": <number 1-100>,
    "feedback": "<2-3 sentences about readability, flow, formatting, paragraph length.>"
  },
  "emotionalTriggers": {
    "score": <number 1-100>,
    "feedback": "<2-3 sentences about psychological drivers present.>",
    "triggers": ["<list 2-5 emotional triggers detected, e.g. Curiosity, Fear of Missing Out, Authority, Social Proof, Contrarian, Vulnerability, Aspiration, Urgency>"]
  },
  "improvements": [
    "<4-5 specific, actionable improvements. Each should be 1 sentence. Be concrete and reference the actual content.>"
  ],
  "summary": "<2-3 sentence executive summary. What's the biggest win and biggest missed opportunity?>"
}

SCORING GUIDE:
- 90-100: Viral-tier content, exceptional craft
- 75-89: Strong content, minor optimizations needed
- 60-74: Decent but missing key elements
- 40-59: Needs significant work
- Below 40: Fundamental issues

Be honest and direct. Don't sugarcoat. Creators want real feedback, not compliments."""

CONTENT_TYPE_LABELS: Dict[ContentType, str] = {
    ContentType.SHORT_FORM: "X/Twitter post",
    ContentType.LONG_FORM: "Substack article",
}

MAX_TRIGGERS = 6
MAX_IMPROVEMENTS = 5
OPENAI_MAX_TOKENS = 1000

_CODE_FENCE = re.compile(r"```(?:json)?\n?")


class TextGenerationError(Exception):
    """Raised when a remote provider cannot produce a usable analysis."""
    pass


def build_user_message(text: str, content_type: Union[ContentType, str, None]) -> str:
    label = CONTENT_TYPE_LABELS[ContentType.parse(content_type)]
    return f"Content type: {label}\n\n{text}"


def create_provider_from_settings(settings: Optional[Settings] = None) -> Optional[LLMProvider]:
    """
    Pick the remote provider to use, if any.

    Priority is Anthropic, then OpenAI, then Gemini. Returns None when no
    key is configured or remote analysis is disabled.
    """
    settings = settings or get_settings()
    if not settings.remote_analysis_available:
        return None

    llm = settings.llm
    timeout = float(llm.llm_api_timeout)

    if llm.anthropic_api_key:
        return LLMProvider(
            type="anthropic",
            config=AnthropicConfig(
                api_key=llm.anthropic_api_key.get_secret_value(),
                model=llm.anthropic_model,
                timeout=timeout,
            ),
        )
    if llm.openai_api_key:
        return LLMProvider(
            type="openai",
            config=OpenAIConfig(
                api_key=llm.openai_api_key.get_secret_value(),
                model=llm.openai_model,
                timeout=timeout,
            ),
        )
    if llm.gemini_api_key:
        return LLMProvider(
            type="gemini",
            config=GeminiConfig(
                api_key=llm.gemini_api_key.get_secret_value(),
                model=llm.gemini_model,
                timeout=timeout,
            ),
        )
    return None


def generate_analysis_text(
    user_message: str,
    provider: LLMProvider,
    options: Optional[GenerationOptions] = None,
    system_prompt: str = SYSTEM_PROMPT,
) -> str:
    """
    Send a prompt to a provider and return its raw reply.

    Uses the analysis system prompt unless another one is given.

    Raises:
        TextGenerationError: If the provider is unsupported or the call fails.
    """
    options = options or GenerationOptions()

    if provider.type == "anthropic":
        return generate_with_anthropic(user_message, provider.config, options, system_prompt)
    elif provider.type == "openai":
        return generate_with_openai(user_message, provider.config, options, system_prompt)
    elif provider.type == "gemini":
        return generate_with_gemini(user_message, provider.config, options, system_prompt)
    else:
        raise TextGenerationError(f"Unsupported provider: {provider.type}")


def generate_with_anthropic(
    user_message: str,
    config: AnthropicConfig,
    options: GenerationOptions,
    system_prompt: str = SYSTEM_PROMPT,
) -> str:
    try:
        import anthropic
    except ImportError:
        raise TextGenerationError(
            "Anthropic package not installed. Install it with 'pip install anthropic'."
        )

    try:
        client = anthropic.Anthropic(api_key=config.api_key, timeout=config.timeout)
        response = client.messages.create(
            model=config.model,
            max_tokens=options.max_tokens,
            system=system_prompt,
            messages=[{"role": "user", "content": user_message}],
        )
        return response.content[0].text
    except Exception as e:
        raise TextGenerationError(f"Error generating analysis with Anthropic: {str(e)}") from e


def generate_with_openai(
    user_message: str,
    config: OpenAIConfig,
    options: GenerationOptions,
    system_prompt: str = SYSTEM_PROMPT,
) -> str:
    try:
        import openai
    except ImportError:
        raise TextGenerationError(
            "OpenAI package not installed. Install it with 'pip install openai'."
        )

    try:
        client = openai.OpenAI(api_key=config.api_key, timeout=config.timeout)
        response = client.chat.completions.create(
            model=config.model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_message},
            ],
            temperature=options.temperature,
            max_tokens=min(options.max_tokens, OPENAI_MAX_TOKENS),
        )
        return response.choices[0].message.content or ""
    except Exception as e:
        raise TextGenerationError(f"Error generating analysis with OpenAI: {str(e)}") from e


def generate_with_gemini(
    user_message: str,
    config: GeminiConfig,
    options: GenerationOptions,
    system_prompt: str = SYSTEM_PROMPT,
) -> str:
    try:
        import google.generativeai as genai
    except ImportError:
        raise TextGenerationError(
            "Google Generative AI package not installed. "
            "Install it with 'pip install google-generativeai'."
        )

    try:
        genai.configure(api_key=config.api_key)
        model = genai.GenerativeModel(
            config.model,
            system_instruction=system_prompt,
            generation_config={
                "temperature": options.temperature,
                "max_output_tokens": options.max_tokens,
            },
        )
        response = model.generate_content(
            user_message,
            request_options={"timeout": config.timeout},
        )
        return response.text
    except Exception as e:
        raise TextGenerationError(f"Error generating analysis with Gemini: {str(e)}") from e


def strip_code_fences(raw: Optional[str]) -> str:
    """Remove Markdown code fences a model may wrap around its JSON."""
    return _CODE_FENCE.sub("", raw or "").strip()


def _band(value: Any) -> int:
    score = float(value)
    if not math.isfinite(score):
        raise ValueError(f"score is not a finite number: {value!r}")
    return int(clamp(round_half_up(score), SCORE_FLOOR, SCORE_CEILING))


def _normalize(data: Dict[str, Any]) -> Dict[str, Any]:
    """Clamp scores into the core band and cap list lengths."""
    hook = dict(data["hookStrength"])
    structure = dict(data["structure"])
    emotion = dict(data["emotionalTriggers"])

    hook["score"] = _band(hook["score"])
    hook.setdefault("techniques", [])
    structure["score"] = _band(structure["score"])
    emotion["score"] = _band(emotion["score"])
    emotion["triggers"] = list(emotion.get("triggers") or [])[:MAX_TRIGGERS]

    return {
        "overallScore": _band(data["overallScore"]),
        "hookStrength": hook,
        "structure": structure,
        "emotionalTriggers": emotion,
        "improvements": list(data.get("improvements") or [])[:MAX_IMPROVEMENTS],
        "summary": data.get("summary") or "",
    }


def parse_analysis_response(raw: str) -> SmartAnalysisResult:
    """
    Parse a provider reply into a SmartAnalysisResult.

    Markdown code fences are stripped, scores are clamped into [15, 98],
    triggers are capped at 6 and improvements at 5.

    Raises:
        TextGenerationError: If the reply is not valid JSON of the
            expected shape, or a score is not a finite number.
    """
    cleaned = strip_code_fences(raw)
    try:
        data = json.loads(cleaned)
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")
        return SmartAnalysisResult.model_validate(_normalize(data))
    except (ValueError, TypeError, KeyError, OverflowError, ValidationError) as e:
        raise TextGenerationError(f"Malformed analysis response: {str(e)}") from e


def analyze_with_provider(
    text: str,
    content_type: Union[ContentType, str, None],
    provider: LLMProvider,
    options: Optional[GenerationOptions] = None,
) -> SmartAnalysisResult:
    """
    Score content with a remote provider.

    Raises:
        TextGenerationError: On any provider or parsing failure.
    """
    logger.info(f"Requesting remote analysis from {provider.type} ({provider.config.model})")
    raw = generate_analysis_text(build_user_message(text, content_type), provider, options)
    return parse_analysis_response(raw)
