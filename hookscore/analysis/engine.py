"""
Full content analysis with remote-provider fallback.

The core hook/structure/emotion scores come from a remote LLM when one
is configured, otherwise (or on any remote failure) from the heuristic
engine. Readability and tone are always computed locally, in parallel
with the core scoring.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Tuple, Union

from ..scoring import analyze_readability, analyze_tone, run_smart_analysis
from ..text_generation import (
    TextGenerationError,
    analyze_with_provider,
    create_provider_from_settings,
)
from ..types.providers import LLMProvider
from ..types.scoring import AnalysisProvider, AnalysisReport, ContentType, SmartAnalysisResult
from ..utils.content import detect_content_type
from ..utils.logging import Timer, timed

logger = logging.getLogger(__name__)

AUTO_DETECT = "auto"

# Shared by every analysis; the analyzers hold no state
_executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="hookscore")


def resolve_content_type(
    text: str,
    requested: Union[ContentType, str, None],
) -> ContentType:
    """
    Turn a requested content type into a concrete one.

    "auto" and None detect the type from the text. Any other value goes
    through ContentType.parse, so unknown values become long-form.
    """
    if requested is None or (
        isinstance(requested, str) and requested.strip().lower() == AUTO_DETECT
    ):
        return detect_content_type(text)
    return ContentType.parse(requested)


def score_content(
    text: str,
    content_type: ContentType,
    allow_remote: bool = True,
    provider: Optional[LLMProvider] = None,
) -> Tuple[SmartAnalysisResult, AnalysisProvider]:
    """
    Produce the core smart analysis and name the engine that produced it.

    Args:
        text: Sanitized content.
        content_type: Resolved content type.
        allow_remote: When False the heuristic engine is always used.
        provider: Explicit remote provider; defaults to the configured one.

    Returns:
        (result, provider name). Remote failures are logged and answered
        by the heuristic engine, never raised.
    """
    if allow_remote:
        provider = provider or create_provider_from_settings()
        if provider is not None:
            try:
                return analyze_with_provider(text, content_type, provider), provider.type
            except TextGenerationError as e:
                logger.warning(
                    f"Remote analysis via {provider.type} failed, using heuristic engine: {e}"
                )

    return run_smart_analysis(text, content_type), "heuristic"


def analyze_content(
    text: str,
    content_type: Union[ContentType, str, None] = AUTO_DETECT,
    allow_remote: bool = True,
    provider: Optional[LLMProvider] = None,
) -> AnalysisReport:
    """
    Run the complete analysis of one piece of content.

    Args:
        text: Sanitized content.
        content_type: "tweet", "article", "auto" or a ContentType.
        allow_remote: Permit a remote provider for the core scores.
        provider: Explicit remote provider; defaults to the configured one.

    Returns:
        AnalysisReport combining the smart analysis with readability and
        tone.
    """
    resolved = resolve_content_type(text, content_type)

    with Timer("analyze_content", logger):
        readability_future = _executor.submit(analyze_readability, text)
        tone_future = _executor.submit(analyze_tone, text)
        core, provider_name = score_content(text, resolved, allow_remote, provider)
        readability = readability_future.result()
        tone = tone_future.result()

    return AnalysisReport(
        overall_score=core.overall_score,
        hook_strength=core.hook_strength,
        structure=core.structure,
        emotional_triggers=core.emotional_triggers,
        improvements=core.improvements,
        summary=core.summary,
        readability=readability,
        tone=tone,
        provider=provider_name,
        mock=provider_name == "heuristic",
        detected_type=resolved,
    )


@timed()
def analyze_pair(
    text_a: str,
    text_b: str,
    content_type: Union[ContentType, str, None] = AUTO_DETECT,
) -> Tuple[SmartAnalysisResult, SmartAnalysisResult]:
    """
    Heuristically analyze two texts concurrently.

    With "auto" each side detects its own type.
    """
    type_a = resolve_content_type(text_a, content_type)
    type_b = resolve_content_type(text_b, content_type)
    future_b = _executor.submit(run_smart_analysis, text_b, type_b)
    result_a = run_smart_analysis(text_a, type_a)
    return result_a, future_b.result()
