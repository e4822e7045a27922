"""
Aggregate hook, structure and emotion analysis into a single result.

Readability and tone are independent siblings and are not run here; see
hookscore.analysis.engine for the combined report.
"""

import logging
import re
from typing import List, Union

from ..types.scoring import (
    SCORE_CEILING,
    SCORE_FLOOR,
    ContentType,
    EmotionalAnalysis,
    HookAnalysis,
    SmartAnalysisResult,
    StructureAnalysis,
)
from .emotions import analyze_emotions
from .hook import analyze_hook
from .structure import analyze_structure
from .text import clamp, count_paragraph_blocks, round_half_up

logger = logging.getLogger(__name__)


HOOK_WEIGHT = 0.35
STRUCTURE_WEIGHT = 0.30
EMOTION_WEIGHT = 0.35

MAX_IMPROVEMENTS = 5
MIN_HOOK_TECHNIQUES = 2
MIN_TRIGGERS = 3
MIN_LONG_FORM_PARAGRAPHS = 4
CTA_TAIL_CHARS = 100

STRENGTH_THRESHOLD = 70
WEAKNESS_THRESHOLD = 50
STRONG_OVERALL = 75
DECENT_OVERALL = 50

_TAIL_CTA = re.compile(r"\?|comment|reply|share|thoughts", re.IGNORECASE)
_DIGIT = re.compile(r"\b\d")


def _improvements(
    text: str,
    content_type: ContentType,
    hook: HookAnalysis,
    emotion: EmotionalAnalysis,
) -> List[str]:
    improvements: List[str] = []

    if len(hook.techniques) < MIN_HOOK_TECHNIQUES:
        improvements.append(
            "Strengthen your hook — try opening with a specific number, bold question, "
            "or contrarian claim to stop the scroll."
        )

    if "?" not in text:
        improvements.append(
            "Add at least one question — questions create open loops that keep readers engaged."
        )

    if len(emotion.triggers) < MIN_TRIGGERS:
        improvements.append(
            "Layer in more emotional triggers — combine curiosity with vulnerability "
            "or authority with aspiration."
        )

    if (
        content_type is ContentType.LONG_FORM
        and count_paragraph_blocks(text) < MIN_LONG_FORM_PARAGRAPHS
    ):
        improvements.append(
            "Break your content into more paragraphs — dense blocks of text lose online "
            "readers fast."
        )

    if content_type is ContentType.SHORT_FORM and not _TAIL_CTA.search(text[-CTA_TAIL_CHARS:]):
        improvements.append(
            "End with a clear CTA — ask a question or invite disagreement to drive replies."
        )

    if not _DIGIT.search(text):
        improvements.append(
            "Add specific numbers or data — '3x more engagement' hits harder than "
            "'much more engagement'."
        )

    if (
        "Personal Connection" not in emotion.triggers
        and "Vulnerability" not in emotion.triggers
    ):
        improvements.append(
            "Add a personal angle — 'I struggled with this too' makes content relatable "
            "and shareable."
        )

    return improvements[:MAX_IMPROVEMENTS]


def _summary(
    overall: int,
    hook: HookAnalysis,
    structure: StructureAnalysis,
    emotion: EmotionalAnalysis,
    improvements: List[str],
) -> str:
    strengths: List[str] = []
    weaknesses: List[str] = []

    if hook.score >= STRENGTH_THRESHOLD:
        strengths.append("strong hook")
    if structure.score >= STRENGTH_THRESHOLD:
        strengths.append("clean structure")
    if emotion.score >= STRENGTH_THRESHOLD:
        strengths.append("emotional depth")

    if hook.score < WEAKNESS_THRESHOLD:
        weaknesses.append("weak opening")
    if structure.score < WEAKNESS_THRESHOLD:
        weaknesses.append("structural issues")
    if emotion.score < WEAKNESS_THRESHOLD:
        weaknesses.append("flat emotional tone")

    if overall >= STRONG_OVERALL:
        lead = "Strong content overall"
        if strengths:
            lead += f" with {' and '.join(strengths)}"
        if weaknesses:
            closer = f"Main area to improve: {weaknesses[0]}."
        else:
            closer = "Fine-tune the details and this is ready to perform."
        first_improvement = improvements[0] if improvements else ""
        return f"{lead}. {closer} {first_improvement}".rstrip()

    if overall >= DECENT_OVERALL:
        summary = "Decent foundation but needs work. "
        if strengths:
            summary += f"You've got {' and '.join(strengths)}, but "
        if weaknesses:
            summary += f"{' and '.join(weaknesses)} are holding this back."
        else:
            summary += "several areas need refinement."
        return summary + " Focus on the top improvement first."

    return (
        f"This needs significant revision. {', '.join(weaknesses)} are the core issues. "
        "Start by rewriting the hook — if you don't stop the scroll, nothing else matters."
    )


def run_smart_analysis(
    text: str,
    content_type: Union[ContentType, str, None],
) -> SmartAnalysisResult:
    """
    Run the hook, structure and emotion analyzers and combine them.

    The overall score is the weighted mean 0.35 hook + 0.30 structure +
    0.35 emotion, rounded half-up and clamped to [15, 98].

    Args:
        text: Sanitized content. Empty text is valid.
        content_type: Short-form or long-form. Unknown values are long-form.

    Returns:
        SmartAnalysisResult with up to 5 ordered improvements and a
        narrative summary.
    """
    content_type = ContentType.parse(content_type)

    hook = analyze_hook(text, content_type)
    structure = analyze_structure(text, content_type)
    emotion = analyze_emotions(text)

    weighted = round_half_up(
        hook.score * HOOK_WEIGHT
        + structure.score * STRUCTURE_WEIGHT
        + emotion.score * EMOTION_WEIGHT
    )
    overall = int(clamp(weighted, SCORE_FLOOR, SCORE_CEILING))

    improvements = _improvements(text, content_type, hook, emotion)
    # Summary tiers read the unclamped weighted score
    summary = _summary(weighted, hook, structure, emotion, improvements)

    logger.debug(
        f"Smart analysis: overall={overall} (hook={hook.score}, "
        f"structure={structure.score}, emotion={emotion.score})"
    )

    return SmartAnalysisResult(
        overall_score=overall,
        hook_strength=hook,
        structure=structure,
        emotional_triggers=emotion,
        improvements=improvements,
        summary=summary,
    )
