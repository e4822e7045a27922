"""
Structure analysis: formatting and flow, branching on content type.
"""

import logging
import re
from typing import List, Tuple, Union

from ..types.scoring import SCORE_CEILING, SCORE_FLOOR, ContentType, StructureAnalysis
from .text import (
    clamp,
    last_non_blank_line,
    non_blank_lines,
    split_lines,
    split_paragraphs,
    split_words,
)

logger = logging.getLogger(__name__)


BASE_SCORE = 50

# Short-form
LINE_BREAK_BONUS = 10
CONCISE_WORD_LIMIT = 50
CONCISE_BONUS = 5
VERBOSE_WORD_LIMIT = 100
VERBOSE_PENALTY = 5
CTA_BONUS = 8

# Long-form
MIN_HEADINGS = 2
HEADINGS_BONUS = 10
UNSTRUCTURED_WORD_LIMIT = 200
MISSING_HEADINGS_PENALTY = 8
MIN_BULLETS = 2
BULLETS_BONUS = 5
DENSE_PARAGRAPH_WORDS = 60
DENSE_PARAGRAPH_PENALTY = 8
GOOD_PARAGRAPH_WORDS = 40
GOOD_PARAGRAPH_BONUS = 5
ENGAGEMENT_CLOSE_BONUS = 5

FALLBACK_FEEDBACK = (
    "Structure is adequate but could be improved with clearer sections and formatting."
)

_CTA = re.compile(
    r"\?|comment|reply|share|repost|follow|tag|agree|disagree|thoughts",
    re.IGNORECASE,
)
_HEADING = re.compile(r"^#{1,3}\s|^[A-Z][A-Z\s]{5,}$")
_BULLET = re.compile(r"^\s*[-*•]\s")
_ENGAGEMENT_PROMPT = re.compile(
    r"\?|subscribe|follow|share|leave a comment|let me know|what do you think",
    re.IGNORECASE,
)


def _short_form(text: str) -> Tuple[int, List[str]]:
    adjustment = 0
    feedback: List[str] = []
    word_count = len(split_words(text))

    if len(non_blank_lines(text)) > 1:
        adjustment += LINE_BREAK_BONUS
        feedback.append("Good use of line breaks for scannability.")

    if word_count <= CONCISE_WORD_LIMIT:
        adjustment += CONCISE_BONUS
        feedback.append("Concise and punchy.")
    elif word_count > VERBOSE_WORD_LIMIT:
        adjustment -= VERBOSE_PENALTY
        feedback.append("Consider trimming — shorter posts tend to get more engagement.")

    if _CTA.search(last_non_blank_line(text)):
        adjustment += CTA_BONUS
        feedback.append("Strong CTA at the end drives engagement.")
    else:
        feedback.append(
            "Add a CTA at the end — a question or invitation to respond boosts replies."
        )

    return adjustment, feedback


def _long_form(text: str) -> Tuple[int, List[str]]:
    adjustment = 0
    feedback: List[str] = []
    lines = split_lines(text)
    paragraphs = split_paragraphs(text)
    word_count = len(split_words(text))

    headings = [line for line in lines if _HEADING.search(line.strip())]
    bullets = [line for line in lines if _BULLET.search(line)]
    avg_paragraph_length = (
        sum(len(split_words(p)) for p in paragraphs) / max(len(paragraphs), 1)
    )

    if len(headings) >= MIN_HEADINGS:
        adjustment += HEADINGS_BONUS
        feedback.append(f"{len(headings)} subheadings provide clear structure.")
    elif word_count > UNSTRUCTURED_WORD_LIMIT:
        adjustment -= MISSING_HEADINGS_PENALTY
        feedback.append(
            "Add subheadings — readers scan before they commit. "
            "Break content into clear sections."
        )

    if len(bullets) >= MIN_BULLETS:
        adjustment += BULLETS_BONUS
        feedback.append("Bullet points aid scannability.")

    # 41-60 words per paragraph is neutral
    if avg_paragraph_length > DENSE_PARAGRAPH_WORDS:
        adjustment -= DENSE_PARAGRAPH_PENALTY
        feedback.append(
            "Paragraphs are too dense. Aim for 2-4 sentences per paragraph for online reading."
        )
    elif avg_paragraph_length <= GOOD_PARAGRAPH_WORDS:
        adjustment += GOOD_PARAGRAPH_BONUS
        feedback.append("Good paragraph length for online reading.")

    last_paragraph = paragraphs[-1] if paragraphs else ""
    if _ENGAGEMENT_PROMPT.search(last_paragraph):
        adjustment += ENGAGEMENT_CLOSE_BONUS
        feedback.append("Ending with engagement prompt is smart.")

    return adjustment, feedback


def analyze_structure(text: str, content_type: Union[ContentType, str, None]) -> StructureAnalysis:
    """
    Score formatting and flow.

    Short-form content is judged on line breaks, brevity and a closing
    call to action. Long-form content is judged on subheadings, bullet
    lists, paragraph density and an engagement prompt at the end.

    Args:
        text: Full content.
        content_type: Short-form or long-form. Unknown values are long-form.

    Returns:
        StructureAnalysis with score in [15, 98].
    """
    content_type = ContentType.parse(content_type)

    if content_type is ContentType.SHORT_FORM:
        adjustment, feedback = _short_form(text)
    else:
        adjustment, feedback = _long_form(text)

    score = int(clamp(BASE_SCORE + adjustment, SCORE_FLOOR, SCORE_CEILING))
    logger.debug(f"Structure scored {score} ({content_type.value})")

    return StructureAnalysis(
        score=score,
        feedback=" ".join(feedback) or FALLBACK_FEEDBACK,
    )
