"""
Emotional trigger detection across the full text.
"""

import logging
import re
from typing import List, Pattern, Tuple

from ..types.scoring import SCORE_CEILING, SCORE_FLOOR, EmotionalAnalysis
from .text import clamp

logger = logging.getLogger(__name__)


BASE_SCORE = 40
MAX_DISPLAYED_TRIGGERS = 6

# (pattern, trigger, weight); weight is added once per matching pattern
EMOTION_PATTERNS: List[Tuple[Pattern[str], str, int]] = [
    (re.compile(r"\b(secret|hidden|reveal|discover|uncover)\b", re.I), "Curiosity", 8),
    (re.compile(r"\b(miss out|left behind|too late|last chance|hurry|limited)\b", re.I), "FOMO", 7),
    (re.compile(r"\b(I|me|my|we|our)\b", re.I), "Personal Connection", 4),
    (re.compile(r"\b(you|your|you're)\b", re.I), "Direct Address", 5),
    (
        re.compile(r"\b(data|research|study|proven|evidence|statistic|percent|\d+%)\b", re.I),
        "Authority",
        6,
    ),
    (re.compile(r"\b(everyone|most people|they all|nobody|no one)\b", re.I), "Social Proof", 5),
    (re.compile(r"\b(wrong|myth|lie|actually|truth is|contrary)\b", re.I), "Contrarian", 7),
    (
        re.compile(r"\b(struggle|fail|pain|fear|worry|stress|anxiety|overwhelm)\b", re.I),
        "Pain Point",
        6,
    ),
    (
        re.compile(r"\b(dream|achieve|success|grow|transform|unlock|freedom|wealth)\b", re.I),
        "Aspiration",
        6,
    ),
    (
        re.compile(r"\b(honest|vulnerable|admit|confess|embarrass|mistake|failure)\b", re.I),
        "Vulnerability",
        8,
    ),
    (re.compile(r"\b(now|today|immediately|right now|this week)\b", re.I), "Urgency", 5),
    (
        re.compile(r"\b(free|save|cheap|cost|expensive|worth|value|price)\b", re.I),
        "Value Framing",
        4,
    ),
    (re.compile(r"\b(story|once|remember|years ago|when I was)\b", re.I), "Storytelling", 7),
    (re.compile(r"\b(simple|easy|quick|fast|just|only)\b", re.I), "Simplicity", 4),
]


def _feedback(triggers: List[str]) -> str:
    count = len(triggers)
    if count >= 5:
        return (
            f"Rich emotional landscape — you're hitting {count} psychological triggers. "
            "This content has high engagement potential."
        )
    if count >= 3:
        return (
            f"Solid emotional foundation with {', '.join(triggers)}. Consider adding "
            "vulnerability or a contrarian angle to deepen impact."
        )
    if count >= 1:
        return (
            f"Limited emotional range — only tapping {', '.join(triggers)}. "
            "High-performing content typically leverages 3-5 triggers."
        )
    return (
        "No strong emotional triggers detected. This reads as informational rather "
        "than engaging. Add personal stories, pain points, or aspirational language."
    )


def analyze_emotions(text: str) -> EmotionalAnalysis:
    """
    Scan the whole text for psychological trigger language.

    Each trigger pattern that matches at least once contributes its label
    and its weight exactly once, however often it matches.

    Args:
        text: Full content.

    Returns:
        EmotionalAnalysis with score in [15, 98] and up to 6 triggers in
        pattern-table order.
    """
    score = BASE_SCORE
    triggers: List[str] = []

    for pattern, trigger, weight in EMOTION_PATTERNS:
        if pattern.search(text):
            triggers.append(trigger)
            score += weight

    unique_triggers = list(dict.fromkeys(triggers))
    final_score = int(clamp(score, SCORE_FLOOR, SCORE_CEILING))
    logger.debug(f"Emotion scored {final_score} with {len(unique_triggers)} trigger(s)")

    return EmotionalAnalysis(
        score=final_score,
        feedback=_feedback(unique_triggers),
        triggers=unique_triggers[:MAX_DISPLAYED_TRIGGERS],
    )
