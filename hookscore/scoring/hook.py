"""
Hook analysis: scores the first non-blank line for attention-grabbing
technique.
"""

import logging
import re
from typing import FrozenSet, List, Pattern, Tuple, Union

from ..types.scoring import SCORE_CEILING, SCORE_FLOOR, ContentType, HookAnalysis
from .text import clamp, first_non_blank_line

logger = logging.getLogger(__name__)


BASE_SCORE = 50
TECHNIQUE_BONUS = 5
POWER_WORD_BONUS = 4
QUESTION_MARK_BONUS = 6
LENGTH_BONUS = 5
LENGTH_PENALTY = 5
NUMERIC_LEAD_BONUS = 6
SUBTITLE_BONUS = 3
EMOJI_BONUS = 3

# (ideal_min, ideal_max, too_long) hook word counts per content type
SHORT_FORM_LENGTH = (5, 15, 25)
LONG_FORM_LENGTH = (5, 20, 30)

POWER_WORDS: FrozenSet[str] = frozenset({
    "secret", "shocking", "surprising", "revealed", "truth", "mistake",
    "proven", "guaranteed", "discover", "warning", "urgent", "breaking",
    "exclusive", "insider", "hidden", "banned", "controversial", "dangerous",
    "extraordinary", "incredible", "unbelievable", "remarkable", "stunning",
    "devastating", "brilliant", "genius", "powerful", "deadly", "critical",
    "essential", "ultimate", "definitive", "complete", "massive", "tiny",
    "silent", "forgotten", "unknown", "rare", "strange", "weird",
})

# Scanned in order; each pattern adds its technique once
CURIOSITY_PATTERNS: List[Tuple[Pattern[str], str]] = [
    (re.compile(r"^(what|why|how|when|where|who)\s", re.IGNORECASE), "Question Hook"),
    (
        re.compile(
            r"\b\d+\s+(ways?|tips?|steps?|reasons?|things?|mistakes?|habits?|rules?"
            r"|secrets?|lessons?|signs?|examples?)\b",
            re.IGNORECASE,
        ),
        "Listicle Hook",
    ),
    (re.compile(r"^(I|we|my)\s", re.IGNORECASE), "Personal Story Hook"),
    (re.compile(r"^(most|everyone|nobody|no one|people)\s", re.IGNORECASE), "Universal Statement"),
    (re.compile(r"\b(but|however|yet|actually|instead|except)\b", re.IGNORECASE), "Contrarian Twist"),
    (re.compile(r"\b(don'?t|stop|never|avoid|quit)\b", re.IGNORECASE), "Negative Framing"),
    (re.compile(r"\b(imagine|picture|think about|what if)\b", re.IGNORECASE), "Visualization"),
    (re.compile(r"\b(you|your|you're|you'll)\b", re.IGNORECASE), "Direct Address"),
    (re.compile(r"\b(just|simply|only|exactly)\b", re.IGNORECASE), "Simplicity Promise"),
    (re.compile(r"\b(finally|at last)\b", re.IGNORECASE), "Resolution Hook"),
]

_NUMERIC_LEAD = re.compile(r"^\d")
_SUBTITLE = re.compile(r"[:\u2014\u2013-]\s")
_EMOJI = re.compile("[\U0001F600-\U0001F9FF\u2600-\u26FF\u2700-\u27BF]")
_NON_LETTERS = re.compile(r"[^a-z]")


def _quote(hook: str, limit: int) -> str:
    return hook[:limit] + ("..." if len(hook) > limit else "")


def analyze_hook(text: str, content_type: Union[ContentType, str, None]) -> HookAnalysis:
    """
    Score the opening line of a piece of content.

    Args:
        text: Full content; only the first non-blank line is scored.
        content_type: Short-form or long-form. Unknown values are long-form.

    Returns:
        HookAnalysis with score in [15, 98], feedback and techniques.
    """
    content_type = ContentType.parse(content_type)
    hook = first_non_blank_line(text)
    hook_words = hook.lower().split()
    hook_length = len(hook_words)

    score = BASE_SCORE
    techniques: List[str] = []
    length_notes: List[str] = []

    for pattern, technique in CURIOSITY_PATTERNS:
        if pattern.search(hook):
            techniques.append(technique)
            score += TECHNIQUE_BONUS

    power_words = [w for w in hook_words if _NON_LETTERS.sub("", w) in POWER_WORDS]
    if power_words:
        techniques.append("Power Words")
        score += len(power_words) * POWER_WORD_BONUS

    # A question mark opens a loop the reader wants closed
    if "?" in hook:
        score += QUESTION_MARK_BONUS
        if "Question Hook" not in techniques:
            techniques.append("Open Loop")

    if content_type is ContentType.SHORT_FORM:
        ideal_min, ideal_max, too_long = SHORT_FORM_LENGTH
        length_warning = (
            "Your hook is long — consider cutting to under 15 words "
            "for maximum scroll-stop power."
        )
    else:
        ideal_min, ideal_max, too_long = LONG_FORM_LENGTH
        length_warning = (
            "Long headlines lose attention. Aim for 6-12 words that "
            "promise a specific transformation."
        )

    if ideal_min <= hook_length <= ideal_max:
        score += LENGTH_BONUS
    elif hook_length > too_long:
        score -= LENGTH_PENALTY
        length_notes.append(length_warning)

    if _NUMERIC_LEAD.search(hook):
        techniques.append("Numeric Lead")
        score += NUMERIC_LEAD_BONUS

    if _SUBTITLE.search(hook):
        techniques.append("Subtitle Pattern")
        score += SUBTITLE_BONUS

    if content_type is ContentType.SHORT_FORM and _EMOJI.search(hook):
        techniques.append("Emoji Hook")
        score += EMOJI_BONUS

    feedback_parts = list(length_notes)
    if not techniques:
        feedback_parts.append(
            f'Your opening "{_quote(hook, 60)}" is straightforward but doesn\'t use any '
            "proven hook techniques. Try leading with a question, a bold number, "
            "or a contrarian claim."
        )
    elif len(techniques) >= 3:
        feedback_parts.append(
            f"Strong hook using {', '.join(techniques[:3])}. "
            f'"{_quote(hook, 50)}" hits multiple psychological triggers that stop the scroll.'
        )
    else:
        feedback_parts.append(
            f"Your hook uses {' + '.join(techniques)} — solid technique. To strengthen "
            "it, try adding a specific number or contrarian angle."
        )

    final_score = int(clamp(score, SCORE_FLOOR, SCORE_CEILING))
    logger.debug(f"Hook scored {final_score} with {len(techniques)} technique(s)")

    return HookAnalysis(
        score=final_score,
        feedback=" ".join(feedback_parts),
        techniques=techniques,
    )
