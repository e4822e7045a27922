"""
Tone and voice analysis.

Detects formality, confidence, personality traits and a voice archetype
from lexical markers.
"""

import logging
import re
from typing import Dict, FrozenSet, List, Pattern, Tuple

from ..types.scoring import ConfidenceScale, FormalityScale, ToneReport
from .text import clamp, split_sentences, split_words

logger = logging.getLogger(__name__)


NEUTRAL_SCORE = 50
MAX_TRAITS = 5
MAX_SUGGESTIONS = 3

# Formality weights
CASUAL_PENALTY = 6
FORMAL_BONUS = 8
CONVERSATIONAL_PENALTY = 3
CONTRACTION_PENALTY = 2
LONG_SENTENCE_AVG = 25
LONG_SENTENCE_BONUS = 10
SHORT_SENTENCE_AVG = 10
SHORT_SENTENCE_PENALTY = 8

# Confidence weights
HEDGE_PENALTY = 5
ASSERTIVE_BONUS = 6
EXCLAMATION_BONUS = 2
EXCLAMATION_CAP = 10
QUESTION_PENALTY = 1

# "Pick a side" fires at this many hedges unless assertive cues offset them
HEDGING_SUGGESTION_MIN = 3
ASSERTIVE_OFFSET_MIN = 2

HEDGE_WORDS = re.compile(
    r"\b(maybe|perhaps|might|could|possibly|somewhat|sort of|kind of|a bit|a little"
    r"|I think|I guess|I feel like|probably|seems like|tends to|appears to)\b",
    re.IGNORECASE,
)
ASSERTIVE_WORDS = re.compile(
    r"\b(always|never|must|definitely|absolutely|clearly|obviously|undeniably"
    r"|without doubt|the truth is|the fact is|here's the thing|let me be clear"
    r"|period|full stop)\b",
    re.IGNORECASE,
)
CASUAL_MARKERS = re.compile(
    r"\b(lol|lmao|tbh|ngl|fr|bruh|dude|bro|gonna|wanna|gotta|kinda|y'all|omg|btw"
    r"|imo|imho|haha|damn|hell|crap|shit|wtf|af)\b|\.{3}|!{2,}|\?{2,}",
    re.IGNORECASE,
)
FORMAL_MARKERS = re.compile(
    r"\b(furthermore|moreover|consequently|nevertheless|notwithstanding|henceforth"
    r"|whereas|thereby|thus|hence|accordingly|in conclusion|it is worth noting"
    r"|one might argue)\b",
    re.IGNORECASE,
)
CONVERSATIONAL_MARKERS = re.compile(
    r"\b(look|listen|here's the thing|let me tell you|you know what|right\?|okay so"
    r"|so here's|the thing is|real talk|honestly|between you and me)\b",
    re.IGNORECASE,
)
_CONTRACTION = re.compile(r"\w+'\w+")

PERSONALITY_PATTERNS: List[Tuple[Pattern[str], str]] = [
    (
        re.compile(
            r"\b(data|research|study|evidence|statistic|percent|\d+%|analysis|metric)\b",
            re.IGNORECASE,
        ),
        "data-driven",
    ),
    (
        re.compile(
            r"\b(story|once upon|I remember|years ago|when I was|let me share|true story)\b",
            re.IGNORECASE,
        ),
        "storyteller",
    ),
    (
        re.compile(
            r"\b(actually|wrong|myth|contrary|unpopular opinion|hot take|controversial)\b",
            re.IGNORECASE,
        ),
        "provocative",
    ),
    (
        re.compile(
            r"\b(honest|vulnerable|admit|confess|embarrass|mistake|I failed|I struggled"
            r"|truth is)\b",
            re.IGNORECASE,
        ),
        "authentic",
    ),
    (
        re.compile(
            r"\b(step \d|first|second|third|framework|system|process|method|strategy"
            r"|blueprint)\b",
            re.IGNORECASE,
        ),
        "systematic",
    ),
    (
        re.compile(
            r"\b(funny|hilarious|joke|laugh|comedy|ridiculous|absurd|ironic|sarcas)",
            re.IGNORECASE,
        ),
        "witty",
    ),
    (
        re.compile(
            r"\b(inspire|dream|vision|believe|passion|purpose|mission|impact"
            r"|change the world)\b",
            re.IGNORECASE,
        ),
        "inspirational",
    ),
    (
        re.compile(
            r"\b(practical|actionable|concrete|specific|exactly how|here's how|do this"
            r"|try this)\b",
            re.IGNORECASE,
        ),
        "practical",
    ),
]

# Earlier entries win ties
VOICE_ARCHETYPES: List[Tuple[FrozenSet[str], str]] = [
    (frozenset({"data-driven", "systematic"}), "Strategic Analyst"),
    (frozenset({"storyteller", "authentic"}), "Vulnerable Narrator"),
    (frozenset({"provocative", "witty"}), "Sharp Contrarian"),
    (frozenset({"inspirational", "authentic"}), "Passionate Advocate"),
    (frozenset({"practical", "systematic"}), "Tactical Guide"),
    (frozenset({"witty", "practical"}), "Witty Educator"),
    (frozenset({"data-driven", "provocative"}), "Myth Buster"),
    (frozenset({"storyteller", "inspirational"}), "Visionary Storyteller"),
    (frozenset({"authentic", "practical"}), "Real Talk Coach"),
    (frozenset({"provocative", "systematic"}), "Framework Breaker"),
]

SINGLE_TRAIT_VOICES: Dict[str, str] = {
    "data-driven": "Data-Driven Writer",
    "storyteller": "Natural Storyteller",
    "provocative": "Bold Contrarian",
    "authentic": "Authentic Voice",
    "systematic": "Systems Thinker",
    "witty": "Sharp Wit",
    "inspirational": "Inspirational Writer",
    "practical": "Tactical Writer",
}

DEFAULT_VOICE = "Balanced Writer"
UNKNOWN_VOICE = "Unknown"


def _count(pattern: Pattern[str], text: str) -> int:
    return sum(1 for _ in pattern.finditer(text))


def formality_level(score: float) -> str:
    if score < 25:
        return "casual"
    if score < 50:
        return "conversational"
    if score < 75:
        return "professional"
    return "academic"


def confidence_level(score: float) -> str:
    if score < 30:
        return "tentative"
    if score < 55:
        return "balanced"
    if score < 80:
        return "assertive"
    return "authoritative"


def detect_traits(text: str) -> List[str]:
    """Personality traits in pattern-table order, each at most once."""
    traits = [trait for pattern, trait in PERSONALITY_PATTERNS if pattern.search(text)]
    return list(dict.fromkeys(traits))


def pick_voice(traits: List[str]) -> str:
    """
    Map detected traits to a voice archetype.

    The archetype sharing the most traits wins; a single trait uses its
    own label; no traits gives the balanced default.
    """
    present = set(traits)
    voice = DEFAULT_VOICE
    best_match = 0
    for required, archetype in VOICE_ARCHETYPES:
        match_count = len(required & present)
        if match_count > best_match:
            best_match = match_count
            voice = archetype

    if len(traits) == 1:
        voice = SINGLE_TRAIT_VOICES.get(traits[0], voice)

    return voice


def _empty_report() -> ToneReport:
    return ToneReport(
        formality=FormalityScale(level="conversational", score=NEUTRAL_SCORE),
        confidence=ConfidenceScale(level="balanced", score=NEUTRAL_SCORE),
        voice=UNKNOWN_VOICE,
        personality=[],
        suggestions=["Add some content to analyze your tone."],
    )


def analyze_tone(text: str) -> ToneReport:
    """
    Analyze formality, confidence, personality and voice.

    Args:
        text: Content to analyze. Empty or whitespace-only input returns
            neutral defaults with voice "Unknown".

    Returns:
        ToneReport.
    """
    words = split_words(text)
    if not words:
        return _empty_report()

    # Formality
    casual_matches = _count(CASUAL_MARKERS, text)
    formal_matches = _count(FORMAL_MARKERS, text)
    conversational_matches = _count(CONVERSATIONAL_MARKERS, text)

    formality = NEUTRAL_SCORE
    formality -= casual_matches * CASUAL_PENALTY
    formality += formal_matches * FORMAL_BONUS
    formality -= conversational_matches * CONVERSATIONAL_PENALTY

    sentences = split_sentences(text, min_length=5)
    avg_sentence_length = len(words) / len(sentences) if sentences else 10
    if avg_sentence_length > LONG_SENTENCE_AVG:
        formality += LONG_SENTENCE_BONUS
    if avg_sentence_length < SHORT_SENTENCE_AVG:
        formality -= SHORT_SENTENCE_PENALTY

    formality -= _count(_CONTRACTION, text) * CONTRACTION_PENALTY
    formality = int(clamp(formality, 0, 100))
    formality_label = formality_level(formality)

    # Confidence
    hedge_matches = _count(HEDGE_WORDS, text)
    assertive_matches = _count(ASSERTIVE_WORDS, text)

    confidence = NEUTRAL_SCORE
    confidence -= hedge_matches * HEDGE_PENALTY
    confidence += assertive_matches * ASSERTIVE_BONUS
    confidence += min(text.count("!") * EXCLAMATION_BONUS, EXCLAMATION_CAP)
    confidence -= text.count("?") * QUESTION_PENALTY
    confidence = int(clamp(confidence, 0, 100))
    confidence_label = confidence_level(confidence)

    traits = detect_traits(text)
    voice = pick_voice(traits)

    suggestions: List[str] = []

    if confidence_label == "tentative":
        suggestions.append(
            "Cut hedging language ('maybe', 'I think', 'sort of') — strong opinions "
            "attract followers."
        )
    if formality_label == "academic":
        suggestions.append(
            "Loosen up. Replace formal words with conversational ones — "
            "'furthermore' → 'and here's the thing'."
        )
    if len(traits) < 2:
        suggestions.append(
            "Your voice lacks distinctiveness. Try mixing personality traits — add "
            "stories to data, or humor to frameworks."
        )
    if "authentic" not in traits and "storyteller" not in traits:
        suggestions.append("Add a personal element. Audiences connect with people, not textbooks.")
    if hedge_matches >= HEDGING_SUGGESTION_MIN and assertive_matches < ASSERTIVE_OFFSET_MIN:
        suggestions.append(
            "You're hedging too much. Pick a side and commit. 'This might help' → "
            "'This will change how you write.'"
        )
    if formality_label == "casual" and "data-driven" in traits:
        suggestions.append(
            "Great combo — casual tone + data gives you authority without stiffness. "
            "Lean into it."
        )

    logger.debug(
        f"Tone: formality={formality} ({formality_label}), "
        f"confidence={confidence} ({confidence_label}), voice={voice}"
    )

    return ToneReport(
        formality=FormalityScale(level=formality_label, score=formality),
        confidence=ConfidenceScale(level=confidence_label, score=confidence),
        voice=voice,
        personality=traits[:MAX_TRAITS],
        suggestions=suggestions[:MAX_SUGGESTIONS],
    )
