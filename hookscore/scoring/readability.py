"""
Readability analysis using Flesch Reading Ease and sentence statistics.

Pure statistics over the text; no lexicon beyond the syllable heuristic.
"""

import logging
import re
from typing import List, Pattern, Tuple

from ..types.scoring import ReadabilityReport
from .text import (
    clamp,
    count_syllables,
    extract_prose_words,
    round_half_up,
    split_paragraphs,
    split_sentences,
)

logger = logging.getLogger(__name__)


LONG_SENTENCE_WORDS = 25
WORDS_PER_MINUTE = 238

PASSIVE_PATTERNS: List[Pattern[str]] = [
    re.compile(r"\b(was|were|is|are|been|being|be)\s+\w+ed\b", re.IGNORECASE),
    re.compile(r"\b(was|were|is|are|been|being|be)\s+\w+en\b", re.IGNORECASE),
    re.compile(r"\b(got|get|gets|getting)\s+\w+ed\b", re.IGNORECASE),
]

# (minimum Flesch score, label), checked top-down
GRADE_LEVELS: List[Tuple[int, str]] = [
    (90, "5th Grade — Very Easy"),
    (80, "6th Grade — Easy"),
    (70, "7th Grade — Fairly Easy"),
    (60, "8th-9th Grade — Standard"),
    (50, "10th-12th Grade — Fairly Hard"),
    (30, "College — Hard"),
]
HARDEST_GRADE_LEVEL = "Graduate — Very Hard"


def flesch_reading_ease(avg_sentence_length: float, avg_syllables_per_word: float) -> int:
    """Flesch Reading Ease, rounded and clamped to [0, 100]."""
    raw = 206.835 - 1.015 * avg_sentence_length - 84.6 * avg_syllables_per_word
    return int(clamp(round_half_up(raw), 0, 100))


def grade_level_label(flesch_score: float) -> str:
    for minimum, label in GRADE_LEVELS:
        if flesch_score >= minimum:
            return label
    return HARDEST_GRADE_LEVEL


def _one_decimal(value: float) -> float:
    return round_half_up(value * 10) / 10


def analyze_readability(text: str) -> ReadabilityReport:
    """
    Compute readability statistics and suggestions.

    Sentence, word and paragraph counts are floored at 1 so that every
    ratio is defined, even for empty input.

    Args:
        text: Content to analyze.

    Returns:
        ReadabilityReport.
    """
    sentences = split_sentences(text)
    words = extract_prose_words(text)
    paragraphs = split_paragraphs(text)

    sentence_count = max(1, len(sentences))
    word_count = max(1, len(words))
    paragraph_count = max(1, len(paragraphs))

    total_syllables = sum(count_syllables(w) for w in words)
    avg_sentence_length = word_count / sentence_count
    avg_syllables_per_word = total_syllables / word_count
    avg_word_length = sum(len(w) for w in words) / word_count

    flesch = flesch_reading_ease(avg_sentence_length, avg_syllables_per_word)
    long_sentences = sum(
        1 for s in sentences if len(extract_prose_words(s)) > LONG_SENTENCE_WORDS
    )

    passive_count = sum(len(pattern.findall(text)) for pattern in PASSIVE_PATTERNS)
    passive_voice_estimate = round_half_up(passive_count / sentence_count * 100)

    reading_time_seconds = round_half_up(word_count / WORDS_PER_MINUTE * 60)

    suggestions: List[str] = []

    if flesch < 50:
        suggestions.append(
            "Your writing is quite dense. Try shorter sentences and simpler words "
            "for better engagement."
        )
    if avg_sentence_length > 20:
        suggestions.append(
            f"Average sentence length is {round_half_up(avg_sentence_length)} words. "
            "Aim for 15-20 for online content."
        )
    if long_sentences > 0:
        plural = "s" if long_sentences > 1 else ""
        suggestions.append(
            f"{long_sentences} sentence{plural} over {LONG_SENTENCE_WORDS} words. "
            "Break these up for better flow."
        )
    if passive_voice_estimate > 20:
        suggestions.append(
            f"~{passive_voice_estimate}% passive voice detected. "
            "Use active voice for punchier writing."
        )
    if word_count / paragraph_count > 100:
        suggestions.append(
            "Paragraphs are long. Online readers prefer 2-3 sentence paragraphs max."
        )
    if word_count < 50 and avg_sentence_length < 8:
        suggestions.append(
            "Very short and punchy — great for social. Make sure every word earns its place."
        )

    logger.debug(f"Readability: flesch={flesch}, words={word_count}, sentences={sentence_count}")

    return ReadabilityReport(
        flesch_reading_ease=flesch,
        grade_level=grade_level_label(flesch),
        avg_sentence_length=_one_decimal(avg_sentence_length),
        avg_word_length=_one_decimal(avg_word_length),
        sentence_count=sentence_count,
        word_count=word_count,
        paragraph_count=paragraph_count,
        long_sentences=long_sentences,
        passive_voice_estimate=passive_voice_estimate,
        reading_time_seconds=reading_time_seconds,
        suggestions=suggestions,
    )
