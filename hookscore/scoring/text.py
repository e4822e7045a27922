"""
Tokenization and segmentation helpers shared by the analyzers.

Everything here is regex/whitespace based. The functions never raise and
return empty lists for empty input.
"""

import math
import re
from typing import List

_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
_SENTENCE_TERMINATORS = re.compile(r"[.!?]+")
_NON_WORD_CHARS = re.compile(r"[^a-zA-Z'-]")
_NON_LETTERS = re.compile(r"[^a-z]")
_VOWEL_GROUP = re.compile(r"[aeiouy]+")


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value into the closed band [lo, hi]."""
    return max(lo, min(hi, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always rounding up."""
    return int(math.floor(value + 0.5))


def split_lines(text: str) -> List[str]:
    """Split text on newlines, keeping blank lines."""
    return text.split("\n")


def non_blank_lines(text: str) -> List[str]:
    """Lines that contain something other than whitespace (unstripped)."""
    return [line for line in split_lines(text) if line.strip()]


def first_non_blank_line(text: str) -> str:
    lines = non_blank_lines(text)
    return lines[0] if lines else ""


def last_non_blank_line(text: str) -> str:
    lines = non_blank_lines(text)
    return lines[-1] if lines else ""


def split_paragraphs(text: str) -> List[str]:
    """Split text into non-blank paragraphs on blank-line boundaries."""
    return [p for p in _PARAGRAPH_BREAK.split(text) if p.strip()]


def count_paragraph_blocks(text: str) -> int:
    """Number of blank-line separated blocks, blank ones included."""
    return len(_PARAGRAPH_BREAK.split(text))


def split_words(text: str) -> List[str]:
    """Whitespace-delimited tokens."""
    return text.split()


def split_sentences(text: str, min_length: int = 0) -> List[str]:
    """
    Split text on runs of sentence terminators.

    Args:
        text: Text to segment.
        min_length: Sentences of this many characters or fewer (after
            stripping) are discarded.

    Returns:
        Stripped sentences in document order.
    """
    sentences = (s.strip() for s in _SENTENCE_TERMINATORS.split(text))
    return [s for s in sentences if len(s) > min_length]


def extract_prose_words(text: str) -> List[str]:
    """
    Whitespace tokens reduced to letters, apostrophes and hyphens.

    Tokens left empty by the reduction (numbers, bare punctuation) are
    dropped.
    """
    words = (_NON_WORD_CHARS.sub("", token) for token in text.split())
    return [w for w in words if w]


def count_syllables(word: str) -> int:
    """
    Estimate syllable count for a word.

    Uses vowel-group runs after dropping a trailing silent "e". Every
    word counts as at least one syllable.
    """
    word = _NON_LETTERS.sub("", word.lower())
    if len(word) <= 2:
        return 1

    if word.endswith("e"):
        word = word[:-1]

    return max(1, len(_VOWEL_GROUP.findall(word)))
