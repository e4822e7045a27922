"""
Input preparation for the analyzers: sanitization, content-type detection
and preview extraction.
"""

import re

from ..types.scoring import ContentType

SHORT_FORM_MAX_CHARS = 280
SHORT_FORM_SOFT_MAX_CHARS = 600
SHORT_FORM_MAX_LINES = 5
LONG_FORM_MIN_WORDS = 200
LONG_FORM_MIN_LINES = 10
LONG_FORM_FALLBACK_CHARS = 500
MIN_THREAD_LINES = 3
DEFAULT_PREVIEW_LENGTH = 120

_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")
_LINE_ENDINGS = re.compile(r"\r\n?")
_EXCESS_NEWLINES = re.compile(r"\n{3,}")
# "1.", "2/", "3)", bullets and dashes at the start of a line
_THREAD_LINE = re.compile(r"^(\d+[./)]|•|-)\s")


def sanitize_content(raw: str) -> str:
    """
    Normalize raw user input before analysis.

    Strips control characters (newlines and tabs are kept), converts CRLF
    and lone CR to LF, collapses three or more newlines to two and trims
    surrounding whitespace.
    """
    text = _CONTROL_CHARS.sub("", raw)
    text = _LINE_ENDINGS.sub("\n", text)
    text = _EXCESS_NEWLINES.sub("\n\n", text)
    return text.strip()


def detect_content_type(content: str) -> ContentType:
    """
    Guess whether content is a short-form post or a long-form article.

    Numbered or bulleted threads are not treated as short-form even when
    they fit in a few hundred characters.
    """
    lines = [line for line in content.split("\n") if line.strip()]
    char_count = len(content)
    word_count = len(content.split())

    thread_lines = sum(1 for line in lines if _THREAD_LINE.search(line.strip()))
    is_thread = thread_lines >= MIN_THREAD_LINES

    if char_count <= SHORT_FORM_MAX_CHARS:
        return ContentType.SHORT_FORM
    if (
        char_count <= SHORT_FORM_SOFT_MAX_CHARS
        and not is_thread
        and len(lines) <= SHORT_FORM_MAX_LINES
    ):
        return ContentType.SHORT_FORM

    if word_count > LONG_FORM_MIN_WORDS:
        return ContentType.LONG_FORM
    if len(lines) > LONG_FORM_MIN_LINES:
        return ContentType.LONG_FORM

    if char_count > LONG_FORM_FALLBACK_CHARS:
        return ContentType.LONG_FORM
    return ContentType.SHORT_FORM


def get_preview(content: str, max_len: int = DEFAULT_PREVIEW_LENGTH) -> str:
    """First line of content, truncated with "..." to at most max_len characters."""
    first_line = content.split("\n")[0]
    if len(first_line) <= max_len:
        return first_line
    return first_line[:max_len - 3] + "..."
