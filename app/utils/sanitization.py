"""
Helpers for handling user content outside the analyzers: log previews and
prompt-injection screening for content forwarded to a remote provider.
"""

import logging
import re
from typing import List, Pattern

logger = logging.getLogger(__name__)

# Phrases that try to steer the remote scoring model
PROMPT_INJECTION_PATTERNS: List[str] = [
    r"ignore\s+(all\s+)?(previous|prior|above)\s+(instructions?|prompts?|rules?)",
    r"disregard\s+(all\s+)?(previous|prior|above)\s+(instructions?|prompts?|rules?)",
    r"forget\s+(all\s+)?(previous|prior|above)\s+(instructions?|prompts?|rules?)",
    r"override\s+(system|previous|prior)\s+(prompt|instructions?|rules?)",
    r"new\s+system\s+prompt",
    r"(give|rate|score)\s+(this|me|it)\s+(a\s+)?(perfect|100|full)\s*(score|marks)?",
    r"you\s+are\s+now\s+",
    r"pretend\s+(to\s+be|you\s+are)",
    r"(print|reveal|show)\s+(your|the)\s+(system\s+)?prompt",
]

COMPILED_INJECTION_PATTERNS: List[Pattern] = [
    re.compile(pattern, re.IGNORECASE) for pattern in PROMPT_INJECTION_PATTERNS
]


def contains_injection_attempt(text: str) -> bool:
    """True if text contains a known prompt-injection phrase."""
    if not text:
        return False

    for pattern in COMPILED_INJECTION_PATTERNS:
        if pattern.search(text):
            return True
    return False


def sanitize_for_log(text: str, max_length: int = 30) -> str:
    """
    Shorten text for logging: truncate and collapse whitespace.

    Args:
        text: The text to sanitize.
        max_length: Maximum length before truncation.
    """
    if not text:
        return "[empty]"
    sanitized = text[:max_length] + "..." if len(text) > max_length else text
    sanitized = re.sub(r"\s+", " ", sanitized)
    return sanitized
