"""
Hook rewrites with a built-in fallback.

A configured remote provider writes three alternative openings. Without
one, or when it fails, three fixed templates are filled in from the
content's first clause.
"""

import logging
import re
from typing import List, Optional, Union

from ..text_generation import (
    TextGenerationError,
    create_provider_from_settings,
    rewrite_with_provider,
)
from ..types.providers import LLMProvider
from ..types.scoring import ContentType, HookRewrite, HookRewriteResult, SmartAnalysisResult
from .engine import AUTO_DETECT, resolve_content_type

logger = logging.getLogger(__name__)

_FIRST_CLAUSE_END = re.compile(r"[.\n]")

# Used when the first clause is blank
FALLBACK_TOPIC_CHARS = 50

# (style, template, subject length, why)
TEMPLATE_REWRITES = (
    (
        "Curiosity Gap",
        "Most people get this wrong about {topic}... and it's costing them everything.",
        30,
        "Opens a knowledge gap the reader can't resist closing.",
    ),
    (
        "Bold Contrarian",
        "Unpopular opinion: everything you've been told about {topic} is backwards.",
        25,
        "Contrarian takes trigger disagreement, which drives engagement.",
    ),
    (
        "Story Hook",
        "Last week I almost gave up. Then I discovered something about {topic} "
        "that changed everything.",
        25,
        "Personal vulnerability + transformation arc creates emotional investment.",
    ),
)


def template_rewrites(text: str) -> List[HookRewrite]:
    """
    Fill the fixed hook templates from the text's first clause.

    The first clause runs up to the first period or newline. When it is
    blank the first 50 characters of the text are used instead.
    """
    topic = _FIRST_CLAUSE_END.split(text, maxsplit=1)[0].strip()
    if not topic:
        topic = text[:FALLBACK_TOPIC_CHARS]
    topic = topic.lower()

    return [
        HookRewrite(style=style, hook=template.format(topic=topic[:length]), why=why)
        for style, template, length, why in TEMPLATE_REWRITES
    ]


def rewrite_hook(
    text: str,
    content_type: Union[ContentType, str, None] = AUTO_DETECT,
    analysis: Optional[SmartAnalysisResult] = None,
    allow_remote: bool = True,
    provider: Optional[LLMProvider] = None,
) -> HookRewriteResult:
    """
    Suggest three stronger openings for a piece of content.

    Args:
        text: Sanitized content.
        content_type: "tweet", "article", "auto" or a ContentType.
        analysis: Earlier analysis; its hook score and feedback steer
            the remote rewrite.
        allow_remote: When False the templates are always used.
        provider: Explicit remote provider; defaults to the configured one.

    Returns:
        HookRewriteResult. Remote failures are logged and answered with
        the templates, never raised.
    """
    if allow_remote:
        provider = provider or create_provider_from_settings()
        if provider is not None:
            resolved = resolve_content_type(text, content_type)
            try:
                rewrites = rewrite_with_provider(text, resolved, provider, analysis)
                return HookRewriteResult(rewrites=rewrites, provider=provider.type, mock=False)
            except TextGenerationError as e:
                logger.warning(
                    f"Remote rewrite via {provider.type} failed, using templates: {e}"
                )

    return HookRewriteResult(rewrites=template_rewrites(text), provider="heuristic", mock=True)
