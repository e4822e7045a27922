"""
Content analysis endpoints.

Provides API endpoints for:
- Full analysis (hook, structure, emotion, readability, tone)
- A/B comparison of two versions
- Standalone readability and tone reports
- Hook rewrites
"""

import asyncio
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, status

from hookscore.analysis import analyze_content, analyze_pair, compare_analyses, rewrite_hook
from hookscore.config import get_settings
from hookscore.scoring import analyze_readability, analyze_tone
from hookscore.utils.content import get_preview, sanitize_content

from ..exceptions import ContentTooLongError, ValidationError
from ..models import AnalyzeRequest, CompareRequest, ContentRequest, RewriteRequest
from ..utils.sanitization import contains_injection_attempt, sanitize_for_log

logger = logging.getLogger(__name__)

router = APIRouter(tags=["analysis"])


def prepare_content(raw: Optional[str], field: str = "content") -> str:
    """
    Sanitize request content and enforce presence and length limits.

    Raises:
        ValidationError: If content is missing or empty after sanitization.
        ContentTooLongError: If sanitized content exceeds the limit.
    """
    if raw is None or not raw.strip():
        raise ValidationError(
            message=f"Field '{field}' is required",
            field=field,
        )

    content = sanitize_content(raw)
    max_length = get_settings().analysis.max_content_length
    if len(content) > max_length:
        raise ContentTooLongError(len(content), max_length, field=field)
    if not content:
        raise ValidationError(
            message="Content cannot be empty.",
            field=field,
        )
    return content


@router.post(
    "/analyze",
    status_code=status.HTTP_200_OK,
    summary="Analyze a post or article",
    description="""
Score the hook, structure and emotional pull of a piece of content and add
readability and tone reports.

Set **type** to `tweet`, `article` or `auto`. Other values are scored as
articles. When an LLM provider is configured it produces the core scores;
any provider failure falls back to the heuristic engine.
    """,
)
async def analyze(request: AnalyzeRequest) -> Dict[str, Any]:
    content = prepare_content(request.content)
    if not request.type:
        raise ValidationError(
            message="Field 'type' is required",
            field="type",
        )

    allow_remote = True
    if contains_injection_attempt(content):
        logger.warning(
            f"Prompt injection phrase in content, scoring heuristically: "
            f"{sanitize_for_log(content)}"
        )
        allow_remote = False

    logger.info(
        f"Analyzing {len(content)} chars (type={request.type}): "
        f"{sanitize_for_log(get_preview(content), max_length=60)}"
    )
    report = await asyncio.to_thread(analyze_content, content, request.type, allow_remote)
    return report.to_dict()


@router.post(
    "/compare",
    status_code=status.HTTP_200_OK,
    summary="Compare two versions of a piece of content",
)
async def compare(request: CompareRequest) -> Dict[str, Any]:
    content_a = prepare_content(request.content_a, field="contentA")
    content_b = prepare_content(request.content_b, field="contentB")

    logger.info(f"Comparing {len(content_a)} vs {len(content_b)} chars")
    result_a, result_b = await asyncio.to_thread(
        analyze_pair, content_a, content_b, request.type
    )
    return compare_analyses(result_a, result_b).to_dict()


@router.post(
    "/readability",
    status_code=status.HTTP_200_OK,
    summary="Readability statistics for a piece of content",
)
async def readability(request: ContentRequest) -> Dict[str, Any]:
    content = prepare_content(request.content)
    return analyze_readability(content).to_dict()


@router.post(
    "/tone",
    status_code=status.HTTP_200_OK,
    summary="Tone and voice analysis for a piece of content",
)
async def tone(request: ContentRequest) -> Dict[str, Any]:
    content = prepare_content(request.content)
    return analyze_tone(content).to_dict()


@router.post(
    "/rewrite",
    status_code=status.HTTP_200_OK,
    summary="Suggest stronger hooks",
    description="""
Rewrite the opening of a piece of content in three different hook styles.

Pass the earlier **analysis** to steer the rewrite with its hook score and
feedback. Without a configured LLM provider, or when it fails, template
rewrites built from the first sentence are returned with `mock: true`.
    """,
)
async def rewrite(request: RewriteRequest) -> Dict[str, Any]:
    content = prepare_content(request.content)

    allow_remote = True
    if contains_injection_attempt(content):
        logger.warning(
            f"Prompt injection phrase in content, using template rewrites: "
            f"{sanitize_for_log(content)}"
        )
        allow_remote = False

    logger.info(f"Rewriting hook of {len(content)} chars (type={request.type})")
    result = await asyncio.to_thread(
        rewrite_hook, content, request.type, request.analysis, allow_remote
    )
    return result.to_dict()
