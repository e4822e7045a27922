"""
Analysis orchestration: full reports, comparisons, hook rewrites and the CLI.
"""

from .compare import compare_analyses, format_diff, score_band
from .engine import analyze_content, analyze_pair, resolve_content_type, score_content
from .rewrite import rewrite_hook, template_rewrites

__all__ = [
    "analyze_content",
    "analyze_pair",
    "resolve_content_type",
    "score_content",
    "compare_analyses",
    "format_diff",
    "score_band",
    "rewrite_hook",
    "template_rewrites",
]
