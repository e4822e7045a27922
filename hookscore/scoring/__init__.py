"""
Heuristic content scoring.

Pure, deterministic analyzers over a text string. None of them perform
I/O or raise on any string input, including the empty string.
"""

from .emotions import analyze_emotions
from .hook import analyze_hook
from .readability import analyze_readability
from .smart_analysis import run_smart_analysis
from .structure import analyze_structure
from .tone import analyze_tone

__all__ = [
    "analyze_hook",
    "analyze_structure",
    "analyze_emotions",
    "analyze_readability",
    "analyze_tone",
    "run_smart_analysis",
]
