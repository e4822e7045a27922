"""
Side-by-side comparison of two smart analyses.
"""

from typing import List, Literal

from ..types.scoring import AnalysisComparison, DimensionDelta, SmartAnalysisResult

STRONG_BAND = 75
FAIR_BAND = 50

ScoreBand = Literal["strong", "fair", "weak"]


def score_band(score: float) -> ScoreBand:
    """Color band used when displaying a score."""
    if score >= STRONG_BAND:
        return "strong"
    if score >= FAIR_BAND:
        return "fair"
    return "weak"


def format_diff(diff: int) -> str:
    """Signed difference as displayed next to a dimension ("+4", "-2", "tie")."""
    if diff > 0:
        return f"+{diff}"
    if diff == 0:
        return "tie"
    return str(diff)


def _delta(label: str, score_a: int, score_b: int) -> DimensionDelta:
    return DimensionDelta(label=label, score_a=score_a, score_b=score_b, diff=score_a - score_b)


def compare_analyses(a: SmartAnalysisResult, b: SmartAnalysisResult) -> AnalysisComparison:
    """
    Compare version A against version B.

    The winner is the side with the strictly higher overall score;
    equal scores are a tie. Each dimension diff is A minus B.
    """
    if a.overall_score > b.overall_score:
        winner = "A"
    elif b.overall_score > a.overall_score:
        winner = "B"
    else:
        winner = "tie"

    dimensions: List[DimensionDelta] = [
        _delta("Hook Strength", a.hook_strength.score, b.hook_strength.score),
        _delta("Structure", a.structure.score, b.structure.score),
        _delta("Emotional Pull", a.emotional_triggers.score, b.emotional_triggers.score),
    ]

    if winner == "tie":
        summary = f"It's a tie at {a.overall_score}/100."
    else:
        high, low = sorted((a.overall_score, b.overall_score), reverse=True)
        summary = f"Version {winner} wins {high} vs {low}."

    return AnalysisComparison(
        winner=winner,
        overall_a=a.overall_score,
        overall_b=b.overall_score,
        dimensions=dimensions,
        summary=summary,
        analysis_a=a,
        analysis_b=b,
    )
