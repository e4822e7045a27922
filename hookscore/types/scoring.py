"""
Type definitions for the content scoring engine.

This module defines the value objects produced by the heuristic analyzers:
hook, structure, emotional triggers, readability and tone, plus the
aggregated smart analysis result and the comparison of two analyses.

All models are immutable. Python attributes are snake_case, while the JSON
wire form uses camelCase aliases (``overallScore``, ``hookStrength``, ...).
"""

from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# Score band shared by the hook, structure, emotion and aggregate scores
SCORE_FLOOR = 15
SCORE_CEILING = 98


class ContentType(str, Enum):
    """
    Declared content length category.

    Wire values follow the platforms the scorer was tuned on: short-form
    posts are "tweet", long-form pieces are "article".
    """

    SHORT_FORM = "tweet"
    LONG_FORM = "article"

    @classmethod
    def parse(cls, value: Union["ContentType", str, None]) -> "ContentType":
        """
        Resolve a caller-supplied content type.

        Accepts enum members, wire values and the aliases "short-form",
        "short", "long-form" and "long". Anything else is long-form.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return cls.LONG_FORM

        normalized = value.strip().lower()
        if normalized in _SHORT_FORM_ALIASES:
            return cls.SHORT_FORM
        return cls.LONG_FORM


_SHORT_FORM_ALIASES = frozenset({"tweet", "short-form", "short_form", "short"})


class ScoreModel(BaseModel):
    """Base for all engine value objects: frozen, camelCase on the wire."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the camelCase wire names."""
        return self.model_dump(by_alias=True, mode="json")


class HookAnalysis(ScoreModel):
    """Opening-line analysis."""

    score: int = Field(..., ge=SCORE_FLOOR, le=SCORE_CEILING, description="Hook strength")
    feedback: str = Field(..., description="Qualitative feedback on the opening")
    techniques: List[str] = Field(
        default_factory=list,
        description="Hook techniques detected, in detection order"
    )


class StructureAnalysis(ScoreModel):
    """Formatting and flow analysis."""

    score: int = Field(..., ge=SCORE_FLOOR, le=SCORE_CEILING, description="Structure score")
    feedback: str = Field(..., description="Qualitative feedback on structure")


class EmotionalAnalysis(ScoreModel):
    """Psychological trigger analysis."""

    score: int = Field(..., ge=SCORE_FLOOR, le=SCORE_CEILING, description="Emotional pull")
    feedback: str = Field(..., description="Qualitative feedback on emotional range")
    triggers: List[str] = Field(
        default_factory=list,
        max_length=6,
        description="Triggers detected, in pattern-table order"
    )


class SmartAnalysisResult(ScoreModel):
    """Aggregated hook, structure and emotion analysis."""

    overall_score: int = Field(
        ...,
        ge=SCORE_FLOOR,
        le=SCORE_CEILING,
        description="Weighted overall score"
    )
    hook_strength: HookAnalysis = Field(..., description="Hook analysis")
    structure: StructureAnalysis = Field(..., description="Structure analysis")
    emotional_triggers: EmotionalAnalysis = Field(..., description="Emotional trigger analysis")
    improvements: List[str] = Field(
        default_factory=list,
        max_length=5,
        description="Ordered, actionable improvements"
    )
    summary: str = Field(default="", description="Narrative summary")


class ReadabilityReport(ScoreModel):
    """Prose readability statistics."""

    flesch_reading_ease: int = Field(..., ge=0, le=100, description="Flesch Reading Ease")
    grade_level: str = Field(..., description="Grade level label")
    avg_sentence_length: float = Field(..., description="Average words per sentence")
    avg_word_length: float = Field(..., description="Average characters per word")
    sentence_count: int = Field(..., ge=1)
    word_count: int = Field(..., ge=1)
    paragraph_count: int = Field(..., ge=1)
    long_sentences: int = Field(..., ge=0, description="Sentences over 25 words")
    passive_voice_estimate: int = Field(
        ...,
        ge=0,
        description="Passive constructions as a percentage of sentences"
    )
    reading_time_seconds: int = Field(..., ge=0)
    suggestions: List[str] = Field(default_factory=list)


FormalityLevel = Literal["casual", "conversational", "professional", "academic"]
ConfidenceLevel = Literal["tentative", "balanced", "assertive", "authoritative"]


class FormalityScale(ScoreModel):
    level: FormalityLevel
    score: int = Field(..., ge=0, le=100)


class ConfidenceScale(ScoreModel):
    level: ConfidenceLevel
    score: int = Field(..., ge=0, le=100)


class ToneReport(ScoreModel):
    """Tone and voice analysis."""

    formality: FormalityScale
    confidence: ConfidenceScale
    voice: str = Field(..., description="Voice archetype")
    personality: List[str] = Field(default_factory=list, max_length=5)
    suggestions: List[str] = Field(default_factory=list, max_length=3)


AnalysisProvider = Literal["anthropic", "openai", "gemini", "heuristic"]


class AnalysisReport(SmartAnalysisResult):
    """Smart analysis merged with the sibling readability and tone reports."""

    readability: ReadabilityReport
    tone: ToneReport
    provider: AnalysisProvider = Field(
        default="heuristic",
        description="Engine that produced the core scores"
    )
    mock: bool = Field(
        default=True,
        description="True when the heuristic engine produced the core scores"
    )
    detected_type: ContentType = Field(..., description="Content type used for scoring")


class DimensionDelta(ScoreModel):
    """Per-dimension score difference between two analyses."""

    label: str
    score_a: int
    score_b: int
    diff: int = Field(..., description="score_a - score_b")


class AnalysisComparison(ScoreModel):
    """Side-by-side comparison of two analyses."""

    winner: Literal["A", "B", "tie"]
    overall_a: int
    overall_b: int
    dimensions: List[DimensionDelta] = Field(default_factory=list)
    summary: str = ""
    analysis_a: Optional[SmartAnalysisResult] = None
    analysis_b: Optional[SmartAnalysisResult] = None


MAX_HOOK_REWRITES = 3


class HookRewrite(ScoreModel):
    """One alternative opening written in a named hook style."""

    style: str = Field(..., min_length=1, description="Hook style, e.g. Curiosity Gap")
    hook: str = Field(..., min_length=1, description="The rewritten opening")
    why: str = Field(default="", description="Why this opening works better")


class HookRewriteResult(ScoreModel):
    """Alternative openings for a piece of content."""

    rewrites: List[HookRewrite] = Field(
        ...,
        min_length=1,
        max_length=MAX_HOOK_REWRITES,
        description="Rewrites, each in a different style"
    )
    provider: AnalysisProvider = Field(
        default="heuristic",
        description="Engine that wrote the rewrites"
    )
    mock: bool = Field(
        default=True,
        description="True when the rewrites are the built-in templates"
    )
