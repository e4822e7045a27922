"""
Type definitions for the hookscore project.
"""

from .providers import (
    AnthropicConfig,
    GeminiConfig,
    GenerationOptions,
    LLMProvider,
    OpenAIConfig,
    ProviderType,
)
from .scoring import (
    SCORE_CEILING,
    SCORE_FLOOR,
    AnalysisComparison,
    AnalysisProvider,
    AnalysisReport,
    ConfidenceScale,
    ContentType,
    DimensionDelta,
    EmotionalAnalysis,
    FormalityScale,
    HookAnalysis,
    HookRewrite,
    HookRewriteResult,
    ReadabilityReport,
    SmartAnalysisResult,
    StructureAnalysis,
    ToneReport,
)

__all__ = [
    # Provider types
    "AnthropicConfig",
    "GeminiConfig",
    "GenerationOptions",
    "LLMProvider",
    "OpenAIConfig",
    "ProviderType",
    # Scoring types
    "SCORE_CEILING",
    "SCORE_FLOOR",
    "AnalysisComparison",
    "AnalysisProvider",
    "AnalysisReport",
    "ConfidenceScale",
    "ContentType",
    "DimensionDelta",
    "EmotionalAnalysis",
    "FormalityScale",
    "HookAnalysis",
    "HookRewrite",
    "HookRewriteResult",
    "ReadabilityReport",
    "SmartAnalysisResult",
    "StructureAnalysis",
    "ToneReport",
]
