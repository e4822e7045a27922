"""
Pydantic request models for API endpoints.

Content fields are optional at the schema level so that missing or blank
content is reported as a 400 by the routes, after sanitization.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from hookscore.types.scoring import SmartAnalysisResult


class AnalyzeRequest(BaseModel):
    """Request model for full content analysis."""

    content: Optional[str] = Field(None, description="Post or article text")
    type: Optional[str] = Field(
        None,
        description='Content type: "tweet", "article" or "auto"',
        examples=["tweet", "article", "auto"],
    )


class CompareRequest(BaseModel):
    """Request model for comparing two versions of a piece of content."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    content_a: Optional[str] = Field(None, description="Version A")
    content_b: Optional[str] = Field(None, description="Version B")
    type: Optional[str] = Field(
        "auto",
        description='Content type applied to both versions: "tweet", "article" or "auto"',
    )


class ContentRequest(BaseModel):
    """Request model for the standalone readability and tone endpoints."""

    content: Optional[str] = Field(None, description="Text to analyze")


class RewriteRequest(BaseModel):
    """Request model for hook rewrites."""

    content: Optional[str] = Field(None, description="Post or article text")
    type: Optional[str] = Field(
        "auto",
        description='Content type: "tweet", "article" or "auto"',
    )
    analysis: Optional[SmartAnalysisResult] = Field(
        None,
        description="Earlier /analyze result; its hook score and feedback steer the rewrite",
    )
