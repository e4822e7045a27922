"""Pydantic models for the HookScore API."""

from .requests import AnalyzeRequest, CompareRequest, ContentRequest, RewriteRequest

__all__ = [
    "AnalyzeRequest",
    "CompareRequest",
    "ContentRequest",
    "RewriteRequest",
]
