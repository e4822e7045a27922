"""
Pytest configuration and shared fixtures for HookScore tests.

This module provides common fixtures used across all test files:
- Test client setup
- A heuristic-only environment (no provider keys, remote scoring off)
- Sample content
"""

import os
import sys

import pytest

# Environment setup before any imports
os.environ["ENVIRONMENT"] = "development"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["REMOTE_ANALYSIS_ENABLED"] = "false"
# Tests never reach a real provider; remote paths are mocked explicitly
for key in ("ANTHROPIC_API_KEY", "OPENAI_API_KEY", "GEMINI_API_KEY", "SENTRY_DSN"):
    os.environ.pop(key, None)

# Ensure project root is in path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))


@pytest.fixture
def client():
    """FastAPI test client fixture."""
    from fastapi.testclient import TestClient
    from server import app

    return TestClient(app)


@pytest.fixture
def sample_tweet():
    """A short post with a question hook."""
    return "Why do most people fail at writing? Here's what I learned."


@pytest.fixture
def sample_article():
    """A long-form article with subheadings and a closing question."""
    paragraph = (
        "Most writers start with a blank page and a vague idea. "
        "They write for hours and publish something nobody reads."
    )
    return "\n\n".join([
        "Why 90% of newsletters never grow past 100 subscribers",
        "## The problem",
        paragraph,
        "## The fix",
        paragraph,
        "What do you think? Let me know in the comments.",
    ])


# Test environment cleanup
@pytest.fixture(autouse=True)
def reset_environment():
    """Reset environment variables after each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
