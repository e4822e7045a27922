"""
HookScore: heuristic scoring of social posts and articles.

Scores the opening hook, structure, emotional triggers, readability and
tone of a piece of content, with optional LLM-backed scoring.
"""

__version__ = "1.0.0"
