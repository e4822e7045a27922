"""
Tests for hook rewrites.

Covers the template rewrites, remote reply parsing and the fallback from
a remote provider to the templates. No network calls are made.
"""

import json
import os
import sys
import unittest
from unittest.mock import patch

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from hookscore.analysis import rewrite_hook, template_rewrites
from hookscore.scoring import run_smart_analysis
from hookscore.text_generation import (
    REWRITE_PROMPT,
    TextGenerationError,
    build_rewrite_message,
    parse_rewrite_response,
    rewrite_with_provider,
)
from hookscore.types.providers import LLMProvider, OpenAIConfig
from hookscore.types.scoring import ContentType, HookRewrite

TWEET = "Why do most people fail at writing? Here's what I learned."


def make_rewrites(count=3):
    return [
        {"style": f"Style {i}", "hook": f"Hook number {i}.", "why": f"Reason {i}."}
        for i in range(count)
    ]


class TestTemplateRewrites(unittest.TestCase):
    """Tests for the built-in template rewrites."""

    def test_first_clause_fills_templates(self):
        rewrites = template_rewrites("Cold email is dead. Here is why.")
        self.assertEqual(
            [r.style for r in rewrites],
            ["Curiosity Gap", "Bold Contrarian", "Story Hook"],
        )
        self.assertEqual(
            rewrites[0].hook,
            "Most people get this wrong about cold email is dead... and it's costing them everything.",
        )
        self.assertEqual(
            rewrites[1].hook,
            "Unpopular opinion: everything you've been told about cold email is dead is backwards.",
        )
        self.assertEqual(
            rewrites[2].hook,
            "Last week I almost gave up. Then I discovered something about cold email is dead "
            "that changed everything.",
        )
        self.assertEqual(rewrites[0].why, "Opens a knowledge gap the reader can't resist closing.")

    def test_topic_is_truncated_per_style(self):
        rewrites = template_rewrites(TWEET)
        self.assertIn("about why do most people fail at wri...", rewrites[0].hook)
        self.assertIn("about why do most people fail a is backwards", rewrites[1].hook)

    def test_first_line_ends_the_clause(self):
        rewrites = template_rewrites("Hiring is broken\nHere is the fix")
        self.assertIn("about hiring is broken is backwards", rewrites[1].hook)

    def test_blank_first_clause_uses_text_start(self):
        rewrites = template_rewrites(". Then more")
        self.assertIn("about . then more...", rewrites[0].hook)

    def test_deterministic(self):
        self.assertEqual(template_rewrites(TWEET), template_rewrites(TWEET))


class TestRewriteMessage(unittest.TestCase):

    def test_with_analysis(self):
        analysis = run_smart_analysis(TWEET, "tweet")
        message = build_rewrite_message(TWEET, "tweet", analysis)
        self.assertEqual(
            message,
            "Content type: X/Twitter post\n"
            f"Hook score: {analysis.hook_strength.score}/100\n"
            f"Hook feedback: {analysis.hook_strength.feedback}\n"
            "\n"
            "Original content:\n"
            f"{TWEET}",
        )

    def test_without_analysis(self):
        message = build_rewrite_message("Hello", "article")
        self.assertTrue(message.startswith("Content type: Substack article\n"))
        self.assertIn("Hook score: unknown/100\nHook feedback: none\n", message)


class TestParseRewriteResponse(unittest.TestCase):
    """Tests for parse_rewrite_response."""

    def test_plain_json(self):
        rewrites = parse_rewrite_response(json.dumps({"rewrites": make_rewrites()}))
        self.assertEqual(len(rewrites), 3)
        self.assertEqual(rewrites[0], HookRewrite(style="Style 0", hook="Hook number 0.", why="Reason 0."))

    def test_code_fences_and_cap(self):
        raw = "```json\n" + json.dumps({"rewrites": make_rewrites(5)}) + "\n```"
        self.assertEqual(len(parse_rewrite_response(raw)), 3)

    def test_missing_why_is_allowed(self):
        raw = json.dumps({"rewrites": [{"style": "Bold Claim", "hook": "Nobody reads your intro."}]})
        self.assertEqual(parse_rewrite_response(raw)[0].why, "")

    def test_malformed_replies(self):
        replies = [
            "not json",
            "[1, 2]",
            json.dumps({"ideas": make_rewrites()}),
            json.dumps({"rewrites": []}),
            json.dumps({"rewrites": "three"}),
            json.dumps({"rewrites": [{"style": "Bold Claim"}]}),
            json.dumps({"rewrites": [{"style": "", "hook": "Empty style."}]}),
        ]
        for raw in replies:
            with self.assertRaises(TextGenerationError):
                parse_rewrite_response(raw)


class TestRewriteWithProvider(unittest.TestCase):

    def setUp(self):
        self.provider = LLMProvider(type="openai", config=OpenAIConfig(api_key="sk-test"))

    def test_uses_rewrite_prompt_and_options(self):
        with patch(
            "hookscore.text_generation.rewrite.generate_analysis_text",
            return_value=json.dumps({"rewrites": make_rewrites()}),
        ) as mock_generate:
            rewrites = rewrite_with_provider(TWEET, "tweet", self.provider)

        self.assertEqual(len(rewrites), 3)
        args = mock_generate.call_args.args
        self.assertTrue(args[0].startswith("Content type: X/Twitter post\nHook score: unknown"))
        self.assertEqual(args[2].temperature, 0.8)
        self.assertEqual(args[2].max_tokens, 512)
        self.assertEqual(mock_generate.call_args.kwargs["system_prompt"], REWRITE_PROMPT)


class TestRewriteHook(unittest.TestCase):
    """Tests for rewrite_hook and its fallback."""

    def setUp(self):
        self.provider = LLMProvider(type="openai", config=OpenAIConfig(api_key="sk-test"))

    def test_templates_without_provider(self):
        with patch(
            "hookscore.analysis.rewrite.create_provider_from_settings", return_value=None
        ):
            result = rewrite_hook(TWEET, "tweet")
        self.assertEqual(result.provider, "heuristic")
        self.assertTrue(result.mock)
        self.assertEqual(result.rewrites, template_rewrites(TWEET))

    def test_remote_success(self):
        analysis = run_smart_analysis(TWEET, "tweet")
        remote = [HookRewrite(style="Bold Claim", hook="Writing is a skill.", why="Direct.")]
        with patch(
            "hookscore.analysis.rewrite.rewrite_with_provider", return_value=remote
        ) as mock_remote:
            result = rewrite_hook(TWEET, "tweet", analysis, provider=self.provider)

        mock_remote.assert_called_once_with(TWEET, ContentType.SHORT_FORM, self.provider, analysis)
        self.assertEqual(result.provider, "openai")
        self.assertFalse(result.mock)
        self.assertEqual(result.rewrites, remote)

    def test_remote_failure_falls_back(self):
        with patch(
            "hookscore.analysis.rewrite.rewrite_with_provider",
            side_effect=TextGenerationError("timeout"),
        ):
            result = rewrite_hook(TWEET, "tweet", provider=self.provider)
        self.assertTrue(result.mock)
        self.assertEqual(result.rewrites, template_rewrites(TWEET))

    def test_malformed_remote_reply_falls_back(self):
        with patch(
            "hookscore.text_generation.rewrite.generate_analysis_text",
            return_value='{"rewrites": []}',
        ):
            result = rewrite_hook(TWEET, "auto", provider=self.provider)
        self.assertEqual(result.provider, "heuristic")
        self.assertEqual(len(result.rewrites), 3)

    def test_remote_not_allowed(self):
        with patch("hookscore.analysis.rewrite.rewrite_with_provider") as mock_remote:
            result = rewrite_hook(TWEET, "tweet", allow_remote=False, provider=self.provider)
        mock_remote.assert_not_called()
        self.assertTrue(result.mock)

    def test_wire_format(self):
        data = rewrite_hook(TWEET, "tweet", allow_remote=False).to_dict()
        self.assertEqual(set(data), {"rewrites", "provider", "mock"})
        self.assertEqual(set(data["rewrites"][0]), {"style", "hook", "why"})


if __name__ == "__main__":
    unittest.main()
