"""
Tests for hook analysis.

Covers technique detection, power words, the question-mark bonus, length
rules per content type and the feedback variants.
"""

import os
import sys
import unittest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from hookscore.scoring.hook import analyze_hook
from hookscore.types.scoring import SCORE_CEILING, SCORE_FLOOR, ContentType


class TestHookTechniques(unittest.TestCase):
    """Tests for curiosity pattern detection."""

    def test_question_hook_tweet(self):
        """A why-question opening should score well above neutral."""
        result = analyze_hook(
            "Why do most people fail at writing? Here's what I learned.", "tweet"
        )
        self.assertIn("Question Hook", result.techniques)
        self.assertNotIn("Open Loop", result.techniques)
        self.assertEqual(result.score, 66)
        self.assertGreater(result.score, 55)

    def test_listicle_with_numeric_lead(self):
        """A number-led listicle gets both techniques."""
        result = analyze_hook("7 mistakes every new writer makes", "article")
        self.assertEqual(result.techniques, ["Listicle Hook", "Numeric Lead"])
        self.assertEqual(result.score, 66)

    def test_question_mark_without_question_word_is_open_loop(self):
        """A question mark without a leading question word is an open loop."""
        result = analyze_hook("This changes everything?", "tweet")
        self.assertIn("Open Loop", result.techniques)

    def test_question_mark_raises_score(self):
        """Adding a question mark strictly increases the score."""
        without = analyze_hook("Why do most people fail at writing", "tweet")
        with_mark = analyze_hook("Why do most people fail at writing?", "tweet")
        self.assertEqual(without.score, 60)
        self.assertEqual(with_mark.score, 66)
        self.assertGreater(with_mark.score, without.score)

    def test_only_first_non_blank_line_is_scored(self):
        """Leading blank lines are skipped and later lines are ignored."""
        result = analyze_hook("\n\n   \nWhy now?\nYou should read this.", "tweet")
        self.assertEqual(result.techniques, ["Question Hook"])

    def test_subtitle_pattern(self):
        """A colon followed by a space marks a subtitle."""
        result = analyze_hook("Writing: a practical guide", "article")
        self.assertIn("Subtitle Pattern", result.techniques)

    def test_emoji_only_counts_for_short_form(self):
        """Emoji hooks are a short-form technique."""
        hook = "Big news today \U0001F680 for everyone"
        self.assertIn("Emoji Hook", analyze_hook(hook, "tweet").techniques)
        self.assertNotIn("Emoji Hook", analyze_hook(hook, "article").techniques)


class TestHookPowerWords(unittest.TestCase):
    """Tests for power word scoring."""

    def test_power_words_add_per_word(self):
        """Each power word in the hook adds to the score."""
        result = analyze_hook("7 habits that reveal a shocking secret?", "article")
        self.assertEqual(
            result.techniques,
            ["Listicle Hook", "Power Words", "Open Loop", "Numeric Lead"],
        )
        self.assertEqual(result.score, 80)

    def test_power_words_ignore_punctuation(self):
        """Punctuation attached to a power word does not hide it."""
        result = analyze_hook("The truth, revealed.", "article")
        self.assertIn("Power Words", result.techniques)


class TestHookLength(unittest.TestCase):
    """Tests for hook length rules."""

    def test_long_short_form_hook_warns_first(self):
        """An over-long short-form hook is penalized and the warning leads."""
        hook = " ".join(["word"] * 26)
        result = analyze_hook(hook, "tweet")
        self.assertEqual(result.score, 45)
        self.assertTrue(result.feedback.startswith("Your hook is long"))

    def test_long_form_allows_longer_hooks(self):
        """A 20-word headline is ideal for an article but not for a post."""
        hook = " ".join(["word"] * 20)
        self.assertEqual(analyze_hook(hook, "article").score, 55)
        self.assertEqual(analyze_hook(hook, "tweet").score, 50)

    def test_long_form_warning(self):
        """Long-form hooks over 30 words get the headline warning."""
        hook = " ".join(["word"] * 31)
        result = analyze_hook(hook, "article")
        self.assertTrue(result.feedback.startswith("Long headlines lose attention."))


class TestHookFeedback(unittest.TestCase):
    """Tests for feedback text and edge cases."""

    def test_no_techniques_feedback(self):
        """A plain opening quotes the hook and names the missing techniques."""
        result = analyze_hook("The weather is nice today.", "tweet")
        self.assertEqual(result.techniques, [])
        self.assertEqual(result.score, 55)
        self.assertIn('"The weather is nice today."', result.feedback)
        self.assertIn("doesn't use any proven hook techniques", result.feedback)

    def test_strong_hook_feedback_names_three_techniques(self):
        """Three or more techniques produce the strong-hook feedback."""
        result = analyze_hook("7 habits that reveal a shocking secret?", "article")
        self.assertTrue(
            result.feedback.startswith(
                "Strong hook using Listicle Hook, Power Words, Open Loop."
            )
        )

    def test_some_techniques_feedback(self):
        """One or two techniques produce the solid-technique feedback."""
        result = analyze_hook("Why writing matters", "tweet")
        self.assertIn("Question Hook", result.feedback)
        self.assertIn("solid technique", result.feedback)

    def test_long_hook_is_truncated_in_feedback(self):
        """Hooks over 60 characters are truncated with an ellipsis."""
        hook = "a" * 80
        result = analyze_hook(hook, "article")
        self.assertIn('"' + "a" * 60 + '..."', result.feedback)

    def test_empty_text(self):
        """Empty content yields a neutral score and no techniques."""
        result = analyze_hook("", "tweet")
        self.assertEqual(result.score, 50)
        self.assertEqual(result.techniques, [])

    def test_unknown_content_type_is_long_form(self):
        """Unknown content types are scored like articles."""
        hook = " ".join(["word"] * 20)
        self.assertEqual(
            analyze_hook(hook, "newsletter"),
            analyze_hook(hook, ContentType.LONG_FORM),
        )

    def test_score_is_always_in_band(self):
        """Scores stay within the core band for extreme inputs."""
        samples = [
            "",
            " ".join(["word"] * 200),
            "Why 7 secret shocking hidden proven ultimate truths you just finally "
            "need: imagine never failing again? \U0001F680",
        ]
        for text in samples:
            for content_type in ("tweet", "article"):
                score = analyze_hook(text, content_type).score
                self.assertGreaterEqual(score, SCORE_FLOOR)
                self.assertLessEqual(score, SCORE_CEILING)


if __name__ == "__main__":
    unittest.main()
