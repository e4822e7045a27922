"""
Tests for readability analysis and the text helpers it relies on.
"""

import os
import sys
import unittest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from hookscore.scoring.readability import analyze_readability, grade_level_label
from hookscore.scoring.text import count_syllables, round_half_up, split_sentences


class TestSyllables(unittest.TestCase):
    """Tests for the syllable heuristic."""

    def test_short_words_are_one_syllable(self):
        self.assertEqual(count_syllables("a"), 1)
        self.assertEqual(count_syllables("the"), 1)

    def test_vowel_groups(self):
        self.assertEqual(count_syllables("reading"), 2)
        self.assertEqual(count_syllables("beautiful"), 3)
        self.assertEqual(count_syllables("extraordinary"), 5)

    def test_silent_e_is_dropped(self):
        self.assertEqual(count_syllables("make"), 1)

    def test_never_zero(self):
        self.assertEqual(count_syllables("rhythm"), 1)
        self.assertEqual(count_syllables("---"), 1)


class TestTextHelpers(unittest.TestCase):

    def test_round_half_up(self):
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(3.5), 4)
        self.assertEqual(round_half_up(2.49), 2)

    def test_split_sentences_drops_short_fragments(self):
        self.assertEqual(split_sentences("Hi. Hello there!", min_length=5), ["Hello there"])
        self.assertEqual(split_sentences("Hi. Hello there!"), ["Hi", "Hello there"])


class TestReadability(unittest.TestCase):
    """Tests for analyze_readability."""

    def test_empty_text(self):
        """Empty input has floored counts and the easiest grade."""
        report = analyze_readability("")
        self.assertEqual(report.sentence_count, 1)
        self.assertEqual(report.word_count, 1)
        self.assertEqual(report.paragraph_count, 1)
        self.assertEqual(report.flesch_reading_ease, 100)
        self.assertEqual(report.grade_level, "5th Grade — Very Easy")
        self.assertEqual(report.reading_time_seconds, 0)

    def test_simple_sentence(self):
        """Short monosyllabic sentences clamp to 100."""
        report = analyze_readability("The cat sat on the mat.")
        self.assertEqual(report.word_count, 6)
        self.assertEqual(report.sentence_count, 1)
        self.assertEqual(report.flesch_reading_ease, 100)
        self.assertIn(
            "Very short and punchy — great for social. Make sure every word earns its place.",
            report.suggestions,
        )

    def test_averages_have_one_decimal(self):
        report = analyze_readability("One two three. Four five.")
        self.assertEqual(report.avg_sentence_length, 2.5)
        self.assertEqual(report.avg_word_length, 3.8)

    def test_dense_text(self):
        """Long polysyllabic sentences are flagged."""
        text = " ".join(["extraordinary"] * 30) + "."
        report = analyze_readability(text)
        self.assertEqual(report.flesch_reading_ease, 0)
        self.assertEqual(report.grade_level, "Graduate — Very Hard")
        self.assertEqual(report.long_sentences, 1)
        self.assertTrue(report.suggestions[0].startswith("Your writing is quite dense."))
        self.assertIn(
            "Average sentence length is 30 words. Aim for 15-20 for online content.",
            report.suggestions,
        )
        self.assertIn(
            "1 sentence over 25 words. Break these up for better flow.",
            report.suggestions,
        )

    def test_long_sentences_plural(self):
        sentence = " ".join(["word"] * 26)
        report = analyze_readability(f"{sentence}. {sentence}.")
        self.assertEqual(report.long_sentences, 2)
        self.assertIn("2 sentences over 25 words. Break these up for better flow.", report.suggestions)

    def test_passive_voice(self):
        """Passive constructions are estimated per sentence."""
        report = analyze_readability("The ball was kicked. The cake was eaten.")
        self.assertEqual(report.passive_voice_estimate, 100)
        self.assertIn(
            "~100% passive voice detected. Use active voice for punchier writing.",
            report.suggestions,
        )

    def test_paragraph_count(self):
        report = analyze_readability("First part here.\n\nSecond part here.\n\n\n")
        self.assertEqual(report.paragraph_count, 2)

    def test_reading_time(self):
        """Reading time assumes 238 words per minute."""
        report = analyze_readability(" ".join(["word"] * 238))
        self.assertEqual(report.reading_time_seconds, 60)

    def test_numbers_are_not_words(self):
        report = analyze_readability("I ran 5 miles in 40 minutes.")
        self.assertEqual(report.word_count, 5)

    def test_grade_levels(self):
        self.assertEqual(grade_level_label(90), "5th Grade — Very Easy")
        self.assertEqual(grade_level_label(65), "8th-9th Grade — Standard")
        self.assertEqual(grade_level_label(30), "College — Hard")
        self.assertEqual(grade_level_label(29), "Graduate — Very Hard")

    def test_wire_format(self):
        """Reports serialize with camelCase keys."""
        data = analyze_readability("The cat sat on the mat.").to_dict()
        self.assertIn("fleschReadingEase", data)
        self.assertIn("passiveVoiceEstimate", data)
        self.assertIn("readingTimeSeconds", data)


if __name__ == "__main__":
    unittest.main()
