"""
Unit tests for transcript quality analysis.

Covers sentence counting, AFINN sentiment, profanity detection and the
complete-sentence heuristic.
"""

import unittest

from seriosity.services.profanity import detect_profanity
from seriosity.services.text_quality import (
    analyze_sentiment,
    analyze_text_quality,
    count_sentences,
    has_complete_sentences,
)
from tests.helpers import NEGATIVE_ANSWER, QUALIFYING_ANSWER


class TestSentenceCount(unittest.TestCase):
    def test_splits_on_terminators_and_drops_empty_fragments(self):
        self.assertEqual(count_sentences("One. Two! Three?"), 3)
        self.assertEqual(count_sentences("Wait... what?!"), 2)
        self.assertEqual(count_sentences(""), 0)
        self.assertEqual(count_sentences("..."), 0)

    def test_text_without_terminator_is_one_sentence(self):
        self.assertEqual(count_sentences("no punctuation here"), 1)


class TestSentiment(unittest.TestCase):
    def test_positive(self):
        result = analyze_sentiment("I love this")
        self.assertGreater(result.score, 0)
        self.assertTrue(result.is_positive)
        self.assertFalse(result.is_neutral or result.is_negative)
        self.assertAlmostEqual(result.comparative, result.score / 3)
        self.assertIn("love", result.words)

    def test_negative(self):
        result = analyze_sentiment(NEGATIVE_ANSWER)
        self.assertLess(result.score, 0)
        self.assertTrue(result.is_negative)

    def test_negator_flips_following_word(self):
        result = analyze_sentiment("I am not happy with my current apartment.")
        self.assertEqual(result.score, -3)
        self.assertTrue(result.is_negative)

    def test_contracted_negator(self):
        for text in ("I don't like noisy places.", "I don’t like noisy places."):
            with self.subTest(text=text):
                result = analyze_sentiment(text)
                self.assertEqual(result.score, -3)
                self.assertTrue(result.is_negative)
                self.assertEqual(result.words, ("like", "noisy"))

    def test_negator_only_reaches_next_word(self):
        self.assertEqual(analyze_sentiment("not so happy").score, 3)

    def test_phrases_are_scored_word_by_word(self):
        result = analyze_sentiment("damn good")
        self.assertEqual(result.words, ("damn", "good"))
        self.assertEqual(result.score, 1)

    def test_neutral_and_empty(self):
        for text in ("The table is brown", ""):
            with self.subTest(text=text):
                result = analyze_sentiment(text)
                self.assertEqual(result.score, 0)
                self.assertEqual(result.comparative, 0.0)
                self.assertTrue(result.is_neutral)
                self.assertFalse(result.is_positive or result.is_negative)

    def test_exactly_one_polarity(self):
        for text in (QUALIFYING_ANSWER, NEGATIVE_ANSWER, "Yes.", "", "shit"):
            with self.subTest(text=text):
                r = analyze_sentiment(text)
                self.assertEqual([r.is_positive, r.is_neutral, r.is_negative].count(True), 1)


class TestProfanity(unittest.TestCase):
    def test_whole_word_case_insensitive(self):
        flag, found, _ = detect_profanity("Well, DAMN! That was close.")
        self.assertTrue(flag)
        self.assertEqual(found, ["damn"])

    def test_substrings_do_not_match(self):
        flag, found, excerpt = detect_profanity("We scrapped the class assessment in Scunthorpe.")
        self.assertFalse(flag)
        self.assertEqual(found, [])
        self.assertEqual(excerpt, "")

    def test_excerpt_surrounds_first_hit(self):
        text = "x" * 100 + " crap " + "y" * 100
        _, found, excerpt = detect_profanity(text, context=5)
        self.assertEqual(found, ["crap"])
        self.assertEqual(excerpt, "xxxx crap yyyy")

    def test_excerpt_surrounds_earliest_hit_in_transcript(self):
        text = "What a load of crap" + "." * 60 + "Oh shit, the time."
        _, found, excerpt = detect_profanity(text, context=5)
        self.assertEqual(found, ["shit", "crap"])
        self.assertEqual(excerpt, "d of crap.....")

    def test_custom_terms(self):
        flag, found, _ = detect_profanity("That is rubbish", terms=["rubbish"])
        self.assertTrue(flag)
        self.assertEqual(found, ["rubbish"])


class TestCompleteSentences(unittest.TestCase):
    def test_complete(self):
        self.assertTrue(has_complete_sentences("Yes, I am looking for a flat."))

    def test_too_short(self):
        self.assertFalse(has_complete_sentences("Short one. Yes."))

    def test_needs_terminator(self):
        self.assertFalse(has_complete_sentences("this has no punctuation at all in it"))

    def test_needs_five_words(self):
        self.assertFalse(has_complete_sentences("Absolutely, unquestionably yes!"))

    def test_bare_one_word_answers(self):
        for text in ("ok", " OK ", "Okay", "fine", ""):
            with self.subTest(text=text):
                self.assertFalse(has_complete_sentences(text))


class TestTextQualityProfile(unittest.TestCase):
    def test_profile_fields(self):
        profile = analyze_text_quality("I need a room. I work at the office!")
        self.assertEqual(profile.word_count, 9)
        self.assertEqual(profile.sentence_count, 2)
        self.assertAlmostEqual(profile.avg_words_per_sentence, 4.5)
        self.assertTrue(profile.has_complete_sentences)
        self.assertFalse(profile.contains_offensive_language)
        self.assertEqual(profile.offensive_terms, ())

    def test_empty_profile(self):
        profile = analyze_text_quality("")
        self.assertEqual(profile.word_count, 0)
        self.assertEqual(profile.sentence_count, 0)
        self.assertEqual(profile.avg_words_per_sentence, 0.0)
        self.assertFalse(profile.has_complete_sentences)

    def test_offensive_terms_reported(self):
        profile = analyze_text_quality("What the shit is this crap?")
        self.assertTrue(profile.contains_offensive_language)
        self.assertEqual(profile.offensive_terms, ("shit", "crap"))


if __name__ == "__main__":
    unittest.main()
