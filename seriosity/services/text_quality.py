"""Transcript quality signals: counts, sentiment, profanity and completeness."""
from __future__ import annotations

import re
from types import MappingProxyType

from afinn import Afinn
from afinn.afinn import LANGUAGE_TO_FILENAME

from seriosity.core.models import SentimentResult, TextQualityProfile
from seriosity.services.duration import count_words
from seriosity.services.lexicons import NEGATORS, ONE_WORD_ANSWERS
from seriosity.services.profanity import detect_profanity


MIN_COMPLETE_CHARS = 20
MIN_COMPLETE_WORDS = 5

_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_TOKEN = re.compile(r"[a-z0-9']+")

_afinn = Afinn(language="en")
# Single-word entries only; phrases such as "damn good" never match one token.
_VALENCE = MappingProxyType(
    {
        word: int(valence)
        for word, valence in Afinn.read_word_file(
            _afinn.full_filename(LANGUAGE_TO_FILENAME["en"])
        ).items()
        if " " not in word
    }
)


def count_sentences(text: str) -> int:
    return len([s for s in _SENTENCE_SPLIT.split(text) if s.strip()])


def analyze_sentiment(text: str) -> SentimentResult:
    """AFINN polarity of the text.

    Each token is looked up on its own (AFINN's multi-word entries are not
    used) and its valence flips sign when the previous token is a negator,
    so "not happy" counts as -3. ``score`` is the summed valence,
    ``comparative`` that sum divided by the number of tokens.
    """
    tokens = _TOKEN.findall(text.lower().replace("\u2019", "'"))
    score = 0
    words = []
    for i, token in enumerate(tokens):
        valence = _VALENCE.get(token)
        if valence is None:
            continue
        if i > 0 and tokens[i - 1] in NEGATORS:
            valence = -valence
        score += valence
        words.append(token)
    comparative = score / len(tokens) if tokens else 0.0
    return SentimentResult(
        score=score,
        comparative=comparative,
        is_positive=score > 0,
        is_neutral=score == 0,
        is_negative=score < 0,
        words=tuple(words),
    )


def has_complete_sentences(text: str) -> bool:
    cleaned = text.strip()
    if len(cleaned) < MIN_COMPLETE_CHARS:
        return False
    has_punctuation = _SENTENCE_SPLIT.search(cleaned) is not None
    has_enough_words = count_words(cleaned) >= MIN_COMPLETE_WORDS
    is_one_word = cleaned.lower() in ONE_WORD_ANSWERS
    return has_punctuation and has_enough_words and not is_one_word


def analyze_text_quality(text: str) -> TextQualityProfile:
    word_count = count_words(text)
    sentence_count = count_sentences(text)
    offensive, terms, _ = detect_profanity(text)
    return TextQualityProfile(
        word_count=word_count,
        sentence_count=sentence_count,
        avg_words_per_sentence=word_count / sentence_count if sentence_count > 0 else 0.0,
        has_complete_sentences=has_complete_sentences(text),
        contains_offensive_language=offensive,
        sentiment=analyze_sentiment(text),
        offensive_terms=tuple(terms),
    )
