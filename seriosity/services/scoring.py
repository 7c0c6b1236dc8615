"""Rule-based seriosity score for a single interview answer.

Five rules each award one point:

1. the answer lasts longer than 20 seconds (estimated from word count)
2. it mentions at least two relevant keywords
3. it contains no offensive language
4. its sentiment is positive or neutral
5. it is made of complete sentences rather than one-word answers

The total is floored at 1, so the score is always between 1 and 5.
"""
from __future__ import annotations

from seriosity.core.models import (
    EvaluationDetails,
    ScoreBreakdown,
    ScoreCard,
    ScoreFlags,
)
from seriosity.services.duration import estimate_duration_seconds
from seriosity.services.keywords import MIN_KEYWORD_MATCHES, find_keywords
from seriosity.services.text_quality import analyze_text_quality


MIN_DURATION_SECONDS = 20
MIN_SCORE = 1
MAX_SCORE = 5


def calculate_seriosity_score(transcript: str) -> ScoreCard:
    quality = analyze_text_quality(transcript)
    estimated_duration = estimate_duration_seconds(transcript)
    keywords_found = find_keywords(transcript)

    breakdown = ScoreBreakdown(
        length_score=1 if estimated_duration > MIN_DURATION_SECONDS else 0,
        keyword_score=1 if len(keywords_found) >= MIN_KEYWORD_MATCHES else 0,
        language_score=0 if quality.contains_offensive_language else 1,
        sentiment_score=1 if quality.sentiment.is_positive or quality.sentiment.is_neutral else 0,
        completeness_score=1 if quality.has_complete_sentences else 0,
    )

    return ScoreCard(
        score=max(MIN_SCORE, breakdown.total()),
        breakdown=breakdown,
        flags=ScoreFlags.from_breakdown(breakdown),
        details=EvaluationDetails(
            estimated_duration_seconds=estimated_duration,
            word_count=quality.word_count,
            keywords_found=keywords_found,
            sentiment_score=quality.sentiment.score,
        ),
        quality=quality,
    )
