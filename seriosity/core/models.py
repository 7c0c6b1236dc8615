from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class SentimentResult:
    score: int
    comparative: float
    is_positive: bool
    is_neutral: bool
    is_negative: bool
    words: Tuple[str, ...] = ()


@dataclass(frozen=True)
class TextQualityProfile:
    word_count: int
    sentence_count: int
    avg_words_per_sentence: float
    has_complete_sentences: bool
    contains_offensive_language: bool
    sentiment: SentimentResult
    offensive_terms: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ScoreBreakdown:
    length_score: int
    keyword_score: int
    language_score: int
    sentiment_score: int
    completeness_score: int

    def total(self) -> int:
        return (
            self.length_score
            + self.keyword_score
            + self.language_score
            + self.sentiment_score
            + self.completeness_score
        )

    def to_dict(self) -> Dict[str, int]:
        return {
            "lengthScore": self.length_score,
            "keywordScore": self.keyword_score,
            "languageScore": self.language_score,
            "sentimentScore": self.sentiment_score,
            "completenessScore": self.completeness_score,
        }


@dataclass(frozen=True)
class ScoreFlags:
    too_short: bool
    no_keywords: bool
    offensive: bool
    negative: bool
    incomplete: bool

    @classmethod
    def from_breakdown(cls, breakdown: ScoreBreakdown) -> "ScoreFlags":
        return cls(
            too_short=breakdown.length_score == 0,
            no_keywords=breakdown.keyword_score == 0,
            offensive=breakdown.language_score == 0,
            negative=breakdown.sentiment_score == 0,
            incomplete=breakdown.completeness_score == 0,
        )

    def to_dict(self) -> Dict[str, bool]:
        return {
            "tooShort": self.too_short,
            "noKeywords": self.no_keywords,
            "offensive": self.offensive,
            "negative": self.negative,
            "incomplete": self.incomplete,
        }


@dataclass(frozen=True)
class EvaluationDetails:
    estimated_duration_seconds: int
    word_count: int
    keywords_found: Tuple[str, ...]
    sentiment_score: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "estimatedDurationSeconds": self.estimated_duration_seconds,
            "wordCount": self.word_count,
            "keywordsFound": list(self.keywords_found),
            "sentimentScore": self.sentiment_score,
        }


@dataclass(frozen=True)
class ScoreCard:
    score: int
    breakdown: ScoreBreakdown
    flags: ScoreFlags
    details: EvaluationDetails
    quality: TextQualityProfile


@dataclass(frozen=True)
class ExternalEvaluationResult:
    """Evaluation as shown to a counter-party: no flags, no suggestions."""

    transcript: str
    score: int
    score_explanation: str
    breakdown: ScoreBreakdown
    details: EvaluationDetails

    def to_dict(self) -> Dict[str, Any]:
        return {
            "transcript": self.transcript,
            "score": self.score,
            "scoreExplanation": self.score_explanation,
            "breakdown": self.breakdown.to_dict(),
            "details": self.details.to_dict(),
        }


@dataclass(frozen=True)
class EvaluationResult:
    transcript: str
    score: int
    score_explanation: str
    breakdown: ScoreBreakdown
    flags: ScoreFlags
    suggestions: Tuple[str, ...]
    details: EvaluationDetails

    def to_dict(self) -> Dict[str, Any]:
        return {
            "transcript": self.transcript,
            "score": self.score,
            "scoreExplanation": self.score_explanation,
            "breakdown": self.breakdown.to_dict(),
            "flags": self.flags.to_dict(),
            "suggestions": list(self.suggestions),
            "details": self.details.to_dict(),
        }
