from __future__ import annotations

import logging

from seriosity.core.config import MAX_MEDIA_BYTES, MEDIA_EXTENSIONS, base_media_type
from seriosity.core.errors import InternalError, ValidationError
from seriosity.core.models import EvaluationResult, ExternalEvaluationResult
from seriosity.services.explanations import improvement_suggestions, score_explanation
from seriosity.services.scoring import MAX_SCORE, MIN_SCORE, calculate_seriosity_score
from seriosity.services.stt_whisper import Transcriber


logger = logging.getLogger(__name__)


def evaluate_transcript(transcript: str) -> EvaluationResult:
    """Score an already transcribed answer. Deterministic, no I/O."""
    try:
        card = calculate_seriosity_score(transcript)
        explanation = score_explanation(card.score)
        suggestions = improvement_suggestions(card.flags)
    except Exception as exc:
        raise InternalError(f"Scoring failed: {exc}") from exc

    assert MIN_SCORE <= card.score <= MAX_SCORE, card.score

    return EvaluationResult(
        transcript=transcript,
        score=card.score,
        score_explanation=explanation,
        breakdown=card.breakdown,
        flags=card.flags,
        suggestions=suggestions,
        details=card.details,
    )


def evaluate_interview(
    media_bytes: bytes,
    media_type: str,
    transcribe: Transcriber,
    max_media_bytes: int = MAX_MEDIA_BYTES,
) -> EvaluationResult:
    if not media_bytes:
        raise ValidationError("Interview recording is required")
    if len(media_bytes) > max_media_bytes:
        raise ValidationError(
            f"Recording is too large: {len(media_bytes)} bytes (limit {max_media_bytes})"
        )
    if base_media_type(media_type or "") not in MEDIA_EXTENSIONS:
        raise ValidationError(f"Unsupported media type: {media_type!r}")

    logger.info("Evaluating interview recording: %d bytes, %s", len(media_bytes), media_type)
    transcript = transcribe(media_bytes, media_type)
    logger.info("Transcription complete: %d characters", len(transcript))

    result = evaluate_transcript(transcript)
    logger.info("Evaluation complete: score %d/%d", result.score, MAX_SCORE)
    return result


def evaluate_for_external_party(result: EvaluationResult) -> ExternalEvaluationResult:
    return ExternalEvaluationResult(
        transcript=result.transcript,
        score=result.score,
        score_explanation=result.score_explanation,
        breakdown=result.breakdown,
        details=result.details,
    )
