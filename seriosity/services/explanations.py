from __future__ import annotations

import logging
from typing import Tuple

from seriosity.core.models import ScoreFlags
from seriosity.services.lexicons import FLAG_SUGGESTIONS, SCORE_EXPLANATIONS, SCORE_UNAVAILABLE


logger = logging.getLogger(__name__)


def score_explanation(score: int) -> str:
    explanation = SCORE_EXPLANATIONS.get(score)
    if explanation is None:
        # Scores are clamped to 1..5 upstream; reaching this is a bug.
        logger.warning("No explanation for out-of-range score %r", score)
        return SCORE_UNAVAILABLE
    return explanation


def improvement_suggestions(flags: ScoreFlags) -> Tuple[str, ...]:
    return tuple(text for flag, text in FLAG_SUGGESTIONS if getattr(flags, flag))
