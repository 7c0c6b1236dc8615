from __future__ import annotations

from typing import Tuple

from seriosity.services.lexicons import RELEVANT_KEYWORDS


MIN_KEYWORD_MATCHES = 2


def find_keywords(transcript: str) -> Tuple[str, ...]:
    # Plain substring containment, so "stay" also matches inside "stays".
    lowered = transcript.lower()
    return tuple(k for k in RELEVANT_KEYWORDS if k in lowered)


def has_relevant_keywords(transcript: str) -> bool:
    return len(find_keywords(transcript)) >= MIN_KEYWORD_MATCHES
