from __future__ import annotations

import re
from typing import Iterable, List, Tuple

from seriosity.services.lexicons import PROFANITY_TERMS


def _whole_word(term: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(term)}\b", re.IGNORECASE)


_PATTERNS = tuple((term, _whole_word(term)) for term in PROFANITY_TERMS)


def detect_profanity(
    transcript: str, terms: Iterable[str] | None = None, context: int = 40
) -> Tuple[bool, List[str], str]:
    patterns = _PATTERNS if terms is None else tuple((t, _whole_word(t)) for t in terms)
    found = []
    first = None
    for term, pattern in patterns:
        match = pattern.search(transcript)
        if match is None:
            continue
        found.append(term)
        if first is None or match.start() < first.start():
            first = match
    if first is None:
        return (False, found, "")
    start = max(0, first.start() - context)
    end = min(len(transcript), first.end() + context)
    return (True, found, transcript[start:end].strip())
