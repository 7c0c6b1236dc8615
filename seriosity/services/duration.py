from __future__ import annotations


# 150 words per minute
WORDS_PER_SECOND = 150 / 60


def count_words(text: str) -> int:
    if not text or not text.strip():
        return 0
    return len(text.split())


def estimate_duration_seconds(text: str) -> int:
    """Approximate how long the answer took to say, from its word count."""
    return round(count_words(text) / WORDS_PER_SECOND)
