"""Fixed word lists and canned texts used by the seriosity scoring rules.

Everything here is read-only and shared by all evaluations.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple


KEYWORD_GROUPS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "employment": (
            "job",
            "work",
            "working",
            "employed",
            "employment",
            "career",
            "profession",
            "company",
            "office",
        ),
        "education": (
            "study",
            "studying",
            "student",
            "university",
            "college",
            "school",
            "education",
            "degree",
            "course",
        ),
        "housing_intent": (
            "stay",
            "staying",
            "live",
            "living",
            "looking for",
            "searching",
            "need",
            "require",
            "apartment",
            "flat",
            "room",
            "place",
            "home",
        ),
        "stability": (
            "long-term",
            "permanent",
            "stable",
            "settle",
            "relocate",
            "move",
            "family",
            "partner",
            "spouse",
        ),
        "financial": (
            "income",
            "salary",
            "afford",
            "budget",
            "rent",
            "payment",
        ),
    }
)

# Matching order; groups are informational only.
RELEVANT_KEYWORDS: Tuple[str, ...] = tuple(
    keyword for group in KEYWORD_GROUPS.values() for keyword in group
)

PROFANITY_TERMS: Tuple[str, ...] = (
    "fuck",
    "shit",
    "damn",
    "bitch",
    "asshole",
    "bastard",
    "crap",
    "piss",
)

ONE_WORD_ANSWERS = frozenset({"yes", "no", "maybe", "sure", "ok", "okay", "fine"})

SCORE_EXPLANATIONS: Mapping[int, str] = MappingProxyType(
    {
        5: (
            "Excellent! Your interview shows strong commitment and professionalism. "
            "Landlords will be very interested in your application."
        ),
        4: (
            "Great! Your interview demonstrates good communication and seriousness. "
            "You have a strong profile."
        ),
        3: (
            "Good! Your interview is acceptable, but could be improved with more detail "
            "and relevant information."
        ),
        2: (
            "Fair. Your interview needs improvement. Try to provide more detailed answers "
            "about your situation and plans."
        ),
        1: (
            "Needs improvement. Please provide more detailed, thoughtful answers to help "
            "landlords understand your situation better."
        ),
    }
)

SCORE_UNAVAILABLE = "Score unavailable."

# (flag attribute, suggestion) in the order suggestions are reported.
FLAG_SUGGESTIONS: Tuple[Tuple[str, str], ...] = (
    (
        "too_short",
        "Provide longer, more detailed answers (aim for at least 30 seconds per question)",
    ),
    (
        "no_keywords",
        "Include relevant information about your job, studies, or why you're looking for a place",
    ),
    ("offensive", "Use professional language throughout your interview"),
    (
        "negative",
        "Try to maintain a positive or neutral tone when discussing your situation",
    ),
    (
        "incomplete",
        "Provide complete, well-formed sentences rather than one-word answers",
    ),
)

# A valence word directly after one of these counts with the opposite sign.
NEGATORS = frozenset(
    {
        "aint", "ain't", "arent", "aren't", "cannot", "cant", "can't",
        "couldnt", "couldn't", "darent", "daren't", "didnt", "didn't",
        "doesnt", "doesn't", "dont", "don't", "hadnt", "hadn't", "hasnt",
        "hasn't", "havent", "haven't", "isnt", "isn't", "mightnt", "mightn't",
        "mustnt", "mustn't", "neednt", "needn't", "neither", "never", "none",
        "nope", "nor", "not", "nothing", "nowhere", "oughtnt", "oughtn't",
        "shant", "shan't", "shouldnt", "shouldn't", "wasnt", "wasn't",
        "werent", "weren't", "without", "wont", "won't", "wouldnt",
        "wouldn't", "rarely", "seldom", "despite",
    }
)
