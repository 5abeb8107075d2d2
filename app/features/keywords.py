"""Job description keyword extraction.

This is intentionally naive: every surviving unigram, bigram and trigram of the
normalized text is a candidate phrase. There is no part-of-speech tagging, no
frequency weighting and no key-phrase ranking; the scorer only asks whether
each phrase also appears in the resume.
"""

from __future__ import annotations

from app.core.config import get_scoring_value
from app.normalize.utils import split_tokens

_DEFAULT_STOP_WORDS = ("the", "and", "for", "with", "you", "are", "this", "that", "will", "have")


def _stop_words() -> frozenset[str]:
    configured = get_scoring_value("keywords.stop_words", None)
    if not configured:
        return frozenset(_DEFAULT_STOP_WORDS)
    return frozenset(str(word).strip().lower() for word in configured)


def filter_tokens(text: str | None) -> list[str]:
    min_length = int(get_scoring_value("keywords.min_token_length", 3))
    return [token for token in split_tokens(text) if len(token) >= min_length]


def extract_keywords(job_description: str | None) -> list[str]:
    """Return unique candidate phrases in first-seen order: unigrams, then bigrams, then trigrams.

    Stop words are never keywords on their own but stay inside phrases, so
    bigrams and trigrams remain substrings of ordinary prose.
    """
    tokens = filter_tokens(job_description)
    if not tokens:
        return []

    stop_words = _stop_words()
    min_unigram = int(get_scoring_value("keywords.min_unigram_length", 4))
    min_bigram = int(get_scoring_value("keywords.min_bigram_length", 6))

    # dict keeps insertion order, which a set would not across processes
    keywords: dict[str, None] = {}

    for token in tokens:
        if len(token) >= min_unigram and token not in stop_words:
            keywords.setdefault(token, None)

    for index in range(len(tokens) - 1):
        phrase = f"{tokens[index]} {tokens[index + 1]}"
        if len(phrase) >= min_bigram:
            keywords.setdefault(phrase, None)

    for index in range(len(tokens) - 2):
        keywords.setdefault(" ".join(tokens[index:index + 3]), None)

    return list(keywords)
