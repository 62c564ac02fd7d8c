"""Frequency-ranked key term extraction."""

from __future__ import annotations

import math
import re
from collections import Counter
from typing import List

NON_WORD_CHARS = re.compile(r"[^a-z\s-]")
NUMERIC = re.compile(r"^\d+$")
CAPITALIZED_PHRASE = re.compile(r"\b[A-Z][a-z]+(?:\s+[A-Z][a-z]+){1,2}\b")

MIN_WORD_LENGTH = 4
MIN_FREQUENCY = 2
SINGLE_WORD_SHARE = (3, 5)  # ceil(0.6 * max_terms)
PHRASE_SHARE = (2, 5)  # ceil(0.4 * max_terms)

STOPWORDS = frozenset({
    "the", "is", "at", "which", "on", "a", "an", "as", "are", "was", "were",
    "be", "been", "being", "have", "has", "had", "do", "does", "did", "will",
    "would", "should", "could", "may", "might", "must", "can", "of", "to",
    "in", "for", "with", "by", "from", "up", "about", "into", "through",
    "during", "before", "after", "above", "below", "between", "under",
    "and", "or", "but", "if", "then", "than", "so", "this", "that", "these",
    "those", "it", "its", "their", "them", "they", "he", "she", "his", "her",
    "we", "our", "your", "you", "me", "my", "mine", "who", "whom", "what",
    "where", "when", "why", "how", "all", "each", "every", "both", "few",
    "more", "most", "other", "some", "such", "only", "own", "same", "also",
    "just", "very", "too", "now", "make", "like", "time",
    "slide", "page", "section",
})


def extract_key_terms(text: str, max_terms: int = 20) -> List[str]:
    """Return capitalized key terms, multi-word phrases first.

    A phrase and one of its own words may both be returned since phrases and
    single words are counted independently.
    """
    if max_terms <= 0:
        return []

    word_freq = _count_words(text)
    phrase_freq = _count_phrases(text)

    single_words = _top_frequent(word_freq, _share(max_terms, SINGLE_WORD_SHARE))
    phrases = _top_frequent(phrase_freq, _share(max_terms, PHRASE_SHARE))

    terms = [_capitalize(term) for term in phrases + single_words]
    return list(dict.fromkeys(terms))[:max_terms]


def _count_words(text: str) -> Counter:
    words = NON_WORD_CHARS.sub(" ", text.lower()).split()
    return Counter(
        word for word in words
        if len(word) >= MIN_WORD_LENGTH and word not in STOPWORDS and not NUMERIC.match(word)
    )


def _count_phrases(text: str) -> Counter:
    return Counter(
        phrase for phrase in CAPITALIZED_PHRASE.findall(text)
        if phrase.lower() not in STOPWORDS
    )


def _top_frequent(freq: Counter, limit: int) -> List[str]:
    frequent = [(term, count) for term, count in freq.items() if count >= MIN_FREQUENCY]
    frequent.sort(key=lambda item: item[1], reverse=True)
    return [term for term, _ in frequent[:limit]]


def _capitalize(term: str) -> str:
    return term[:1].upper() + term[1:]


def _share(max_terms: int, ratio) -> int:
    numerator, denominator = ratio
    return math.ceil(max_terms * numerator / denominator)
