"""Extractive summarization by sentence scoring."""

from __future__ import annotations

import logging
import re
from typing import List

from ..core.models import ScoredSentence

logger = logging.getLogger(__name__)

SENTENCE_SPLIT = re.compile(r"[.!?]+")
CAPITALIZED_WORD = re.compile(r"\b[A-Z][a-z]+\b")
DIGIT = re.compile(r"\d")

MIN_SENTENCE_LENGTH = 30
MIN_SENTENCE_WORDS = 5
FALLBACK_LENGTH = 300
MAX_SUMMARY_LENGTH = 600
ELLIPSIS = "..."

POSITION_BONUS = {0: 5, 1: 3, 2: 2}
LAST_POSITION_BONUS = 2
KEYWORD_BONUS = 3
DIGIT_BONUS = 2
MAX_CAPITALIZED_BONUS = 3

IMPORTANT_KEYWORDS = (
    "important",
    "significant",
    "key",
    "main",
    "primary",
    "essential",
    "fundamental",
    "critical",
    "vital",
    "crucial",
    "major",
    "central",
    "conclude",
    "therefore",
    "thus",
    "consequently",
    "in summary",
    "overall",
    "in conclusion",
    "notably",
    "significantly",
)


def split_sentences(text: str, min_length: int = MIN_SENTENCE_LENGTH) -> List[str]:
    """Split text on sentence terminators, keeping stripped pieces longer than ``min_length``."""
    pieces = (piece.strip() for piece in SENTENCE_SPLIT.split(text))
    return [piece for piece in pieces if len(piece) > min_length]


def generate_summary(text: str, max_sentences: int = 5) -> str:
    """Build an extractive summary from the highest scoring sentences.

    Sentences keep their original order in the output. When no sentence is
    long enough to score, the first 300 characters of the text are returned.
    """
    sentences = [
        sentence for sentence in split_sentences(text)
        if len(sentence.split()) >= MIN_SENTENCE_WORDS
    ]

    if not sentences:
        logger.debug("No scorable sentences, falling back to leading text")
        return text[:FALLBACK_LENGTH] + ELLIPSIS

    scored = [
        ScoredSentence(text=sentence, score=_score_sentence(sentence, index, len(sentences)),
                       original_index=index)
        for index, sentence in enumerate(sentences)
    ]

    ranked = sorted(scored, key=lambda item: item.score, reverse=True)
    selected = sorted(ranked[:max(max_sentences, 0)], key=lambda item: item.original_index)

    summary = ". ".join(item.text for item in selected) + "."
    if len(summary) > MAX_SUMMARY_LENGTH:
        return summary[:MAX_SUMMARY_LENGTH] + ELLIPSIS
    return summary


def _score_sentence(sentence: str, index: int, total: int) -> int:
    score = _length_score(len(sentence.split()))
    score += _position_score(index, total)

    lowered = sentence.lower()
    score += KEYWORD_BONUS * sum(1 for keyword in IMPORTANT_KEYWORDS if keyword in lowered)

    if DIGIT.search(sentence):
        score += DIGIT_BONUS

    score += min(len(CAPITALIZED_WORD.findall(sentence)), MAX_CAPITALIZED_BONUS)
    return score


def _length_score(word_count: int) -> int:
    if 10 <= word_count <= 25:
        return 3
    if 25 < word_count <= 35:
        return 2
    return 1


def _position_score(index: int, total: int) -> int:
    # Short lists can hit several bands at once (e.g. the only sentence is also the last)
    score = POSITION_BONUS.get(index, 0)
    if index == total - 1:
        score += LAST_POSITION_BONUS
    return score
