"""Pattern-based extraction of definition and emphasis statements."""

from __future__ import annotations

import re
from typing import List

from .summarizer import split_sentences

MAX_CONCEPT_LENGTH = 150
MIN_LIST_ITEM_LENGTH = 30

# Subjects must start with a capital letter; the linking words match in any case.
DEFINITION_PATTERNS = (
    re.compile(r"([A-Z][^.!?]*?)\s+(?i:is|are|was|were)\s+(?:(?i:a|an|the)\s+)?([^.!?]{20,100})"),
    re.compile(r"([A-Z][^.!?]*?)\s+(?i:refers to|means|defined as|describes)\s+([^.!?]{20,100})"),
    re.compile(r"([A-Z][^.!?]*?)\s*:\s*([^.!?]{20,100})"),
)

IMPORTANT_INDICATORS = (
    "important",
    "key point",
    "main idea",
    "primary",
    "essential",
    "fundamental",
    "critical",
    "significant",
    "notably",
    "remember that",
)

# Items run to the next sentence terminator, across line breaks
LIST_ITEM = re.compile(r"(?:•|\*|-|\d+\.)\s*([^•*\-\d.][^.!?]{30,150})")


def extract_concepts(text: str, max_concepts: int = 8) -> List[str]:
    """Collect definitions, then emphasized sentences, then list items."""
    concepts: List[str] = []
    concepts.extend(_definitions(text))
    concepts.extend(_important_sentences(text))
    concepts.extend(_list_items(text))
    return list(dict.fromkeys(concepts))[:max(max_concepts, 0)]


def _definitions(text: str) -> List[str]:
    found = []
    for pattern in DEFINITION_PATTERNS:
        for match in pattern.finditer(text):
            concept = f"{match.group(1).strip()}: {match.group(2).strip()}"
            if len(concept) < MAX_CONCEPT_LENGTH:
                found.append(concept)
    return found


def _important_sentences(text: str) -> List[str]:
    found = []
    for sentence in split_sentences(text):
        lowered = sentence.lower()
        if any(indicator in lowered for indicator in IMPORTANT_INDICATORS):
            if len(sentence) < MAX_CONCEPT_LENGTH:
                found.append(sentence)
    return found


def _list_items(text: str) -> List[str]:
    found = []
    for match in LIST_ITEM.finditer(text):
        item = match.group(1).strip()
        if MIN_LIST_ITEM_LENGTH <= len(item) <= MAX_CONCEPT_LENGTH:
            found.append(item)
    return found
