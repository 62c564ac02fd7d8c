"""Keyword-bucket topic classification."""

from __future__ import annotations

from typing import Dict, List, Sequence

MIN_KEYWORD_MATCHES = 3
FALLBACK_TOPIC = "General Knowledge"

TOPIC_KEYWORDS: Dict[str, Sequence[str]] = {
    "Science": (
        "science", "experiment", "hypothesis", "theory", "research", "study",
        "cell", "atom", "molecule", "chemical", "physics", "biology",
    ),
    "Technology": (
        "technology", "computer", "software", "program", "algorithm", "code",
        "data", "digital", "internet", "network", "system", "application",
    ),
    "Mathematics": (
        "math", "equation", "formula", "calculate", "number", "algebra",
        "geometry", "statistics", "probability", "theorem", "proof",
    ),
    "Business": (
        "business", "market", "company", "economy", "finance", "management",
        "strategy", "profit", "revenue", "customer", "product",
    ),
    "Medicine": (
        "medical", "health", "disease", "treatment", "patient", "diagnosis",
        "symptom", "therapy", "clinical", "hospital", "doctor",
    ),
    "History": (
        "history", "historical", "century", "war", "revolution", "empire",
        "ancient", "modern", "era", "civilization", "culture",
    ),
    "Literature": (
        "literature", "author", "novel", "poem", "story", "character",
        "plot", "theme", "literary", "book", "writing",
    ),
    "Law": (
        "law", "legal", "court", "justice", "rights", "constitution",
        "legislation", "attorney", "judge", "case",
    ),
    "Engineering": (
        "engineering", "design", "build", "structure", "mechanical",
        "electrical", "civil", "construction", "architecture",
    ),
    "Education": (
        "education", "learning", "teaching", "student", "course",
        "curriculum", "instruction", "academic", "school", "university",
    ),
}


def classify_topics(text: str, key_terms: Sequence[str]) -> List[str]:
    """Return topics in declaration order, or the general fallback."""
    lowered_text = text.lower()
    lowered_terms = [term.lower() for term in key_terms]

    topics = [
        topic for topic, keywords in TOPIC_KEYWORDS.items()
        if _count_matches(keywords, lowered_text, lowered_terms) >= MIN_KEYWORD_MATCHES
    ]
    return topics or [FALLBACK_TOPIC]


def _count_matches(keywords: Sequence[str], lowered_text: str, lowered_terms: List[str]) -> int:
    return sum(
        1 for keyword in keywords
        if keyword in lowered_text or any(keyword in term for term in lowered_terms)
    )
