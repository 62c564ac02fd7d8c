"""Core data models for study material extraction."""

from dataclasses import dataclass, field
from typing import List, Optional
from enum import Enum

class FileType(Enum):
    """Supported file types for study material extraction."""
    TEXT = "text"
    PDF = "pdf"
    DOCX = "docx"
    UNKNOWN = "unknown"

@dataclass(frozen=True)
class ParsedDocument:
    """Normalized text extracted from an uploaded document."""
    text: str
    word_count: int
    page_count: Optional[int] = None  # only for page-structured sources

    def get_text_stats(self) -> dict:
        """Return text statistics."""
        stats = {
            "char_count": len(self.text),
            "word_count": self.word_count,
            "paragraph_count": len([p for p in self.text.split('\n\n') if p.strip()])
        }
        if self.page_count is not None:
            stats["page_count"] = self.page_count
        return stats

@dataclass
class ScoredSentence:
    """Candidate sentence ranked by the summarizer."""
    text: str
    score: int
    original_index: int

@dataclass(frozen=True)
class StudyAids:
    """Study aids derived from a parsed document."""
    summary: str
    key_terms: List[str] = field(default_factory=list)
    concepts: List[str] = field(default_factory=list)
    topics: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "summary": self.summary,
            "key_terms": list(self.key_terms),
            "concepts": list(self.concepts),
            "topics": list(self.topics),
        }

@dataclass
class ExtractionOutcome:
    """Result of extracting a single file in a batch."""
    file_name: str
    document: Optional[ParsedDocument] = None
    error: Optional[Exception] = None
    extraction_time: float = 0.0

    @property
    def success(self) -> bool:
        return self.document is not None and self.error is None

    @property
    def error_kind(self) -> Optional[str]:
        if self.error is None:
            return None
        return getattr(self.error, 'kind', type(self.error).__name__)

@dataclass
class ExtractionResult:
    """Batch extraction result containing multiple outcomes."""
    outcomes: List[ExtractionOutcome]
    total_files: int
    successful_extractions: int
    failed_extractions: int
    total_processing_time: float

    @property
    def success_rate(self) -> float:
        """Calculate success rate as percentage."""
        if self.total_files == 0:
            return 0.0
        return (self.successful_extractions / self.total_files) * 100.0
