"""Study material extraction: uploaded documents to summaries, key terms, concepts and topics."""

from .engine import StudyMaterialEngine, parse_document
from .core.models import (
    FileType,
    ParsedDocument,
    StudyAids,
    ExtractionOutcome,
    ExtractionResult,
)
from .core.base import BaseExtractor, CancellationToken, DocumentValidator
from .core.errors import (
    ExtractionError,
    UnsupportedFormat,
    MissingDocumentPart,
    CorruptArchive,
    CorruptDocument,
    InsufficientText,
    ExtractionCancelled,
)
from .utils.file_utils import FileTypeDetector, FileScanner

# Extractors
from .extractors.pdf_extractor import PDFExtractor, PdfTextService, PdfTextSource, PyMuPDFTextService
from .extractors.office_extractor import OfficeExtractor
from .extractors.text_extractor import TextExtractor

# Analysis
from .analysis.summarizer import generate_summary
from .analysis.key_terms import extract_key_terms
from .analysis.concepts import extract_concepts
from .analysis.topics import classify_topics

__version__ = "1.0.0"

# Main exports
__all__ = [
    # Main engine
    "StudyMaterialEngine",
    "parse_document",

    # Data models
    "FileType",
    "ParsedDocument",
    "StudyAids",
    "ExtractionOutcome",
    "ExtractionResult",

    # Base classes
    "BaseExtractor",
    "CancellationToken",
    "DocumentValidator",

    # Errors
    "ExtractionError",
    "UnsupportedFormat",
    "MissingDocumentPart",
    "CorruptArchive",
    "CorruptDocument",
    "InsufficientText",
    "ExtractionCancelled",

    # Utilities
    "FileTypeDetector",
    "FileScanner",

    # Extractors
    "PDFExtractor",
    "PdfTextService",
    "PdfTextSource",
    "PyMuPDFTextService",
    "OfficeExtractor",
    "TextExtractor",

    # Analysis
    "generate_summary",
    "extract_key_terms",
    "extract_concepts",
    "classify_topics",
]
