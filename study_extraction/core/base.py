"""Base extractor abstract class and shared document validation."""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any
import logging
import threading
import time

from .errors import ExtractionCancelled, InsufficientText
from .models import ParsedDocument, FileType

logger = logging.getLogger(__name__)

MIN_TEXT_LENGTH = 50

class CancellationToken:
    """Cooperative cancellation flag shared between a caller and an extraction."""

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self, file_name: Optional[str] = None) -> None:
        if self._event.is_set():
            raise ExtractionCancelled("Extraction was cancelled", file_name=file_name)

class DocumentValidator:
    """Minimum-length check applied after every extractor."""

    def __init__(self, min_length: int = MIN_TEXT_LENGTH):
        self.min_length = min_length

    def validate(self, text: str, file_type: FileType, file_name: Optional[str] = None,
                 page_count: Optional[int] = None) -> ParsedDocument:
        """Build a ParsedDocument, or raise InsufficientText."""
        text = text.strip()

        if len(text) < self.min_length:
            raise InsufficientText(self._insufficient_message(file_type), file_name=file_name)

        word_count = len(text.split())

        return ParsedDocument(
            text=text,
            word_count=word_count,
            page_count=page_count if file_type == FileType.PDF else None,
        )

    def _insufficient_message(self, file_type: FileType) -> str:
        if file_type == FileType.PDF:
            return ("Could not extract enough readable text from PDF. "
                    "The file may be image-based or corrupted.")
        if file_type == FileType.DOCX:
            return ("Could not extract readable text from DOCX file. "
                    "The document may be empty or corrupted.")
        return (f"Text file is too short or empty. Please provide a document "
                f"with at least {self.min_length} characters.")

class BaseExtractor(ABC):
    """Abstract base class for document extractors."""

    file_type = FileType.UNKNOWN

    def __init__(self, config: Optional[Dict[str, Any]] = None,
                 validator: Optional[DocumentValidator] = None):
        self.config = config or {}
        self.validator = validator or DocumentValidator()
        self.name = self.__class__.__name__
        self.version = "1.0.0"

    @abstractmethod
    def extract(self, data: bytes, file_name: Optional[str] = None,
                cancel_token: Optional[CancellationToken] = None) -> ParsedDocument:
        """Extract a validated document from raw bytes."""
        pass

    def _finish(self, text: str, file_name: Optional[str],
                page_count: Optional[int] = None) -> ParsedDocument:
        """Validate extracted text and log the outcome."""
        document = self.validator.validate(text, self.file_type, file_name, page_count)
        if document.page_count is not None:
            logger.info(f"{self.name} parsed {file_name}: {document.word_count} words, "
                        f"{document.page_count} pages")
        else:
            logger.info(f"{self.name} parsed {file_name}: {document.word_count} words")
        return document

    def _time_extraction(self, func, *args, **kwargs):
        """Time a function execution and return result with timing."""
        start_time = time.time()
        try:
            result = func(*args, **kwargs)
            extraction_time = time.time() - start_time
            return result, extraction_time
        except Exception as e:
            extraction_time = time.time() - start_time
            logger.error(f"Extraction failed after {extraction_time:.3f}s: {e}")
            raise
