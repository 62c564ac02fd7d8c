"""PDF text extraction using an injectable page text service (PyMuPDF by default)."""

import logging
import threading
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Dict, Any, List

from ..core.base import BaseExtractor, CancellationToken, DocumentValidator
from ..core.errors import CorruptDocument, ExtractionError
from ..core.models import ParsedDocument, FileType

logger = logging.getLogger(__name__)

class PdfTextSource(ABC):
    """An opened, paged document that yields text fragments per page."""

    @property
    @abstractmethod
    def page_count(self) -> int:
        pass

    @abstractmethod
    def page_fragments(self, page_index: int) -> List[str]:
        """Return the text fragments of a zero-based page in reading order."""
        pass

    def close(self) -> None:
        pass

class PdfTextService(ABC):
    """Opens PDF bytes as a PdfTextSource."""

    @abstractmethod
    def open(self, data: bytes) -> PdfTextSource:
        pass

class PyMuPDFTextSource(PdfTextSource):
    """Page text source backed by a PyMuPDF document."""

    def __init__(self, doc):
        self.doc = doc
        # PyMuPDF documents must not be used from several threads at once
        self._lock = threading.Lock()

    @property
    def page_count(self) -> int:
        return self.doc.page_count

    def page_fragments(self, page_index: int) -> List[str]:
        with self._lock:
            page = self.doc[page_index]
            words = page.get_text("words")
        return [word[4] for word in words]

    def close(self) -> None:
        self.doc.close()

class PyMuPDFTextService(PdfTextService):
    """Default PDF text service using PyMuPDF (fitz)."""

    def __init__(self):
        try:
            import fitz  # PyMuPDF
            self.fitz = fitz
            self.available = True
            logger.debug("PyMuPDF (fitz) available")
        except ImportError:
            self.fitz = None
            self.available = False
            logger.warning("PyMuPDF (fitz) not available")

    def open(self, data: bytes) -> PdfTextSource:
        if not self.available:
            raise RuntimeError("PyMuPDF is not available. Please install: pip install PyMuPDF")
        return PyMuPDFTextSource(self.fitz.open(stream=data, filetype="pdf"))

class PDFExtractor(BaseExtractor):
    """Extract page-ordered text from PDF documents."""

    file_type = FileType.PDF

    def __init__(self, config: Optional[Dict[str, Any]] = None,
                 text_service: Optional[PdfTextService] = None,
                 validator: Optional[DocumentValidator] = None):
        super().__init__(config, validator)
        self.version = "1.0.0"

        # Configuration options
        self.max_workers = max(1, self.config.get('max_workers', 1))
        self.text_service = text_service or self.config.get('text_service') or PyMuPDFTextService()

    def extract(self, data: bytes, file_name: Optional[str] = None,
                cancel_token: Optional[CancellationToken] = None) -> ParsedDocument:
        """Extract text from PDF bytes."""
        token = cancel_token or CancellationToken()
        token.raise_if_cancelled(file_name)

        try:
            source = self.text_service.open(data)
        except Exception as e:
            logger.error(f"Failed to open PDF {file_name}: {e}")
            raise CorruptDocument(f"Failed to parse PDF: {e}", file_name=file_name) from e

        try:
            (text, page_count), extraction_time = self._time_extraction(
                self._extract_pdf_content, source, file_name, token
            )
        finally:
            source.close()

        logger.debug(f"Extracted {page_count} PDF pages in {extraction_time:.3f}s")
        return self._finish(text, file_name, page_count=page_count)

    def _extract_pdf_content(self, source: PdfTextSource, file_name: Optional[str],
                             token: CancellationToken):
        """Join non-empty page texts in ascending page order."""
        page_count = source.page_count
        logger.info(f"Found {page_count} pages in {file_name}")

        page_texts = self._collect_page_texts(source, page_count, file_name, token)
        token.raise_if_cancelled(file_name)

        text_content = []
        for page_num, page_text in enumerate(page_texts, 1):
            if page_text.strip():
                text_content.append(page_text)
            else:
                logger.warning(f"No text on page {page_num}/{page_count} of {file_name}")

        return "\n\n".join(text_content).strip(), page_count

    def _collect_page_texts(self, source: PdfTextSource, page_count: int,
                            file_name: Optional[str], token: CancellationToken) -> List[str]:
        if self.max_workers == 1 or page_count < 2:
            return [
                self._read_page(source, index, page_count, file_name, token)
                for index in range(page_count)
            ]

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [
                executor.submit(self._read_page, source, index, page_count, file_name, token)
                for index in range(page_count)
            ]
            try:
                # Results are read in submission order, which is page order
                return [future.result() for future in futures]
            except ExtractionError:
                for future in futures:
                    future.cancel()
                raise

    def _read_page(self, source: PdfTextSource, index: int, page_count: int,
                   file_name: Optional[str], token: CancellationToken) -> str:
        token.raise_if_cancelled(file_name)
        try:
            fragments = source.page_fragments(index)
        except Exception as e:
            logger.error(f"Failed to read page {index + 1} of {file_name}: {e}")
            raise CorruptDocument(f"Failed to parse PDF: {e}", file_name=file_name) from e
        logger.debug(f"Page {index + 1}/{page_count} extracted")
        return " ".join(fragments)
