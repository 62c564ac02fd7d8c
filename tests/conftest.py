"""
Test Configuration and Fixtures
"""
import io
import threading
import time
import zipfile
from typing import List, Optional

import pytest

from study_extraction import StudyMaterialEngine
from study_extraction.extractors.pdf_extractor import PdfTextService, PdfTextSource


STUDY_TEXT = (
    "Photosynthesis is the process by which green plants convert light into chemical energy. "
    "Chlorophyll absorbs light in the chloroplasts of leaf cells. "
    "It is important to remember that 6 molecules of carbon dioxide are used per glucose molecule. "
    "Researchers at Cambridge University study photosynthesis to improve crop yields. "
    "In summary, photosynthesis sustains nearly all life on Earth."
)


class FakePdfTextSource(PdfTextSource):
    """In-memory paged document with optional per-page delays."""

    def __init__(self, pages: List[List[str]], delays: Optional[List[float]] = None,
                 on_page=None):
        self.pages = pages
        self.delays = delays or [0.0] * len(pages)
        self.on_page = on_page
        self.closed = False
        self.read_pages = []
        self._lock = threading.Lock()

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def page_fragments(self, page_index: int) -> List[str]:
        time.sleep(self.delays[page_index])
        with self._lock:
            self.read_pages.append(page_index)
        if self.on_page:
            self.on_page(page_index)
        return self.pages[page_index]

    def close(self) -> None:
        self.closed = True


class FakePdfTextService(PdfTextService):
    """PDF text service double that ignores the bytes it is given."""

    def __init__(self, source: Optional[FakePdfTextSource] = None, error: Optional[Exception] = None):
        self.source = source
        self.error = error
        self.opened = 0

    def open(self, data: bytes) -> PdfTextSource:
        self.opened += 1
        if self.error is not None:
            raise self.error
        return self.source


def build_pdf(pages: List[str]) -> bytes:
    """Build a real PDF with PyMuPDF, one text block per page ('' for a blank page)."""
    import fitz

    doc = fitz.open()
    try:
        for page_text in pages:
            page = doc.new_page()
            if page_text:
                page.insert_text((72, 72), page_text, fontsize=11)
        return doc.tobytes()
    finally:
        doc.close()


def build_docx(paragraphs: List[str]) -> bytes:
    """Build a DOCX with python-docx."""
    from docx import Document

    document = Document()
    for paragraph in paragraphs:
        document.add_paragraph(paragraph)

    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def build_zip(parts: dict) -> bytes:
    """Build a raw ZIP archive from name -> bytes."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, 'w') as archive:
        for name, content in parts.items():
            archive.writestr(name, content)
    return buffer.getvalue()


@pytest.fixture
def engine():
    """Engine with default extractors"""
    return StudyMaterialEngine({'max_workers': 4})


@pytest.fixture
def study_text():
    return STUDY_TEXT
