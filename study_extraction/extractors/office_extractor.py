"""Word document extractor (DOCX)."""

import io
import logging
import re
import zipfile
import zlib
from typing import Optional, Dict, Any

from lxml import etree

from ..core.base import BaseExtractor, CancellationToken, DocumentValidator
from ..core.errors import CorruptArchive, MissingDocumentPart
from ..core.models import ParsedDocument, FileType

logger = logging.getLogger(__name__)

WORD_NAMESPACE = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
DOCUMENT_PART = "word/document.xml"

class OfficeExtractor(BaseExtractor):
    """Extract text runs from Word documents."""

    file_type = FileType.DOCX

    def __init__(self, config: Optional[Dict[str, Any]] = None,
                 validator: Optional[DocumentValidator] = None):
        super().__init__(config, validator)
        self.version = "1.0.0"

        # Configuration options
        self.document_part = self.config.get('document_part', DOCUMENT_PART)

    def extract(self, data: bytes, file_name: Optional[str] = None,
                cancel_token: Optional[CancellationToken] = None) -> ParsedDocument:
        """Extract text from Word document bytes."""
        if cancel_token:
            cancel_token.raise_if_cancelled(file_name)

        content, extraction_time = self._time_extraction(
            self._extract_word_content, data, file_name
        )
        logger.debug(f"Extracted DOCX text in {extraction_time:.3f}s")

        if cancel_token:
            cancel_token.raise_if_cancelled(file_name)

        return self._finish(content, file_name)

    def _extract_word_content(self, data: bytes, file_name: Optional[str]) -> str:
        """Join all w:t runs of the main document part."""
        document_xml = self._read_document_part(data, file_name)

        try:
            root = etree.fromstring(document_xml)
        except etree.XMLSyntaxError as e:
            raise CorruptArchive(
                f"Failed to parse DOCX file: {e}", file_name=file_name
            ) from e

        runs = [node.text for node in root.iter(f"{{{WORD_NAMESPACE}}}t") if node.text]
        return re.sub(r'\s+', ' ', " ".join(runs)).strip()

    def _read_document_part(self, data: bytes, file_name: Optional[str]) -> bytes:
        try:
            with zipfile.ZipFile(io.BytesIO(data)) as archive:
                if self.document_part not in archive.namelist():
                    raise MissingDocumentPart(
                        "Could not find document content in DOCX file.", file_name=file_name
                    )
                return archive.read(self.document_part)
        except (zipfile.BadZipFile, zipfile.LargeZipFile, zlib.error,
                EOFError, ValueError, NotImplementedError) as e:
            raise CorruptArchive(
                f"Failed to parse DOCX file: {e}", file_name=file_name
            ) from e
