"""Plain text extractor."""

import logging
from typing import Optional, Dict, Any, List

from ..core.base import BaseExtractor, CancellationToken, DocumentValidator
from ..core.models import ParsedDocument, FileType

logger = logging.getLogger(__name__)

DEFAULT_ENCODINGS = ['utf-8-sig', 'utf-8', 'cp1252', 'latin-1']

class TextExtractor(BaseExtractor):
    """Extract text from plain text files."""

    file_type = FileType.TEXT

    def __init__(self, config: Optional[Dict[str, Any]] = None,
                 validator: Optional[DocumentValidator] = None):
        super().__init__(config, validator)
        self.version = "1.0.0"
        self.encodings: List[str] = list(self.config.get('encodings', DEFAULT_ENCODINGS))

    def extract(self, data: bytes, file_name: Optional[str] = None,
                cancel_token: Optional[CancellationToken] = None) -> ParsedDocument:
        """Decode and trim a plain text file."""
        if cancel_token:
            cancel_token.raise_if_cancelled(file_name)

        content = self._decode_text(data)
        return self._finish(content, file_name)

    def _decode_text(self, data: bytes) -> str:
        """Decode bytes trying each configured encoding in turn."""
        for encoding in self.encodings:
            try:
                return data.decode(encoding)
            except (UnicodeDecodeError, LookupError):
                continue

        # Final fallback
        logger.warning("No configured encoding matched, decoding with replacement characters")
        return data.decode('utf-8', errors='replace')
