"""Extraction error kinds."""

from typing import Optional


class ExtractionError(Exception):
    """Base class for terminal, per-file extraction failures."""

    kind = "ExtractionError"

    def __init__(self, message: str, file_name: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.file_name = file_name

    def __str__(self) -> str:
        return self.message


class UnsupportedFormat(ExtractionError):
    """File extension is not one of pdf, doc, docx or txt."""

    kind = "UnsupportedFormat"


class MissingDocumentPart(ExtractionError):
    """DOCX archive has no main document part."""

    kind = "MissingDocumentPart"


class CorruptArchive(ExtractionError):
    """DOCX archive or its markup could not be parsed."""

    kind = "CorruptArchive"


class CorruptDocument(ExtractionError):
    """PDF bytes could not be opened or read."""

    kind = "CorruptDocument"


class InsufficientText(ExtractionError):
    """Extracted text is too short to study from."""

    kind = "InsufficientText"


class ExtractionCancelled(ExtractionError):
    """Extraction was cancelled before it finished."""

    kind = "ExtractionCancelled"
