"""File utilities for study material extraction."""

from pathlib import Path
from typing import List, Optional, Set
import logging

from ..core.errors import UnsupportedFormat
from ..core.models import FileType

logger = logging.getLogger(__name__)

class FileTypeDetector:
    """Detect file types for extraction from the file name alone."""

    # Supported file extensions mapped to FileType
    EXTENSION_MAPPING = {
        'txt': FileType.TEXT,
        'pdf': FileType.PDF,
        'docx': FileType.DOCX,
        'doc': FileType.DOCX,  # legacy binary .doc fails later as a corrupt archive
    }

    def __init__(self):
        self.supported_extensions = set(self.EXTENSION_MAPPING.keys())

    @staticmethod
    def get_extension(file_name: str) -> str:
        """Return the lowercase text after the last dot, or '' when there is none."""
        name = Path(file_name).name
        if '.' not in name:
            return ''
        return name.rsplit('.', 1)[-1].lower()

    def detect_file_type(self, file_name: str) -> FileType:
        """Detect file type using the extension."""
        return self.EXTENSION_MAPPING.get(self.get_extension(file_name), FileType.UNKNOWN)

    def require_supported(self, file_name: str) -> FileType:
        """Detect the file type, raising UnsupportedFormat when unknown."""
        file_type = self.detect_file_type(file_name)
        if file_type == FileType.UNKNOWN:
            extension = self.get_extension(file_name) or '(none)'
            raise UnsupportedFormat(
                f"Unsupported file type: {extension}. Please upload PDF, DOCX, or TXT files.",
                file_name=file_name
            )
        return file_type

    def is_supported(self, file_name: str) -> bool:
        """Check if file type is supported for extraction."""
        return self.detect_file_type(file_name) != FileType.UNKNOWN

    def get_supported_extensions(self) -> Set[str]:
        """Get set of supported file extensions."""
        return self.supported_extensions.copy()

class FileScanner:
    """Scan directories for extractable study files."""

    def __init__(self, file_detector: Optional[FileTypeDetector] = None):
        self.detector = file_detector or FileTypeDetector()

    def scan_directory(self, directory: Path,
                      recursive: bool = True,
                      include_hidden: bool = False) -> List[Path]:
        """
        Scan directory for extractable files.

        Args:
            directory: Directory to scan
            recursive: Whether to scan subdirectories
            include_hidden: Whether to include hidden files

        Returns:
            Sorted list of file paths that can be extracted
        """
        if not directory.exists() or not directory.is_dir():
            logger.warning(f"Directory does not exist or is not a directory: {directory}")
            return []

        pattern = "**/*" if recursive else "*"
        files = []

        for file_path in directory.glob(pattern):
            if not file_path.is_file():
                continue

            if not include_hidden and file_path.name.startswith('.'):
                continue

            if self.detector.is_supported(file_path.name):
                files.append(file_path)
                logger.debug(f"Found extractable file: {file_path}")

        logger.info(f"Found {len(files)} extractable files in {directory}")
        return sorted(files)
