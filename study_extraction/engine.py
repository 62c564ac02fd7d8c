"""Main StudyMaterialEngine for turning uploaded files into study aids."""

import logging
import multiprocessing
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, List, Optional, Dict, Any, Union

from .analysis.concepts import extract_concepts
from .analysis.key_terms import extract_key_terms
from .analysis.summarizer import generate_summary
from .analysis.topics import classify_topics
from .core.base import BaseExtractor, CancellationToken
from .core.errors import ExtractionError
from .core.models import (
    ExtractionOutcome,
    ExtractionResult,
    FileType,
    ParsedDocument,
    StudyAids,
)
from .extractors.office_extractor import OfficeExtractor
from .extractors.pdf_extractor import PDFExtractor
from .extractors.text_extractor import TextExtractor
from .utils.file_utils import FileTypeDetector, FileScanner

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, ExtractionOutcome], None]

class StudyMaterialEngine:
    """Dispatches uploads to format extractors and derives study aids."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.file_detector = FileTypeDetector()
        self.file_scanner = FileScanner(self.file_detector)

        # Performance settings
        self.max_workers = self.config.get('max_workers', min(32, (multiprocessing.cpu_count() or 1) + 4))
        self.batch_size = self.config.get('batch_size', 10)

        self.extractors = self._initialize_extractors()

        logger.debug(f"StudyMaterialEngine initialized with {len(self.extractors)} extractors")

    def _initialize_extractors(self) -> Dict[FileType, BaseExtractor]:
        """Initialize one extractor per supported file type."""
        extractor_config = self.config.get('extractors', {})

        return {
            FileType.PDF: PDFExtractor(extractor_config.get('pdf', {})),
            FileType.DOCX: OfficeExtractor(extractor_config.get('docx', {})),
            FileType.TEXT: TextExtractor(extractor_config.get('text', {})),
        }

    def get_supported_extensions(self) -> set:
        """Get all supported file extensions."""
        return self.file_detector.get_supported_extensions()

    def parse(self, file_name: str, data: bytes,
              cancel_token: Optional[CancellationToken] = None) -> ParsedDocument:
        """Extract a validated document from an uploaded file's name and bytes."""
        file_type = self.file_detector.require_supported(file_name)
        extractor = self.extractors[file_type]

        logger.info(f"Parsing {file_type.value.upper()} file: {file_name}")
        logger.info(f"File size: {len(data) / 1024:.2f} KB")
        logger.debug(f"Using {extractor.name} for {file_name}")

        return extractor.extract(data, file_name=file_name, cancel_token=cancel_token)

    def parse_file(self, file_path: Union[str, Path],
                   cancel_token: Optional[CancellationToken] = None) -> ParsedDocument:
        """Read a file from disk and parse it; unsupported names are rejected before reading."""
        file_path = Path(file_path)
        self.file_detector.require_supported(file_path.name)
        return self.parse(file_path.name, file_path.read_bytes(), cancel_token)

    def analyze(self, source: Union[ParsedDocument, str],
                max_sentences: int = 5,
                max_terms: int = 20,
                max_concepts: int = 8) -> StudyAids:
        """Derive every study aid from a parsed document or raw text."""
        text = source.text if isinstance(source, ParsedDocument) else source

        key_terms = extract_key_terms(text, max_terms)
        aids = StudyAids(
            summary=generate_summary(text, max_sentences),
            key_terms=key_terms,
            concepts=extract_concepts(text, max_concepts),
            topics=classify_topics(text, key_terms),
        )

        logger.info(f"Derived {len(aids.key_terms)} key terms, {len(aids.concepts)} concepts, "
                    f"topics: {', '.join(aids.topics)}")
        return aids

    def _extract_outcome(self, file_path: Path,
                         cancel_token: Optional[CancellationToken] = None) -> ExtractionOutcome:
        start_time = time.time()
        try:
            document = self.parse_file(file_path, cancel_token)
            return ExtractionOutcome(
                file_name=str(file_path),
                document=document,
                extraction_time=time.time() - start_time
            )
        except (ExtractionError, OSError) as e:
            logger.error(f"Extraction failed for {file_path}: {e}")
            return ExtractionOutcome(
                file_name=str(file_path),
                error=e,
                extraction_time=time.time() - start_time
            )

    def extract_batch(self, file_paths: List[Path],
                      progress_callback: Optional[ProgressCallback] = None,
                      cancel_token: Optional[CancellationToken] = None) -> ExtractionResult:
        """Extract multiple files in parallel; per-file failures never abort the batch."""
        start_time = time.time()
        total_files = len(file_paths)

        if total_files == 0:
            return ExtractionResult(
                outcomes=[],
                total_files=0,
                successful_extractions=0,
                failed_extractions=0,
                total_processing_time=0.0
            )

        logger.info(f"Starting batch extraction of {total_files} files")

        outcomes = []
        successful = 0
        failed = 0

        # Process files in batches to manage memory
        batch_size = max(1, min(self.batch_size, total_files))

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            for i in range(0, total_files, batch_size):
                batch = [Path(path) for path in file_paths[i:i + batch_size]]

                futures = [
                    executor.submit(self._extract_outcome, path, cancel_token)
                    for path in batch
                ]

                for future in futures:
                    outcome = future.result()
                    outcomes.append(outcome)

                    if outcome.success:
                        successful += 1
                    else:
                        failed += 1

                    if progress_callback:
                        progress_callback(successful + failed, total_files, outcome)

        total_time = time.time() - start_time

        logger.info(f"Batch extraction completed in {total_time:.2f}s")
        logger.info(f"Success: {successful}, Failed: {failed}, Success rate: {(successful/total_files)*100:.1f}%")

        return ExtractionResult(
            outcomes=outcomes,
            total_files=total_files,
            successful_extractions=successful,
            failed_extractions=failed,
            total_processing_time=total_time
        )

    def extract_directory(self, directory: Path,
                          recursive: bool = True,
                          include_hidden: bool = False,
                          progress_callback: Optional[ProgressCallback] = None) -> ExtractionResult:
        """Extract every supported file in a directory."""
        logger.info(f"Scanning directory: {directory}")

        file_paths = self.file_scanner.scan_directory(
            directory,
            recursive=recursive,
            include_hidden=include_hidden
        )

        return self.extract_batch(file_paths, progress_callback)

    def get_extraction_stats(self) -> Dict[str, Any]:
        """Get statistics about available extractors."""
        return {
            "total_extractors": len(self.extractors),
            "available_extractors": [
                {
                    "name": extractor.name,
                    "version": extractor.version,
                    "file_type": file_type.value,
                }
                for file_type, extractor in self.extractors.items()
            ],
            "supported_extensions": sorted(self.get_supported_extensions()),
            "max_workers": self.max_workers,
        }

def parse_document(file_name: str, data: bytes,
                   cancel_token: Optional[CancellationToken] = None,
                   config: Optional[Dict[str, Any]] = None) -> ParsedDocument:
    """Parse an uploaded file with a default engine."""
    return StudyMaterialEngine(config).parse(file_name, data, cancel_token)
