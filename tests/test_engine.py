"""
Engine and Command-Line Tests
"""
import json

import pytest

from study_extraction import (
    CancellationToken,
    ExtractionCancelled,
    FileType,
    InsufficientText,
    ParsedDocument,
    StudyAids,
    StudyMaterialEngine,
    UnsupportedFormat,
    parse_document,
)
from study_extraction.__main__ import main
from study_extraction.utils.file_utils import FileTypeDetector

from .conftest import FakePdfTextService, FakePdfTextSource, build_docx, build_pdf


class TestFileTypeDetector:
    """Test extension-based dispatch"""

    def setup_method(self):
        self.detector = FileTypeDetector()

    @pytest.mark.parametrize("file_name, expected", [
        ("lecture.pdf", FileType.PDF),
        ("LECTURE.PDF", FileType.PDF),
        ("notes.docx", FileType.DOCX),
        ("old.doc", FileType.DOCX),
        ("reading.TXT", FileType.TEXT),
        ("archive.tar.txt", FileType.TEXT),
        ("report.rtf", FileType.UNKNOWN),
        ("README", FileType.UNKNOWN),
    ])
    def test_detect(self, file_name, expected):
        assert self.detector.detect_file_type(file_name) == expected

    def test_require_supported_rejects_rtf(self):
        with pytest.raises(UnsupportedFormat) as exc_info:
            self.detector.require_supported("report.rtf")

        assert "rtf" in str(exc_info.value)
        assert exc_info.value.file_name == "report.rtf"

    def test_supported_extensions(self):
        assert self.detector.get_supported_extensions() == {"pdf", "doc", "docx", "txt"}


class TestStudyMaterialEngine:
    """Test parsing and analysis through the engine"""

    def test_unsupported_format_fails_before_reading(self, engine):
        # None would fail on any attempt to read it
        with pytest.raises(UnsupportedFormat):
            engine.parse("report.rtf", None)

    def test_parse_file_rejects_before_opening(self, engine, tmp_path):
        with pytest.raises(UnsupportedFormat):
            engine.parse_file(tmp_path / "missing.rtf")

    def test_parse_txt(self, engine, study_text):
        document = engine.parse("biology.txt", study_text.encode("utf-8"))

        assert isinstance(document, ParsedDocument)
        assert document.text == study_text
        assert document.word_count == len(study_text.split())

    def test_parse_docx(self, engine, study_text):
        document = engine.parse("biology.docx", build_docx([study_text]))
        assert document.text == study_text

    def test_parse_pdf_with_injected_service(self, study_text):
        source = FakePdfTextSource([study_text.split()[:20], study_text.split()[20:]])
        engine = StudyMaterialEngine({
            'extractors': {'pdf': {'text_service': FakePdfTextService(source), 'max_workers': 2}}
        })
        document = engine.parse("biology.pdf", b"%PDF")

        assert document.page_count == 2
        assert document.word_count == len(study_text.split())

    def test_parse_real_pdf(self, engine):
        data = build_pdf([
            "Alpha decay emits a helium nucleus from heavy atoms.",
            "Beta decay converts a neutron into a proton.",
            "Gamma decay releases energy as a photon.",
        ])
        document = engine.parse("decay.pdf", data)

        assert document.page_count == 3
        assert document.text.index("Alpha") < document.text.index("Beta") < document.text.index("Gamma")

    def test_parse_document_helper(self):
        with pytest.raises(InsufficientText):
            parse_document("tiny.txt", b"too short")

    def test_cancelled_parse(self, engine, study_text):
        token = CancellationToken()
        token.cancel()
        with pytest.raises(ExtractionCancelled):
            engine.parse("biology.txt", study_text.encode("utf-8"), cancel_token=token)

    def test_analyze(self, engine, study_text):
        aids = engine.analyze(engine.parse("biology.txt", study_text.encode("utf-8")))

        assert isinstance(aids, StudyAids)
        assert aids.summary.endswith(".")
        assert "Photosynthesis" in aids.key_terms
        assert "Cambridge University" not in aids.key_terms
        assert "Photosynthesis: process by which green plants convert light into chemical energy" in aids.concepts
        assert aids.topics == ["Science"]

    def test_analyze_raw_text_fallbacks(self, engine):
        aids = engine.analyze("Short. Text.")

        assert aids.summary == "Short. Text...."
        assert aids.key_terms == []
        assert aids.concepts == []
        assert aids.topics == ["General Knowledge"]

    def test_analysis_limits(self, engine, study_text):
        aids = engine.analyze(study_text, max_sentences=1, max_terms=2, max_concepts=1)

        assert len(aids.key_terms) <= 2
        assert len(aids.concepts) == 1
        assert aids.summary.count(". ") == 0

    def test_extraction_stats(self, engine):
        stats = engine.get_extraction_stats()
        assert stats["total_extractors"] == 3
        assert stats["supported_extensions"] == ["doc", "docx", "pdf", "txt"]


class TestExtractBatch:
    """Test batch extraction"""

    def test_mixed_batch(self, engine, study_text, tmp_path):
        good = tmp_path / "good.txt"
        good.write_text(study_text, encoding="utf-8")
        short = tmp_path / "short.txt"
        short.write_text("tiny", encoding="utf-8")
        unsupported = tmp_path / "slides.pptx"
        unsupported.write_bytes(b"PK")
        docx = tmp_path / "notes.docx"
        docx.write_bytes(build_docx([study_text]))

        progress = []
        result = engine.extract_batch(
            [good, short, unsupported, docx],
            progress_callback=lambda done, total, outcome: progress.append((done, total)),
        )

        assert result.total_files == 4
        assert result.successful_extractions == 2
        assert result.failed_extractions == 2
        assert result.success_rate == 50.0
        assert [outcome.error_kind for outcome in result.outcomes] == [
            None, "InsufficientText", "UnsupportedFormat", None
        ]
        assert progress == [(1, 4), (2, 4), (3, 4), (4, 4)]

    def test_missing_file_is_a_failed_outcome(self, engine, tmp_path):
        result = engine.extract_batch([tmp_path / "gone.txt"])

        assert result.failed_extractions == 1
        assert isinstance(result.outcomes[0].error, FileNotFoundError)

    def test_empty_batch(self, engine):
        result = engine.extract_batch([])
        assert result.total_files == 0
        assert result.success_rate == 0.0

    def test_extract_directory(self, engine, study_text, tmp_path):
        (tmp_path / "a.txt").write_text(study_text, encoding="utf-8")
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "b.txt").write_text(study_text, encoding="utf-8")
        (tmp_path / "ignored.csv").write_text("a,b", encoding="utf-8")
        (tmp_path / ".hidden.txt").write_text(study_text, encoding="utf-8")

        result = engine.extract_directory(tmp_path)

        assert result.total_files == 2
        assert result.successful_extractions == 2


class TestCommandLine:
    """Test the JSON report command"""

    def test_reports_study_aids(self, study_text, tmp_path, capsys):
        path = tmp_path / "biology.txt"
        path.write_text(study_text, encoding="utf-8")

        exit_code = main([str(path), "--max-terms", "5"])
        reports = json.loads(capsys.readouterr().out)

        assert exit_code == 0
        assert reports[0]["file"] == str(path)
        assert reports[0]["document"]["word_count"] == len(study_text.split())
        assert len(reports[0]["study_aids"]["key_terms"]) <= 5
        assert reports[0]["study_aids"]["topics"] == ["Science"]

    def test_reports_errors(self, tmp_path, capsys):
        path = tmp_path / "short.txt"
        path.write_text("tiny", encoding="utf-8")

        exit_code = main([str(path)])
        reports = json.loads(capsys.readouterr().out)

        assert exit_code == 1
        assert reports[0]["error"]["kind"] == "InsufficientText"

    def test_no_documents(self, tmp_path, capsys):
        assert main([str(tmp_path)]) == 1
