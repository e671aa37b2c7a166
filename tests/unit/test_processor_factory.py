from unittest.mock import MagicMock

import pytest

from docingest.pdf.pdfplumber_adapter import PdfPlumberAdapter
from docingest.pdf.pymupdf_adapter import PyMuPdfAdapter
from docingest.processors.drawing_processor import DrawingProcessor
from docingest.processors.factory import ProcessorFactory
from docingest.processors.metadata_extractor import FileMetadataExtractor
from docingest.processors.text_processor import TextProcessor


def _make_settings(pdf_engine: str = "pdfplumber") -> MagicMock:
    return MagicMock(pdf_engine=pdf_engine, text_encoding="utf-8")


class TestPdfExtractorSelection:
    def test_creates_pdfplumber_adapter(self) -> None:
        adapter = ProcessorFactory.create_pdf_extractor(_make_settings("pdfplumber"))
        assert isinstance(adapter, PdfPlumberAdapter)

    def test_creates_pymupdf_adapter(self) -> None:
        adapter = ProcessorFactory.create_pdf_extractor(_make_settings("pymupdf"))
        assert isinstance(adapter, PyMuPdfAdapter)

    def test_is_case_insensitive(self) -> None:
        adapter = ProcessorFactory.create_pdf_extractor(_make_settings("PdfPlumber"))
        assert isinstance(adapter, PdfPlumberAdapter)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            ProcessorFactory.create_pdf_extractor(_make_settings("unknown"))


class TestProcessorCreation:
    def test_creates_bundled_processors(self) -> None:
        settings = _make_settings()
        assert isinstance(ProcessorFactory.create_text_processor(settings), TextProcessor)
        assert isinstance(ProcessorFactory.create_drawing_processor(settings), DrawingProcessor)
        assert isinstance(
            ProcessorFactory.create_metadata_extractor(settings), FileMetadataExtractor
        )

    def test_text_processor_fails_fast_on_unknown_engine(self) -> None:
        with pytest.raises(ValueError):
            ProcessorFactory.create_text_processor(_make_settings("ghostscript"))
