from docingest.config.settings import Settings
from docingest.pdf.base import BasePdfExtractor
from docingest.pdf.pdfplumber_adapter import PdfPlumberAdapter
from docingest.pdf.pymupdf_adapter import PyMuPdfAdapter
from docingest.processors.base import BaseMetadataExtractor, BaseProcessor
from docingest.processors.drawing_processor import DrawingProcessor
from docingest.processors.metadata_extractor import FileMetadataExtractor
from docingest.processors.text_processor import TextProcessor


class ProcessorFactory:
    """Creates the bundled processors and metadata extractor from settings."""

    PDF_ENGINES: dict[str, type[BasePdfExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create_pdf_extractor(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.PDF_ENGINES.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ENGINES)}"
            )
        return adapter_cls()

    @classmethod
    def create_text_processor(cls, settings: Settings) -> BaseProcessor:
        return TextProcessor(
            pdf_extractor=cls.create_pdf_extractor(settings),
            encoding=settings.text_encoding,
        )

    @classmethod
    def create_drawing_processor(cls, settings: Settings) -> BaseProcessor:
        _ = settings  # no configurable options yet
        return DrawingProcessor()

    @classmethod
    def create_metadata_extractor(cls, settings: Settings) -> BaseMetadataExtractor:
        _ = settings  # no configurable options yet
        return FileMetadataExtractor()
