from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class PdfText:
    """Text pulled out of a PDF, pages joined by newlines."""

    text: str
    page_count: int


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> PdfText:
        """Extract plain text from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            PdfText with the stripped text of all pages and the page count.

        Raises:
            PdfExtractionError: if extraction fails for any reason.
        """
