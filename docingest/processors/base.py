from abc import ABC, abstractmethod
from typing import Any

from docingest.ingestion.models import UploadedItem
from docingest.processors.models import ProcessedContent


class BaseProcessor(ABC):
    """Contract for all type-specific processors."""

    @abstractmethod
    def process(self, item: UploadedItem) -> ProcessedContent:
        """Turn an uploaded file into processed content.

        Args:
            item: The uploaded file, including its raw bytes.

        Returns:
            Processed content for the item's type.

        Raises:
            Exception: any failure; the registry wraps it as a delegate error.
        """


class BaseMetadataExtractor(ABC):
    """Contract for metadata extraction adapters."""

    @abstractmethod
    def extract(self, item: UploadedItem) -> dict[str, Any]:
        """Return a JSON-serializable metadata dict for the item."""
