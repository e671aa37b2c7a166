from typing import Any

from docingest.ingestion.exceptions import ExtractionError
from docingest.ingestion.models import UploadedItem
from docingest.processors.base import BaseMetadataExtractor


class MetadataExtractorAdapter:
    """Gives any metadata extractor a uniform failure mode."""

    def __init__(self, extractor: BaseMetadataExtractor) -> None:
        self._extractor = extractor

    def extract(self, item: UploadedItem) -> dict[str, Any]:
        """Extract metadata for an item.

        Raises:
            ExtractionError: if the extractor raises or returns a non-dict.
        """
        try:
            metadata = self._extractor.extract(item)
        except Exception as exc:
            raise ExtractionError(str(exc)) from exc
        if not isinstance(metadata, dict):
            raise ExtractionError(
                f"Metadata extractor returned {type(metadata).__name__}, expected dict"
            )
        return metadata
