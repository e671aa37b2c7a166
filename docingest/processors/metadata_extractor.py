import hashlib
import io
import mimetypes
from typing import Any

import docx
import pdfplumber

from docingest.ingestion.models import UploadedItem
from docingest.logging.logger import Log
from docingest.processors.base import BaseMetadataExtractor
from docingest.processors.exceptions import MetadataExtractionError

# Not in every platform's mimetypes table.
_EXTRA_MIME_TYPES = {
    "dwg": "image/vnd.dwg",
    "dxf": "image/vnd.dxf",
    "ifc": "application/x-step",
    "rvt": "application/octet-stream",
}


class FileMetadataExtractor(BaseMetadataExtractor):
    """Basic file facts plus document properties for pdf and docx."""

    def extract(self, item: UploadedItem) -> dict[str, Any]:
        metadata: dict[str, Any] = {
            "name": item.name,
            "extension": item.extension,
            "size_bytes": item.size_bytes,
            "size_mb": item.size_mb,
            "mime_type": self._guess_mime_type(item),
            "sha256": hashlib.sha256(item.content).hexdigest(),
        }
        if item.extension == "pdf":
            metadata.update(self._pdf_metadata(item))
        elif item.extension == "docx":
            metadata.update(self._docx_metadata(item))

        Log.debug(f"Extracted metadata for {item.name}: {sorted(metadata)}")
        return metadata

    @staticmethod
    def _guess_mime_type(item: UploadedItem) -> str | None:
        mime_type, _encoding = mimetypes.guess_type(item.name)
        return mime_type or _EXTRA_MIME_TYPES.get(item.extension)

    @staticmethod
    def _pdf_metadata(item: UploadedItem) -> dict[str, Any]:
        try:
            with pdfplumber.open(io.BytesIO(item.content)) as pdf:
                info = {
                    key: str(value)
                    for key, value in (pdf.metadata or {}).items()
                }
                page_count = len(pdf.pages)
        except Exception as exc:
            raise MetadataExtractionError(
                f"{item.name}: cannot read PDF metadata: {exc}"
            ) from exc
        return {"page_count": page_count, "document_info": info}

    @staticmethod
    def _docx_metadata(item: UploadedItem) -> dict[str, Any]:
        try:
            props = docx.Document(io.BytesIO(item.content)).core_properties
        except Exception as exc:
            raise MetadataExtractionError(
                f"{item.name}: cannot read DOCX properties: {exc}"
            ) from exc
        return {
            "document_info": {
                "title": props.title,
                "author": props.author,
                "subject": props.subject,
                "created": props.created.isoformat() if props.created else None,
                "modified": props.modified.isoformat() if props.modified else None,
                "revision": props.revision,
            }
        }
