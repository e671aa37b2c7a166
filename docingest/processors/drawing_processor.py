"""Header-level processing of CAD and BIM drawings.

Drawings are not rendered or converted here. The processor fingerprints
the file and reads the format version from the header where the format
keeps one in plain bytes:

- DWG: the first six bytes are the release code, e.g. ``AC1032``.
- DXF: the ``$ACADVER`` header variable, followed by group code 1 and the
  release code.
- IFC: the ``FILE_SCHEMA`` entry of the STEP header, e.g. ``IFC4``.
- RVT: an OLE compound file; only the fingerprint is recorded.
"""

import hashlib
import re

from docingest.ingestion.models import UploadedItem
from docingest.logging.logger import Log
from docingest.processors.base import BaseProcessor
from docingest.processors.exceptions import DrawingProcessingError
from docingest.processors.models import DrawingContent

_DWG_VERSION_RE = re.compile(rb"^AC\d{4}")
_DXF_VERSION_RE = re.compile(rb"\$ACADVER\s*\r?\n\s*1\s*\r?\n\s*(AC\d{4})")
_IFC_SCHEMA_RE = re.compile(rb"FILE_SCHEMA\s*\(\s*\(\s*'([A-Za-z0-9_]+)'")

# STEP and DXF headers sit at the top of the file.
_HEADER_SCAN_BYTES = 64 * 1024


class DrawingProcessor(BaseProcessor):
    """Fingerprints drawings and reads their format version."""

    FORMATS = ("dwg", "dxf", "rvt", "ifc")

    def process(self, item: UploadedItem) -> DrawingContent:
        extension = item.extension
        if extension not in self.FORMATS:
            raise DrawingProcessingError(f"{item.name}: not a drawing file")
        if not item.content:
            raise DrawingProcessingError(f"{item.name}: file is empty")

        header = item.content[:_HEADER_SCAN_BYTES]
        version: str | None = None
        schema: str | None = None
        if extension == "dwg":
            version = self._dwg_version(item, header)
        elif extension == "dxf":
            version = self._match(_DXF_VERSION_RE, header)
        elif extension == "ifc":
            schema = self._match(_IFC_SCHEMA_RE, header)

        Log.debug(f"{item.name}: {extension} version={version} schema={schema}")
        return DrawingContent(
            format=extension,
            size_bytes=len(item.content),
            sha256=hashlib.sha256(item.content).hexdigest(),
            version=version,
            schema=schema,
        )

    @staticmethod
    def _dwg_version(item: UploadedItem, header: bytes) -> str:
        match = _DWG_VERSION_RE.match(header)
        if match is None:
            raise DrawingProcessingError(f"{item.name}: missing DWG release code")
        return match.group(0).decode("ascii")

    @staticmethod
    def _match(pattern: re.Pattern[bytes], header: bytes) -> str | None:
        match = pattern.search(header)
        if match is None:
            return None
        return match.group(1).decode("ascii")
