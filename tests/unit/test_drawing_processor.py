import hashlib

import pytest

from docingest.ingestion.models import UploadedItem
from docingest.processors.drawing_processor import DrawingProcessor
from docingest.processors.exceptions import DrawingProcessingError


def _make_item(name: str, content: bytes) -> UploadedItem:
    return UploadedItem(name=name, size_bytes=len(content), content=content)


class TestDrawingProcessor:
    def test_dwg_release_code(self, sample_dwg_bytes: bytes) -> None:
        content = DrawingProcessor().process(_make_item("plan.dwg", sample_dwg_bytes))

        assert content.format == "dwg"
        assert content.version == "AC1032"
        assert content.size_bytes == len(sample_dwg_bytes)
        assert content.sha256 == hashlib.sha256(sample_dwg_bytes).hexdigest()

    def test_dwg_without_release_code_raises(self) -> None:
        with pytest.raises(DrawingProcessingError, match="release code"):
            DrawingProcessor().process(_make_item("plan.dwg", b"garbage bytes"))

    def test_dxf_acadver(self, sample_dxf_bytes: bytes) -> None:
        content = DrawingProcessor().process(_make_item("site.DXF", sample_dxf_bytes))

        assert content.format == "dxf"
        assert content.version == "AC1027"
        assert content.schema is None

    def test_dxf_without_header_has_no_version(self) -> None:
        content = DrawingProcessor().process(
            _make_item("site.dxf", b"  0\nSECTION\n  2\nENTITIES\n  0\nENDSEC\n")
        )
        assert content.version is None

    def test_ifc_schema(self, sample_ifc_bytes: bytes) -> None:
        content = DrawingProcessor().process(_make_item("model.ifc", sample_ifc_bytes))

        assert content.format == "ifc"
        assert content.schema == "IFC4"
        assert content.version is None

    def test_rvt_is_fingerprinted_only(self) -> None:
        data = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1" + b"\x00" * 56
        content = DrawingProcessor().process(_make_item("tower.rvt", data))

        assert content.format == "rvt"
        assert content.version is None
        assert content.schema is None

    def test_empty_file_raises(self) -> None:
        with pytest.raises(DrawingProcessingError, match="empty"):
            DrawingProcessor().process(_make_item("plan.dxf", b""))

    def test_non_drawing_extension_raises(self) -> None:
        with pytest.raises(DrawingProcessingError, match="not a drawing"):
            DrawingProcessor().process(_make_item("notes.txt", b"hello"))
