from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class TextContent:
    """Output of the text processor."""

    text: str
    format: str  # "pdf", "docx" or "txt"
    char_count: int
    page_count: int | None = None

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class DrawingContent:
    """Output of the drawing processor."""

    format: str  # "dwg", "dxf", "rvt" or "ifc"
    size_bytes: int
    sha256: str
    version: str | None = None  # AutoCAD release code, e.g. "AC1032"
    schema: str | None = None  # IFC schema identifier, e.g. "IFC4"

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


ProcessedContent = TextContent | DrawingContent
