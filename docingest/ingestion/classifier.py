from docingest.ingestion.models import FileTypeTag, UploadedItem, extension_of

DRAWING_EXTENSIONS: frozenset[str] = frozenset({"dwg", "dxf", "rvt", "ifc"})
TEXT_EXTENSIONS: frozenset[str] = frozenset({"pdf", "doc", "docx", "txt"})
ACCEPTED_EXTENSIONS: frozenset[str] = DRAWING_EXTENSIONS | TEXT_EXTENSIONS


def assert_disjoint_extension_sets(
    drawing: frozenset[str] = DRAWING_EXTENSIONS,
    text: frozenset[str] = TEXT_EXTENSIONS,
) -> None:
    """Fail fast if an extension would match both drawing and text."""
    overlap = drawing & text
    if overlap:
        raise ValueError(f"Extension sets overlap: {sorted(overlap)}")


def classify_name(name: str) -> FileTypeTag:
    """Map a file name to its type tag by extension. Pure and total."""
    extension = extension_of(name)
    if extension in DRAWING_EXTENSIONS:
        return FileTypeTag.DRAWING
    if extension in TEXT_EXTENSIONS:
        return FileTypeTag.TEXT
    return FileTypeTag.UNKNOWN


def classify(item: UploadedItem) -> FileTypeTag:
    return classify_name(item.name)
