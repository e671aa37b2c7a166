from pathlib import Path

from docingest.ingestion.exceptions import FileReadError
from docingest.ingestion.models import UploadedItem


class FileLoader:
    """Reads uploaded files from disk into UploadedItem values."""

    UPLOADS_ROOT = Path("/app/uploads")

    def __init__(self, uploads_root: Path | None = None) -> None:
        self._uploads_root = uploads_root if uploads_root is not None else self.UPLOADS_ROOT

    def load(self, path: Path | str) -> UploadedItem:
        """Read a file; relative paths resolve against the uploads root.

        Raises:
            FileNotFoundError: if nothing exists at the resolved path.
            FileReadError: if the path is not a regular file or cannot be read.
        """
        resolved = self._resolve_path(Path(path))
        if not resolved.exists():
            raise FileNotFoundError(f"File not found: {resolved}")
        if not resolved.is_file():
            raise FileReadError(f"Not a regular file: {resolved}")
        try:
            content = resolved.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Cannot read {resolved}: {exc}") from exc
        return UploadedItem(name=resolved.name, size_bytes=len(content), content=content)

    def discover(self) -> list[Path]:
        """List the regular files directly under the uploads root, by name."""
        if not self._uploads_root.is_dir():
            return []
        return sorted(
            (p for p in self._uploads_root.iterdir() if p.is_file()),
            key=lambda p: p.name,
        )

    def _resolve_path(self, path: Path) -> Path:
        return path if path.is_absolute() else self._uploads_root / path
