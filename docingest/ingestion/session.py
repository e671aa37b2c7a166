from collections.abc import Iterable
from pathlib import Path

from docingest.ingestion.classifier import ACCEPTED_EXTENSIONS
from docingest.ingestion.exceptions import SessionBusyError
from docingest.ingestion.models import ProcessingOutcome, UploadedItem
from docingest.ingestion.pipeline import IngestionPipeline
from docingest.logging.logger import Log


class UploadSession:
    """Selected files plus the accumulated results of every processing run.

    Files added across several uploads are kept together; each call to
    ``process`` submits all of them and appends to the same result log.

    A session is meant for one caller at a time. ``is_processing`` guards
    against re-entrant calls from that caller; it is a plain flag, not a
    lock, so concurrent callers on different threads need their own
    session or their own synchronization.
    """

    def __init__(self, pipeline: IngestionPipeline) -> None:
        self._pipeline = pipeline
        self._files: list[UploadedItem] = []
        self._processing = False

    @property
    def is_processing(self) -> bool:
        return self._processing

    def add_files(self, items: Iterable[UploadedItem]) -> None:
        for item in items:
            if item.extension not in ACCEPTED_EXTENSIONS:
                Log.warning(
                    f"{item.name} has extension '{item.extension}', "
                    f"accepted: {sorted(ACCEPTED_EXTENSIONS)}"
                )
            self._files.append(item)
            Log.debug(f"Selected {item.name} ({item.size_mb:.2f} MB)")

    def selected_files(self) -> list[UploadedItem]:
        return list(self._files)

    def process(self) -> list[ProcessingOutcome]:
        """Submit every selected file as one batch.

        Raises:
            SessionBusyError: if a run is already in progress.
        """
        if self._processing:
            raise SessionBusyError("A processing run is already in progress")
        self._processing = True
        try:
            return self._pipeline.submit(self._files)
        finally:
            self._processing = False

    def results(self) -> list[ProcessingOutcome]:
        return self._pipeline.results()

    def export_results(self, path: Path) -> None:
        Log.info(f"Writing {len(self.results())} results to {path}")
        self._pipeline.store.export_json(path)
