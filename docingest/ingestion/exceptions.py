from docingest.ingestion.models import FileTypeTag


class IngestionError(Exception):
    """Base exception for all ingestion-related errors."""


class ExtractionError(IngestionError):
    """Raised when metadata extraction fails for an item."""


class ProcessingError(IngestionError):
    """Raised when an item cannot be processed by its type-specific processor."""


class UnsupportedTypeError(ProcessingError):
    """Raised when no processor is registered for the item's tag."""

    def __init__(self, tag: FileTypeTag) -> None:
        self.tag = tag
        super().__init__(f"Unsupported file type: {tag.value}")


class DelegateError(ProcessingError):
    """Wraps a failure raised by an external processor. Message is kept verbatim."""


class InvalidSubmissionError(IngestionError):
    """Raised when a batch is malformed at the API boundary."""


class SessionBusyError(IngestionError):
    """Raised when a session is asked to process while a run is in flight."""


class FileReadError(IngestionError):
    """Raised when an uploaded file cannot be read from disk."""
