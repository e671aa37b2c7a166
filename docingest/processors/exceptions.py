class ProcessorAdapterError(Exception):
    """Base exception for the bundled processor adapters."""


class TextProcessingError(ProcessorAdapterError):
    """Raised when a text document cannot be turned into text."""


class DrawingProcessingError(ProcessorAdapterError):
    """Raised when a drawing file cannot be processed."""


class MetadataExtractionError(ProcessorAdapterError):
    """Raised when metadata cannot be read from a file."""
