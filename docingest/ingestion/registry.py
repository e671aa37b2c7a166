from docingest.ingestion.exceptions import DelegateError, UnsupportedTypeError
from docingest.ingestion.models import FileTypeTag, UploadedItem
from docingest.logging.logger import Log
from docingest.processors.base import BaseProcessor
from docingest.processors.models import DrawingContent, ProcessedContent, TextContent


class ProcessorRegistry:
    """Maps type tags to the processors that handle them."""

    def __init__(self) -> None:
        self._processors: dict[FileTypeTag, BaseProcessor] = {}

    def register(self, tag: FileTypeTag, processor: BaseProcessor) -> None:
        """Register (or replace) the processor for a tag."""
        if tag is FileTypeTag.UNKNOWN:
            raise ValueError("Cannot register a processor for the unknown tag")
        self._processors[tag] = processor
        Log.debug(f"Registered {type(processor).__name__} for {tag.value}")

    def is_registered(self, tag: FileTypeTag) -> bool:
        return tag in self._processors

    def registered_tags(self) -> list[FileTypeTag]:
        return list(self._processors)

    def dispatch(self, tag: FileTypeTag, item: UploadedItem) -> ProcessedContent:
        """Route an item to the processor registered for its tag.

        Raises:
            UnsupportedTypeError: if no processor handles the tag. Raised before
                any processor is called.
            DelegateError: if the processor fails, carrying its message unchanged,
                or returns something other than processed content.
        """
        processor = self._processors.get(tag)
        if processor is None:
            raise UnsupportedTypeError(tag)
        try:
            content = processor.process(item)
        except Exception as exc:
            raise DelegateError(str(exc)) from exc
        if not isinstance(content, (TextContent, DrawingContent)):
            raise DelegateError(
                f"{type(processor).__name__} returned {type(content).__name__}, "
                "expected processed content"
            )
        return content
