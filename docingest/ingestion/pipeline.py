"""Sequential ingestion pipeline.

Each item of a batch moves through:

    pending -> metadata_extracted -> classified -> dispatched -> succeeded | failed

Items are handled one at a time in submission order. A failing item is
recorded as a failure outcome and never aborts the rest of the batch.
Metadata is extracted for every item before dispatch, so items with an
unknown type still cost one extraction call before they are rejected.
"""

import copy
import threading
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from docingest.config.settings import Settings
from docingest.ingestion.classifier import assert_disjoint_extension_sets, classify
from docingest.ingestion.exceptions import (
    ExtractionError,
    InvalidSubmissionError,
    ProcessingError,
)
from docingest.ingestion.metadata import MetadataExtractorAdapter
from docingest.ingestion.models import (
    FailureOutcome,
    FileTypeTag,
    ItemState,
    ProcessingOutcome,
    SuccessOutcome,
    UploadedItem,
)
from docingest.ingestion.registry import ProcessorRegistry
from docingest.ingestion.result_store import ResultStore
from docingest.logging.logger import Log
from docingest.processors.factory import ProcessorFactory
from docingest.processors.models import ProcessedContent

CANCELLED_MESSAGE = "Batch cancelled"


@dataclass(slots=True)
class PipelineContext:
    item: UploadedItem
    tag: FileTypeTag = FileTypeTag.UNKNOWN
    state: ItemState = ItemState.PENDING
    metadata: dict[str, Any] | None = None
    content: ProcessedContent | None = None
    error_message: str = ""

    def advance(self, state: ItemState) -> None:
        if self.state.is_terminal:
            raise RuntimeError(
                f"Item {self.item.name} is already {self.state.value}"
            )
        Log.debug(f"{self.item.name}: {self.state.value} -> {state.value}")
        self.state = state


class IngestionPipeline:
    """Classifies, extracts metadata for, and dispatches uploaded items."""

    def __init__(
        self,
        metadata_adapter: MetadataExtractorAdapter,
        registry: ProcessorRegistry,
        store: ResultStore | None = None,
    ) -> None:
        self._metadata_adapter = metadata_adapter
        self._registry = registry
        self._store = store if store is not None else ResultStore()

    @property
    def store(self) -> ResultStore:
        return self._store

    def submit(
        self,
        items: Sequence[UploadedItem],
        cancel_event: threading.Event | None = None,
    ) -> list[ProcessingOutcome]:
        """Process a batch and append one outcome per item to the store.

        Args:
            items: Uploaded items, processed in this order.
            cancel_event: Checked between items. Once set, the remaining
                items are recorded as cancelled without being processed.

        Returns:
            The outcomes of this batch, in submission order.

        Raises:
            InvalidSubmissionError: if the batch or any entry is malformed.
                Nothing is processed in that case.
        """
        batch = self._validate(items)
        Log.info(f"Processing batch of {len(batch)} files")

        outcomes: list[ProcessingOutcome] = []
        for item in batch:
            if cancel_event is not None and cancel_event.is_set():
                outcome: ProcessingOutcome = FailureOutcome(
                    file_name=item.name, error_message=CANCELLED_MESSAGE
                )
                Log.warning(f"Skipping {item.name}: batch cancelled")
            else:
                outcome = self._process_item(item)
            self._store.append(outcome)
            outcomes.append(outcome)

        failed = sum(1 for outcome in outcomes if not outcome.succeeded)
        Log.info(
            f"Batch finished: {len(outcomes) - failed} succeeded, {failed} failed"
        )
        return outcomes

    def results(self) -> list[ProcessingOutcome]:
        return self._store.all()

    @staticmethod
    def _validate(items: Sequence[UploadedItem] | None) -> list[UploadedItem]:
        if items is None:
            raise InvalidSubmissionError("Batch must not be None")
        batch = list(items)
        for index, item in enumerate(batch):
            if not isinstance(item, UploadedItem):
                raise InvalidSubmissionError(
                    f"Batch entry {index} is {type(item).__name__}, expected UploadedItem"
                )
            if not isinstance(item.name, str):
                raise InvalidSubmissionError(
                    f"Batch entry {index} has a {type(item.name).__name__} name, expected str"
                )
            if not isinstance(item.content, bytes):
                raise InvalidSubmissionError(
                    f"Batch entry {index} ({item.name}) has "
                    f"{type(item.content).__name__} content, expected bytes"
                )
        return batch

    def _process_item(self, item: UploadedItem) -> ProcessingOutcome:
        context = PipelineContext(item=item, tag=classify(item))

        try:
            context.metadata = self._metadata_adapter.extract(item)
            context.advance(ItemState.METADATA_EXTRACTED)
            context.advance(ItemState.CLASSIFIED)
            context.advance(ItemState.DISPATCHED)
            context.content = self._registry.dispatch(context.tag, item)
        except (ExtractionError, ProcessingError) as exc:
            context.error_message = str(exc)
            context.advance(ItemState.FAILED)
            Log.error(f"Error processing {item.name}: {exc}")
            return FailureOutcome(file_name=item.name, error_message=context.error_message)

        context.advance(ItemState.SUCCEEDED)
        Log.info(f"Processed {item.name} as {context.tag.value}")
        return SuccessOutcome(
            file_name=item.name,
            file_type=context.tag,
            metadata=copy.deepcopy(context.metadata),
            content=context.content,
        )


def build_pipeline(
    settings: Settings,
    store: ResultStore | None = None,
) -> IngestionPipeline:
    """Build an IngestionPipeline with the bundled extractor and processors."""
    assert_disjoint_extension_sets()
    registry = ProcessorRegistry()
    registry.register(FileTypeTag.DRAWING, ProcessorFactory.create_drawing_processor(settings))
    registry.register(FileTypeTag.TEXT, ProcessorFactory.create_text_processor(settings))
    adapter = MetadataExtractorAdapter(ProcessorFactory.create_metadata_extractor(settings))
    return IngestionPipeline(metadata_adapter=adapter, registry=registry, store=store)
