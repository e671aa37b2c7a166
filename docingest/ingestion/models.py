import copy
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from docingest.processors.models import ProcessedContent


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def extension_of(name: str) -> str:
    """Lower-cased text after the last '.', empty when there is none."""
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1].lower()


@dataclass(frozen=True)
class UploadedItem:
    """A file submitted for ingestion. The pipeline only reads it."""

    name: str
    size_bytes: int
    content: bytes = field(repr=False)

    @property
    def extension(self) -> str:
        return extension_of(self.name)

    @property
    def size_mb(self) -> float:
        return round(self.size_bytes / 1024 / 1024, 2)


class FileTypeTag(str, Enum):
    DRAWING = "drawing"
    TEXT = "text"
    UNKNOWN = "unknown"


class ItemState(str, Enum):
    """Per-item lifecycle inside a batch. Transitions only move forward."""

    PENDING = "pending"
    METADATA_EXTRACTED = "metadata_extracted"
    CLASSIFIED = "classified"
    DISPATCHED = "dispatched"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (ItemState.SUCCEEDED, ItemState.FAILED)


@dataclass(frozen=True)
class SuccessOutcome:
    file_name: str
    file_type: FileTypeTag
    metadata: dict[str, Any]
    content: ProcessedContent
    timestamp: datetime = field(default_factory=utc_now)

    @property
    def succeeded(self) -> bool:
        return True

    def to_record(self) -> dict[str, object]:
        return {
            "fileName": self.file_name,
            "fileType": self.file_type.value,
            "metadata": copy.deepcopy(self.metadata),
            "content": self.content.to_dict(),
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class FailureOutcome:
    file_name: str
    error_message: str
    timestamp: datetime = field(default_factory=utc_now)

    @property
    def succeeded(self) -> bool:
        return False

    def to_record(self) -> dict[str, object]:
        return {
            "fileName": self.file_name,
            "error": self.error_message,
            "timestamp": self.timestamp.isoformat(),
        }


ProcessingOutcome = SuccessOutcome | FailureOutcome
