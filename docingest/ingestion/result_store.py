import json
from pathlib import Path

from docingest.ingestion.models import FailureOutcome, ProcessingOutcome, SuccessOutcome


class ResultStore:
    """Append-only, insertion-ordered log of processing outcomes."""

    def __init__(self) -> None:
        self._outcomes: list[ProcessingOutcome] = []

    def append(self, outcome: ProcessingOutcome) -> None:
        if not isinstance(outcome, (SuccessOutcome, FailureOutcome)):
            raise TypeError(
                f"Expected a processing outcome, got {type(outcome).__name__}"
            )
        self._outcomes.append(outcome)

    def all(self) -> list[ProcessingOutcome]:
        """Return a copy of every outcome in the order it was appended."""
        return list(self._outcomes)

    def __len__(self) -> int:
        return len(self._outcomes)

    def to_records(self) -> list[dict[str, object]]:
        return [outcome.to_record() for outcome in self._outcomes]

    def export_json(self, path: Path) -> None:
        """Write the result log to *path* as a JSON array."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(self.to_records(), indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
