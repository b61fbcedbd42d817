from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from .errors import InvalidInputTypeError
from .splitter import HeaderDetailSplitter
from .types import ON_RECORD_ERROR_POLICIES

logger = logging.getLogger(__name__)


@dataclass
class RecordError:
    index: int
    record: Any
    error: InvalidInputTypeError

    def as_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "code": self.error.code.name,
            "message": str(self.error),
        }


@dataclass
class BatchResult:
    records: List[Dict[str, Any]] = field(default_factory=list)
    errors: List[RecordError] = field(default_factory=list)
    summary: Dict[str, int] = field(default_factory=dict)


class RecordProcessor:
    """
    Runs a HeaderDetailSplitter over a batch of input records.

    Records rejected with ``InvalidInputTypeError`` are handled according to
    the on-record-error policy: ``discard`` drops them, ``to_error`` collects
    them in ``BatchResult.errors`` and ``stop_pipeline`` re-raises.
    """

    def __init__(
        self,
        splitter: HeaderDetailSplitter,
        on_record_error: Optional[str] = None,
    ) -> None:
        policy = on_record_error or splitter.config.on_record_error
        if policy not in ON_RECORD_ERROR_POLICIES:
            raise ValueError(f"Unknown on_record_error policy '{policy}'.")
        self.splitter = splitter
        self.on_record_error = policy

    def process(self, records: Iterable[Any]) -> BatchResult:
        result = BatchResult()
        total = skipped = discarded = 0
        for index, record in enumerate(records):
            total += 1
            try:
                emitted = self.splitter.split(record)
            except InvalidInputTypeError as exc:
                if self.on_record_error == "stop_pipeline":
                    raise
                if self.on_record_error == "discard":
                    logger.warning("Discarding record %d: %s", index, exc)
                    discarded += 1
                else:
                    result.errors.append(RecordError(index=index, record=record, error=exc))
                continue
            if not emitted:
                skipped += 1
            result.records.extend(emitted)

        result.summary = {
            "input": total,
            "emitted": len(result.records),
            "skipped": skipped,
            "discarded": discarded,
            "errors": len(result.errors),
        }
        logger.info(
            "Processed %d record(s): %d emitted, %d without details, %d discarded, %d error(s)",
            total,
            len(result.records),
            skipped,
            discarded,
            len(result.errors),
        )
        return result
