from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .fields import validate_output_path

SEPARATOR_LINE = "-----"

ON_RECORD_ERROR_POLICIES = ("discard", "to_error", "stop_pipeline")


class SplitState(str, Enum):
    WITHIN_HEADER = "within_header"
    AWAITING_DETAIL_HEADER = "awaiting_detail_header"
    IN_DETAIL = "in_detail"


@dataclass(frozen=True)
class HeaderExtractorConfig:
    """
    Binds a header line (1-based) and a regex to an output key.

    Without a key, capture group 1 names the field and group 2 holds the value.
    """

    line_number: int
    regex: str
    key: Optional[str] = None

    def __post_init__(self) -> None:
        if self.line_number < 1:
            raise ValueError(f"line_number must be >= 1, got {self.line_number}")
        if not self.regex:
            raise ValueError("regex must not be empty")

    @property
    def has_key(self) -> bool:
        return bool(self.key)


@dataclass(frozen=True)
class SplitterConfig:
    field_path_to_parse: str = "/text"
    keep_original_fields: bool = False
    output_field: str = "/"
    detail_line_field: str = "line"
    header_extractor_configs: Tuple[HeaderExtractorConfig, ...] = ()
    nof_header_lines: Optional[int] = None
    on_record_error: str = "to_error"

    def __post_init__(self) -> None:
        # Accept any iterable of extractors but store an immutable tuple.
        object.__setattr__(
            self, "header_extractor_configs", tuple(self.header_extractor_configs)
        )
        if self.nof_header_lines is not None and self.nof_header_lines < 0:
            raise ValueError(
                f"nof_header_lines must be >= 0, got {self.nof_header_lines}"
            )
        if not self.detail_line_field:
            raise ValueError("detail_line_field must not be empty")
        validate_output_path(self.detail_line_field)
        validate_output_path(self.output_field, allow_root=True)
        if self.on_record_error not in ON_RECORD_ERROR_POLICIES:
            raise ValueError(
                f"Unknown on_record_error policy '{self.on_record_error}'. "
                f"Expected one of: {', '.join(ON_RECORD_ERROR_POLICIES)}"
            )


@dataclass
class LineClassification:
    header_lines: List[str] = field(default_factory=list)
    detail_lines: List[str] = field(default_factory=list)
    column_header: Optional[str] = None
    state: SplitState = SplitState.WITHIN_HEADER
