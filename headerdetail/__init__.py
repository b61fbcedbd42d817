"""Split header + detail text documents into one record per detail line."""

from .config_loader import load_splitter_config, splitter_config_from_dict
from .errors import ErrorCode, HeaderDetailError, InvalidInputTypeError, InvalidPatternError
from .patterns import PatternCache
from .processor import BatchResult, RecordError, RecordProcessor
from .splitter import HeaderDetailSplitter, classify_lines, extract_header_fields, split_lines
from .types import (
    SEPARATOR_LINE,
    HeaderExtractorConfig,
    LineClassification,
    SplitState,
    SplitterConfig,
)

__all__ = [
    "SEPARATOR_LINE",
    "BatchResult",
    "ErrorCode",
    "HeaderDetailError",
    "HeaderDetailSplitter",
    "HeaderExtractorConfig",
    "InvalidInputTypeError",
    "InvalidPatternError",
    "LineClassification",
    "PatternCache",
    "RecordError",
    "RecordProcessor",
    "SplitState",
    "SplitterConfig",
    "classify_lines",
    "extract_header_fields",
    "load_splitter_config",
    "split_lines",
    "splitter_config_from_dict",
]
