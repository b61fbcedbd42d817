from __future__ import annotations

import logging
from copy import deepcopy
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .errors import InvalidInputTypeError
from .fields import MISSING, get_field, parse_field_path, set_field
from .patterns import PatternCache
from .types import (
    SEPARATOR_LINE,
    HeaderExtractorConfig,
    LineClassification,
    SplitState,
    SplitterConfig,
)

logger = logging.getLogger(__name__)


def split_lines(document: str) -> List[str]:
    """
    Break a document into lines on line feeds.

    Surrounding whitespace of the whole document is trimmed and empty lines are
    dropped. Carriage returns are left alone, so CRLF input keeps a trailing
    ``\\r`` on every line but the last.
    """
    return [line for line in document.strip().split("\n") if line]


def classify_lines(
    lines: Iterable[str], nof_header_lines: Optional[int] = None
) -> LineClassification:
    """
    Sort lines into header lines, the detail column header and detail lines.

    The header ends at the ``-----`` separator (which is consumed) or, when
    ``nof_header_lines`` is set, at the first line whose index reaches it. That
    boundary line is then handled as the first non-header line. The first
    non-header line is the column header label, everything after it is detail.
    """
    result = LineClassification()
    for index, line in enumerate(lines):
        if result.state is SplitState.WITHIN_HEADER:
            if line == SEPARATOR_LINE:
                result.state = SplitState.AWAITING_DETAIL_HEADER
                continue
            if nof_header_lines is None or index < nof_header_lines:
                result.header_lines.append(line)
                continue
            result.state = SplitState.AWAITING_DETAIL_HEADER

        if result.state is SplitState.AWAITING_DETAIL_HEADER:
            result.column_header = line
            result.state = SplitState.IN_DETAIL
        else:
            result.detail_lines.append(line)
    return result


def extract_header_fields(
    header_lines: List[str],
    extractors: Iterable[HeaderExtractorConfig],
    cache: PatternCache,
) -> Dict[str, str]:
    parsed: Dict[str, str] = {}
    for extractor in extractors:
        if extractor.line_number > len(header_lines):
            logger.debug(
                "Header line %d not available (%d collected), skipping regex '%s'",
                extractor.line_number,
                len(header_lines),
                extractor.regex,
            )
            continue

        header = header_lines[extractor.line_number - 1]
        pattern = cache.get_or_compile(extractor.regex)
        match = pattern.search(header)
        if not match:
            logger.debug("No match for regex '%s' on header '%s'", extractor.regex, header)
            continue

        key = extractor.key if extractor.has_key else match.group(1)
        value = match.group(2) if pattern.groups >= 2 else match.group(1)
        if key is None or value is None:
            logger.debug(
                "Regex '%s' matched header '%s' without a key or value group",
                extractor.regex,
                header,
            )
            continue
        # Later extractors overwrite earlier ones with the same key.
        parsed[key] = value
    return parsed


class HeaderDetailSplitter:
    """
    Turns one header + detail document into one output record per detail line.

    Each record holds the fields extracted from the header lines plus the
    detail line itself under ``detail_line_field``. With
    ``keep_original_fields`` the record starts as a copy of the input record.
    """

    def __init__(
        self, config: SplitterConfig, pattern_cache: Optional[PatternCache] = None
    ) -> None:
        self.config = config
        if pattern_cache is None:
            pattern_cache = PatternCache()
        pattern_cache.register(config.header_extractor_configs)
        self._patterns = pattern_cache
        self._output_at_root = not parse_field_path(config.output_field)

    @property
    def patterns(self) -> PatternCache:
        return self._patterns

    def split(self, record: Any) -> List[Dict[str, Any]]:
        if self.config.keep_original_fields and not isinstance(record, Mapping):
            raise InvalidInputTypeError(type(record).__name__, str(record), str(record))

        original = get_field(record, self.config.field_path_to_parse)
        if original is MISSING or original is None:
            logger.debug(
                "Field '%s' not present, skipping record", self.config.field_path_to_parse
            )
            return []
        if not isinstance(original, str):
            raise InvalidInputTypeError(
                type(original).__name__, str(original), str(record)
            )

        base = record if self.config.keep_original_fields else None
        return self._split(original, base)

    def split_document(self, document: str) -> List[Dict[str, Any]]:
        if not isinstance(document, str):
            raise InvalidInputTypeError(
                type(document).__name__, str(document), str(document)
            )
        return self._split(document, None)

    def classify(self, document: str) -> LineClassification:
        return classify_lines(split_lines(document), self.config.nof_header_lines)

    def _split(
        self, document: str, base: Optional[Mapping[str, Any]]
    ) -> List[Dict[str, Any]]:
        classification = self.classify(document)
        logger.debug("Number of header lines: %d", len(classification.header_lines))
        logger.debug("Number of detail lines: %d", len(classification.detail_lines))
        if classification.column_header is not None:
            logger.debug("Detail column header: %s", classification.column_header)

        parsed_header = extract_header_fields(
            classification.header_lines,
            self.config.header_extractor_configs,
            self._patterns,
        )
        return [
            self._build_record(base, parsed_header, detail)
            for detail in classification.detail_lines
        ]

    def _build_record(
        self,
        base: Optional[Mapping[str, Any]],
        parsed_header: Mapping[str, str],
        detail: str,
    ) -> Dict[str, Any]:
        record: Dict[str, Any] = deepcopy(dict(base)) if base is not None else {}
        if self._output_at_root:
            target = record
        else:
            target = {}
            set_field(record, self.config.output_field, target)

        target.update(parsed_header)
        set_field(target, self.config.detail_line_field, detail)
        return record
