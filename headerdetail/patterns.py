from __future__ import annotations

import logging
import re
from typing import Dict, Iterable

from .errors import ErrorCode, InvalidPatternError
from .types import HeaderExtractorConfig

logger = logging.getLogger(__name__)


class PatternCache:
    """
    Compiled regexes keyed by their source text.

    Extractor regexes are compiled by ``register``, which every splitter calls
    at construction, so a bad pattern fails setup instead of the first document
    that reaches it. After setup the cache is only read, and one instance can
    be shared between splitters and workers.
    """

    def __init__(self, extractors: Iterable[HeaderExtractorConfig] = ()) -> None:
        self._patterns: Dict[str, re.Pattern[str]] = {}
        self.register(extractors)

    def register(self, extractors: Iterable[HeaderExtractorConfig]) -> None:
        """Compile extractor regexes now and check their capture group count."""
        count = 0
        for extractor in extractors:
            pattern = self.get_or_compile(extractor.regex)
            required = 1 if extractor.has_key else 2
            if pattern.groups < required:
                raise InvalidPatternError(
                    ErrorCode.HEADERDETAILP_03, extractor.regex, pattern.groups, required
                )
            count += 1
        logger.debug("Registered %d header pattern(s), %d cached", count, len(self._patterns))

    def get_or_compile(self, source: str) -> re.Pattern[str]:
        pattern = self._patterns.get(source)
        if pattern is not None:
            return pattern
        try:
            pattern = re.compile(source)
        except re.error as exc:
            raise InvalidPatternError(ErrorCode.HEADERDETAILP_01, source, exc) from exc
        self._patterns[source] = pattern
        return pattern

    def __contains__(self, source: object) -> bool:
        return source in self._patterns

    def __len__(self) -> int:
        return len(self._patterns)
