import pytest

from headerdetail import ErrorCode, HeaderExtractorConfig, InvalidPatternError, PatternCache


def test_get_or_compile_returns_same_pattern():
    cache = PatternCache()
    first = cache.get_or_compile(r"Date: (\S+)")
    second = cache.get_or_compile(r"Date: (\S+)")
    assert first is second
    assert len(cache) == 1


def test_extractor_patterns_are_compiled_at_init():
    extractors = [
        HeaderExtractorConfig(line_number=1, regex=r"(Report): (\w+)"),
        HeaderExtractorConfig(line_number=2, regex=r"Date: (\S+)", key="date"),
    ]
    cache = PatternCache(extractors)
    assert r"(Report): (\w+)" in cache
    assert r"Date: (\S+)" in cache
    assert len(cache) == 2


def test_duplicate_regex_is_compiled_once():
    extractors = [
        HeaderExtractorConfig(line_number=1, regex=r"(\w+)=(\w+)"),
        HeaderExtractorConfig(line_number=2, regex=r"(\w+)=(\w+)"),
    ]
    assert len(PatternCache(extractors)) == 1


def test_invalid_regex_fails_at_setup():
    with pytest.raises(InvalidPatternError) as exc_info:
        PatternCache([HeaderExtractorConfig(line_number=1, regex=r"(unclosed", key="k")])
    assert exc_info.value.code is ErrorCode.HEADERDETAILP_01
    assert "(unclosed" in str(exc_info.value)


def test_invalid_pattern_error_is_value_error():
    with pytest.raises(ValueError):
        PatternCache().get_or_compile("[a-")


def test_keyless_extractor_needs_two_groups():
    with pytest.raises(InvalidPatternError) as exc_info:
        PatternCache([HeaderExtractorConfig(line_number=1, regex=r"Report: (\w+)")])
    assert exc_info.value.code is ErrorCode.HEADERDETAILP_03


def test_keyed_extractor_needs_one_group():
    with pytest.raises(InvalidPatternError):
        PatternCache([HeaderExtractorConfig(line_number=1, regex=r"Report", key="r")])
    cache = PatternCache([HeaderExtractorConfig(line_number=1, regex=r"Report: (\w+)", key="r")])
    assert len(cache) == 1


def test_register_adds_patterns_to_existing_cache():
    cache = PatternCache()
    cache.register([HeaderExtractorConfig(line_number=1, regex=r"(\w+)=(\w+)")])
    assert r"(\w+)=(\w+)" in cache


def test_register_checks_groups_on_existing_cache():
    cache = PatternCache([HeaderExtractorConfig(line_number=1, regex=r"(\w+)=(\w+)")])
    with pytest.raises(InvalidPatternError):
        cache.register([HeaderExtractorConfig(line_number=1, regex=r"Report")])
