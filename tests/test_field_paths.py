import pytest

from headerdetail.fields import (
    MISSING,
    get_field,
    parse_field_path,
    set_field,
    validate_output_path,
)


def test_parse_field_path_segments():
    assert parse_field_path("/") == []
    assert parse_field_path("") == []
    assert parse_field_path("/text") == ["text"]
    assert parse_field_path("payload/body") == ["payload", "body"]
    assert parse_field_path("/rows[2]/value") == ["rows", 2, "value"]


def test_parse_field_path_rejects_bad_segment():
    with pytest.raises(ValueError):
        parse_field_path("/rows[x]")


def test_get_field_resolves_maps_and_lists():
    record = {"rows": [{"value": "a"}, {"value": "b"}]}
    assert get_field(record, "/rows[1]/value") == "b"
    assert get_field(record, "/") is record


def test_get_field_missing():
    record = {"rows": []}
    assert get_field(record, "/rows[0]") is MISSING
    assert get_field(record, "/other") is MISSING
    assert get_field("plain text", "/text") is MISSING
    assert get_field(record, "/other", default=None) is None


def test_set_field_creates_intermediate_maps():
    record = {}
    set_field(record, "/a/b", "value")
    assert record == {"a": {"b": "value"}}


def test_set_field_root_not_allowed():
    with pytest.raises(ValueError):
        set_field({}, "/", "value")


def test_set_field_replaces_scalar_intermediate():
    record = {"meta": "ftp"}
    set_field(record, "/meta/parsed", {"k": "v"})
    assert record == {"meta": {"parsed": {"k": "v"}}}


def test_set_field_rejects_list_index():
    with pytest.raises(ValueError):
        set_field({"rows": [{}]}, "/rows[0]/value", "x")


def test_validate_output_path():
    validate_output_path("/", allow_root=True)
    validate_output_path("/a/b")
    with pytest.raises(ValueError):
        validate_output_path("/")
    with pytest.raises(ValueError):
        validate_output_path("/a[0]")
