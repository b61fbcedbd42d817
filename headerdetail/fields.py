from __future__ import annotations

import re
from typing import Any, List, Mapping, MutableMapping, Union

PathSegment = Union[str, int]

_INDEX_PATTERN = re.compile(r"^(?P<name>[^\[\]]*)(?P<indexes>(\[\d+\])*)$")


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def parse_field_path(path: str) -> List[PathSegment]:
    """
    Turn a field locator such as ``/header/lines[2]`` into path segments.

    ``"/"`` and ``""`` address the record root and yield no segments.
    """
    segments: List[PathSegment] = []
    for part in path.strip().strip("/").split("/"):
        if not part:
            continue
        match = _INDEX_PATTERN.match(part)
        if not match:
            raise ValueError(f"Invalid field path segment '{part}' in '{path}'")
        if match.group("name"):
            segments.append(match.group("name"))
        for index in re.findall(r"\[(\d+)\]", match.group("indexes")):
            segments.append(int(index))
    return segments


def get_field(record: Any, path: str, default: Any = MISSING) -> Any:
    current = record
    for segment in parse_field_path(path):
        if isinstance(segment, int):
            if not isinstance(current, list) or segment >= len(current):
                return default
            current = current[segment]
        else:
            if not isinstance(current, Mapping) or segment not in current:
                return default
            current = current[segment]
    return current


def validate_output_path(path: str, allow_root: bool = False) -> None:
    segments = parse_field_path(path)
    if not segments and not allow_root:
        raise ValueError("Output path must name a field, not the record root")
    if any(isinstance(segment, int) for segment in segments):
        raise ValueError(f"List indexes are not supported in output path '{path}'")


def set_field(record: MutableMapping[str, Any], path: str, value: Any) -> None:
    """
    Assign ``value`` at ``path``, creating intermediate maps on the way.

    An intermediate segment that holds anything other than a map is replaced by
    a new map. List indexes are not writable.
    """
    validate_output_path(path)
    segments = parse_field_path(path)

    current: MutableMapping[str, Any] = record
    for segment in segments[:-1]:
        child = current.get(segment)
        if not isinstance(child, MutableMapping):
            child = {}
            current[segment] = child
        current = child
    current[segments[-1]] = value
