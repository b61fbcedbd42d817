from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping

import yaml

from .types import HeaderExtractorConfig, SplitterConfig

# camelCase names used by pipeline stage configs, mapped to SplitterConfig fields
_KEY_ALIASES = {
    "fieldPathToParse": "field_path_to_parse",
    "keepOriginalFields": "keep_original_fields",
    "outputField": "output_field",
    "detailLineField": "detail_line_field",
    "headerExtractorConfigs": "header_extractor_configs",
    "nofHeaderLines": "nof_header_lines",
    "onRecordError": "on_record_error",
}


def header_extractor_from_dict(data: Mapping[str, Any]) -> HeaderExtractorConfig:
    line_number = data.get("lineNumber", data.get("line_number"))
    if line_number is None:
        raise ValueError(f"Header extractor is missing 'lineNumber': {dict(data)}")
    if "regex" not in data:
        raise ValueError(f"Header extractor is missing 'regex': {dict(data)}")
    return HeaderExtractorConfig(
        line_number=int(line_number),
        regex=str(data["regex"]),
        key=data.get("key") or None,
    )


def splitter_config_from_dict(data: Mapping[str, Any]) -> SplitterConfig:
    normalized: Dict[str, Any] = {}
    for key, value in data.items():
        name = _KEY_ALIASES.get(key, key)
        if name in SplitterConfig.__dataclass_fields__:
            normalized[name] = value

    extractors: List[HeaderExtractorConfig] = [
        header_extractor_from_dict(entry)
        for entry in normalized.pop("header_extractor_configs", None) or []
    ]
    nof_header_lines = normalized.pop("nof_header_lines", None)
    return SplitterConfig(
        header_extractor_configs=tuple(extractors),
        nof_header_lines=int(nof_header_lines) if nof_header_lines is not None else None,
        **normalized,
    )


def load_splitter_config(path: str | Path) -> SplitterConfig:
    data = yaml.safe_load(Path(path).read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Splitter config in {path} must be a mapping")
    return splitter_config_from_dict(data)
