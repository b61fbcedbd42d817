from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    HEADERDETAILP_01 = "Regex '{0}' could not be compiled: {1}"
    HEADERDETAILP_02 = "Field of type '{0}' with value '{1}' is not supported, record: {2}"
    HEADERDETAILP_03 = "Regex '{0}' has {1} capture group(s), at least {2} required"


class HeaderDetailError(Exception):
    """
    Base error for the header/detail splitter. Carries a stable error code so
    callers can route failures without parsing messages.
    """

    def __init__(self, code: ErrorCode, *params: Any) -> None:
        self.code = code
        self.params = params
        super().__init__(f"{code.name} - {code.value.format(*params)}")


class InvalidPatternError(HeaderDetailError, ValueError):
    """A configured extractor regex is unusable. Raised at setup time."""


class InvalidInputTypeError(HeaderDetailError, TypeError):
    """The input record or the field to parse has an unsupported type."""

    def __init__(self, type_name: str, value: str, record: str) -> None:
        super().__init__(ErrorCode.HEADERDETAILP_02, type_name, value, record)
        self.type_name = type_name
        self.value = value
        self.record = record
