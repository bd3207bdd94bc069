"""Error taxonomy shared by the bounds guard, random source and dispatcher."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(str, Enum):
    """Reason a generation request was rejected."""

    INVALID_SIZE = "invalid_size"
    SIZE_EXCEEDED = "size_exceeded"
    NON_INTEGER_BOUND = "non_integer_bound"
    INVERTED_RANGE = "inverted_range"
    INTERNAL_GENERATION_FAILURE = "internal_generation_failure"
    UNKNOWN_TOOL = "unknown_tool"
    INVALID_ARGUMENT = "invalid_argument"


@dataclass
class GenerationError(ValueError):
    """
    Rejection returned (not raised) by every layer of the generation pipeline.

    `message` is the human readable text surfaced to tool callers.
    """

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return self.message
