"""
Request dispatcher.

Maps a tool name and its raw arguments through the bounds guard, the random
source and the formatter, and wraps the outcome in a `ResponseEnvelope`.
Failures of any kind, expected or not, come back as failure envelopes.
"""

from collections.abc import Mapping
from typing import Any

from hopeit.server.logger import engine_logger, extra_logger

from random_generator.bounds import check_byte_size, check_int_range
from random_generator.encoding import encode
from random_generator.errors import ErrorCode, GenerationError
from random_generator.models import (
    Encoding,
    RandomBytesResult,
    RandomIntResult,
    ResponseEnvelope,
)
from random_generator.settings import GeneratorConfig
from random_generator.source import draw_bytes, draw_int

logger = engine_logger()
extra = extra_logger()

BYTES_TOOL = "random_generate_bytes"
INT_TOOL = "random_generate_int"


def generate_bytes(
    size: Any,
    encoding: Encoding | str | None = Encoding.HEX,
    *,
    config: GeneratorConfig,
) -> ResponseEnvelope:
    """Generate `size` random bytes encoded as `encoding`."""
    parsed = _parse_encoding(encoding)
    if isinstance(parsed, GenerationError):
        return _rejected(BYTES_TOOL, parsed)
    try:
        checked = check_byte_size(size, config.max_byte_size)
        if isinstance(checked, GenerationError):
            return _rejected(BYTES_TOOL, checked)
        data = draw_bytes(checked)
        if isinstance(data, GenerationError):
            return _failed(BYTES_TOOL, data)
        encoded = encode(data, parsed)
        result = RandomBytesResult(size=checked, encoding=parsed, data=encoded)
    except Exception as exc:  # pylint: disable=broad-except
        return _unexpected(BYTES_TOOL, exc)

    logger.debug(
        __name__,
        "random_bytes_generated",
        extra=extra(size=checked, encoding=parsed.value),
    )
    return ResponseEnvelope.success(result.summary())


def generate_int(min_value: Any, max_value: Any) -> ResponseEnvelope:
    """Generate a random integer between `min_value` and `max_value`, both inclusive."""
    try:
        checked = check_int_range(min_value, max_value)
        if isinstance(checked, GenerationError):
            return _rejected(INT_TOOL, checked)
        low, high = checked
        value = draw_int(low, high)
        if isinstance(value, GenerationError):
            return _failed(INT_TOOL, value)
        result = RandomIntResult(min=low, max=high, value=value)
    except Exception as exc:  # pylint: disable=broad-except
        return _unexpected(INT_TOOL, exc)

    logger.debug(
        __name__,
        "random_int_generated",
        extra=extra(min=low, max=high, value=value),
    )
    return ResponseEnvelope.success(result.summary())


def dispatch(
    tool_name: str,
    arguments: Mapping[str, Any] | None,
    config: GeneratorConfig,
) -> ResponseEnvelope:
    """Route a named tool call with untrusted arguments to its operation."""
    args = dict(arguments or {})
    if tool_name == BYTES_TOOL:
        if "size" not in args:
            return _rejected(tool_name, _missing_argument("size"))
        return generate_bytes(args["size"], args.get("encoding"), config=config)

    if tool_name == INT_TOOL:
        for name in ("min", "max"):
            if name not in args:
                return _rejected(tool_name, _missing_argument(name))
        return generate_int(args["min"], args["max"])

    return _rejected(
        tool_name, GenerationError(ErrorCode.UNKNOWN_TOOL, f"Unknown tool: {tool_name}")
    )


def _parse_encoding(value: Any) -> Encoding | GenerationError:
    if value is None:
        return Encoding.HEX
    try:
        return Encoding(value)
    except (TypeError, ValueError):
        allowed = ", ".join(item.value for item in Encoding)
        return GenerationError(
            ErrorCode.INVALID_ARGUMENT,
            f"Invalid encoding: {value}. Encoding must be one of {allowed}.",
        )


def _missing_argument(name: str) -> GenerationError:
    return GenerationError(ErrorCode.INVALID_ARGUMENT, f"Missing required argument: {name}")


def _rejected(tool_name: str, error: GenerationError) -> ResponseEnvelope:
    logger.info(
        __name__,
        "random_request_rejected",
        extra=extra(tool_name=tool_name, code=error.code.value, error=error.message),
    )
    return ResponseEnvelope.failure(error)


def _failed(tool_name: str, error: GenerationError) -> ResponseEnvelope:
    logger.error(
        __name__,
        "random_generation_failed",
        extra=extra(tool_name=tool_name, code=error.code.value, error=error.message),
    )
    return ResponseEnvelope.failure(error)


def _unexpected(tool_name: str, exc: Exception) -> ResponseEnvelope:
    return _failed(
        tool_name,
        GenerationError(ErrorCode.INTERNAL_GENERATION_FAILURE, f"Random generation failed: {exc}"),
    )
