"""Cryptographically secure random generation exposed as MCP tools."""

from random_generator.dispatcher import dispatch, generate_bytes, generate_int
from random_generator.errors import ErrorCode, GenerationError
from random_generator.models import (
    ByteRequest,
    Encoding,
    EnvelopeStatus,
    IntRequest,
    ResponseEnvelope,
)
from random_generator.settings import GeneratorConfig, build_config

__all__ = [
    "ByteRequest",
    "Encoding",
    "EnvelopeStatus",
    "ErrorCode",
    "GenerationError",
    "GeneratorConfig",
    "IntRequest",
    "ResponseEnvelope",
    "build_config",
    "dispatch",
    "generate_bytes",
    "generate_int",
]
