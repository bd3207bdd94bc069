"""Unit tests for the MCP server wiring and command line."""

import pytest
from mcp import types

from random_generator.errors import ErrorCode, GenerationError
from random_generator.models import ResponseEnvelope
from random_generator.server import (
    SERVER_NAME,
    ToolCallError,
    create_server,
    envelope_content,
    parse_args,
)
from random_generator.settings import build_config


def test_envelope_content_success() -> None:
    content = envelope_content(ResponseEnvelope.success("Random integer between 1 and 2: 2"))

    assert content == [types.TextContent(type="text", text="Random integer between 1 and 2: 2")]


def test_envelope_content_failure_raises_with_error_text() -> None:
    envelope = ResponseEnvelope.failure(
        GenerationError(ErrorCode.INVERTED_RANGE, "Min must be less than max")
    )

    with pytest.raises(ToolCallError) as exc_info:
        envelope_content(envelope)

    assert str(exc_info.value) == "Error: Min must be less than max"


def test_create_server_registers_tool_handlers() -> None:
    server = create_server(build_config(64))

    assert server.name == SERVER_NAME
    assert types.ListToolsRequest in server.request_handlers
    assert types.CallToolRequest in server.request_handlers


def test_parse_args_defaults() -> None:
    args = parse_args([])

    assert args.verbose is False
    assert args.config.max_byte_size == 1_048_576
    assert args.transport == "stdio"
    assert args.host == "127.0.0.1"
    assert args.port == 8765


def test_parse_args_flags() -> None:
    args = parse_args(["-v", "-m", "4096", "--transport", "http", "--port", "9000"])

    assert args.verbose is True
    assert args.config.max_byte_size == 4096
    assert args.transport == "http"
    assert args.port == 9000


@pytest.mark.parametrize("value", ["0", "-10", "lots"])
def test_parse_args_rejects_invalid_max_size(value: str) -> None:
    with pytest.raises(SystemExit):
        parse_args(["--max-size", value])
