"""Integration tests for the hopeit app events."""

import json
from pathlib import Path

import pytest
from hopeit.testing.apps import config, execute_event

from random_generator.errors import ErrorCode
from random_generator.models import (
    ByteRequest,
    Encoding,
    EnvelopeStatus,
    IntRequest,
    ResponseEnvelope,
)

APP_CONFIG = "config/app-config.json"


@pytest.mark.asyncio
async def test_generate_bytes_event_returns_encoded_bytes() -> None:
    app_config = config(APP_CONFIG)

    response = await execute_event(
        app_config, "tool.generate_bytes", ByteRequest(size=16, encoding=Encoding.BASE64)
    )

    assert isinstance(response, ResponseEnvelope)
    assert response.status == EnvelopeStatus.SUCCESS
    assert response.text.startswith("Random bytes (16 bytes, base64 encoded):\n")


@pytest.mark.asyncio
async def test_generate_bytes_event_enforces_configured_limit() -> None:
    app_config = config(APP_CONFIG)

    response = await execute_event(app_config, "tool.generate_bytes", ByteRequest(size=2_000_000))

    assert response.status == EnvelopeStatus.FAILURE
    assert response.error_code == ErrorCode.SIZE_EXCEEDED
    assert "exceeds maximum allowed size of 1048576 bytes" in response.text


@pytest.mark.asyncio
async def test_generate_int_event_returns_value_in_range() -> None:
    app_config = config(APP_CONFIG)

    response = await execute_event(app_config, "tool.generate_int", IntRequest(min=-3, max=3))

    assert response.status == EnvelopeStatus.SUCCESS
    value = int(response.text.rsplit(": ", 1)[1])
    assert -3 <= value <= 3


@pytest.mark.asyncio
async def test_generate_int_event_rejects_equal_bounds() -> None:
    app_config = config(APP_CONFIG)

    response = await execute_event(app_config, "tool.generate_int", IntRequest(min=10, max=10))

    assert response.status == EnvelopeStatus.FAILURE
    assert response.text == "Error: Min must be less than max"


@pytest.mark.asyncio
@pytest.mark.parametrize("limit", [0, -5])
async def test_generate_bytes_event_rejects_non_positive_configured_limit(
    tmp_path: Path, limit: int
) -> None:
    """A non-positive limit in the app settings is refused instead of rejecting every request."""
    raw_config = json.loads(Path(APP_CONFIG).read_text(encoding="utf-8"))
    raw_config["settings"]["random_generator"]["max_byte_size"] = limit
    config_file = tmp_path / "app-config.json"
    config_file.write_text(json.dumps(raw_config), encoding="utf-8")
    with pytest.raises(ValueError):
        app_config = config(str(config_file))
        await execute_event(app_config, "tool.generate_bytes", ByteRequest(size=1))
