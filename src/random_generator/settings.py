"""Settings for the random generator app and MCP server."""

from hopeit.dataobjects import dataclass, dataobject

from random_generator.bounds import as_integer

SETTINGS_KEY = "random_generator"
DEFAULT_MAX_BYTE_SIZE = 1_048_576


@dataobject
@dataclass(frozen=True)
class GeneratorConfig:
    """Process-wide limits, built once at startup and shared read-only."""

    max_byte_size: int = DEFAULT_MAX_BYTE_SIZE

    def __post_init__(self) -> None:
        if self.max_byte_size <= 0:
            raise ValueError(
                f"Maximum size must be a positive integer, received: {self.max_byte_size}"
            )


def build_config(max_byte_size: int | str = DEFAULT_MAX_BYTE_SIZE) -> GeneratorConfig:
    """Validate `max_byte_size` and return the immutable config."""
    if isinstance(max_byte_size, str):
        try:
            value: int | None = int(max_byte_size)
        except ValueError as exc:
            raise ValueError(f"Invalid maximum size: {max_byte_size}") from exc
    else:
        value = as_integer(max_byte_size)
    if value is None:
        raise ValueError(f"Invalid maximum size: {max_byte_size}")
    return GeneratorConfig(max_byte_size=value)
