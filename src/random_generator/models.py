"""Data objects for the random generator tools."""

from enum import Enum

from hopeit.dataobjects import dataclass, dataobject

from random_generator.errors import ErrorCode, GenerationError


class Encoding(str, Enum):
    """Text encodings supported for random bytes."""

    HEX = "hex"
    BASE64 = "base64"
    BINARY = "binary"


class EnvelopeStatus(str, Enum):
    """Outcome of a tool invocation."""

    SUCCESS = "success"
    FAILURE = "failure"


@dataobject
@dataclass
class ByteRequest:
    """Request payload for the random bytes tool."""

    size: int
    encoding: Encoding = Encoding.HEX


@dataobject
@dataclass
class IntRequest:
    """Request payload for the random integer tool (both bounds inclusive)."""

    min: int
    max: int


@dataobject
@dataclass
class RandomBytesResult:
    """Encoded random bytes."""

    size: int
    encoding: Encoding
    data: str

    def summary(self) -> str:
        encoding = Encoding(self.encoding).value
        return f"Random bytes ({self.size} bytes, {encoding} encoded):\n{self.data}"


@dataobject
@dataclass
class RandomIntResult:
    """Generated random integer with the range it was drawn from."""

    min: int
    max: int
    value: int

    def summary(self) -> str:
        return f"Random integer between {self.min} and {self.max}: {self.value}"


@dataobject
@dataclass
class ResponseEnvelope:
    """Uniform response returned by every tool, on success or failure."""

    status: EnvelopeStatus
    text: str
    error_code: ErrorCode | None = None

    @classmethod
    def success(cls, text: str) -> "ResponseEnvelope":
        return cls(status=EnvelopeStatus.SUCCESS, text=text)

    @classmethod
    def failure(cls, error: GenerationError) -> "ResponseEnvelope":
        return cls(
            status=EnvelopeStatus.FAILURE,
            text=f"Error: {error.message}",
            error_code=error.code,
        )

    @property
    def is_error(self) -> bool:
        return self.status == EnvelopeStatus.FAILURE
