"""Random bytes generator tool event."""

from hopeit.app.api import event_api
from hopeit.app.context import EventContext
from hopeit.app.logger import app_extra_logger

from random_generator.dispatcher import generate_bytes as dispatch_generate_bytes
from random_generator.models import ByteRequest, ResponseEnvelope
from random_generator.settings import SETTINGS_KEY, GeneratorConfig

__steps__ = ["generate_bytes"]

__api__ = event_api(
    summary="mcp-random-generator: generate cryptographically secure random bytes",
    payload=(ByteRequest, "Random bytes request"),
    responses={
        200: (ResponseEnvelope, "Encoded random bytes, or the reason the request was rejected"),
    },
)

logger, extra = app_extra_logger()


async def generate_bytes(payload: ByteRequest, context: EventContext) -> ResponseEnvelope:
    """Return `payload.size` random bytes in the requested encoding."""
    config = context.settings(key=SETTINGS_KEY, datatype=GeneratorConfig)
    response = dispatch_generate_bytes(payload.size, payload.encoding, config=config)
    logger.info(
        context,
        "random_bytes_response",
        extra=extra(
            size=payload.size,
            encoding=payload.encoding.value,
            status=response.status.value,
        ),
    )
    return response
