"""Random integer generator tool event."""

from hopeit.app.api import event_api
from hopeit.app.context import EventContext
from hopeit.app.logger import app_extra_logger

from random_generator.dispatcher import generate_int as dispatch_generate_int
from random_generator.models import IntRequest, ResponseEnvelope

__steps__ = ["generate_int"]

__api__ = event_api(
    summary="mcp-random-generator: generate a random integer in an inclusive range",
    payload=(IntRequest, "Random integer request"),
    responses={
        200: (ResponseEnvelope, "Random integer, or the reason the request was rejected"),
    },
)

logger, extra = app_extra_logger()


async def generate_int(payload: IntRequest, context: EventContext) -> ResponseEnvelope:
    """Return a random integer between minimum and maximum (inclusive)."""
    response = dispatch_generate_int(payload.min, payload.max)
    logger.info(
        context,
        "random_int_response",
        extra=extra(minimum=payload.min, maximum=payload.max, status=response.status.value),
    )
    return response
