"""Random source adapter over the platform CSPRNG (`secrets`)."""

import secrets

from random_generator.errors import ErrorCode, GenerationError


def draw_bytes(size: int) -> bytes | GenerationError:
    """Return `size` random bytes. `size` must already be validated."""
    try:
        return secrets.token_bytes(size)
    except (OSError, NotImplementedError) as exc:
        return _source_failure(exc)


def draw_int(min_value: int, max_value: int) -> int | GenerationError:
    """Return a uniformly distributed integer in `[min_value, max_value]`.

    `secrets.randbelow` rejection-samples `getrandbits(k)` with
    `k = span.bit_length()`, so fewer than half the draws are discarded and
    there is no modulo bias. Python ints do not overflow, so any span is valid.
    """
    span = max_value - min_value + 1
    try:
        return min_value + secrets.randbelow(span)
    except (OSError, NotImplementedError) as exc:
        return _source_failure(exc)


def _source_failure(exc: BaseException) -> GenerationError:
    return GenerationError(
        ErrorCode.INTERNAL_GENERATION_FAILURE,
        f"Random generation failed: {exc}",
    )
