"""Text encodings for random bytes."""

import base64

from random_generator.models import Encoding


def encode(data: bytes, encoding: Encoding) -> str:
    """
    Encode `data` as text.

    `hex` is lowercase without separators, `base64` uses the standard padded
    alphabet. `binary` maps every byte to the Latin-1 character with the same
    code point: bytes 0x80-0xff are not ASCII and may not survive every text
    transport unchanged.
    """
    encoding = Encoding(encoding)
    if encoding == Encoding.HEX:
        return data.hex()
    if encoding == Encoding.BASE64:
        return base64.b64encode(data).decode("ascii")
    return data.decode("latin-1")
