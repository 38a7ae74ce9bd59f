"""Message Padding and Block Decomposition."""

import logging
from typing import Iterator

import numpy as np

from fips_sha256.constants import BLOCK_BYTES, LENGTH_BYTES, MAX_MESSAGE_BYTES

logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)
logger.addHandler(logging.NullHandler())


def padding_bytes(input_len: int) -> bytes:
    """Pad the input to a specific length."""
    if input_len > MAX_MESSAGE_BYTES:
        raise ValueError(
            f"message of {input_len} bytes does not fit the 64-bit length field"
        )
    remainder_bytes = (input_len + LENGTH_BYTES) % BLOCK_BYTES
    filler_bytes = BLOCK_BYTES - remainder_bytes
    zero_bytes = filler_bytes - 1
    encoded_bit_length = (8 * input_len).to_bytes(LENGTH_BYTES, "big")
    return b"\x80" + b"\0" * zero_bytes + encoded_bit_length


def pad(message: bytes) -> bytes:
    """Pad the message to a whole number of 512-bit blocks."""
    padded = bytearray(message)
    padded += padding_bytes(len(message))
    assert len(padded) % BLOCK_BYTES == 0
    return bytes(padded)


def blocks(padded: bytes) -> Iterator[np.ndarray]:
    """Iterate over read-only 64-byte views of the padded message."""
    assert len(padded) % BLOCK_BYTES == 0
    view = np.frombuffer(padded, dtype=np.uint8).reshape(-1, BLOCK_BYTES)
    logger.debug("Split %d padded bytes into %d blocks", len(padded), len(view))
    yield from view
