"""SHA256 Hash Algorithm."""

import functools
import logging
from typing import List, Sequence

from fips_sha256 import compress, padding, schedule
from fips_sha256.constants import IV, ROUND_CONSTANTS

logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)
logger.addHandler(logging.NullHandler())


def format_digest(state: Sequence[int]) -> str:
    """Render the hash state as 64 lowercase hex digits."""
    assert len(state) == len(IV)
    return "".join(f"{word:08x}" for word in state)


def _compress_block(state_words: List[int], block) -> List[int]:
    """Compress an input block."""
    return compress.compress(state_words, schedule.expand(block), ROUND_CONSTANTS)


def hash_state(message: bytes) -> List[int]:
    """Final hash state of the message."""
    padded = padding.pad(message)
    logger.debug("Hashing %d bytes padded to %d", len(message), len(padded))
    return functools.reduce(_compress_block, padding.blocks(padded), list(IV))


def digest(message: bytes) -> str:
    """SHA256 hex digest."""
    return format_digest(hash_state(message))
