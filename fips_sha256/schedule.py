"""Message Schedule Expansion."""

from typing import List

import numpy as np

from fips_sha256 import bitops
from fips_sha256.constants import BLOCK_BYTES, ROUND_SIZE

_BIG_ENDIAN_WORD = np.dtype(">u4")


def expand(block) -> List[int]:
    """Compute the message schedule array of a 64-byte block."""
    assert len(block) == BLOCK_BYTES
    w = np.frombuffer(block, dtype=_BIG_ENDIAN_WORD).tolist()
    for i in range(16, ROUND_SIZE):
        s0 = bitops.little_sigma0(w[i - 15])
        s1 = bitops.little_sigma1(w[i - 2])
        w.append(bitops.add32(w[i - 16], s0, w[i - 7], s1))
    return w
