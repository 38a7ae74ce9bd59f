"""SHA256 Compression Function."""

from typing import List, Sequence

from fips_sha256 import bitops
from fips_sha256.constants import IV, ROUND_SIZE


def round_(state: Sequence[int], round_constant: int, schedule_word: int) -> List[int]:
    """Round state given the constant and schedule word."""
    s1 = bitops.big_sigma1(state[4])
    ch = bitops.choice(state[4], state[5], state[6])
    temp1 = bitops.add32(state[7], s1, ch, round_constant, schedule_word)
    s0 = bitops.big_sigma0(state[0])
    maj = bitops.majority(state[0], state[1], state[2])
    temp2 = bitops.add32(s0, maj)
    return [
        bitops.add32(temp1, temp2),
        state[0],
        state[1],
        state[2],
        bitops.add32(state[3], temp1),
        state[4],
        state[5],
        state[6],
    ]


def compress(
    state: Sequence[int],
    schedule: Sequence[int],
    round_constants: Sequence[int],
) -> List[int]:
    """Fold one block's schedule into the hash state.

    The working variables start from ``state`` and go through one round per
    schedule word; the result is added back into ``state`` word by word.
    ``state`` itself is left untouched.
    """
    assert len(state) == len(IV)
    assert len(schedule) == ROUND_SIZE == len(round_constants)
    working = state
    for round_constant, schedule_word in zip(round_constants, schedule):
        working = round_(working, round_constant, schedule_word)
    return [bitops.add32(x, y) for x, y in zip(state, working)]
