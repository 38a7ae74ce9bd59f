import numpy as np

from fips_sha256 import bitops, padding, schedule


def test_expand_abc_block():
    (block,) = padding.blocks(padding.pad(b"abc"))
    w = schedule.expand(block)
    assert len(w) == 64
    assert w[0] == 0x61626380
    assert w[1:15] == [0] * 14
    assert w[15] == 0x18
    assert w[16] == 0x61626380
    assert w[17] == 0x000F0000


def test_expand_random_block():
    block_bytes = np.random.bytes(64)
    w = schedule.expand(block_bytes)
    assert len(w) == 64
    for i in range(16):
        assert w[i] == int.from_bytes(block_bytes[4 * i : 4 * i + 4], "big")
    for i in range(16, 64):
        assert w[i] == bitops.add32(
            bitops.little_sigma1(w[i - 2]),
            w[i - 7],
            bitops.little_sigma0(w[i - 15]),
            w[i - 16],
        )
    assert all(0 <= word < 2**32 for word in w)


def test_expand_accepts_bytes_and_views():
    padded = padding.pad(np.random.bytes(30))
    (block,) = padding.blocks(padded)
    assert schedule.expand(block) == schedule.expand(padded)
