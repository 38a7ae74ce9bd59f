"""Word-level Operations at Width 32."""

from fips_sha256.constants import BIT_WIDTH, WORD_MASK


def add32(*args: int) -> int:
    """Sum the args but within width 32."""
    return sum(args) & WORD_MASK


def rightrotate32(x: int, n: int) -> int:
    """Right rotate at width 32."""
    return ((x >> n) | (x << (BIT_WIDTH - n))) & WORD_MASK


def right_shift(x: int, n: int) -> int:
    """Bitwise right shift by n bits on x."""
    return (x & WORD_MASK) >> n


def little_sigma0(word: int) -> int:
    """Little sigma 0 formula."""
    return rightrotate32(word, 7) ^ rightrotate32(word, 18) ^ right_shift(word, 3)


def little_sigma1(word: int) -> int:
    """Little sigma 1 formula."""
    return rightrotate32(word, 17) ^ rightrotate32(word, 19) ^ right_shift(word, 10)


def big_sigma0(word: int) -> int:
    """Big sigma 0 formula."""
    return rightrotate32(word, 2) ^ rightrotate32(word, 13) ^ rightrotate32(word, 22)


def big_sigma1(word: int) -> int:
    """Big sigma 1 formula."""
    return rightrotate32(word, 6) ^ rightrotate32(word, 11) ^ rightrotate32(word, 25)


def choice(x: int, y: int, z: int) -> int:
    """Choice between y and z with x."""
    return (x & y) ^ (~x & WORD_MASK & z)


def majority(x: int, y: int, z: int) -> int:
    """Majority among x, y and z."""
    return (x & y) ^ (x & z) ^ (y & z)
