import hashlib
import re

import numpy as np

from fips_sha256 import digest

_HEX_DIGEST = re.compile(r"^[0-9a-f]{64}$")


def _bit_difference(a: str, b: str) -> int:
    return bin(int(a, 16) ^ int(b, 16)).count("1")


def test_empty_message():
    assert (
        digest.digest(b"")
        == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_abc():
    assert (
        digest.digest(b"abc")
        == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_two_block_message():
    message = b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq"
    assert (
        digest.digest(message)
        == "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"
    )


def test_million_a():
    assert (
        digest.digest(b"a" * 1_000_000)
        == "cdc76e5c9914fb9281a1c7e284d73e67f1809a48a497200e046d39ccc7112cd0"
    )


def test_random_messages_match_hashlib():
    for input_len in list(range(0, 130)) + [1000, 4096]:
        message = np.random.bytes(input_len)
        hex_digest = digest.digest(message)
        assert _HEX_DIGEST.match(hex_digest)
        assert hex_digest == hashlib.sha256(message).hexdigest()


def test_hash_state_words():
    state = digest.hash_state(b"abc")
    assert len(state) == 8
    assert state[0] == 0xBA7816BF
    assert state[7] == 0xF20015AD


def test_format_digest_pads_words():
    assert digest.format_digest([0, 1, 0xF, 0xFF, 0xABC, 0xFFFFFFFF, 0x10, 0]) == (
        "00000000"
        "00000001"
        "0000000f"
        "000000ff"
        "00000abc"
        "ffffffff"
        "00000010"
        "00000000"
    )


def test_deterministic():
    message = np.random.bytes(300)
    assert digest.digest(message) == digest.digest(message)
    assert digest.digest(bytearray(message)) == digest.digest(message)


def test_single_bit_flip_changes_many_bits():
    message = bytearray(b"The quick brown fox jumps over the lazy dog")
    original = digest.digest(bytes(message))
    for bit in range(8):
        flipped = bytearray(message)
        flipped[0] ^= 1 << bit
        assert _bit_difference(original, digest.digest(bytes(flipped))) > 64
