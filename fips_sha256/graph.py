"""Word-based SHA256 Hash Algorithm for tf Graphs.

Words are int64 tensors holding unsigned 32-bit values. Every addition,
rotation and complement is masked back to width 32.
"""

import logging

import numpy as np
import tensorflow as tf

from fips_sha256 import digest as digest_
from fips_sha256.constants import (
    BIT_WIDTH,
    BLOCK_BYTES,
    IV,
    LENGTH_BYTES,
    ROUND_CONSTANTS,
    ROUND_SIZE,
    WORD_MASK,
)

logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)
logger.addHandler(logging.NullHandler())

WORD_SPEC = tf.TensorSpec(shape=[], dtype=tf.int64)
STATE_SPEC = tf.TensorSpec(shape=[len(IV)], dtype=tf.int64)
BLOCK_SPEC = tf.TensorSpec(shape=[BLOCK_BYTES], dtype=tf.uint8)

ROUND_TENSOR = tf.constant(ROUND_CONSTANTS, dtype=tf.int64, name="ROUND_CONSTANTS")
IV_TENSOR = tf.constant(IV, dtype=tf.int64, name="IV")
_BYTE_SHIFTS = tf.constant([24, 16, 8, 0], dtype=tf.int64)


def add32(*args) -> tf.Tensor:
    """Sum the args but within width 32."""
    return tf.bitwise.bitwise_and(tf.math.add_n(list(args)), WORD_MASK)


@tf.function(input_signature=(WORD_SPEC, WORD_SPEC))
def rightrotate32(x, n) -> tf.Tensor:
    """Right rotate at width 32."""
    rotated = tf.bitwise.bitwise_or(
        tf.bitwise.right_shift(x, n), tf.bitwise.left_shift(x, BIT_WIDTH - n)
    )
    return tf.bitwise.bitwise_and(rotated, WORD_MASK)


@tf.function(input_signature=(WORD_SPEC, WORD_SPEC))
def right_shift(x, n) -> tf.Tensor:
    """Bitwise right shift by n bits on x."""
    return tf.bitwise.right_shift(x, n)


def _xor3(a, b, c) -> tf.Tensor:
    return tf.bitwise.bitwise_xor(tf.bitwise.bitwise_xor(a, b), c)


@tf.function(input_signature=(WORD_SPEC,))
def little_sigma0(word) -> tf.Tensor:
    """Little sigma 0 formula."""
    return _xor3(rightrotate32(word, 7), rightrotate32(word, 18), right_shift(word, 3))


@tf.function(input_signature=(WORD_SPEC,))
def little_sigma1(word) -> tf.Tensor:
    """Little sigma 1 formula."""
    return _xor3(
        rightrotate32(word, 17), rightrotate32(word, 19), right_shift(word, 10)
    )


@tf.function(input_signature=(WORD_SPEC,))
def big_sigma0(word) -> tf.Tensor:
    """Big sigma 0 formula."""
    return _xor3(
        rightrotate32(word, 2), rightrotate32(word, 13), rightrotate32(word, 22)
    )


@tf.function(input_signature=(WORD_SPEC,))
def big_sigma1(word) -> tf.Tensor:
    """Big sigma 1 formula."""
    return _xor3(
        rightrotate32(word, 6), rightrotate32(word, 11), rightrotate32(word, 25)
    )


@tf.function(input_signature=(WORD_SPEC, WORD_SPEC, WORD_SPEC))
def choice(x, y, z) -> tf.Tensor:
    """Choice between y and z with x."""
    not_x = tf.bitwise.bitwise_xor(x, WORD_MASK)
    return tf.bitwise.bitwise_xor(
        tf.bitwise.bitwise_and(x, y), tf.bitwise.bitwise_and(not_x, z)
    )


@tf.function(input_signature=(WORD_SPEC, WORD_SPEC, WORD_SPEC))
def majority(x, y, z) -> tf.Tensor:
    """Majority among x, y and z."""
    return _xor3(
        tf.bitwise.bitwise_and(x, y),
        tf.bitwise.bitwise_and(x, z),
        tf.bitwise.bitwise_and(y, z),
    )


@tf.function(input_signature=(BLOCK_SPEC,))
def message_schedule_array(block) -> tf.Tensor:
    """Compute the message schedule array."""
    octets = tf.reshape(tf.cast(block, dtype=tf.int64), (16, 4))
    w = tf.reduce_sum(tf.bitwise.left_shift(octets, _BYTE_SHIFTS), axis=1)

    def c(idx, _):
        return tf.less(idx, ROUND_SIZE)

    def b(idx, w_):
        s0 = little_sigma0(w_[idx - 15])
        s1 = little_sigma1(w_[idx - 2])
        w_i_new = add32(w_[idx - 16], s0, w_[idx - 7], s1)
        w_i_new = tf.expand_dims(w_i_new, axis=0)
        return idx + 1, tf.concat([w_, w_i_new], axis=0)

    w = tf.while_loop(
        c,
        b,
        [tf.constant(16), w],
        shape_invariants=[tf.TensorShape([]), tf.TensorShape([None])],
        parallel_iterations=1,
        name="message_schedule_array_while_loop",
    )[1]
    return tf.ensure_shape(w, [ROUND_SIZE])


@tf.function(input_signature=(STATE_SPEC, WORD_SPEC, WORD_SPEC))
def round_(state, round_constant, schedule_word) -> tf.Tensor:
    """Round state given the constant and schedule word."""
    s1 = big_sigma1(state[4])
    ch = choice(state[4], state[5], state[6])
    temp1 = add32(state[7], s1, ch, round_constant, schedule_word)
    s0 = big_sigma0(state[0])
    maj = majority(state[0], state[1], state[2])
    temp2 = add32(s0, maj)
    return tf.stack(
        [
            add32(temp1, temp2),
            state[0],
            state[1],
            state[2],
            add32(state[3], temp1),
            state[4],
            state[5],
            state[6],
        ],
        axis=0,
    )


def _compress_step(state_words, round_params):
    round_constant, schedule_word = round_params
    return round_(state_words, round_constant, schedule_word)


@tf.function(input_signature=(STATE_SPEC, BLOCK_SPEC))
def compress_block(input_state_words, block) -> tf.Tensor:
    """Compress an input block."""
    w = message_schedule_array(block)

    state_words = tf.foldl(
        _compress_step,
        (ROUND_TENSOR, w),
        input_state_words,
        parallel_iterations=1,
        name="compress_block_foldl",
    )
    return add32(input_state_words, state_words)


@tf.function(input_signature=(tf.TensorSpec(shape=[], dtype=tf.int64),))
def padding_bytes(input_len) -> tf.Tensor:
    """Pad the input to a specific length."""
    remainder_bytes = (input_len + LENGTH_BYTES) % BLOCK_BYTES
    filler_bytes = BLOCK_BYTES - remainder_bytes
    zero_bytes = filler_bytes - 1
    shifts = tf.range(8 * (LENGTH_BYTES - 1), -8, -8, dtype=tf.int64)
    encoded_bit_length = tf.bitwise.bitwise_and(
        tf.bitwise.right_shift(8 * input_len, shifts), 0xFF
    )
    prefix = tf.constant([0x80], dtype=tf.int64)
    zeros = tf.zeros(tf.expand_dims(zero_bytes, axis=0), dtype=tf.int64)
    padding = tf.concat([prefix, zeros, encoded_bit_length], axis=0)
    return tf.cast(padding, dtype=tf.uint8)


@tf.function(input_signature=(tf.TensorSpec(shape=[None], dtype=tf.uint8),))
def sha256(message) -> tf.Tensor:
    """SHA256 hash state for byte tensors."""
    msg_len = tf.size(message, out_type=tf.int64)
    padded = tf.concat([message, padding_bytes(msg_len)], axis=0)
    padded = tf.reshape(padded, (-1, BLOCK_BYTES))

    return tf.foldl(
        compress_block,
        padded,
        IV_TENSOR,
        parallel_iterations=1,
        name="sha256_foldl",
    )


def digest(message: bytes) -> str:
    """SHA256 hex digest computed in the graph."""
    logger.debug("Hashing %d bytes in the graph", len(message))
    message_tensor = tf.constant(np.frombuffer(message, dtype=np.uint8))
    state_words = sha256(message_tensor)
    return digest_.format_digest(state_words.numpy().tolist())
