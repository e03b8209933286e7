import hashlib
import struct

import pytest

from benchkernels import md5 as md5mod


def _reference_state(message: bytes) -> tuple[int, ...]:
    return struct.unpack("<4I", hashlib.md5(message).digest())


def test_empty_message_digest():
    assert md5mod.hexdigest(md5mod.md5(b"")) == "d41d8cd98f00b204e9800998ecf8427e"


@pytest.mark.parametrize("length", [0, 1, 55, 56, 63, 64, 65, 119, 120, 1000])
def test_matches_reference_digest(length):
    message = bytes((i * 7) & 0xFF for i in range(length))
    assert md5mod.hexdigest(md5mod.md5(message)) == hashlib.md5(message).hexdigest()


def test_state_words_match_reference():
    message = b"The quick brown fox jumps over the lazy dog"
    assert md5mod.md5(message) == _reference_state(message)


def test_accepts_bytearray():
    message = bytearray(b"abc")
    assert md5mod.md5(message) == md5mod.md5(b"abc")


def test_run_returns_sum_of_state_words():
    message = bytes(i & 0xFF for i in range(1000))
    assert md5mod.run(1, 1000) == sum(_reference_state(message))


def test_run_default_length_and_repeats_agree():
    assert md5mod.run(3) == md5mod.run(1, md5mod.MSG_SIZE)


def test_run_rejects_bad_repeat():
    with pytest.raises(ValueError):
        md5mod.run(0)


def test_run_rejects_negative_length():
    with pytest.raises(ValueError):
        md5mod.run(1, -1)


def test_verify_accepts_expected_and_rejects_other():
    assert md5mod.verify(md5mod.EXPECTED_RESULT) is True
    assert md5mod.verify(md5mod.EXPECTED_RESULT + 1) is False