import zlib

import pytest

from modplaylist.errors import CorruptPayload, MalformedInput
from modplaylist.transport import compress, decode_text, decompress, encode_text


def test_text_roundtrip():
    data = bytes(range(256)) + b"\x00\x00\x00\x00" + b"tail"
    assert decode_text(encode_text(data)) == data


def test_text_is_single_line_ascii85():
    text = encode_text(bytes(range(256)) * 4)
    assert "\n" not in text
    assert all("!" <= ch <= "u" or ch == "z" for ch in text)


def test_zero_group_uses_z():
    assert encode_text(b"\x00\x00\x00\x00") == "z"
    assert decode_text("z") == b"\x00\x00\x00\x00"


@pytest.mark.parametrize("text", ["abc~", "ab cd", "vvvvv", "abc\n", "é"])
def test_decode_text_rejects_bad_characters(text):
    with pytest.raises(MalformedInput):
        decode_text(text)


def test_decode_text_rejects_dangling_group():
    good = encode_text(b"12345678")
    with pytest.raises(MalformedInput):
        decode_text(good + "!")


def test_decode_text_rejects_overflowing_group():
    with pytest.raises(MalformedInput):
        decode_text("uuuuu")


def test_compress_roundtrip():
    raw = b"playlist" * 100
    packed = compress(raw)
    assert len(packed) < len(raw)
    assert decompress(packed) == raw


def test_decompress_rejects_garbage():
    with pytest.raises(CorruptPayload):
        decompress(b"not a zlib stream")


def test_decompress_rejects_truncated_stream():
    with pytest.raises(CorruptPayload):
        decompress(compress(b"playlist" * 10)[:-3])


def test_decompress_rejects_trailing_bytes():
    with pytest.raises(CorruptPayload):
        decompress(zlib.compress(b"abc") + b"extra")


def test_decompress_rejects_empty():
    with pytest.raises(CorruptPayload):
        decompress(b"")


def test_decompress_caps_inflated_size():
    bomb = compress(b"\x00" * 100_000)
    assert decompress(bomb, max_length=100_000) == b"\x00" * 100_000
    with pytest.raises(CorruptPayload):
        decompress(bomb, max_length=99_999)
    with pytest.raises(CorruptPayload):
        decompress(bomb, max_length=1000)
