import pytest

from kingkai.protocol import Decoder, Status, encode_bits


def _decode(bits, sender=4242):
    decoder = Decoder()
    out = []
    for bit in bits:
        byte = decoder.feed(bit, sender)
        if byte is not None:
            out.append(byte)
    return bytes(out)


def test_encode_single_letter_msb_first():
    assert list(encode_bits("A")) == [0, 1, 0, 0, 0, 0, 0, 1] + [0] * 8


def test_encode_length_includes_terminator():
    assert len(list(encode_bits("hello"))) == 8 * 6


def test_encode_bytes_input():
    assert list(encode_bits(b"\xff"))[:8] == [1] * 8


def test_encode_stops_at_nul():
    assert list(encode_bits("a\0b")) == list(encode_bits("a"))


def test_round_trip_ascii():
    assert _decode(encode_bits("Kame hame ha")) == b"Kame hame ha\0"


def test_round_trip_utf8():
    text = "✅ ok"
    assert _decode(encode_bits(text)) == text.encode("utf-8") + b"\0"


def test_decoder_returns_none_mid_byte():
    decoder = Decoder()
    results = [decoder.feed(bit, 7) for bit in [0, 1, 0, 0, 0, 0, 0]]
    assert results == [None] * 7
    assert decoder.feed(1, 7) == ord("A")


def test_decoder_records_expected_sender():
    decoder = Decoder()
    decoder.feed(1, 555)
    assert decoder.expected == 555


def test_decoder_rejects_other_sender():
    decoder = Decoder()
    decoder.feed(0, 100)
    with pytest.raises(ValueError, match="unexpected PID: 200"):
        decoder.feed(1, 200)
    assert decoder.expected == 100


def test_decoder_next_byte_can_come_from_new_sender():
    decoder = Decoder()
    for bit in encode_bits("A"):
        decoder.feed(bit, 100)
    bits = list(encode_bits("B"))[:8]
    results = [decoder.feed(bit, 300) for bit in bits]
    assert results[-1] == ord("B")
    assert decoder.expected == 300


def test_status_order():
    assert Status.BUSY < Status.READY
    assert Status(0) is Status.BUSY