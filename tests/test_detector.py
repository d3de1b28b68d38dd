# tests/test_detector.py
from __future__ import annotations

import array
import sys

import pytest

from encsniff.detector import StringEncodingDetector, new_session
from encsniff.enums import DetectorState, Encoding
from encsniff.heuristics import INVALID_HEURISTIC
from encsniff.heuristics.cp932 import CP932Heuristic
from encsniff.heuristics.cp949 import CP949Heuristic


def _resolve(data: bytes) -> Encoding:
    detector = StringEncodingDetector()
    detector.feed(data)
    return detector.finalize()


def test_basic_lifecycle():
    detector = new_session()
    assert detector.state is DetectorState.ACCUMULATING
    detector.feed(b"Hello world")
    assert detector.finalize() is Encoding.UTF8
    assert detector.state is DetectorState.FINALIZED
    assert detector.finalized
    assert detector.resolved_encoding() is Encoding.UTF8
    assert detector.encoding is Encoding.UTF8


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        pytest.param(b"\xe3\x81\x82", Encoding.UTF8, id="utf8-a"),
        pytest.param(b"\x82\xa0", Encoding.CP932, id="sjis-a"),
        pytest.param(b"\xff\xfe", Encoding.UNKNOWN, id="ff-fe"),
        pytest.param(b"", Encoding.UTF8, id="empty"),
        pytest.param(b"plain ascii", Encoding.UTF8, id="ascii"),
        pytest.param(b"\x80", Encoding.UNKNOWN, id="lone-continuation"),
    ],
)
def test_examples(data: bytes, expected: Encoding):
    assert _resolve(data) is expected


def test_shift_jis_sentence(sjis_sample: bytes):
    assert _resolve(sjis_sample) is Encoding.CP932


def test_korean(cp949_sample: bytes):
    assert _resolve(cp949_sample) is Encoding.CP949
    assert _resolve(b"\xc7\xd1\xb1\xb9\xbe\xee") is Encoding.CP949


def test_tier0_wins_over_valid_legacy_reading():
    # C3 A9 is "é" in UTF-8 and two half-width katakana in CP932.
    detector = StringEncodingDetector()
    detector.feed(b"caf\xc3\xa9")
    assert detector.finalize() is Encoding.UTF8
    assert detector.get_best_heuristic().get_encoding() is Encoding.UTF8


def test_truncated_utf8_falls_back_to_legacy():
    # E3 81 is a complete CP932 pair but an unfinished UTF-8 sequence.
    assert _resolve(b"\xe3\x81") is Encoding.CP932


def test_unknown_uses_sentinel():
    detector = StringEncodingDetector()
    detector.feed(b"\xff\xfe")
    detector.finalize()
    assert detector.get_best_heuristic() is INVALID_HEURISTIC


def test_feed_after_finalize_raises():
    detector = StringEncodingDetector()
    detector.feed(b"Hello")
    detector.finalize()
    with pytest.raises(ValueError, match="after finalize"):
        detector.feed(b"more data")


def test_finalize_twice_raises():
    detector = StringEncodingDetector()
    detector.finalize()
    with pytest.raises(ValueError, match="twice"):
        detector.finalize()


def test_query_before_finalize_raises():
    detector = StringEncodingDetector()
    detector.feed(b"Hello")
    with pytest.raises(ValueError, match="before finalize"):
        detector.resolved_encoding()
    with pytest.raises(ValueError, match="before finalize"):
        detector.get_best_heuristic()


def test_resolved_encoding_idempotent(sjis_sample: bytes):
    detector = StringEncodingDetector()
    detector.feed(sjis_sample)
    detector.finalize()
    results = {detector.resolved_encoding() for _ in range(5)}
    assert results == {Encoding.CP932}


@pytest.mark.parametrize("chunk_size", [1, 2, 3, 7])
def test_multiple_feeds(chunk_size: int, sjis_sample: bytes, utf8_sample: bytes):
    for data in (sjis_sample, utf8_sample):
        detector = StringEncodingDetector()
        for i in range(0, len(data), chunk_size):
            detector.feed(data[i : i + chunk_size])
        assert detector.finalize() is _resolve(data)


def test_accepts_bytearray_and_memoryview(sjis_sample: bytes):
    detector = StringEncodingDetector()
    detector.feed(bytearray(sjis_sample[:4]))
    detector.feed(memoryview(sjis_sample)[4:])
    assert detector.finalize() is Encoding.CP932
    assert detector.total_bytes_fed == len(sjis_sample)


def test_abandoned_session_needs_no_finalize():
    detector = StringEncodingDetector()
    detector.feed(b"\xe3\x81")
    del detector


def test_sessions_are_independent():
    first = new_session()
    second = new_session()
    first.feed(b"\xff")
    second.feed(b"\xe3\x81\x82")
    assert first.finalize() is Encoding.UNKNOWN
    assert second.finalize() is Encoding.UTF8


def test_tiers_can_be_reordered_by_subclassing():
    class KoreanFirstDetector(StringEncodingDetector):
        TIER1 = (CP949Heuristic, CP932Heuristic)

    detector = KoreanFirstDetector()
    detector.feed(b"\x82\xa0")
    assert detector.finalize() is Encoding.CP949


@pytest.mark.parametrize("bad", [5, "text", None, [0x82, 0xA0]])
def test_feed_rejects_non_bytes(bad: object):
    detector = StringEncodingDetector()
    with pytest.raises(TypeError):
        detector.feed(bad)
    assert detector.total_bytes_fed == 0


def test_feed_counts_bytes_of_wide_buffers():
    # Two 16-bit items are four bytes: E3 81 82 00 in little-endian order.
    wide = array.array("H", [0x81E3, 0x0082])
    if sys.byteorder == "big":
        wide.byteswap()
    detector = StringEncodingDetector()
    detector.feed(wide)
    assert detector.total_bytes_fed == 4
    assert detector.finalize() is Encoding.UTF8
