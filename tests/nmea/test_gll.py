"""Tests for GLL sentence decoding and encoding."""

import pytest

from gpsnmea.nmea import GLLData, MalformedSentenceError, Time, parse_sentence
from gpsnmea.nmea.gll import encode_gll

GLL_WITH_STATUS = "$GPGLL,4916.45,N,12311.12,W,225444,A,*1D"


class TestDecodeGLL:
    """Tests for decode_gll function."""

    def test_valid_gll(self):
        result = parse_sentence(GLL_WITH_STATUS)
        assert isinstance(result, GLLData)
        assert result.latitude.decimal_degrees == pytest.approx(49.274167, rel=1e-6)
        assert result.longitude.decimal_degrees == pytest.approx(-123.185333, rel=1e-6)
        assert result.time == Time(22, 54, 44)
        assert result.status == "A"
        assert result.valid is True

    def test_gll_without_status(self):
        result = parse_sentence("$GPGLL,4916.45,N,12311.12,W,225444*5C")
        assert result.status is None
        assert result.valid is False

    def test_gll_truncated(self):
        with pytest.raises(MalformedSentenceError):
            parse_sentence("$GPGLL,4916.45,N*3B")


class TestEncodeGLL:
    """Tests for encode_gll function."""

    def test_encode_with_status(self):
        record = parse_sentence(GLL_WITH_STATUS)
        assert encode_gll(record) == b"$GPGLL,4916.4500,N,12311.1200,W,225444,A*31\r"

    def test_encode_without_status(self):
        record = parse_sentence("$GPGLL,4916.45,N,12311.12,W,225444*5C")
        assert encode_gll(record) == b"$GPGLL,4916.4500,N,12311.1200,W,225444*5C\r"

    def test_encode_then_decode(self):
        record = parse_sentence(GLL_WITH_STATUS)
        assert parse_sentence(encode_gll(record).decode()) == record

