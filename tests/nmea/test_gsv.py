"""Tests for GSV sentence decoding and encoding."""

import pytest

from gpsnmea.nmea import (
    GSVData,
    MalformedSentenceError,
    SatelliteInView,
    parse_sentence,
)
from gpsnmea.nmea.fields import tokenize
from gpsnmea.nmea.gsv import decode_gsv, encode_gsv

GSV_FULL = "$GPGSV,2,1,08,01,40,083,46,02,17,308,41,12,07,344,39,14,22,228,45*75"
GSV_SECOND = "$GPGSV,2,2,08,15,10,050,,22,05,100,33*75"


class TestDecodeGSV:
    """Tests for decode_gsv function."""

    def test_four_satellites(self):
        result = parse_sentence(GSV_FULL)
        assert isinstance(result, GSVData)
        assert result.total_messages == 2
        assert result.message_number == 1
        assert result.satellites_in_view == 8
        assert len(result.satellites) == 4
        assert result.satellites[0] == SatelliteInView(1, 40, 83, 46)
        assert result.satellites[3] == SatelliteInView(14, 22, 228, 45)

    def test_untracked_satellite_has_no_snr(self):
        result = parse_sentence(GSV_SECOND)
        assert result.satellites == (
            SatelliteInView(15, 10, 50, None),
            SatelliteInView(22, 5, 100, 33),
        )

    def test_no_satellites(self):
        result = parse_sentence("$GPGSV,1,1,00*79")
        assert result.satellites_in_view == 0
        assert result.satellites == ()

    def test_partial_satellite_group(self):
        with pytest.raises(MalformedSentenceError):
            parse_sentence("$GPGSV,2,2,08,15,10,050*6D")

    @pytest.mark.parametrize(
        "sentence",
        ["$GPGSV,1,1,02,05,40,083,46,07*68", "$GPGSV,1,1,02,05,40,083,46,07,12*47"],
    )
    def test_short_trailing_group(self, sentence):
        with pytest.raises(MalformedSentenceError, match="incomplete satellite group"):
            parse_sentence(sentence)

    def test_short_trailing_group_from_fields(self):
        with pytest.raises(MalformedSentenceError):
            decode_gsv(tokenize("GPGSV,1,1,02,05,40,083,46,07"))


class TestEncodeGSV:
    """Tests for encode_gsv function."""

    def test_encode_canonical(self):
        record = parse_sentence(GSV_FULL)
        assert encode_gsv(record) == GSV_FULL.encode() + b"\r"

    def test_encode_empty_snr(self):
        record = parse_sentence(GSV_SECOND)
        assert encode_gsv(record) == GSV_SECOND.encode() + b"\r"

    def test_encode_other_talker(self):
        record = GSVData(1, 1, 0, (), talker="GL")
        assert encode_gsv(record) == b"$GLGSV,1,1,00*65\r"

    def test_too_many_satellites(self):
        satellite = SatelliteInView(1, 40, 83, 46)
        record = GSVData(2, 1, 8, (satellite,) * 5)
        with pytest.raises(ValueError):
            encode_gsv(record)
