"""Tests for field tokenizing and scalar field decoders."""

import pytest

from gpsnmea.nmea import (
    Coordinate,
    Date,
    FieldDecodeError,
    Height,
    MalformedSentenceError,
    Time,
)
from gpsnmea.nmea.fields import (
    MAX_FIELD_LENGTH,
    MAX_FIELDS,
    get_field,
    hemisphere_sign,
    is_available,
    is_digit,
    parse_char_field,
    parse_coordinate_field,
    parse_date_field,
    parse_float_field,
    parse_height_field,
    parse_int_field,
    parse_time_field,
    require_fields,
    safe_float_field,
    safe_int_field,
    tokenize,
)


class TestTokenize:
    """Tests for tokenize function."""

    def test_preserves_empty_fields(self):
        assert tokenize("GPGGA,,1,,") == ["GPGGA", "", "1", "", ""]

    def test_single_field(self):
        assert tokenize("GPGGA") == ["GPGGA"]

    def test_maximum_field_count_accepted(self):
        payload = ",".join(["x"] * MAX_FIELDS)
        assert len(tokenize(payload)) == MAX_FIELDS

    def test_too_many_fields(self):
        payload = ",".join(["x"] * (MAX_FIELDS + 1))
        with pytest.raises(MalformedSentenceError):
            tokenize(payload)

    def test_field_too_long(self):
        with pytest.raises(MalformedSentenceError):
            tokenize("GPGGA," + "9" * (MAX_FIELD_LENGTH + 1))

    def test_custom_bounds(self):
        with pytest.raises(MalformedSentenceError):
            tokenize("a,b,c", max_fields=2)


class TestFieldAccess:
    """Tests for get_field, require_fields and is_available."""

    def test_get_field_in_range(self):
        assert get_field(["GPGGA", "08"], 1) == "08"

    def test_get_field_out_of_range(self):
        with pytest.raises(MalformedSentenceError):
            get_field(["GPGGA"], 3)

    def test_negative_index_rejected(self):
        with pytest.raises(MalformedSentenceError):
            get_field(["GPGGA", "08"], -1)

    def test_require_fields(self):
        require_fields(["GPGGA", "1", "2"], 3)
        with pytest.raises(MalformedSentenceError, match="GPGGA"):
            require_fields(["GPGGA", "1"], 3)

    def test_is_available(self):
        fields = ["GPGGA", "", "1"]
        assert is_available(fields, 1) is False
        assert is_available(fields, 2) is True


class TestNumericFields:
    """Tests for the integer and decimal decoders."""

    def test_parse_int(self):
        assert parse_int_field(["X", "08"], 1) == 8

    def test_parse_int_empty_is_zero(self):
        assert parse_int_field(["X", ""], 1) == 0

    def test_parse_int_rejects_text(self):
        with pytest.raises(FieldDecodeError) as info:
            parse_int_field(["X", "XX"], 1)
        assert info.value.index == 1
        assert info.value.value == "XX"

    def test_parse_float(self):
        assert parse_float_field(["X", "545.4"], 1) == pytest.approx(545.4)

    def test_parse_float_empty_is_zero(self):
        assert parse_float_field(["X", ""], 1) == 0.0

    def test_parse_float_rejects_text(self):
        with pytest.raises(FieldDecodeError):
            parse_float_field(["X", "1.2.3"], 1)

    def test_safe_int_empty_is_none(self):
        assert safe_int_field(["X", ""], 1) is None
        assert safe_int_field(["X", "46"], 1) == 46

    def test_safe_float_empty_is_none(self):
        assert safe_float_field(["X", ""], 1) is None
        assert safe_float_field(["X", "054.7"], 1) == pytest.approx(54.7)

    def test_safe_int_rejects_text(self):
        with pytest.raises(FieldDecodeError):
            safe_int_field(["X", "4x"], 1)

    def test_negative_float(self):
        assert parse_float_field(["X", "-34.0"], 1) == pytest.approx(-34.0)


class TestStrictNumericText:
    """Only plain ASCII decimal text decodes as a number."""

    @pytest.mark.parametrize(
        "text", ["nan", "inf", "-inf", "1e3", "1_0", "+5", " 5", "5 ", "٣", "5.", ".5"]
    )
    def test_float_rejects(self, text):
        with pytest.raises(FieldDecodeError):
            parse_float_field(["X", text], 1)
        with pytest.raises(FieldDecodeError):
            safe_float_field(["X", text], 1)

    @pytest.mark.parametrize("text", ["1_0", "+5", " 8", "8 ", "٣", "-3", "1.0", "0x1F"])
    def test_int_rejects(self, text):
        with pytest.raises(FieldDecodeError):
            parse_int_field(["X", text], 1)
        with pytest.raises(FieldDecodeError):
            safe_int_field(["X", text], 1)

    def test_height_rejects_nan(self):
        with pytest.raises(FieldDecodeError):
            parse_height_field(["X", "nan", "M"], 1)

    @pytest.mark.parametrize("char,expected", [("7", True), ("٣", False), ("x", False)])
    def test_is_digit(self, char, expected):
        assert is_digit(char) is expected


class TestCharFields:
    """Tests for parse_char_field and hemisphere_sign."""

    def test_first_character(self):
        assert parse_char_field(["X", "A"], 1) == "A"
        assert parse_char_field(["X", ""], 1) is None

    @pytest.mark.parametrize(
        "hemisphere,expected",
        [("N", 1), ("E", 1), ("S", -1), ("W", -1), ("", 1)],
    )
    def test_hemisphere_sign(self, hemisphere, expected):
        assert hemisphere_sign(["X", hemisphere], 1) == expected


class TestParseTimeField:
    """Tests for parse_time_field function."""

    def test_without_fraction(self):
        assert parse_time_field(["X", "123519"], 1) == Time(12, 35, 19, None)

    def test_with_hundredths(self):
        assert parse_time_field(["X", "225446.33"], 1) == Time(22, 54, 46, 33)

    def test_single_fraction_digit_is_padded(self):
        assert parse_time_field(["X", "123519.5"], 1).hundredths == 50

    def test_extra_fraction_digits_ignored(self):
        assert parse_time_field(["X", "123519.123"], 1).hundredths == 12

    def test_empty(self):
        assert parse_time_field(["X", ""], 1) is None

    def test_too_short(self):
        with pytest.raises(FieldDecodeError):
            parse_time_field(["X", "1235"], 1)

    def test_non_digit(self):
        with pytest.raises(FieldDecodeError):
            parse_time_field(["X", "12a519"], 1)

    def test_bad_fraction_separator(self):
        with pytest.raises(FieldDecodeError):
            parse_time_field(["X", "123519,33"], 1)

    @pytest.mark.parametrize("text", ["123519.12ZZ", "123519.1Z", "123519.", "123519.12 "])
    def test_non_digit_after_point(self, text):
        with pytest.raises(FieldDecodeError):
            parse_time_field(["X", text], 1)


class TestParseDateField:
    """Tests for parse_date_field function."""

    def test_date(self):
        assert parse_date_field(["X", "230394"], 1) == Date(23, 3, 94)

    def test_empty(self):
        assert parse_date_field(["X", ""], 1) is None

    def test_non_digit(self):
        with pytest.raises(FieldDecodeError):
            parse_date_field(["X", "23o394"], 1)

    def test_trailing_text(self):
        with pytest.raises(FieldDecodeError):
            parse_date_field(["X", "230394Z"], 1)


class TestParseCoordinateField:
    """Tests for parse_coordinate_field function."""

    def test_latitude_north(self):
        result = parse_coordinate_field(["X", "4807.038", "N"], 1)
        assert result.sign == 1
        assert result.degrees == 48
        assert result.minutes == pytest.approx(7.038)
        assert result.decimal_degrees == pytest.approx(48.1173)

    def test_longitude_west(self):
        result = parse_coordinate_field(["X", "12311.12", "W"], 1)
        assert result.sign == -1
        assert result.degrees == 123
        assert result.minutes == pytest.approx(11.12)
        assert result.decimal_degrees == pytest.approx(-123.185333, rel=1e-6)

    def test_no_fraction(self):
        result = parse_coordinate_field(["X", "0100", "N"], 1)
        assert result == Coordinate(sign=1, degrees=1, minutes=0.0)

    def test_fraction_scaled_by_digit_count(self):
        result = parse_coordinate_field(["X", "4807.5", "N"], 1)
        assert result.minutes == pytest.approx(7.5)

    def test_empty(self):
        assert parse_coordinate_field(["X", "", ""], 1) is None

    def test_minutes_out_of_range(self):
        with pytest.raises(FieldDecodeError, match="below 60"):
            parse_coordinate_field(["X", "4860.000", "N"], 1)

    def test_non_digit(self):
        with pytest.raises(FieldDecodeError):
            parse_coordinate_field(["X", "48O7.038", "N"], 1)

    def test_missing_hemisphere_field(self):
        with pytest.raises(MalformedSentenceError):
            parse_coordinate_field(["X", "4807.038"], 1)


class TestParseHeightField:
    """Tests for parse_height_field function."""

    def test_height_with_unit(self):
        assert parse_height_field(["X", "545.4", "M"], 1) == Height(545.4, "M")

    def test_empty_unit(self):
        assert parse_height_field(["X", "46.9", ""], 1) == Height(46.9, "")

    def test_empty_value(self):
        assert parse_height_field(["X", "", "M"], 1) is None

    def test_non_numeric(self):
        with pytest.raises(FieldDecodeError):
            parse_height_field(["X", "high", "M"], 1)
