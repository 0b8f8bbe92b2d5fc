"""
Test suite for the flexible scalar codecs
Following AAA pattern and descriptive naming
"""

import pytest
from datetime import datetime, timezone

from woocommerce_client.scalars import (
    CustomTime,
    PersonType,
    StringFloat,
    StringInt,
    StringOrInt,
    StringTime,
    parse_string_float,
)


class TestStringInt:
    """Test suite for quoted integer decoding"""

    def test_decode_with_quoted_decimal_returns_bare_number_on_encode(self):
        """
        Test that a quoted integer re-encodes as a bare number
        """
        # Arrange
        raw = "42"

        # Act
        value = StringInt.decode(raw)

        # Assert
        assert value == 42
        assert value.encode() == 42
        assert isinstance(value.encode(), int)

    def test_decode_with_unquoted_number_keeps_value(self):
        assert StringInt.decode(7).int64() == 7

    @pytest.mark.parametrize("raw", [None, "", "null"])
    def test_decode_with_null_marker_returns_zero(self, raw):
        assert StringInt.decode(raw) == 0

    @pytest.mark.parametrize("raw", ["1_000", "\u0661\u0662", "1.5"])
    def test_decode_with_non_decimal_text_falls_back_to_zero(self, raw):
        assert StringInt.decode(raw) == 0

    def test_decode_with_signed_text_keeps_sign(self):
        assert StringInt.decode("-12") == -12

    def test_decode_with_invalid_text_falls_back_to_zero_and_logs_warning(self, caplog):
        """
        Test that invalid integer text never raises
        """
        # Act
        value = StringInt.decode("abc")

        # Assert
        assert value == 0
        assert "Error parsing string int" in caplog.text


class TestStringFloat:
    """Test suite for quoted float decoding with 32-bit precision"""

    def test_decode_with_quoted_price_returns_float_value(self):
        # Act
        value = StringFloat.decode("19.90")

        # Assert
        assert value.encode() == 19.9
        assert abs(value.float64() - 19.9) < 1e-5

    def test_decode_with_empty_string_returns_zero(self):
        assert StringFloat.decode("") == 0.0

    def test_decode_with_invalid_text_raises_value_error(self):
        """
        Test that money fields do not silently become zero
        """
        with pytest.raises(ValueError):
            StringFloat.decode("twelve")

    @pytest.mark.parametrize("raw", ["1e39", "-1e39", "3.5e38"])
    def test_decode_with_value_beyond_float32_range_raises_value_error(self, raw):
        """
        Test that an overflowing price is an error instead of infinity
        """
        with pytest.raises(ValueError, match="float32 range"):
            StringFloat.decode(raw)

    def test_decode_with_largest_float32_keeps_value(self):
        assert StringFloat.decode("3.4028234e38").float64() > 3.4e38

    @pytest.mark.parametrize("raw", ["1_000.5", "\u0661.5"])
    def test_decode_with_non_ascii_or_separated_digits_raises_value_error(self, raw):
        with pytest.raises(ValueError):
            StringFloat.decode(raw)

    def test_parse_string_float_with_invalid_text_returns_zero(self):
        assert parse_string_float("n/a") == 0.0


class TestStringOrInt:
    """Test suite for values that are either integers or free text"""

    def test_decode_with_numeric_string_keeps_canonical_form(self):
        # Act
        value = StringOrInt.decode("007")

        # Assert
        assert value == "7"
        assert value.encode() == 7
        assert value.int64() == 7

    def test_decode_with_text_preserves_literal(self):
        # Act
        value = StringOrInt.decode("A-12")

        # Assert
        assert value == "A-12"
        assert value.encode() == "A-12"
        assert value.int64() == 0

    def test_decode_with_separated_digits_keeps_text(self):
        # Act
        value = StringOrInt.decode("1_000")

        # Assert
        assert value == "1_000"
        assert not value.is_numeric()
        assert value.encode() == "1_000"
        assert value.int64() == 0

    def test_decode_with_bare_number_encodes_as_number(self):
        assert StringOrInt.decode(3).encode() == 3


class TestStringTime:
    """Test suite for multi-layout date decoding"""

    @pytest.mark.parametrize("raw", ["2026-01-19T10:00:00", "2026-01-19", "19/01/2026"])
    def test_decode_with_supported_layout_returns_date(self, raw):
        """
        Test that each supported layout yields 19 January 2026
        """
        # Act
        value = StringTime.decode(raw)

        # Assert
        parsed = value.time()
        assert (parsed.year, parsed.month, parsed.day) == (2026, 1, 19)
        assert not value.is_zero()

    @pytest.mark.parametrize("raw", ["", "null", None])
    def test_decode_with_null_marker_returns_zero_time(self, raw):
        assert StringTime.decode(raw).is_zero()

    @pytest.mark.parametrize("raw", ["2026-1-9", "9/1/2026", "2026-01-19T10:0:00"])
    def test_decode_with_unpadded_fields_raises_value_error(self, raw):
        with pytest.raises(ValueError):
            StringTime.decode(raw)

    @pytest.mark.parametrize("raw", ["19-01-2026", "2026/01/19", "19/01/2026 10:00"])
    def test_decode_with_unsupported_layout_raises_value_error(self, raw):
        with pytest.raises(ValueError):
            StringTime.decode(raw)

    def test_encode_with_parsed_time_returns_utc_timestamp(self):
        # Arrange
        value = StringTime.decode("2026-01-19T10:00:00")

        # Act
        encoded = value.encode()

        # Assert
        assert encoded == "2026-01-19T10:00:00Z"

    def test_encode_with_zero_time_returns_none(self):
        assert StringTime().encode() is None

    def test_equality_with_same_instant_returns_true(self):
        # Arrange
        first = StringTime.decode("2026-01-19")
        second = StringTime(datetime(2026, 1, 19, tzinfo=timezone.utc))

        # Assert
        assert first == second
        assert hash(first) == hash(second)


class TestCustomTime:
    """Test suite for the single-layout subscription date"""

    def test_decode_with_full_timestamp_returns_time(self):
        assert CustomTime.decode("2026-01-19T10:00:00").time().hour == 10

    def test_decode_with_date_only_raises_value_error(self):
        """
        Test that layouts accepted by StringTime are not accepted here
        """
        with pytest.raises(ValueError):
            CustomTime.decode("2026-01-19")

    def test_decode_with_null_returns_zero_time(self):
        assert CustomTime.decode("null").is_zero()


class TestPersonType:
    """Test suite for billing person type decoding"""

    @pytest.mark.parametrize("raw, expected", [
        ("F", PersonType.PESSOA_FISICA),
        ("J", PersonType.PESSOA_JURIDICA),
        ("X", PersonType.UNKNOWN),
        (None, PersonType.UNKNOWN),
    ])
    def test_decode_with_marker_returns_person_type(self, raw, expected):
        assert PersonType.decode(raw) == expected

    def test_encode_with_company_returns_marker(self):
        assert PersonType.PESSOA_JURIDICA.encode() == "J"
