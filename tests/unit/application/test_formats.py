"""Unit tests for shared format helpers."""

from uuid import uuid1, uuid4

import pytest

from momo.application.formats import is_numeric, is_present, is_uuid_v4


class TestIsUuidV4:
    """Test is_uuid_v4 function."""

    def test_generated_uuid4(self) -> None:
        """A generated UUID v4 string is accepted."""
        assert is_uuid_v4(str(uuid4())) is True

    def test_uppercase_uuid4(self) -> None:
        """Hex digits are matched case-insensitively."""
        assert is_uuid_v4(str(uuid4()).upper()) is True

    @pytest.mark.parametrize(
        "value",
        [
            "test user id",
            "",
            str(uuid1()),
            "f47ac10b-58cc-4372-c567-0e02b2c3d479",  # variant nibble c
            "f47ac10b58cc4372a5670e02b2c3d479",  # no hyphens
            "{f47ac10b-58cc-4372-a567-0e02b2c3d479}",
            "f47ac10b-58cc-4372-a567-0e02b2c3d479\n",
            None,
            {"a": 1},
        ],
    )
    def test_rejects_non_v4(self, value: object) -> None:
        """Anything but a canonical UUID v4 string is rejected."""
        assert is_uuid_v4(value) is False


class TestIsNumeric:
    """Test is_numeric function."""

    @pytest.mark.parametrize(
        "value",
        ["1000", "0", "-5", "+5", "12.50", ".5", "5.", "1e3", " 42 ", 1000, 2.5, 10**400],
    )
    def test_numbers(self, value: object) -> None:
        """Finite numbers and numeric text are accepted."""
        assert is_numeric(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            "alphabetic",
            "",
            " ",
            "nan",
            "inf",
            "1,000",
            "1_000",
            "12abc",
            True,
            float("nan"),
            float("inf"),
            ["10"],
            None,
        ],
    )
    def test_not_numbers(self, value: object) -> None:
        """Non-numeric text, booleans and non-finite values are rejected."""
        assert is_numeric(value) is False


class TestIsPresent:
    """Test is_present function."""

    def test_present_values(self) -> None:
        """Non-empty values, including "0" and empty containers, are present."""
        assert is_present("x") is True
        assert is_present("0") is True
        assert is_present({}) is True
        assert is_present([]) is True

    def test_missing_values(self) -> None:
        """None and the empty string are absent."""
        assert is_present(None) is False
        assert is_present("") is False
