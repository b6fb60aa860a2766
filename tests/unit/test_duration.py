"""Unit tests for the M:SS duration codec."""

from __future__ import annotations

import pytest

from tunefetch.utils.duration import format_duration, parse_duration


class TestFormatDuration:
    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [(271, "4:31"), (65, "1:05"), (0, "0:00"), (59, "0:59"), (3600, "60:00")],
    )
    def test_renders_minutes_and_padded_seconds(self, seconds: int, expected: str) -> None:
        assert format_duration(seconds) == expected

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            format_duration(-1)


class TestParseDuration:
    def test_parses_minutes_and_seconds(self) -> None:
        assert parse_duration("4:31") == 271

    def test_unpadded_seconds(self) -> None:
        assert parse_duration("1:5") == 65

    def test_whitespace_is_trimmed(self) -> None:
        assert parse_duration(" 4 : 31 ") == 271

    def test_non_numeric_parts_count_as_zero(self) -> None:
        assert parse_duration("4:") == 240
        assert parse_duration("x:5") == 5

    def test_missing_colon_rejected(self) -> None:
        with pytest.raises(ValueError):
            parse_duration("271")

    def test_inverse_of_format(self) -> None:
        assert parse_duration(format_duration(4321)) == 4321
