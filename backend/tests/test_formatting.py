"""Tests for formatting helpers."""

from __future__ import annotations

from cabinquote.formatting import (
    INCLUDED_LABEL,
    format_currency,
    format_dimensions,
    format_line_price,
)

NBSP = "\u00a0"


class TestFormatCurrency:
    def test_reference_price(self) -> None:
        assert format_currency(162_000) == f"162{NBSP}000{NBSP}₽"

    def test_millions(self) -> None:
        assert format_currency(1_234_567) == f"1{NBSP}234{NBSP}567{NBSP}₽"

    def test_small_amount(self) -> None:
        assert format_currency(850) == f"850{NBSP}₽"

    def test_zero(self) -> None:
        assert format_currency(0) == f"0{NBSP}₽"

    def test_rounds_to_whole_roubles(self) -> None:
        assert format_currency(2820.4) == f"2{NBSP}820{NBSP}₽"
        assert format_currency(2820.6) == f"2{NBSP}821{NBSP}₽"

    def test_negative(self) -> None:
        assert format_currency(-162_000) == f"-162{NBSP}000{NBSP}₽"


class TestFormatLinePrice:
    def test_zero_without_flag_is_an_amount(self) -> None:
        assert format_line_price(0.0) == f"0{NBSP}₽"

    def test_included_zero_row(self) -> None:
        assert format_line_price(0.0, included=True) == INCLUDED_LABEL

    def test_included_flag(self) -> None:
        assert format_line_price(4200.0, included=True) == "Included"

    def test_paid_row(self) -> None:
        assert format_line_price(25_800.0) == f"25{NBSP}800{NBSP}₽"


class TestFormatDimensions:
    def test_reference_cabin(self) -> None:
        assert format_dimensions(5.85, 2.45, 2.45) == "5.85 x 2.45 x 2.45 m"

    def test_whole_numbers_drop_decimals(self) -> None:
        assert format_dimensions(6.0, 2.5, 3.0) == "6 x 2.5 x 3 m"
