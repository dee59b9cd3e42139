"""Tests for currency formatting."""

from decimal import Decimal

import pytest

from ledgerview.domain.account_types import AccountSubtype, AccountType
from ledgerview.domain.currency import (
    CURRENCY_SYMBOLS,
    SUPPORTED_CURRENCY_OPTIONS,
    format_account_balance,
    format_currency_amount,
    format_currency_amount_detail,
    format_multi_currency_balances,
    format_normalized_balance,
    format_normalized_transaction_amount,
    format_transaction_currency,
    format_valuation_amount,
    get_currency_symbol,
    group_balances_by_currency,
)
from ledgerview.domain.errors import ValidationError


class TestCurrencySymbol:
    """Symbol lookup."""

    def test_known_symbols(self):
        assert get_currency_symbol("USD") == "$"
        assert get_currency_symbol("EUR") == "€"
        assert get_currency_symbol("GBP") == "£"
        assert get_currency_symbol("JPY") == "¥"

    def test_lookup_is_case_insensitive(self):
        assert get_currency_symbol("usd") == "$"

    def test_unknown_falls_back_to_code(self):
        assert get_currency_symbol("XYZ") == "XYZ"

    def test_symbol_table_is_read_only(self):
        with pytest.raises(TypeError):
            CURRENCY_SYMBOLS["USD"] = "US$"

    def test_supported_options_have_symbols(self):
        for option in SUPPORTED_CURRENCY_OPTIONS:
            assert get_currency_symbol(option.code) == option.symbol


class TestFormatCurrencyAmount:
    """Summary, code and detail presets."""

    def test_summary_positive(self):
        assert format_currency_amount(1234.56, "USD") == "$1,234.56"

    def test_summary_negative(self):
        assert format_currency_amount(-1234.56, "USD") == "-$1,234.56"

    def test_large_negative(self):
        result = format_currency_amount(-1234567.89, "USD")
        assert "-" in result
        assert "1,234,567.89" in result

    def test_no_plus_sign(self):
        result = format_currency_amount(50, "USD")
        assert "+" not in result
        assert "-" not in result
        assert result == "$50.00"

    def test_summary_unknown_code_appended(self):
        assert format_currency_amount(100, "XYZ") == "100.00 XYZ"

    def test_summary_symbol_equal_to_code(self):
        assert format_currency_amount(-5, "CHF") == "-5.00 CHF"

    def test_code_preset(self):
        assert format_currency_amount(1000, "USD", preset="code") == "1,000.00 USD"
        assert format_currency_amount(-1000, "eur", preset="code") == "-1,000.00 EUR"

    def test_detail_preset(self):
        assert format_currency_amount(200, "USD", preset="detail") == "USD 200.00"
        assert format_currency_amount_detail(-100, "CAD") == "CAD -100.00"

    def test_detail_does_not_show_symbol(self):
        result = format_currency_amount_detail(-100, "CAD")
        assert "CAD$" not in result

    def test_decimals(self):
        assert format_currency_amount(1000.123, "USD", decimals=3) == "$1,000.123"
        assert format_currency_amount(1000.5, "JPY", decimals=0) == "¥1,001"

    def test_no_grouping(self):
        assert format_currency_amount(1234567.5, "USD", use_grouping=False) == "$1234567.50"

    def test_rounds_half_away_from_zero(self):
        assert format_currency_amount(Decimal("2.345"), "USD") == "$2.35"
        assert format_currency_amount(Decimal("-2.345"), "USD") == "-$2.35"

    @pytest.mark.parametrize("noise", [1e-13, -1e-13, -0.0, -0.004, Decimal("-0.001")])
    def test_tiny_amounts_have_no_minus(self, noise):
        result = format_currency_amount(noise, "USD")
        assert result == "$0.00"

    def test_none_formats_as_zero(self):
        assert format_currency_amount(None, "USD") == "$0.00"

    def test_decimal_input(self):
        assert format_currency_amount(Decimal("-42.10"), "GBP") == "-£42.10"

    def test_very_large_amounts(self):
        """Amounts beyond 28 significant digits still format."""
        assert format_currency_amount(1e27, "USD") == "$1,000,000,000,000,000,000,000,000,000.00"
        result = format_currency_amount(Decimal("-123456789012345678901234567890.125"), "EUR")
        assert result == "-€123,456,789,012,345,678,901,234,567,890.13"
        assert format_currency_amount(1e27, "USD", decimals=8, use_grouping=False) == (
            "$1000000000000000000000000000.00000000"
        )

    def test_float_representation_preserved(self):
        assert format_currency_amount(0.1 + 0.2, "USD") == "$0.30"

    def test_unknown_preset(self):
        with pytest.raises(ValidationError) as excinfo:
            format_currency_amount(1, "USD", preset="fancy")
        assert "Unknown format preset" in str(excinfo.value)


class TestNormalizedFormatting:
    """Normalize-then-format helpers."""

    def test_asset_spending(self):
        result = format_normalized_transaction_amount(
            -100.50, "USD", AccountType.User, AccountSubtype.Asset, True
        )
        assert result == "-$100.50"

    def test_asset_zero(self):
        result = format_normalized_transaction_amount(
            0, "USD", AccountType.User, AccountSubtype.Asset, True
        )
        assert result == "$0.00"

    def test_liability_transaction_keeps_sign(self):
        result = format_normalized_transaction_amount(
            -150.25, "USD", AccountType.User, AccountSubtype.Liability, True
        )
        assert result == "-$150.25"

    def test_category_transaction_positive(self):
        result = format_normalized_transaction_amount(
            -100, "USD", AccountType.Category, AccountSubtype.Asset, True
        )
        assert "-" not in result
        assert "100.00" in result

    def test_code_preset_option(self):
        result = format_normalized_transaction_amount(
            100, "USD", AccountType.User, AccountSubtype.Asset, True, preset="code"
        )
        assert "$" not in result
        assert "USD" in result

    def test_liability_owed_balance_positive(self):
        result = format_normalized_balance(-500, "USD", AccountType.User, AccountSubtype.Liability)
        assert result == "$500.00"

    def test_liability_credit_balance_negative(self):
        result = format_normalized_balance(100, "USD", AccountType.User, AccountSubtype.Liability)
        assert result == "-$100.00"

    def test_balance_options(self):
        result = format_normalized_balance(
            1000, "USD", AccountType.User, AccountSubtype.Asset, preset="code", decimals=2
        )
        assert result == "1,000.00 USD"

    def test_category_balance_positive(self):
        result = format_normalized_balance(500, "USD", AccountType.Category, AccountSubtype.Liability)
        assert result == "$500.00"


class TestMultiCurrency:
    """Multi-currency balance helpers."""

    def test_sorted_by_code(self):
        result = format_multi_currency_balances({"USD": 1234.56, "EUR": 500, "JPY": 1000})
        assert result == "€500.00, ¥1,000.00, $1,234.56"

    def test_unsorted_keeps_order(self):
        result = format_multi_currency_balances(
            {"USD": 1, "EUR": 2}, sort_currencies=False, separator=" | "
        )
        assert result == "$1.00 | €2.00"

    def test_empty(self):
        assert format_multi_currency_balances({}) == "—"
        assert format_multi_currency_balances(None) == "—"

    def test_group_balances(self):
        items = [("USD", Decimal("10")), ("EUR", Decimal("5")), ("USD", Decimal("-2.5"))]
        balances = group_balances_by_currency(items, lambda i: i[0], lambda i: i[1])
        assert balances == {"USD": Decimal("7.5"), "EUR": Decimal("5")}

    def test_account_balance_prefers_multi_currency(self):
        assert format_account_balance(10, "USD", {"EUR": 3}) == "€3.00"

    def test_account_balance_falls_back(self):
        assert format_account_balance(10, "USD", {}) == "$10.00"
        assert format_account_balance(10, "USD") == "$10.00"

    def test_transaction_currency(self):
        assert format_transaction_currency(1234.56, "USD") == "1,234.56 USD"


class TestValuation:
    """Investment valuation formatting."""

    def test_below_threshold_is_zero(self):
        assert format_valuation_amount(-0.00005, "USD") == "$0.00"

    def test_regular_amount(self):
        assert format_valuation_amount(1500.5, "USD") == "$1,500.50"

    def test_disambiguate(self):
        assert format_valuation_amount(1500.5, "JPY", disambiguate=True) == "JPY 1,500.50"
