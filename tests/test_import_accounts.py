"""Tests for counter-account routing of imported rows."""

from decimal import Decimal

from ledgerview.domain.account_types import AccountSubtype
from ledgerview.domain.import_accounts import resolve_import_accounts

DEFAULTS = {
    "uncategorized_income_id": "income-default",
    "uncategorized_expense_id": "expense-default",
}


def test_asset_inflow_routes_from_uncategorized_income():
    result = resolve_import_accounts("checking", AccountSubtype.Asset, Decimal("100"), **DEFAULTS)
    assert result.from_account_id == "income-default"
    assert result.to_account_id == "checking"
    assert result.used_default is True
    assert result.default_account_name == "Uncategorized Income"
    assert result.ok


def test_asset_outflow_routes_to_uncategorized_expense():
    result = resolve_import_accounts("checking", AccountSubtype.Asset, Decimal("-40"), **DEFAULTS)
    assert result.from_account_id == "checking"
    assert result.to_account_id == "expense-default"
    assert result.default_account_name == "Uncategorized Expense"


def test_liability_increase_routes_to_uncategorized_expense():
    result = resolve_import_accounts("card", AccountSubtype.Liability, Decimal("75"), **DEFAULTS)
    assert result.from_account_id == "card"
    assert result.to_account_id == "expense-default"
    assert result.used_default is True
    assert result.default_account_name == "Uncategorized Expense"


def test_liability_decrease_routes_from_uncategorized_income():
    result = resolve_import_accounts("card", AccountSubtype.Liability, Decimal("-75"), **DEFAULTS)
    assert result.from_account_id == "income-default"
    assert result.to_account_id == "card"
    assert result.default_account_name == "Uncategorized Income"


def test_mapped_counter_account_passes_through():
    result = resolve_import_accounts(
        "checking", AccountSubtype.Asset, Decimal("-12"), to_account_id="groceries", **DEFAULTS
    )
    assert result.from_account_id == "checking"
    assert result.to_account_id == "groceries"
    assert result.used_default is False
    assert result.default_account_name is None


def test_mapped_source_for_asset_inflow():
    result = resolve_import_accounts(
        "checking", "asset", Decimal("2500"), to_account_id="salary", **DEFAULTS
    )
    assert result.from_account_id == "salary"
    assert result.to_account_id == "checking"
    assert result.used_default is False


def test_missing_defaults_reports_error():
    result = resolve_import_accounts("checking", AccountSubtype.Asset, Decimal("10"))
    assert not result.ok
    assert result.error == "Missing source account for asset increase"
    assert result.from_account_id is None
    assert result.to_account_id is None

    result = resolve_import_accounts("card", AccountSubtype.Liability, Decimal("10"))
    assert result.error == "Missing destination account for liability increase"


def test_unknown_subtype_routes_by_sign():
    result = resolve_import_accounts("acct", None, Decimal("5"), **DEFAULTS)
    assert result.to_account_id == "income-default"
    assert result.used_default is True

    result = resolve_import_accounts("acct", "other", Decimal("-5"), **DEFAULTS)
    assert result.to_account_id == "expense-default"


def test_unknown_subtype_zero_without_mapping_is_error():
    result = resolve_import_accounts("acct", None, Decimal("0"), **DEFAULTS)
    assert result.error == "Missing to_account_id and no default account found"
