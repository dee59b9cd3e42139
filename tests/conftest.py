"""Shared pytest fixtures for ledgerview tests."""

from pathlib import Path
import pytest

from ledgerview.domain.account_types import AccountSubtype, AccountType


# Representative raw values: tiny, fractional, large, both signs.
NONZERO_AMOUNTS = [
    0.01,
    -0.01,
    1,
    -1,
    42.5,
    -42.5,
    100.10,
    -100.10,
    1234.56,
    -1234.56,
    999999999.99,
    -999999999.99,
    1e-6,
    -1e-6,
]


@pytest.fixture(params=NONZERO_AMOUNTS)
def nonzero_amount(request):
    """Each representative nonzero raw amount."""
    return request.param


@pytest.fixture(params=[True, False], ids=["current", "other"])
def is_current_account(request):
    """Both perspectives of a transfer leg."""
    return request.param


@pytest.fixture(params=list(AccountSubtype), ids=lambda s: s.value)
def any_subtype(request):
    """Each account subtype."""
    return request.param


@pytest.fixture
def user_asset():
    """Type/subtype pair for a bank or cash account."""
    return AccountType.User, AccountSubtype.Asset


@pytest.fixture
def user_liability():
    """Type/subtype pair for a credit card or loan account."""
    return AccountType.User, AccountSubtype.Liability


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def bank_field_map():
    """Column mapping for fixtures/bank_transactions.csv."""
    return {
        "date": "Date",
        "amount": "Amount",
        "description": "Description",
        "category": "Category",
    }


@pytest.fixture
def card_field_map():
    """Column mapping for fixtures/card_debit_credit.csv."""
    return {
        "date": "Posted",
        "credit": "Credit",
        "debit": "Debit",
        "description": "Memo",
    }
