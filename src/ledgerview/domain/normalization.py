"""Display normalization for ledger amounts and balances.

The ledger stores every journal line in debit/credit convention, so the stored
sign is not always the sign a person expects to see. The functions here map
raw values to display values:

- User asset accounts (bank, cash): sign preserved. Negative is spending,
  positive is income; a negative balance is an overdraft.
- User liability accounts (credit cards, loans): transaction sign preserved
  (positive is a charge, negative a payment) but the balance is negated so
  money owed shows as a positive amount.
- Category accounts: always the absolute value.
- System accounts: raw value unchanged.

Stored data is never modified and every result is either ``raw``, ``-raw`` or
``abs(raw)``. Zero, including negative zero, always comes back as positive
zero.
"""

from decimal import Decimal
from typing import Mapping, Optional, Union

from ledgerview.domain.account_types import (
    AccountSubtype,
    AccountType,
    validate_account_metadata,
)
from ledgerview.domain.entities import DisplaySign

Amount = Union[int, float, Decimal]


def normalize_transaction_amount(
    amount: Optional[Amount],
    account_type: AccountType | str,
    account_subtype: AccountSubtype | str,
    is_current_account: bool,
) -> Amount:
    """Normalize a transaction amount for display.

    Args:
        amount: Raw journal-line amount; None is treated as zero
        account_type: Type of the account the line belongs to
        account_subtype: Subtype of the account the line belongs to
        is_current_account: Whether this is the account being viewed. Accepted
            so per-leg transfer rendering can pass it; no rule uses it yet.

    Returns:
        Amount to display

    Raises:
        ValidationError: If account type or subtype is invalid. Zero and
            None return zero without validation.
    """
    if amount is None:
        return 0
    if amount == 0:
        return abs(amount)

    account_type, account_subtype = validate_account_metadata(account_type, account_subtype)

    if account_type is AccountType.Category:
        return abs(amount)

    # User accounts keep the stored sign for both subtypes; only their
    # balances differ. System accounts are shown raw.
    return amount


def normalize_account_balance(
    balance: Optional[Amount],
    account_type: AccountType | str,
    account_subtype: AccountSubtype | str,
) -> Amount:
    """Normalize an account balance for display.

    Args:
        balance: Raw running balance; None is treated as zero
        account_type: Type of the account
        account_subtype: Subtype of the account

    Returns:
        Balance to display

    Raises:
        ValidationError: If account type or subtype is invalid. Zero and
            None return zero without validation.
    """
    if balance is None:
        return 0
    if balance == 0:
        return abs(balance)

    account_type, account_subtype = validate_account_metadata(account_type, account_subtype)

    if account_type is AccountType.Category:
        return abs(balance)

    if account_type is AccountType.User and account_subtype is AccountSubtype.Liability:
        # Owed money is stored negative (credit balance) and shown positive.
        return -balance

    return balance


def is_income_transaction(
    amount: Amount,
    account_type: AccountType | str,
    account_subtype: AccountSubtype | str,
) -> bool:
    """Return True if a raw amount is income for the given account."""
    account_type, account_subtype = validate_account_metadata(account_type, account_subtype)
    if amount == 0:
        return False

    if account_type is AccountType.User:
        if account_subtype is AccountSubtype.Asset:
            return amount > 0
        # Payments reduce what is owed on a liability.
        return amount < 0

    if account_type is AccountType.Category:
        return account_subtype is AccountSubtype.Asset

    return False


def is_expense_transaction(
    amount: Amount,
    account_type: AccountType | str,
    account_subtype: AccountSubtype | str,
) -> bool:
    """Return True if a raw amount is an expense for the given account."""
    account_type, account_subtype = validate_account_metadata(account_type, account_subtype)
    if amount == 0:
        return False

    if account_type is AccountType.User:
        if account_subtype is AccountSubtype.Asset:
            return amount < 0
        return amount > 0

    if account_type is AccountType.Category:
        return account_subtype is AccountSubtype.Liability

    return False


def get_transaction_display_sign(
    amount: Optional[Amount],
    account_type: AccountType | str,
    account_subtype: AccountSubtype | str,
    is_current_account: bool,
) -> DisplaySign:
    """Get the display sign of a transaction amount for styling."""
    normalized = normalize_transaction_amount(
        amount, account_type, account_subtype, is_current_account
    )
    if normalized > 0:
        return DisplaySign.POSITIVE
    if normalized < 0:
        return DisplaySign.NEGATIVE
    return DisplaySign.NEUTRAL


def _align_numeric(left: Amount, right: Amount) -> tuple[Amount, Amount]:
    # Decimal and float don't mix in arithmetic; repr keeps 0.1 as 0.1
    if isinstance(left, Decimal) and isinstance(right, float):
        return left, Decimal(repr(right))
    if isinstance(right, Decimal) and isinstance(left, float):
        return Decimal(repr(left)), right
    return left, right


def compute_net_worth(
    asset_balance: Optional[Amount], liability_balance: Optional[Amount]
) -> Amount:
    """Compute net worth from raw asset and liability balances.

    Equal to ``asset_balance + liability_balance`` because liability balances
    are stored negative when money is owed. A float paired with a Decimal is
    converted to Decimal first.
    """
    normalized_asset = normalize_account_balance(
        asset_balance, AccountType.User, AccountSubtype.Asset
    )
    normalized_liability = normalize_account_balance(
        liability_balance, AccountType.User, AccountSubtype.Liability
    )
    normalized_asset, normalized_liability = _align_numeric(
        normalized_asset, normalized_liability
    )
    return normalized_asset - normalized_liability


def compute_net_worth_by_currency(
    asset_balances: Mapping[str, Amount],
    liability_balances: Mapping[str, Amount],
) -> dict[str, Amount]:
    """Compute net worth per currency.

    Args:
        asset_balances: Raw asset balance per currency code
        liability_balances: Raw liability balance per currency code

    Returns:
        Net worth per currency, sorted by currency code. A currency missing
        from one side counts as zero on that side.
    """
    currencies = sorted(set(asset_balances) | set(liability_balances))
    return {
        currency: compute_net_worth(
            asset_balances.get(currency, 0), liability_balances.get(currency, 0)
        )
        for currency in currencies
    }
