"""Counter-account routing for imported rows.

Each imported row becomes a two-legged journal entry between the account being
imported into and a counter account: the mapped category when the row has
one, otherwise the Uncategorized Income or Uncategorized Expense category.
"""

from typing import Optional

from ledgerview.domain.account_types import AccountSubtype
from ledgerview.domain.entities import ImportAccountResolution
from ledgerview.domain.normalization import Amount

UNCATEGORIZED_INCOME = "Uncategorized Income"
UNCATEGORIZED_EXPENSE = "Uncategorized Expense"


def _failed(message: str) -> ImportAccountResolution:
    return ImportAccountResolution(from_account_id=None, to_account_id=None, error=message)


def _coerce_subtype(value: Optional[AccountSubtype | str]) -> Optional[AccountSubtype]:
    try:
        return AccountSubtype(value)
    except ValueError:
        return None


def resolve_import_accounts(
    user_account_id: str,
    user_account_subtype: Optional[AccountSubtype | str],
    amount: Amount,
    to_account_id: Optional[str] = None,
    uncategorized_income_id: Optional[str] = None,
    uncategorized_expense_id: Optional[str] = None,
) -> ImportAccountResolution:
    """Choose the from/to accounts for an imported row.

    Args:
        user_account_id: Account the file is being imported into
        user_account_subtype: Subtype of that account
        amount: Raw signed amount resolved for the row
        to_account_id: Category mapped for the row, if any
        uncategorized_income_id: ID of the Uncategorized Income category
        uncategorized_expense_id: ID of the Uncategorized Expense category

    Returns:
        Resolution with both legs, or with ``error`` set when no counter
        account is available
    """
    subtype = _coerce_subtype(user_account_subtype)

    if subtype is AccountSubtype.Asset:
        if amount > 0:
            source = to_account_id or uncategorized_income_id
            if not source:
                return _failed("Missing source account for asset increase")
            used_default = not to_account_id
            return ImportAccountResolution(
                from_account_id=source,
                to_account_id=user_account_id,
                used_default=used_default,
                default_account_name=UNCATEGORIZED_INCOME if used_default else None,
            )

        destination = to_account_id or uncategorized_expense_id
        if not destination:
            return _failed("Missing destination account for asset decrease")
        used_default = not to_account_id
        return ImportAccountResolution(
            from_account_id=user_account_id,
            to_account_id=destination,
            used_default=used_default,
            default_account_name=UNCATEGORIZED_EXPENSE if used_default else None,
        )

    if subtype is AccountSubtype.Liability:
        if amount > 0:
            # A charge increases what is owed and is spent somewhere.
            destination = to_account_id or uncategorized_expense_id
            if not destination:
                return _failed("Missing destination account for liability increase")
            used_default = not to_account_id
            return ImportAccountResolution(
                from_account_id=user_account_id,
                to_account_id=destination,
                used_default=used_default,
                default_account_name=UNCATEGORIZED_EXPENSE if used_default else None,
            )

        source = to_account_id or uncategorized_income_id
        if not source:
            return _failed("Missing source account for liability decrease")
        used_default = not to_account_id
        return ImportAccountResolution(
            from_account_id=source,
            to_account_id=user_account_id,
            used_default=used_default,
            default_account_name=UNCATEGORIZED_INCOME if used_default else None,
        )

    if to_account_id:
        return ImportAccountResolution(from_account_id=user_account_id, to_account_id=to_account_id)
    if amount > 0 and uncategorized_income_id:
        return ImportAccountResolution(
            from_account_id=user_account_id,
            to_account_id=uncategorized_income_id,
            used_default=True,
            default_account_name=UNCATEGORIZED_INCOME,
        )
    if amount < 0 and uncategorized_expense_id:
        return ImportAccountResolution(
            from_account_id=user_account_id,
            to_account_id=uncategorized_expense_id,
            used_default=True,
            default_account_name=UNCATEGORIZED_EXPENSE,
        )
    return _failed("Missing to_account_id and no default account found")
