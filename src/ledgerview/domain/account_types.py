"""Account classification enums shared by the display and import rules."""

from enum import Enum

from ledgerview.domain.errors import (
    ValidationError,
    invalid_account_subtype,
    invalid_account_type,
)


class AccountType(str, Enum):
    """What an account represents in the ledger."""

    User = "user"
    Category = "category"
    System = "system"


class AccountSubtype(str, Enum):
    """Natural sign convention of an account."""

    Asset = "asset"
    Liability = "liability"


def to_account_type(value: str, fallback: AccountType = AccountType.User) -> AccountType:
    """Coerce a stored type string, falling back for unknown values.

    Used when reading loosely-typed records (e.g. legacy rows); the display
    rules use :func:`validate_account_metadata` instead and never fall back.
    """
    try:
        return AccountType(value)
    except ValueError:
        return fallback


def to_account_subtype(
    value: str, fallback: AccountSubtype = AccountSubtype.Asset
) -> AccountSubtype:
    """Coerce a stored subtype string, falling back for unknown values."""
    try:
        return AccountSubtype(value)
    except ValueError:
        return fallback


def validate_account_metadata(
    account_type: AccountType | str, account_subtype: AccountSubtype | str
) -> tuple[AccountType, AccountSubtype]:
    """Validate and coerce account type and subtype.

    Args:
        account_type: AccountType member or its string value
        account_subtype: AccountSubtype member or its string value

    Returns:
        Tuple of (AccountType, AccountSubtype)

    Raises:
        ValidationError: If either value is outside its enum
    """
    try:
        resolved_type = AccountType(account_type)
    except ValueError:
        raise ValidationError(invalid_account_type(account_type)) from None

    try:
        resolved_subtype = AccountSubtype(account_subtype)
    except ValueError:
        raise ValidationError(invalid_account_subtype(account_subtype)) from None

    return resolved_type, resolved_subtype
