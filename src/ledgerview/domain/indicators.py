"""Visual indicators for displayed transaction amounts.

Green for positive display amounts, red for negative, gray for zero. The
classification is always made on the normalized amount, never the raw one,
so a liability charge (raw positive) and an asset deposit both render green.
"""

from typing import Optional

from ledgerview.domain.account_types import AccountSubtype, AccountType
from ledgerview.domain.entities import DisplaySign, VisualIndicator
from ledgerview.domain.normalization import Amount, get_transaction_display_sign

POSITIVE_INDICATOR = VisualIndicator(
    css_class="amount-positive",
    color_class="text-green-600",
    aria_label="Positive amount",
)
NEGATIVE_INDICATOR = VisualIndicator(
    css_class="amount-negative",
    color_class="text-red-600",
    aria_label="Negative amount",
)
NEUTRAL_INDICATOR = VisualIndicator(
    css_class="amount-neutral",
    color_class="text-gray-600",
    aria_label="Zero amount",
)

_INDICATORS = {
    DisplaySign.POSITIVE: POSITIVE_INDICATOR,
    DisplaySign.NEGATIVE: NEGATIVE_INDICATOR,
    DisplaySign.NEUTRAL: NEUTRAL_INDICATOR,
}


def get_transaction_visual_indicator(
    amount: Optional[Amount],
    account_type: AccountType | str,
    account_subtype: AccountSubtype | str,
    is_current_account: bool,
) -> VisualIndicator:
    """Get CSS class, color class and ARIA label for a transaction amount.

    Args:
        amount: Raw transaction amount
        account_type: Type of account
        account_subtype: Subtype of account
        is_current_account: Whether this is the account being viewed

    Returns:
        Visual indicator for the normalized amount

    Raises:
        ValidationError: If account type or subtype is invalid
    """
    sign = get_transaction_display_sign(
        amount, account_type, account_subtype, is_current_account
    )
    return _INDICATORS[sign]


def get_transaction_css_class(
    amount: Optional[Amount],
    account_type: AccountType | str,
    account_subtype: AccountSubtype | str,
    is_current_account: bool,
) -> str:
    """Get CSS class for a transaction amount."""
    return get_transaction_visual_indicator(
        amount, account_type, account_subtype, is_current_account
    ).css_class


def get_transaction_color_class(
    amount: Optional[Amount],
    account_type: AccountType | str,
    account_subtype: AccountSubtype | str,
    is_current_account: bool,
) -> str:
    """Get Tailwind color class for a transaction amount."""
    return get_transaction_visual_indicator(
        amount, account_type, account_subtype, is_current_account
    ).color_class


def get_transaction_aria_label(
    amount: Optional[Amount],
    account_type: AccountType | str,
    account_subtype: AccountSubtype | str,
    is_current_account: bool,
) -> str:
    """Get ARIA label for a transaction amount."""
    return get_transaction_visual_indicator(
        amount, account_type, account_subtype, is_current_account
    ).aria_label
