"""Domain layer for ledgerview application."""

from ledgerview.domain.account_types import AccountSubtype, AccountType
from ledgerview.domain.csv_import import CSVImportService
from ledgerview.domain.currency import (
    format_currency_amount,
    format_normalized_balance,
    format_normalized_transaction_amount,
    get_currency_symbol,
)
from ledgerview.domain.errors import DomainError, ValidationError
from ledgerview.domain.import_mapping import (
    get_import_duplicate_key,
    is_import_mapping_valid,
    resolve_import_amount,
)
from ledgerview.domain.indicators import get_transaction_visual_indicator
from ledgerview.domain.normalization import (
    compute_net_worth,
    normalize_account_balance,
    normalize_transaction_amount,
)

__all__ = [
    "AccountType",
    "AccountSubtype",
    "CSVImportService",
    "DomainError",
    "ValidationError",
    "compute_net_worth",
    "format_currency_amount",
    "format_normalized_balance",
    "format_normalized_transaction_amount",
    "get_currency_symbol",
    "get_import_duplicate_key",
    "get_transaction_visual_indicator",
    "is_import_mapping_valid",
    "normalize_account_balance",
    "normalize_transaction_amount",
    "resolve_import_amount",
]
