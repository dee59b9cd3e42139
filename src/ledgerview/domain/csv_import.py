"""CSV import preview domain service."""

import csv
from decimal import Decimal
from pathlib import Path
from typing import Any, Mapping, Optional

from ledgerview.domain.account_types import AccountSubtype, AccountType
from ledgerview.domain.errors import (
    ValidationError,
    invalid_account_subtype,
    missing_csv_columns,
)
from ledgerview.domain.import_accounts import (
    UNCATEGORIZED_EXPENSE,
    UNCATEGORIZED_INCOME,
    resolve_import_accounts,
)
from ledgerview.domain.import_mapping import (
    NO_AMOUNT,
    apply_duplicate_flags,
    find_duplicate_indexes,
    resolve_import_amount,
    validate_import_mapping,
)
from ledgerview.domain.normalization import normalize_transaction_amount
from ledgerview.logging_setup import get_logger
from ledgerview.utils.date_parser import format_iso_date, parse_date

logger = get_logger(__name__)


class CSVImportService:
    """Service for previewing CSV imports into one user account."""

    def __init__(
        self,
        field_map: Mapping[str, str],
        account_name: str = "Imported Account",
        account_subtype: AccountSubtype | str = AccountSubtype.Asset,
        dayfirst: bool = False,
    ):
        """Initialize CSV import service.

        Args:
            field_map: Logical import field to CSV column name
            account_name: Name of the account being imported into
            account_subtype: Subtype of that account
            dayfirst: Whether ambiguous numeric dates put the day first

        Raises:
            ValidationError: If the mapping or subtype is invalid
        """
        validate_import_mapping(field_map)
        self.field_map = {field: column for field, column in field_map.items() if column}
        self.account_name = account_name
        try:
            self.account_subtype = AccountSubtype(account_subtype)
        except ValueError:
            raise ValidationError(invalid_account_subtype(account_subtype)) from None
        self.dayfirst = dayfirst

    def preview_csv(self, csv_file_path: str) -> dict[str, Any]:
        """Resolve every row of a CSV file without storing anything.

        Args:
            csv_file_path: Path to CSV file

        Returns:
            Dict with preview results:
            - rows: resolved rows (row_number, date, amount, display_amount,
              description, category, from_account, to_account, is_duplicate)
            - duplicates: indexes into rows repeated earlier in the file
            - defaulted: row numbers routed to an Uncategorized category
            - errors: list of error messages

        Raises:
            ValidationError: If the CSV lacks mapped columns
            FileNotFoundError: If CSV file doesn't exist
        """
        csv_path = Path(csv_file_path)
        if not csv_path.exists():
            raise FileNotFoundError(f"CSV file not found: {csv_file_path}")

        rows = []
        defaulted = []
        errors = []

        with open(csv_path, "r", encoding="utf-8-sig", newline="") as f:
            sample = f.read(1024)
            f.seek(0)
            try:
                delimiter = csv.Sniffer().sniff(sample, delimiters=",;\t|").delimiter
            except csv.Error:
                delimiter = ","

            reader = csv.DictReader(f, delimiter=delimiter)

            csv_columns = reader.fieldnames
            if csv_columns is None:
                raise ValidationError("CSV file has no columns")

            missing_columns = set(self.field_map.values()) - set(csv_columns)
            if missing_columns:
                raise ValidationError(missing_csv_columns(missing_columns))

            # Header is row 1
            for row_num, row in enumerate(reader, start=2):
                resolved = self._resolve_row(row_num, row, errors)
                if resolved is None:
                    continue
                if resolved.pop("used_default"):
                    defaulted.append(row_num)
                rows.append(resolved)

        duplicates = find_duplicate_indexes(rows)
        rows = apply_duplicate_flags(rows, duplicates)
        logger.info(
            "Previewed %s: %d rows, %d duplicates, %d errors",
            csv_path.name,
            len(rows),
            len(duplicates),
            len(errors),
        )

        return {
            "rows": rows,
            "duplicates": duplicates,
            "defaulted": defaulted,
            "errors": errors,
        }

    def _column_value(self, row: Mapping[str, Optional[str]], field: str) -> Optional[str]:
        column = self.field_map.get(field)
        if column is None:
            return None
        value = row.get(column)
        if not value:
            return None
        return value.strip() or None

    def _resolve_row(
        self, row_num: int, row: Mapping[str, Optional[str]], errors: list[str]
    ) -> Optional[dict[str, Any]]:
        """Resolve one CSV row, recording a row error and returning None on failure."""
        date_str = self._column_value(row, "date")
        if not date_str:
            errors.append(f"Row {row_num}: Missing date")
            return None

        try:
            txn_date = parse_date(date_str, dayfirst=self.dayfirst)
        except ValueError as e:
            errors.append(f"Row {row_num}: {e}")
            return None

        amount = resolve_import_amount(row, self.field_map)
        if amount == NO_AMOUNT:
            errors.append(f"Row {row_num}: Missing amount")
            return None

        category = self._column_value(row, "category")
        routing = resolve_import_accounts(
            user_account_id=self.account_name,
            user_account_subtype=self.account_subtype,
            amount=amount,
            to_account_id=category,
            uncategorized_income_id=UNCATEGORIZED_INCOME,
            uncategorized_expense_id=UNCATEGORIZED_EXPENSE,
        )
        if not routing.ok:
            errors.append(f"Row {row_num}: {routing.error}")
            return None

        display_amount: Decimal = normalize_transaction_amount(
            amount, AccountType.User, self.account_subtype, True
        )
        return {
            "row_number": row_num,
            "date": format_iso_date(txn_date),
            "amount": amount,
            "display_amount": display_amount,
            "description": self._column_value(row, "description"),
            "category": category,
            "from_account": routing.from_account_id,
            "to_account": routing.to_account_id,
            "used_default": routing.used_default,
        }
