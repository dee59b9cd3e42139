"""Column mapping, amount resolution and duplicate handling for CSV imports.

A field map associates logical import fields with CSV column names, e.g.
``{"date": "Posted", "credit": "Credit", "debit": "Debit"}``. Rows are the
dicts produced by :class:`csv.DictReader`.
"""

from decimal import Decimal
from typing import Any, Iterable, Mapping, Optional, Sequence, TypeVar, Union

from ledgerview.domain.entities import ImportSummary
from ledgerview.domain.errors import (
    ValidationError,
    invalid_import_mapping,
    unknown_import_field,
)
from ledgerview.logging_setup import get_logger
from ledgerview.utils.amount_parser import parse_amount

logger = get_logger(__name__)

IMPORT_FIELDS = frozenset({"date", "amount", "credit", "debit", "description", "category"})
AMOUNT_FIELDS = ("amount", "credit", "debit")

# Returned by resolve_import_amount when no amount column holds a value.
NO_AMOUNT = ""

Row = TypeVar("Row", bound=Mapping[str, Any])


def has_amount_mapping(field_map: Mapping[str, str]) -> bool:
    """Return True if any amount-bearing field is mapped."""
    return any(field_map.get(field) for field in AMOUNT_FIELDS)


def is_import_mapping_valid(field_map: Mapping[str, str]) -> bool:
    """Return True if the mapping has a date column and an amount column.

    Description and category columns are optional.
    """
    return bool(field_map.get("date")) and has_amount_mapping(field_map)


def validate_import_mapping(field_map: Mapping[str, str]) -> None:
    """Validate an import mapping.

    Raises:
        ValidationError: If a key is not an import field, or the mapping is
            missing its date or amount columns
    """
    for field in field_map:
        if field not in IMPORT_FIELDS:
            raise ValidationError(unknown_import_field(field, set(IMPORT_FIELDS)))

    if not is_import_mapping_valid(field_map):
        raise ValidationError(invalid_import_mapping(dict(field_map)))


def _cell_text(row: Mapping[str, Any], column: Optional[str]) -> Optional[str]:
    if not column:
        return None
    value = row.get(column)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_cell(text: str, column: str) -> Decimal:
    try:
        return parse_amount(text)
    except ValueError:
        logger.warning("Unparsable amount %r in column %r, using 0", text, column)
        return Decimal(0)


def resolve_import_amount(
    row: Mapping[str, Any], field_map: Mapping[str, str]
) -> Union[Decimal, str]:
    """Compute the signed raw amount to store for an import row.

    Credit/debit columns take precedence: when either holds a value the
    result is ``credit - debit``, a blank side counting as zero. Otherwise the
    single amount column is used.

    Args:
        row: CSV row keyed by column name
        field_map: Logical field to column name

    Returns:
        Decimal amount, or "" when no amount column holds a value. Cells
        that cannot be parsed count as zero and are logged.
    """
    credit_column = field_map.get("credit")
    debit_column = field_map.get("debit")
    credit_text = _cell_text(row, credit_column)
    debit_text = _cell_text(row, debit_column)

    if credit_text is not None or debit_text is not None:
        credit = _parse_cell(credit_text, credit_column) if credit_text is not None else Decimal(0)
        debit = _parse_cell(debit_text, debit_column) if debit_text is not None else Decimal(0)
        return credit - debit

    amount_column = field_map.get("amount")
    amount_text = _cell_text(row, amount_column)
    if amount_text is not None:
        return _parse_cell(amount_text, amount_column)

    return NO_AMOUNT


def _key_part(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return str(value)
    # 10, 10.0 and Decimal("10.00") share one key
    if value == 0:
        return "0"
    if isinstance(value, float):
        value = Decimal(repr(value))
    return format(Decimal(value).normalize(), "f")


def get_import_duplicate_key(row: Mapping[str, Any]) -> str:
    """Build the key used to spot repeated rows within one import batch."""
    return "|".join(_key_part(row.get(field)) for field in ("date", "amount", "description"))


def find_duplicate_indexes(rows: Iterable[Mapping[str, Any]]) -> list[int]:
    """Return indexes of rows whose duplicate key appeared earlier in the batch.

    The first occurrence is never reported.
    """
    seen: set[str] = set()
    duplicates = []
    for index, row in enumerate(rows):
        key = get_import_duplicate_key(row)
        if key in seen:
            duplicates.append(index)
        else:
            seen.add(key)
    return duplicates


def apply_duplicate_flags(
    rows: Sequence[Row], duplicate_indexes: Iterable[int]
) -> list[dict[str, Any]]:
    """Return copies of rows with ``is_duplicate`` set."""
    duplicates = set(duplicate_indexes)
    return [{**row, "is_duplicate": index in duplicates} for index, row in enumerate(rows)]


def apply_force_duplicate(
    rows: Sequence[Row], duplicate_indexes: Iterable[int]
) -> list[Union[Row, dict[str, Any]]]:
    """Mark rows the user chose to import despite being duplicates."""
    duplicates = set(duplicate_indexes)
    return [
        {**row, "force_duplicate": True} if index in duplicates else row
        for index, row in enumerate(rows)
    ]


def filter_out_duplicate_rows(rows: Sequence[Row], duplicate_indexes: Iterable[int]) -> list[Row]:
    """Drop the rows at the given indexes."""
    duplicates = set(duplicate_indexes)
    return [row for index, row in enumerate(rows) if index not in duplicates]


def build_import_payload(rows: Sequence[Row]) -> list[dict[str, Any]]:
    """Number rows for the import call.

    Rows with a category also carry it as ``to_account_id``.
    """
    payload = []
    for index, row in enumerate(rows):
        item = {**row, "index": index}
        if row.get("category"):
            item["to_account_id"] = row["category"]
        payload.append(item)
    return payload


def _is_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def resolve_import_summary(
    result: Optional[Mapping[str, Any]], fallback_count: int
) -> ImportSummary:
    """Read imported/skipped counts from an import result.

    Falls back to ``(fallback_count, 0)`` when the result is missing or does
    not report both counts.
    """
    if result and _is_count(result.get("imported")) and _is_count(result.get("skipped")):
        return ImportSummary(imported=result["imported"], skipped=result["skipped"])
    return ImportSummary(imported=fallback_count, skipped=0)


def should_show_default_account_warning(details: Any) -> bool:
    """Return True when some rows were routed to an Uncategorized account."""
    return isinstance(details, list) and len(details) > 0
