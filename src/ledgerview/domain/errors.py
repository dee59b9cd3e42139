"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for callers that already catch ValueError.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


def invalid_account_type(value: object) -> str:
    """Return message for an account type outside the enumerated set."""
    return f"Invalid account type: {value}"


def invalid_account_subtype(value: object) -> str:
    """Return message for an account subtype outside the enumerated set."""
    return f"Invalid account subtype: {value}"


def invalid_import_mapping(field_map: dict[str, str]) -> str:
    """Return message for a column mapping without date or amount fields."""
    mapped = ", ".join(sorted(field for field, column in field_map.items() if column))
    return (
        "Import mapping must map 'date' and one of 'amount', 'credit' or 'debit' "
        f"(mapped: {mapped or 'nothing'})"
    )


def unknown_import_field(field: str, valid_fields: set[str]) -> str:
    """Return message for a mapping key that is not an import field."""
    return (
        f"Invalid import field '{field}'. "
        f"Must be one of: {', '.join(sorted(valid_fields))}"
    )


def missing_csv_columns(columns: set[str]) -> str:
    """Return message when mapped columns are absent from the CSV header."""
    return f"CSV file missing required columns: {', '.join(sorted(columns))}"


def unknown_format_preset(preset: str, presets: tuple[str, ...]) -> str:
    """Return message for an unsupported currency format preset."""
    return f"Unknown format preset '{preset}'. Must be one of: {', '.join(presets)}"
