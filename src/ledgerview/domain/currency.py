"""Currency formatting for display amounts and balances."""

from decimal import ROUND_HALF_UP, Decimal, localcontext
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional, TypeVar

from ledgerview.domain.account_types import AccountSubtype, AccountType
from ledgerview.domain.entities import CurrencyOption
from ledgerview.domain.errors import ValidationError, unknown_format_preset
from ledgerview.domain.normalization import (
    Amount,
    normalize_account_balance,
    normalize_transaction_amount,
)

T = TypeVar("T")

CURRENCY_SYMBOLS: Mapping[str, str] = MappingProxyType(
    {
        "USD": "$",
        "EUR": "€",
        "GBP": "£",
        "JPY": "¥",
        "CNY": "¥",
        "CAD": "CAD$",
        "AUD": "A$",
        "HKD": "HK$",
        "CHF": "CHF",
        "INR": "₹",
        "KRW": "₩",
        "BRL": "R$",
        "MXN": "MX$",
        "RUB": "₽",
        "ZAR": "R",
        "SEK": "kr",
        "NOK": "kr",
        "DKK": "kr",
        "PLN": "zł",
        "TRY": "₺",
        "THB": "฿",
    }
)

SUPPORTED_CURRENCY_OPTIONS: tuple[CurrencyOption, ...] = (
    CurrencyOption(code="USD", label="US Dollar", symbol="$"),
    CurrencyOption(code="CAD", label="Canadian Dollar", symbol="CAD$"),
    CurrencyOption(code="EUR", label="Euro", symbol="€"),
    CurrencyOption(code="GBP", label="British Pound", symbol="£"),
    CurrencyOption(code="JPY", label="Japanese Yen", symbol="¥"),
    CurrencyOption(code="CNY", label="Chinese Yuan", symbol="¥"),
    CurrencyOption(code="HKD", label="Hong Kong Dollar", symbol="HK$"),
    CurrencyOption(code="AUD", label="Australian Dollar", symbol="A$"),
)

# summary: "$1,234.56"; code: "1,234.56 USD"; detail: "USD 1,234.56"
FORMAT_PRESETS = ("summary", "code", "detail")

# Floating-point noise such as 1e-13 must not render as "-0.00".
ZERO_EPSILON = Decimal("1e-9")
VALUATION_THRESHOLD = Decimal("0.0001")

EMPTY_BALANCES = "—"


def get_currency_symbol(currency_code: str) -> str:
    """Get the symbol for a currency code, falling back to the code itself."""
    return CURRENCY_SYMBOLS.get(currency_code.upper(), currency_code)


def _to_decimal(amount: Optional[Amount]) -> Decimal:
    if amount is None:
        return Decimal(0)
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, float):
        # repr gives the shortest string that round-trips, so 0.1 stays 0.1
        return Decimal(repr(amount))
    return Decimal(amount)


def _format_magnitude(
    amount: Optional[Amount], decimals: int, use_grouping: bool
) -> tuple[bool, str]:
    """Round an amount and return (is_negative, formatted magnitude)."""
    value = _to_decimal(amount)
    if abs(value) < ZERO_EPSILON:
        value = Decimal(0)

    with localcontext() as ctx:
        # Room for every integer digit plus the requested decimals
        ctx.prec = max(ctx.prec, value.adjusted() + decimals + 2)
        quantized = value.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
        # Values that round to zero lose their sign here: Decimal("-0.00") < 0 is False
        is_negative = quantized < 0
        magnitude = abs(quantized)
    text = format(magnitude, ",f" if use_grouping else "f")
    return is_negative, text


def format_currency_amount(
    amount: Optional[Amount],
    currency: str,
    *,
    preset: str = "summary",
    decimals: int = 2,
    use_grouping: bool = True,
) -> str:
    """Format an amount with its currency symbol or code.

    Args:
        amount: Display amount (already normalized)
        currency: Currency code, e.g. "USD"
        preset: "summary" (symbol first), "code" (code appended) or "detail"
            (code first)
        decimals: Number of decimal places
        use_grouping: Whether to insert thousands separators

    Returns:
        Formatted string such as "$1,234.56", "-1,234.56 USD" or "USD 1,234.56"

    Raises:
        ValidationError: If preset is not supported
    """
    if preset not in FORMAT_PRESETS:
        raise ValidationError(unknown_format_preset(preset, FORMAT_PRESETS))

    is_negative, magnitude = _format_magnitude(amount, decimals, use_grouping)
    sign = "-" if is_negative else ""
    code = currency.upper()

    if preset == "detail":
        return f"{code} {sign}{magnitude}"

    symbol = get_currency_symbol(currency)
    if preset == "summary" and symbol != code:
        return f"{sign}{symbol}{magnitude}"

    return f"{sign}{magnitude} {code}"


def format_currency_amount_detail(amount: Optional[Amount], currency: str) -> str:
    """Format an amount code-first, e.g. "USD 200.00", for detail views."""
    return format_currency_amount(amount, currency, preset="detail")


def format_transaction_currency(amount: Optional[Amount], currency: str) -> str:
    """Format a transaction amount with the code appended, e.g. "1,234.56 USD"."""
    return format_currency_amount(amount, currency, preset="code")


def format_multi_currency_balances(
    balances: Optional[Mapping[str, Amount]],
    *,
    separator: str = ", ",
    sort_currencies: bool = True,
    preset: str = "summary",
    decimals: int = 2,
) -> str:
    """Format balances in several currencies as one string.

    Returns:
        String like "$1,234.56, €500.00, ¥1,000.00", or an em dash when there
        are no balances
    """
    if not balances:
        return EMPTY_BALANCES

    entries = list(balances.items())
    if sort_currencies:
        entries.sort(key=lambda entry: entry[0])

    return separator.join(
        format_currency_amount(amount, currency, preset=preset, decimals=decimals)
        for currency, amount in entries
    )


def group_balances_by_currency(
    items: Iterable[T],
    get_currency: Callable[[T], str],
    get_amount: Callable[[T], Amount],
) -> dict[str, Amount]:
    """Sum item amounts per currency code."""
    balances: dict[str, Amount] = {}
    for item in items:
        currency = get_currency(item)
        balances[currency] = balances.get(currency, 0) + get_amount(item)
    return balances


def format_account_balance(
    balance: Optional[Amount],
    currency: str,
    balances: Optional[Mapping[str, Amount]] = None,
) -> str:
    """Format an account balance, preferring per-currency balances if present."""
    if balances:
        return format_multi_currency_balances(balances)
    return format_currency_amount(balance, currency)


def format_normalized_transaction_amount(
    amount: Optional[Amount],
    currency: str,
    account_type: AccountType | str,
    account_subtype: AccountSubtype | str,
    is_current_account: bool,
    **options,
) -> str:
    """Normalize a raw transaction amount and format it with its currency.

    Extra keyword arguments are passed to :func:`format_currency_amount`.
    """
    normalized = normalize_transaction_amount(
        amount, account_type, account_subtype, is_current_account
    )
    return format_currency_amount(normalized, currency, **options)


def format_normalized_balance(
    balance: Optional[Amount],
    currency: str,
    account_type: AccountType | str,
    account_subtype: AccountSubtype | str,
    **options,
) -> str:
    """Normalize a raw account balance and format it with its currency."""
    normalized = normalize_account_balance(balance, account_type, account_subtype)
    return format_currency_amount(normalized, currency, **options)


def format_valuation_amount(
    amount: Optional[Amount], currency: str, *, disambiguate: bool = False
) -> str:
    """Format an investment valuation.

    Valuations below 0.0001 in magnitude are shown as zero. With
    ``disambiguate`` the code is shown first so currencies sharing a symbol
    (JPY/CNY) can be told apart.
    """
    value = _to_decimal(amount)
    if abs(value) < VALUATION_THRESHOLD:
        value = Decimal(0)

    preset = "detail" if disambiguate else "summary"
    return format_currency_amount(value, currency, preset=preset)
