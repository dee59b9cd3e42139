"""Domain value types for ledgerview.

These are pure data classes returned by the display and import rules. None of
them are persisted; they are rebuilt on every render or import preview.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DisplaySign(str, Enum):
    """Sign of a normalized amount, for styling."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class VisualIndicator:
    """CSS classes and accessibility label for a displayed amount."""

    css_class: str
    color_class: str
    aria_label: str


@dataclass(frozen=True)
class CurrencyOption:
    """Currency offered for account setup."""

    code: str
    label: str
    symbol: str


@dataclass(frozen=True)
class ImportSummary:
    """Counts reported after an import batch."""

    imported: int
    skipped: int


@dataclass(frozen=True)
class ImportAccountResolution:
    """Journal legs chosen for one imported row.

    ``error`` is set (and both account IDs are None) when no counter account
    could be found.
    """

    from_account_id: Optional[str]
    to_account_id: Optional[str]
    used_default: bool = False
    default_account_name: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        """Whether both legs were resolved."""
        return self.error is None
