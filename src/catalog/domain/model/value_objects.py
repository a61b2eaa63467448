"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from catalog.domain.exceptions import ValidationError

_MINOR_UNITS_PER_MAJOR = 100


@dataclass(frozen=True)
class Money:
    """Monetary amount stored as an integer number of minor units (cents).

    Prices arrive from forms as decimal strings such as ``"6.49"``; they
    are converted once, at the boundary, and never kept as floats.
    """

    amount: int
    currency: str = "USD"

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValidationError(
                f"Money amount must be an integer of minor units, got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Conversion -----------------------------------------------------------

    def to_decimal(self) -> Decimal:
        return Decimal(self.amount) / _MINOR_UNITS_PER_MAJOR

    def to_input(self) -> str:
        """Render the amount the way a form would submit it, e.g. ``"6.49"``."""
        return f"{self.to_decimal():.2f}"

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.to_input()}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(amount: str | int | Decimal) -> Money:
        """Build Money from a major-unit value: ``Money.of("6.49").amount == 649``."""
        if isinstance(amount, bool) or not isinstance(amount, (str, int, Decimal)):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            major = Decimal(str(amount).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        if not major.is_finite():
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            minor = (major * _MINOR_UNITS_PER_MAJOR).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        except InvalidOperation as exc:
            # more digits than the decimal context can hold
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        return Money(int(minor))
