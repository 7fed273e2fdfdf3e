"""Domain value objects - pure Python immutable types."""

from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True)
class Money:
    """
    Immutable monetary value in minor currency units.

    Amounts are integers (e.g. 1999 == 19.99 USD).

    CRITICAL: Never use float for money!
    """
    amount_minor: int
    currency: str

    def __post_init__(self):
        if isinstance(self.amount_minor, bool) or not isinstance(self.amount_minor, int):
            raise ValueError(
                f"Amount must be an integer number of minor units, got: {self.amount_minor!r}"
            )

        # Validate currency code (3 uppercase letters, ISO 4217)
        if (
            not isinstance(self.currency, str)
            or len(self.currency) != 3
            or not self.currency.isalpha()
            or not self.currency.isupper()
        ):
            raise ValueError(
                f"Currency must be 3-letter uppercase ISO code, got: {self.currency!r}"
            )

    @classmethod
    def zero(cls, currency: str) -> "Money":
        return cls(amount_minor=0, currency=currency)

    def __str__(self) -> str:
        return f"{self.amount_minor} {self.currency}"

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects (must have same currency)."""
        if self.currency != other.currency:
            raise ValueError(
                f"Cannot add different currencies: {self.currency} vs {other.currency}"
            )
        return Money(amount_minor=self.amount_minor + other.amount_minor, currency=self.currency)

    def __mul__(self, quantity: int) -> "Money":
        """Multiply by an integer quantity."""
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValueError(f"Quantity must be an integer, got: {quantity!r}")
        return Money(amount_minor=self.amount_minor * quantity, currency=self.currency)

    def is_positive(self) -> bool:
        """Check if amount is positive."""
        return self.amount_minor > 0


@dataclass(frozen=True)
class OrderId:
    """Unique order identifier."""

    value: UUID

    @classmethod
    def generate(cls) -> "OrderId":
        """Generate a new OrderId."""
        return cls(value=uuid4())

    @classmethod
    def parse(cls, raw: str) -> "OrderId":
        """
        Parse an OrderId from its string form.

        Raises:
            ValueError: If raw is not a well-formed UUID
        """
        return cls(value=UUID(str(raw)))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class PaymentId:
    """Unique payment attempt identifier."""

    value: UUID

    @classmethod
    def generate(cls) -> "PaymentId":
        """Generate a new PaymentId."""
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)
