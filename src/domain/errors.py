"""Domain errors raised by the finance calculators."""


class FleetLedgerError(ValueError):
    """Base class for recoverable calculator errors."""


class InvalidRangeError(FleetLedgerError):
    """Raised when a period ends before it starts."""

    def __init__(self, start, end, label: str = "period") -> None:
        self.start = start
        self.end = end
        self.label = label
        super().__init__(
            f"Invalid {label} range: end {end} precedes start {start}"
        )


class NonFiniteAmountError(FleetLedgerError):
    """Raised when an amount feeding a persisted total is NaN or infinite."""

    def __init__(self, field: str, value) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Amount for {field} is not finite: {value}")


class NegativeAmountError(FleetLedgerError):
    """Raised when a quantity or price that must be non-negative is not."""

    def __init__(self, field: str, value) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Amount for {field} must not be negative: {value}")


class InvalidQuantityError(FleetLedgerError):
    """Raised when a line quantity is not a whole number of units."""

    def __init__(self, field: str, value) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Quantity for {field} must be whole units: {value}")


class InvalidPaymentError(FleetLedgerError):
    """Raised when a payment is not positive or exceeds the balance."""

    def __init__(self, amount, remaining) -> None:
        self.amount = amount
        self.remaining = remaining
        super().__init__(
            f"Invalid payment amount {amount}; remaining balance is "
            f"{remaining}"
        )


__all__ = [
    "FleetLedgerError",
    "InvalidRangeError",
    "NonFiniteAmountError",
    "NegativeAmountError",
    "InvalidQuantityError",
    "InvalidPaymentError",
]
