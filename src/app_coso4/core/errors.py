"""Error types raised by the property tables."""


class TableRangeError(ValueError):
    """
    Raised in strict mode when an input lies outside the tabulated range.

    Attributes:
        quantity: Name of the looked-up quantity (e.g. 'temperature')
        value: Offending input value
        low: Lowest tabulated value
        high: Highest tabulated value
    """

    def __init__(self, quantity: str, value: float, low: float, high: float,
                 unit: str = ""):
        self.quantity = quantity
        self.value = value
        self.low = low
        self.high = high
        suffix = f" {unit}" if unit else ""
        super().__init__(
            f"{quantity}={value:.4g}{suffix} outside table range "
            f"[{low:.4g}, {high:.4g}]{suffix}"
        )


class TableIntegrityError(ValueError):
    """Raised when an embedded table is empty or not strictly increasing."""
