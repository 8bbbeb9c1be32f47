class SolcalError(Exception):
    """Base error."""


class OutOfRangeError(SolcalError, ValueError):
    """Raised when a year lies outside the supported 1900..2100 window."""

    def __init__(self, year: int, lo: int = 1900, hi: int = 2100):
        super().__init__(f"Year out of range: {year}, must be between {lo} and {hi}")
        self.year = year


class ConversionError(SolcalError, ValueError):
    """Raised when a Julian Day cannot be expressed as a UTC calendar timestamp."""

    def __init__(self, value, reason: str):
        super().__init__(f"Cannot convert {value!r}: {reason}")
        self.value = value
