class BmiCalculatorError(Exception):
    """Base class for calculator errors."""


class InvalidInputError(BmiCalculatorError, ValueError):
    """Text that could not be parsed into the requested type."""

    def __init__(self, text: str, reason: str):
        super().__init__(reason)
        self.text = text
        self.reason = reason


class InputStreamError(BmiCalculatorError):
    """The input source closed or could not be read."""
