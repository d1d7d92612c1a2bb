"""Exception types for complexmath.

Numeric code never raises: edge cases propagate as IEEE-754 infinities
and NaNs. These exceptions cover configuration mistakes only.
"""


class ComplexMathError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f"{self.__class__.__name__}: {self.message}"


class FormatConfigError(ComplexMathError, ValueError):
    """Invalid display configuration or format specification."""
