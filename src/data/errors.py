"""Exceptions raised by the headcount data layer and analytics queries."""


class HeadcountError(Exception):
    """Base class for every error this package raises on purpose."""


class MissingRequiredFieldError(HeadcountError):
    """A required query option (e.g. grade) was not supplied."""


class UnsupportedValueError(HeadcountError, ValueError):
    """A supplied option is outside the supported domain."""


class DivisionDegenerateError(HeadcountError, ArithmeticError):
    """A ratio has a zero denominator and a non-zero numerator."""


class UnknownDistrictError(HeadcountError, LookupError):
    """No district with the requested name exists in the repository."""

    def __init__(self, name: str):
        super().__init__(f"{name} is not a known district")
        self.name = name
