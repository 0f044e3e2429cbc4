"""
Utilities: error types shared by the weathersolar modules
"""

class WeatherSolarError(Exception):
    """Base class for weathersolar errors."""
    pass


class LengthMismatchError(WeatherSolarError, ValueError):
    """
    A temperature series does not have one value per day of the requested period.

    Attributes
    ----------
    series: str
        Name of the offending input series (e.g. "Tmin")
    expected: int
        Number of days in the requested period
    actual: int
        Number of values supplied
    """

    def __init__(self, series, expected, actual):
        self.series = series
        self.expected = expected
        self.actual = actual
        super().__init__(f"Length of {series} ({actual}) does not match the number of days in the period ({expected})")


class DomainError(WeatherSolarError, ValueError):
    """
    Raised in strict mode when days fall outside the domain of the equations (polar day or
    night, or Tmax < Tmin) and produce NaN outputs.
    """

    def __init__(self, indices):
        self.indices = list(indices)
        super().__init__(f"{len(self.indices)} day(s) with undefined solar outputs, first at index {self.indices[0]}")
