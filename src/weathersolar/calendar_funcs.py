"""
Calendar helpers for the daily solar calculations
"""

from datetime import datetime, date, timedelta


def parse_date(value):
    """
    Return a datetime.date from a date, a datetime or an ISO formatted string (e.g. "1995-01-01"
    or "1995-01-01T00:00:00"). Any time component is dropped.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip().split("T")[0], "%Y-%m-%d").date()
        except ValueError:
            raise ValueError("Date string '%s' is not in ISO format (YYYY-MM-DD)" % value)
    raise ValueError("Cannot interpret %r as a date" % (value,))

def day_of_year(xdate):
    """
    Ordinal day of year (1 - 366) of the given date
    """
    xdate = parse_date(xdate)
    return (xdate - date(xdate.year, 1, 1)).days + 1

def add_one_day(xdate):
    """
    Return the calendar day following xdate. The argument is left untouched.
    """
    return parse_date(xdate) + timedelta(days=1)

def days_in_year(year):
    """
    Number of days in the given year (365 or 366)
    """
    return (date(int(year) + 1, 1, 1) - date(int(year), 1, 1)).days

def date_range(start_date, ndays):
    """
    List of ndays consecutive dates beginning at start_date
    """
    dates = []
    xdate = parse_date(start_date)
    for _ in range(ndays):
        dates.append(xdate)
        xdate = add_one_day(xdate)
    return dates
