"""Date manipulation utilities"""

from datetime import date


def current_assessment_year(today: date | None = None) -> int:
    """Assessment year used when a request does not name one (the calendar year)"""
    return (today or date.today()).year
