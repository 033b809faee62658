"""Domain Model - Money, jobs, people and household income."""

__version__ = "0.1.0"

from .exceptions import DomainModelError, UnsupportedCurrencyError
from .models import Currency, Family, Hourly, Job, Money, Person, Salary

__all__ = [
    "Currency",
    "Money",
    "Job",
    "Hourly",
    "Salary",
    "Person",
    "Family",
    "DomainModelError",
    "UnsupportedCurrencyError",
]
