"""Domain models for money, jobs, people and families.

- Money and currency conversion (money.py)
- Jobs and compensation (job.py)
- People with age-gated job and spouse assignment (person.py)
- Families and household income (family.py)
"""

from domain_model.models.money import (
    FROM_USD,
    TO_USD,
    Currency,
    Money,
)
from domain_model.models.job import (
    Compensation,
    Hourly,
    Job,
    Salary,
)
from domain_model.models.person import (
    MINIMUM_MARRIAGE_AGE,
    MINIMUM_WORKING_AGE,
    Person,
)
from domain_model.models.family import (
    ANNUAL_WORK_HOURS,
    MINIMUM_PARENT_AGE,
    Family,
)

__all__ = [
    # Money
    "Currency",
    "Money",
    "FROM_USD",
    "TO_USD",
    # Jobs
    "Job",
    "Hourly",
    "Salary",
    "Compensation",
    # People
    "Person",
    "MINIMUM_WORKING_AGE",
    "MINIMUM_MARRIAGE_AGE",
    # Families
    "Family",
    "MINIMUM_PARENT_AGE",
    "ANNUAL_WORK_HOURS",
]
