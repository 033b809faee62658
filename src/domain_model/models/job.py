"""Jobs and their compensation policy.

A job pays either an hourly rate or a fixed salary. Salaried income does not
depend on hours worked.
"""

from typing import Annotated, Literal, Union

import structlog
from pydantic import BaseModel, ConfigDict, Field

logger = structlog.get_logger()


class Hourly(BaseModel):
    """Compensation paid per hour worked."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["hourly"] = "hourly"
    rate: float = Field(description="Pay per hour")

    def describe(self) -> str:
        return f"Hourly({self.rate})"


class Salary(BaseModel):
    """Fixed compensation, independent of hours worked."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["salary"] = "salary"
    amount: int = Field(ge=0, description="Salary per period")

    def describe(self) -> str:
        return f"Salary({self.amount})"


Compensation = Annotated[Union[Hourly, Salary], Field(discriminator="kind")]


class Job(BaseModel):
    """A titled job with a compensation policy.

    The compensation is replaced in place by the raise operations. Nothing
    checks that a negative raise keeps an hourly rate positive; a salary that
    would drop below zero fails validation.
    """

    model_config = ConfigDict(validate_assignment=True)

    title: str = Field(description="Job title")
    type: Compensation = Field(description="Hourly or salaried compensation")

    def calculate_income(self, hours: int) -> int:
        """
        Income for the given number of hours worked.

        Hourly pay is truncated to a whole amount. Salaried pay ignores hours.
        """
        if isinstance(self.type, Hourly):
            return int(self.type.rate * hours)
        return self.type.amount

    def raise_by_amount(self, amount: float) -> None:
        """Add a flat amount to the rate or salary; salaries drop the fraction."""
        if isinstance(self.type, Hourly):
            self.type = Hourly(rate=self.type.rate + amount)
        else:
            self.type = Salary(amount=self.type.amount + int(amount))
        logger.debug("job_raised", title=self.title, by_amount=amount, compensation=self.type.describe())

    def raise_by_percent(self, percent: float) -> None:
        """Scale the rate or salary by (1 + percent); 0.1 is a ten percent raise."""
        if isinstance(self.type, Hourly):
            self.type = Hourly(rate=self.type.rate * (1.0 + percent))
        else:
            self.type = Salary(amount=int(self.type.amount * (1.0 + percent)))
        logger.debug("job_raised", title=self.title, by_percent=percent, compensation=self.type.describe())
