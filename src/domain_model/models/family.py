"""Households formed by two spouses and their children."""

from typing import Final

import structlog

from .person import Person

logger = structlog.get_logger()

# At least one founding spouse must be this old to add a child
MINIMUM_PARENT_AGE: Final[int] = 21

# Yearly working hours assumed for household income
ANNUAL_WORK_HOURS: Final[int] = 2000


class Family:
    """
    A household of two founding spouses plus any children.

    Creating a family marries the two spouses to each other without checking
    the marriage age; the caller forming the family is trusted to have done
    so. Members are kept in insertion order and can only be added.
    """

    def __init__(self, spouse1: Person, spouse2: Person) -> None:
        self._spouse1 = spouse1
        self._spouse2 = spouse2
        spouse2._link_spouse(spouse1)
        spouse1._link_spouse(spouse2)
        self._members: list[Person] = [spouse1, spouse2]
        logger.debug("spouses_linked", spouse1=spouse1.first_name, spouse2=spouse2.first_name)

    @property
    def members(self) -> list[Person]:
        """Household members in the order they joined (a copy)."""
        return list(self._members)

    def have_child(self, child: Person) -> bool:
        """
        Add a child to the household.

        Args:
            child: The new member; no age requirement applies to the child

        Returns:
            True if the child was added, False if neither founding spouse
            has reached MINIMUM_PARENT_AGE
        """
        if self._spouse1.age >= MINIMUM_PARENT_AGE or self._spouse2.age >= MINIMUM_PARENT_AGE:
            self._members.append(child)
            logger.info("child_added", child=child.first_name, household_size=len(self._members))
            return True

        logger.info(
            "child_rejected",
            child=child.first_name,
            spouse1_age=self._spouse1.age,
            spouse2_age=self._spouse2.age,
        )
        return False

    def household_income(self) -> int:
        """Sum of yearly income over members with a job; unemployed members count as zero."""
        total_income = 0
        for person in self._members:
            if person.job is not None:
                total_income += person.job.calculate_income(ANNUAL_WORK_HOURS)
        return total_income

    def __repr__(self) -> str:
        names = ", ".join(person.first_name for person in self._members)
        return f"{self.__class__.__name__}(members=[{names}])"
