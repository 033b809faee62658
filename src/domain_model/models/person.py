"""People, with age-gated job and spouse assignment."""

from typing import Final, Optional

import structlog

from .job import Job

logger = structlog.get_logger()

# Legal minimum ages
MINIMUM_WORKING_AGE: Final[int] = 16
MINIMUM_MARRIAGE_AGE: Final[int] = 18


class Person:
    """
    An individual with an optional job and an optional spouse.

    The job and spouse setters enforce the age gates on every assignment: a
    value assigned to someone under the minimum age is discarded and the
    attribute reads back as None. No error is raised.

    The spouse reference is one-sided; Family links both partners.
    """

    def __init__(self, first_name: str, last_name: str, age: int) -> None:
        self.first_name = first_name
        self.last_name = last_name
        self.age = age
        self._job: Optional[Job] = None
        self._spouse: Optional["Person"] = None

    @property
    def job(self) -> Optional[Job]:
        return self._job

    @job.setter
    def job(self, job: Optional[Job]) -> None:
        self._job = job
        if self.age < MINIMUM_WORKING_AGE:
            if job is not None:
                logger.debug("job_assignment_rejected", person=self.first_name, age=self.age)
            self._job = None

    @property
    def spouse(self) -> Optional["Person"]:
        return self._spouse

    @spouse.setter
    def spouse(self, spouse: Optional["Person"]) -> None:
        self._spouse = spouse
        if self.age < MINIMUM_MARRIAGE_AGE:
            if spouse is not None:
                logger.debug("spouse_assignment_rejected", person=self.first_name, age=self.age)
            self._spouse = None

    def _link_spouse(self, spouse: "Person") -> None:
        # Skips the marriage age gate; only Family calls this.
        self._spouse = spouse

    def describe(self) -> str:
        """Render the person; the job shows its compensation but never its title."""
        job = self._job.type.describe() if self._job is not None else "nil"
        spouse = self._spouse.first_name if self._spouse is not None else "nil"
        return (
            f"[Person: firstName:{self.first_name} lastName:{self.last_name} "
            f"age:{self.age} job:{job} spouse:{spouse}]"
        )

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(first_name={self.first_name!r}, "
            f"last_name={self.last_name!r}, age={self.age!r})"
        )
