"""Tests for Family and household income."""

import pytest
from structlog.testing import capture_logs

from domain_model.models.family import ANNUAL_WORK_HOURS, MINIMUM_PARENT_AGE, Family
from domain_model.models.job import Hourly, Job, Salary
from domain_model.models.person import Person


@pytest.fixture
def ted() -> Person:
    return Person("Ted", "Neward", 45)


@pytest.fixture
def charlotte() -> Person:
    return Person("Charlotte", "Neward", 45)


class TestFamilyConstruction:
    """Tests for forming a family."""

    def test_spouses_linked(self, ted: Person, charlotte: Person):
        """Both founding spouses should point at each other."""
        Family(ted, charlotte)

        assert ted.spouse is charlotte
        assert charlotte.spouse is ted

    def test_initial_members(self, ted: Person, charlotte: Person):
        """Members should start as the two spouses in order."""
        family = Family(ted, charlotte)

        assert family.members == [ted, charlotte]

    def test_links_spouses_under_marriage_age(self):
        """Forming a family marries the spouses regardless of age."""
        first = Person("Romeo", "Montague", 16)
        second = Person("Juliet", "Capulet", 13)

        Family(first, second)

        assert first.spouse is second
        assert second.spouse is first

    def test_members_is_a_copy(self, ted: Person, charlotte: Person):
        """Mutating the returned list should not change the household."""
        family = Family(ted, charlotte)

        family.members.append(Person("Stranger", "Danger", 30))

        assert len(family.members) == 2

    def test_describe_after_marriage(self, ted: Person, charlotte: Person):
        """Each spouse should render the other's first name."""
        Family(ted, charlotte)

        assert ted.describe().endswith("spouse:Charlotte]")
        assert charlotte.describe().endswith("spouse:Ted]")

    def test_repr(self, ted: Person, charlotte: Person):
        """repr should list member first names."""
        assert repr(Family(ted, charlotte)) == "Family(members=[Ted, Charlotte])"


class TestHaveChild:
    """Tests for Family.have_child."""

    def test_child_added_when_a_spouse_is_old_enough(self, ted: Person, charlotte: Person):
        """A spouse aged 21 or more allows a child."""
        family = Family(ted, charlotte)
        child = Person("Mike", "Neward", 0)

        assert family.have_child(child) is True
        assert family.members == [ted, charlotte, child]

    def test_one_old_enough_spouse_is_sufficient(self):
        """Only one founding spouse needs to reach the parent age."""
        family = Family(Person("A", "X", MINIMUM_PARENT_AGE), Person("B", "X", 19))

        assert family.have_child(Person("C", "X", 1)) is True

    def test_child_rejected_when_both_spouses_too_young(self):
        """Both spouses under 21 should leave members unchanged."""
        first = Person("A", "X", MINIMUM_PARENT_AGE - 1)
        second = Person("B", "X", 19)
        family = Family(first, second)

        with capture_logs() as logs:
            added = family.have_child(Person("C", "X", 1))

        assert added is False
        assert family.members == [first, second]
        assert logs[0]["event"] == "child_rejected"

    def test_no_age_requirement_for_child(self, ted: Person, charlotte: Person):
        """The child's own age is not checked."""
        family = Family(ted, charlotte)

        assert family.have_child(Person("Grown", "Neward", 50)) is True

    def test_multiple_children_in_order(self, ted: Person, charlotte: Person):
        """Children should be appended in the order they were added."""
        family = Family(ted, charlotte)
        first = Person("Mike", "Neward", 3)
        second = Person("Matt", "Neward", 1)

        family.have_child(first)
        family.have_child(second)

        assert family.members == [ted, charlotte, first, second]


class TestHouseholdIncome:
    """Tests for Family.household_income."""

    def test_no_jobs_means_zero(self, ted: Person, charlotte: Person):
        """An all-unemployed household earns nothing."""
        assert Family(ted, charlotte).household_income() == 0

    def test_sums_employed_members(self, ted: Person, charlotte: Person):
        """Income should be summed over employed members only."""
        ted.job = Job(title="Guest Lecturer", type=Salary(amount=1000))
        charlotte.job = Job(title="Consultant", type=Hourly(rate=15.0))
        family = Family(ted, charlotte)
        family.have_child(Person("Mike", "Neward", 3))

        expected = ted.job.calculate_income(ANNUAL_WORK_HOURS) + charlotte.job.calculate_income(
            ANNUAL_WORK_HOURS
        )

        assert family.household_income() == expected == 31000

    def test_includes_employed_children(self, ted: Person, charlotte: Person):
        """A child with a job contributes to household income."""
        family = Family(ted, charlotte)
        teen = Person("Mike", "Neward", 17)
        teen.job = Job(title="Cashier", type=Hourly(rate=7.5))
        family.have_child(teen)

        assert family.household_income() == 15000

    def test_reflects_raises(self, ted: Person, charlotte: Person):
        """Income should follow later raises to members' jobs."""
        ted.job = Job(title="Guest Lecturer", type=Salary(amount=1000))
        family = Family(ted, charlotte)

        ted.job.raise_by_amount(250)

        assert family.household_income() == 1250
