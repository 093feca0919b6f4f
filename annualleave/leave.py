"""Annual leave entitlement rules and result formatting."""

from __future__ import annotations

from datetime import date
from enum import Enum

FIRST_YEAR_MAX_DAYS = 11
BASE_DAYS = 15
MAX_DAYS = 25


class Workplace(Enum):
    """Where the employee works; the value is the display label."""

    DIRECT_AGENCY = "직속기관"
    SCHOOL = "학교"

    @property
    def label(self) -> str:
        return self.value


class WorkType(Enum):
    """Whether the employee works during school vacations."""

    REGULAR = "상시근무자"
    NON_REGULAR = "비상시근무자"

    @property
    def label(self) -> str:
        return self.value


def calculate_annual_leave(join_date: date, today: date) -> int:
    """Return the number of annual leave days earned by ``today``.

    During the first year one day is earned per started month, at most 11.
    From the first full year on the base is 15 days, plus one day for every
    two further years, at most 25.
    """
    years = today.year - join_date.year
    months = today.month - join_date.month
    days = today.day - join_date.day

    if days < 0:
        months -= 1
    if months < 0:
        years -= 1
        months += 12

    if years < 1:
        total_months = months + (1 if days >= 0 else 0)
        return min(total_months, FIRST_YEAR_MAX_DAYS)

    return min(BASE_DAYS + (years - 1) // 2, MAX_DAYS)


def standard_date_text(workplace: Workplace) -> str:
    """Return the reference-date note for a workplace."""
    if Workplace(workplace) is Workplace.DIRECT_AGENCY:
        return "직속기관: 1월 1일 기준"
    return "학교: 3월 1일 기준"


def format_result(workplace: Workplace, work_type: WorkType, days: int) -> str:
    """Render the calculation result as shown to the user."""
    workplace = Workplace(workplace)
    work_type = WorkType(work_type)
    return (
        f"근무지: {workplace.label}\n"
        f"근무형태: {work_type.label}\n"
        f"계산된 연차 일수: {days}일\n\n"
        f"{standard_date_text(workplace)}"
    )