"""State of the annual leave form: selections, dates and the result text."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from .leave import WorkType, Workplace, calculate_annual_leave, format_result

INITIAL_RESULT = "근무지: \n근무형태: \n계산된 연차 일수: 일\n\n%s"


@dataclass
class LeaveForm:
    """Holds what the user entered and produces the leave calculation."""

    work_type: WorkType = WorkType.REGULAR
    workplace: Workplace = Workplace.DIRECT_AGENCY
    start_date: date = field(default_factory=date.today)
    summer_vacation: tuple[date, date] = field(
        default_factory=lambda: (date.today(), date.today())
    )
    winter_vacation: tuple[date, date] = field(
        default_factory=lambda: (date.today(), date.today())
    )
    selected_dates: set[date] = field(default_factory=set)
    result: str = INITIAL_RESULT

    @property
    def vacation_dates_enabled(self) -> bool:
        """Vacation periods only apply to employees who do not work in vacations."""
        return self.work_type is WorkType.NON_REGULAR

    def select_work_type(self, work_type: WorkType) -> None:
        """Choose the work type; leaving non-regular work resets vacation dates."""
        self.work_type = WorkType(work_type)
        if not self.vacation_dates_enabled:
            today = date.today()
            self.summer_vacation = (today, today)
            self.winter_vacation = (today, today)

    def select_workplace(self, workplace: Workplace) -> None:
        self.workplace = Workplace(workplace)

    def set_start_date(self, start: date) -> None:
        if not isinstance(start, date):
            raise TypeError("start date must be a date")
        self.start_date = start

    def toggle_date(self, day: date) -> bool:
        """Select ``day`` or, if already selected, unselect it. Return whether it is selected now."""
        if day in self.selected_dates:
            self.selected_dates.remove(day)
            return False
        self.selected_dates.add(day)
        return True

    def selected_date_lines(self) -> list[str]:
        """Selected dates in ascending order, formatted as YYYY-MM-DD."""
        return [day.strftime("%Y-%m-%d") for day in sorted(self.selected_dates)]

    def calculate(self, today: date | None = None) -> str:
        """Compute the leave for ``today`` (default: the current date) and store the text."""
        if today is None:
            today = date.today()
        days = calculate_annual_leave(self.start_date, today)
        self.result = format_result(self.workplace, self.work_type, days)
        return self.result