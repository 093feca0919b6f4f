from datetime import date

import pytest

from annualleave.form import INITIAL_RESULT, LeaveForm
from annualleave.leave import WorkType, Workplace, format_result


def test_defaults():
    form = LeaveForm()
    assert form.work_type is WorkType.REGULAR
    assert form.workplace is Workplace.DIRECT_AGENCY
    assert form.result == INITIAL_RESULT
    assert form.vacation_dates_enabled is False


def test_non_regular_enables_vacation_dates():
    form = LeaveForm()
    form.select_work_type(WorkType.NON_REGULAR)
    assert form.vacation_dates_enabled is True


def test_switching_back_resets_vacation_dates():
    form = LeaveForm()
    form.select_work_type(WorkType.NON_REGULAR)
    form.summer_vacation = (date(2024, 7, 20), date(2024, 8, 20))
    form.select_work_type(WorkType.REGULAR)
    assert form.summer_vacation == (date.today(), date.today())
    assert form.winter_vacation == (date.today(), date.today())


def test_toggle_adds_then_removes():
    form = LeaveForm()
    day = date(2024, 5, 1)
    assert form.toggle_date(day) is True
    assert form.selected_date_lines() == ["2024-05-01"]
    assert form.toggle_date(day) is False
    assert form.selected_date_lines() == []


def test_selected_dates_are_sorted():
    form = LeaveForm()
    for day in (date(2024, 12, 1), date(2024, 1, 3), date(2024, 6, 9)):
        form.toggle_date(day)
    lines = form.selected_date_lines()
    assert lines == sorted(lines)
    assert len(lines) == 3


def test_calculate_uses_selections():
    form = LeaveForm()
    form.select_workplace(Workplace.SCHOOL)
    form.select_work_type(WorkType.NON_REGULAR)
    form.set_start_date(date(2020, 1, 1))
    text = form.calculate(date(2021, 1, 1))
    assert text == format_result(Workplace.SCHOOL, WorkType.NON_REGULAR, 15)
    assert form.result == text
    assert text.endswith("학교: 3월 1일 기준")


def test_set_start_date_rejects_non_date():
    form = LeaveForm()
    with pytest.raises(TypeError):
        form.set_start_date("2020-01-01")


def test_select_workplace_rejects_unknown():
    form = LeaveForm()
    with pytest.raises(ValueError):
        form.select_workplace("office")