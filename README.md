# annualleave

Works out how many days of annual leave an employee has earned since the
date they started work, and formats a short summary for the employee's
workplace and work type.

## Rules

- **Less than one year of service:** one day for each month started, up to 11 days.
- **One year or more:** 15 days, plus one more day for every two further
  years of service, up to 25 days.

The summary names a reference date that depends on the workplace:

- 직속기관 (directly affiliated institution): 1월 1일 기준 (1 January)
- 학교 (school): 3월 1일 기준 (1 March)

## Installation

```
pip install .
```

## Command line

```
annualleave [--start-date YYYY-MM-DD] [--today YYYY-MM-DD]
            [--work-type {non-regular,regular}] [--workplace {agency,school}]
            [--select YYYY-MM-DD ...]
```

- `--start-date`: first working day (default: today).
- `--today`: the date to calculate for (default: today).
- `--work-type`: `regular` (상시근무자, the default) or `non-regular` (비상시근무자).
- `--workplace`: `agency` (직속기관, the default) or `school` (학교).
- `--select`: toggle a chosen day; may be given more than once. Giving the
  same day twice unselects it again.

The command prints the workplace, the work type, the calculated number of
leave days and the workplace's reference date. If any days are selected, it
then prints them in ascending order, one `YYYY-MM-DD` per line.

Example:

```
$ annualleave --start-date 2020-03-02 --today 2024-05-01 --workplace school
근무지: 학교
근무형태: 상시근무자
계산된 연차 일수: 16일

학교: 3월 1일 기준
```

## Library use

```python
from datetime import date
from annualleave.leave import Workplace, WorkType, calculate_annual_leave, format_result
from annualleave.form import LeaveForm

days = calculate_annual_leave(date(2020, 3, 2), date(2024, 5, 1))
print(format_result(Workplace.SCHOOL, WorkType.REGULAR, days))

form = LeaveForm()
form.select_workplace(Workplace.SCHOOL)
form.select_work_type(WorkType.NON_REGULAR)
form.set_start_date(date(2023, 1, 10))
form.toggle_date(date(2024, 7, 1))
print(form.selected_date_lines())
print(form.calculate(date(2024, 5, 1)))
```

`annualleave.leave` holds the rules:

- `calculate_annual_leave(join_date, today)` returns the number of days.
- `standard_date_text(workplace)` returns the reference-date note.
- `format_result(workplace, work_type, days)` returns the summary text.
- `Workplace` and `WorkType` are enums whose values are the Korean labels.

`annualleave.form.LeaveForm` keeps the user's choices:

- `select_work_type` and `select_workplace` set the choices. Choosing a
  work type other than `WorkType.NON_REGULAR` resets `summer_vacation` and
  `winter_vacation` to today; `vacation_dates_enabled` tells whether they apply.
- `set_start_date` sets the first working day and raises `TypeError` for
  anything that is not a `date`.
- `toggle_date` adds a day to the selected dates, or removes it if it is
  already there, and returns whether it is selected afterwards.
- `selected_date_lines` returns the selected days in order as `YYYY-MM-DD`.
- `calculate(today=None)` computes the leave (for the current date by
  default), stores the summary in `result` and returns it.

## What it does not do

There is no graphical window: the package is a library and a command-line
tool. The summer and winter vacation periods and the selected days are
recorded only; they do not change the number of leave days calculated.

## Running the tests

```
pip install .[test]
pytest
```