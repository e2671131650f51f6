"""Planning logic behind the task, habit and daily plan tables."""

from __future__ import annotations

import datetime as _dt
from collections.abc import Iterable
from dataclasses import dataclass

from planmanage.database import (
    PLAN_TYPE_HABIT,
    PLAN_TYPE_TASK,
    Database,
    HabitData,
    ReviewData,
    TaskData,
)
from planmanage.dates import format_date, parse_date
from planmanage.statuses import (
    habit_status_from_string,
    habit_status_to_string,
    plan_status_from_string,
    plan_status_to_string,
    task_status_from_string,
    task_status_to_string,
)

TASK_HEADERS = ("ID", "任务名称", "创建日期", "截止日期", "完成日期", "完成状态")
HABIT_HEADERS = ("ID", "习惯名称", "创建日期", "习惯频率", "完成状态")
PLAN_HEADERS = ("类型", "计划名称", "完成状态")
ALL_FILTER = "全部"

_READ_ONLY_TASK_COLUMNS = frozenset({0, 2, 4})
_FRIDAY = 4
_SATURDAY = 5


@dataclass
class PlanRow:
    """One row of a day's plan table: entry type, name and status label."""

    type: str = PLAN_TYPE_TASK
    name: str = ""
    status: str = plan_status_to_string(0)


def habit_due_on(habit: HabitData, day: _dt.date) -> bool:
    """Tell whether ``habit`` should appear in the plan for ``day``."""
    created = habit.created_date
    if created is not None and created > day:
        return False
    days_since = (day - created).days if created is not None else 0
    frequency = habit.target_frequency
    if frequency == "每日一次":
        return True
    if frequency.startswith("每二日一次"):
        return days_since % 2 == 0
    if frequency.startswith("每三日一次"):
        return days_since % 3 == 0
    if frequency.startswith("每周周五"):
        return day.weekday() == _FRIDAY
    if frequency.startswith("每周周六"):
        return day.weekday() == _SATURDAY
    return False


def task_column_editable(column: int) -> bool:
    """Tell whether a column of the task table may be edited."""
    return column not in _READ_ONLY_TASK_COLUMNS


def habit_column_editable(column: int) -> bool:
    """Tell whether a column of the habit table may be edited."""
    return column != 0


def plan_column_editable(column: int) -> bool:
    """Tell whether a column of the plan table may be edited."""
    return column != 0


class Planner:
    """Reads and writes tasks, habits, plans and reviews through a database."""

    def __init__(self, db: Database) -> None:
        self._db = db
        self._task_names: list[str] = []
        self.task_names()

    def task_rows(self, filter_index: int) -> list[list[str]]:
        """Return the task table rows; 0 shows all, n shows status code n - 1."""
        rows = [
            [
                str(task.id),
                task.name,
                format_date(task.created_date),
                format_date(task.due_date),
                format_date(task.completed_date),
                task_status_to_string(task.status),
            ]
            for task in self._db.get_tasks_by_status(filter_index)
        ]
        self.task_names()
        return rows

    def habit_rows(self, filter_index: int) -> list[list[str]]:
        """Return the habit table rows; 0 shows all, n shows status code n - 1."""
        return [
            [
                str(habit.id),
                habit.name,
                format_date(habit.created_date),
                habit.target_frequency,
                habit_status_to_string(habit.status),
            ]
            for habit in self._db.get_habits_by_status(filter_index)
        ]

    def plan_rows(self, day: _dt.date) -> list[PlanRow]:
        """Return the plan for ``day``, adding due habits if none is stored yet."""
        stored = self._db.get_plans_by_date(day)
        rows = [
            PlanRow(plan.type, plan.name, plan_status_to_string(plan.status))
            for plan in stored
        ]
        if any(plan.type == PLAN_TYPE_HABIT for plan in stored):
            return rows
        rows.extend(
            PlanRow(PLAN_TYPE_HABIT, habit.name, plan_status_to_string(habit.status))
            for habit in self._db.get_habits_by_status(0)
            if habit_due_on(habit, day)
        )
        return rows

    def review(self, day: _dt.date) -> ReviewData:
        """Return the reflection and summary stored for ``day``."""
        return self._db.get_review_by_date(day)

    def task_names(self) -> list[str]:
        """Reload and return the names of all tasks, offered as plan entries."""
        self._task_names = [task.name for task in self._db.get_tasks_by_status(0)]
        return list(self._task_names)

    def add_task(self, name: str, due_date: _dt.date | None) -> int:
        """Create a task and return its id."""
        task_id = self._db.add_task(TaskData(name=name, due_date=due_date))
        self.task_names()
        return task_id

    def add_habit(self, name: str, frequency: str) -> int:
        """Create a habit and return its id."""
        return self._db.add_habit(HabitData(name=name, target_frequency=frequency))

    def edit_task(self, task_id: int, column: int, value: str) -> None:
        """Store an edit made in a column of the task table."""
        if column == 1:
            self._db.update_task_name(task_id, value)
        elif column == 3:
            self._db.update_task_due_date(task_id, parse_date(value))
        elif column == 5:
            self._db.update_task_status(task_id, task_status_from_string(value))
        else:
            raise ValueError(f"task column {column} is not editable")
        self.task_names()

    def edit_habit(self, habit_id: int, column: int, value: str) -> None:
        """Store an edit made in a column of the habit table."""
        if column == 1:
            self._db.update_habit_name(habit_id, value)
        elif column == 2:
            self._db.update_habit_created_date(habit_id, parse_date(value))
        elif column == 3:
            self._db.update_habit_frequency(habit_id, value)
        elif column == 4:
            self._db.update_habit_status(habit_id, habit_status_from_string(value))
        else:
            raise ValueError(f"habit column {column} is not editable")

    def save(
        self,
        day: _dt.date,
        rows: Iterable[PlanRow],
        reflection: str,
        summary: str,
    ) -> None:
        """Store the plan rows for ``day`` and today's reflection and summary.

        Every name is resolved before anything is written, so an unknown
        task or habit name raises LookupError and leaves the plan untouched.
        """
        entries = []
        for index, row in enumerate(rows, start=1):
            if row.type == PLAN_TYPE_HABIT:
                ref_id = self._db.get_habit_id_by_name(row.name)
                store = self._db.update_habit_plan
            elif row.type == PLAN_TYPE_TASK:
                ref_id = self._db.get_task_id_by_name(row.name)
                store = self._db.update_task_plan
            else:
                continue
            entries.append((store, index, row, ref_id))
        for store, index, row, ref_id in entries:
            store(index, row.name, plan_status_from_string(row.status), ref_id, day)
        self._db.update_review(reflection, summary)