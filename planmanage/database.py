"""SQLite storage for tasks, habits, daily plans and daily reviews."""

from __future__ import annotations

import datetime as _dt
import sqlite3
from dataclasses import dataclass
from os import PathLike
from types import TracebackType

PLAN_TYPE_TASK = "任务"
PLAN_TYPE_HABIT = "习惯"

# Task status codes whose change clears the completion date.
_UNFINISHED_TASK_STATUSES = frozenset({0, 2, 4})

_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS task (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        created_date DATE DEFAULT CURRENT_DATE,
        due_date DATE,
        completed_date DATE,
        status INTEGER DEFAULT 0
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS habits (
        id INTEGER NOT NULL PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        created_date DATE DEFAULT CURRENT_DATE,
        target_frequency TEXT,
        status INTEGER DEFAULT 0
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS daily_plan (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        task_id INTEGER,
        habit_id INTEGER,
        plan_date DATE NOT NULL,
        plan_name TEXT,
        index_id INTEGER,
        status INTEGER DEFAULT 0,
        FOREIGN KEY (task_id) REFERENCES task(id) ON DELETE CASCADE,
        FOREIGN KEY (habit_id) REFERENCES habits(id) ON DELETE CASCADE,
        CHECK ( (task_id IS NOT NULL AND habit_id IS NULL)
             OR (task_id IS NULL AND habit_id IS NOT NULL) )
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS daily_review (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        review_date DATE NOT NULL UNIQUE,
        reflection TEXT,
        summary TEXT
    )
    """,
)


@dataclass
class TaskData:
    """A row of the task table."""

    id: int = 0
    name: str = ""
    created_date: _dt.date | None = None
    due_date: _dt.date | None = None
    completed_date: _dt.date | None = None
    status: int = 0


@dataclass
class HabitData:
    """A row of the habits table."""

    id: int = 0
    name: str = ""
    created_date: _dt.date | None = None
    target_frequency: str = ""
    status: int = 0


@dataclass
class PlanData:
    """An entry of a day's plan."""

    id: int = 0
    type: str = ""
    name: str = ""
    target_frequency: str = ""
    status: int = 0


@dataclass
class ReviewData:
    """The reflection and summary written for one day."""

    reflection: str = ""
    summary: str = ""


def _to_sql_date(day: _dt.date | None) -> str | None:
    if day is None:
        return None
    if isinstance(day, _dt.datetime):
        day = day.date()
    return day.isoformat()


def _from_sql_date(value: object) -> _dt.date | None:
    if not isinstance(value, str) or not value:
        return None
    try:
        return _dt.date.fromisoformat(value[:10])
    except ValueError:
        return None


def _text(value: object) -> str:
    return "" if value is None else str(value)


def _int(value: object) -> int:
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0


class Database:
    """Access to the plan database; creates its tables on opening."""

    def __init__(self, path: str | PathLike[str]) -> None:
        self._conn = sqlite3.connect(path, isolation_level=None)
        for statement in _SCHEMA:
            self._conn.execute(statement)

    def __enter__(self) -> Database:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()

    def get_tasks_by_status(self, status: int) -> list[TaskData]:
        """Return tasks; 0 means all, otherwise those with status code ``status - 1``."""
        sql = "SELECT id, name, created_date, due_date, completed_date, status FROM task"
        if status == 0:
            rows = self._conn.execute(sql)
        else:
            rows = self._conn.execute(sql + " WHERE status = ?", (status - 1,))
        return [
            TaskData(
                id=_int(row[0]),
                name=_text(row[1]),
                created_date=_from_sql_date(row[2]),
                due_date=_from_sql_date(row[3]),
                completed_date=_from_sql_date(row[4]),
                status=_int(row[5]),
            )
            for row in rows
        ]

    def get_habits_by_status(self, status: int) -> list[HabitData]:
        """Return habits; 0 means all, otherwise those with status code ``status - 1``."""
        sql = "SELECT id, name, created_date, target_frequency, status FROM habits"
        if status == 0:
            rows = self._conn.execute(sql)
        else:
            rows = self._conn.execute(sql + " WHERE status = ?", (status - 1,))
        return [
            HabitData(
                id=_int(row[0]),
                name=_text(row[1]),
                created_date=_from_sql_date(row[2]),
                target_frequency=_text(row[3]),
                status=_int(row[4]),
            )
            for row in rows
        ]

    def get_plans_by_date(self, day: _dt.date) -> list[PlanData]:
        """Return the plan entries stored for ``day``."""
        rows = self._conn.execute(
            "SELECT task_id, habit_id, plan_name, status FROM daily_plan WHERE plan_date = ?",
            (_to_sql_date(day),),
        )
        plans = []
        for task_id, habit_id, name, status in rows:
            if task_id is not None:
                kind = PLAN_TYPE_TASK
            elif habit_id is not None:
                kind = PLAN_TYPE_HABIT
            else:
                continue
            plans.append(PlanData(type=kind, name=_text(name), status=_int(status)))
        return plans

    def get_review_by_date(self, day: _dt.date) -> ReviewData:
        """Return the review for ``day``; empty when none is stored."""
        row = self._conn.execute(
            "SELECT reflection, summary FROM daily_review WHERE review_date = ?",
            (_to_sql_date(day),),
        ).fetchone()
        if row is None:
            return ReviewData()
        return ReviewData(reflection=_text(row[0]), summary=_text(row[1]))

    def add_task(self, task: TaskData) -> int:
        """Insert a task with its name and due date; return the new id."""
        cursor = self._conn.execute(
            "INSERT INTO task (name, due_date) VALUES (?, ?)",
            (task.name, _to_sql_date(task.due_date)),
        )
        return int(cursor.lastrowid)

    def add_habit(self, habit: HabitData) -> int:
        """Insert a habit with its name and frequency; return the new id."""
        cursor = self._conn.execute(
            "INSERT INTO habits (name, target_frequency) VALUES (?, ?)",
            (habit.name, habit.target_frequency),
        )
        return int(cursor.lastrowid)

    def update_task_name(self, task_id: int, name: str) -> None:
        """Rename a task."""
        self._conn.execute("UPDATE task SET name = ? WHERE id = ?", (name, task_id))

    def update_task_due_date(self, task_id: int, day: _dt.date | None) -> None:
        """Set a task's due date."""
        self._conn.execute(
            "UPDATE task SET due_date = ? WHERE id = ?", (_to_sql_date(day), task_id)
        )

    def update_task_status(
        self, task_id: int, status: int, today: _dt.date | None = None
    ) -> None:
        """Set a task's status, stamping or clearing its completion date."""
        if status in _UNFINISHED_TASK_STATUSES:
            self._conn.execute(
                "UPDATE task SET status = ?, completed_date = '' WHERE id = ?",
                (status, task_id),
            )
        else:
            completed = today if today is not None else _dt.date.today()
            self._conn.execute(
                "UPDATE task SET status = ?, completed_date = ? WHERE id = ?",
                (status, _to_sql_date(completed), task_id),
            )

    def update_habit_name(self, habit_id: int, name: str) -> None:
        """Rename a habit."""
        self._conn.execute("UPDATE habits SET name = ? WHERE id = ?", (name, habit_id))

    def update_habit_created_date(self, habit_id: int, day: _dt.date | None) -> None:
        """Set a habit's creation date."""
        self._conn.execute(
            "UPDATE habits SET created_date = ? WHERE id = ?",
            (_to_sql_date(day), habit_id),
        )

    def update_habit_frequency(self, habit_id: int, frequency: str) -> None:
        """Set a habit's target frequency."""
        self._conn.execute(
            "UPDATE habits SET target_frequency = ? WHERE id = ?", (frequency, habit_id)
        )

    def update_habit_status(self, habit_id: int, status: int) -> None:
        """Set a habit's status code."""
        self._conn.execute("UPDATE habits SET status = ? WHERE id = ?", (status, habit_id))

    def _id_by_name(self, table: str, name: str) -> int:
        row = self._conn.execute(
            f"SELECT id FROM {table} WHERE name = ?", (name,)
        ).fetchone()
        if row is None:
            raise LookupError(f"no entry named {name!r} in {table}")
        return int(row[0])

    def get_habit_id_by_name(self, name: str) -> int:
        """Return the id of the first habit called ``name``; LookupError if none."""
        return self._id_by_name("habits", name)

    def get_task_id_by_name(self, name: str) -> int:
        """Return the id of the first task called ``name``; LookupError if none."""
        return self._id_by_name("task", name)

    def _upsert_plan(
        self, column: str, index: int, name: str, status: int, ref_id: int, day: _dt.date
    ) -> None:
        sql_day = _to_sql_date(day)
        cursor = self._conn.execute(
            f"UPDATE daily_plan SET {column} = ?, plan_name = ?, status = ? "
            "WHERE plan_date = ? AND index_id = ?",
            (ref_id, name, status, sql_day, index),
        )
        if cursor.rowcount == 0:
            self._conn.execute(
                f"INSERT INTO daily_plan ({column}, plan_date, plan_name, index_id, status) "
                "VALUES (?, ?, ?, ?, ?)",
                (ref_id, sql_day, name, index, status),
            )

    def update_habit_plan(
        self, index: int, name: str, status: int, habit_id: int, day: _dt.date
    ) -> None:
        """Store a habit entry at position ``index`` of the plan for ``day``."""
        self._upsert_plan("habit_id", index, name, status, habit_id, day)

    def update_task_plan(
        self, index: int, name: str, status: int, task_id: int, day: _dt.date
    ) -> None:
        """Store a task entry at position ``index`` of the plan for ``day``."""
        self._upsert_plan("task_id", index, name, status, task_id, day)

    def update_review(
        self, reflection: str, summary: str, today: _dt.date | None = None
    ) -> None:
        """Store the reflection and summary for ``today`` (the current date by default)."""
        sql_day = _to_sql_date(today if today is not None else _dt.date.today())
        cursor = self._conn.execute(
            "UPDATE daily_review SET reflection = ?, summary = ? WHERE review_date = ?",
            (reflection, summary, sql_day),
        )
        if cursor.rowcount == 0:
            self._conn.execute(
                "INSERT INTO daily_review (review_date, reflection, summary) VALUES (?, ?, ?)",
                (sql_day, reflection, summary),
            )