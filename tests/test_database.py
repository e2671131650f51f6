import datetime as dt
import sqlite3

import pytest

from planmanage.database import (
    PLAN_TYPE_HABIT,
    PLAN_TYPE_TASK,
    Database,
    HabitData,
    ReviewData,
    TaskData,
)

DAY = dt.date(2024, 3, 15)
OTHER_DAY = dt.date(2024, 3, 16)


@pytest.fixture
def db(tmp_path):
    database = Database(tmp_path / "plans.db")
    yield database
    database.close()


def test_tables_survive_reopening(tmp_path):
    path = tmp_path / "plans.db"
    with Database(path) as first:
        first.add_task(TaskData(name="write report", due_date=DAY))
    with Database(path) as second:
        names = [t.name for t in second.get_tasks_by_status(0)]
    assert names == ["write report"]


def test_add_task_round_trip(db):
    task_id = db.add_task(TaskData(name="write report", due_date=DAY))
    [task] = db.get_tasks_by_status(0)
    assert task.id == task_id
    assert task.name == "write report"
    assert task.due_date == DAY
    assert task.completed_date is None
    assert task.status == 0
    assert isinstance(task.created_date, dt.date)


def test_task_status_filter_is_offset_by_one(db):
    first = db.add_task(TaskData(name="a", due_date=DAY))
    second = db.add_task(TaskData(name="b", due_date=DAY))
    db.update_task_status(second, 1, today=DAY)
    assert [t.id for t in db.get_tasks_by_status(1)] == [first]
    assert [t.id for t in db.get_tasks_by_status(2)] == [second]
    assert db.get_tasks_by_status(3) == []
    assert len(db.get_tasks_by_status(0)) == 2


def test_completed_status_stamps_date_and_unfinished_clears_it(db):
    task_id = db.add_task(TaskData(name="a", due_date=DAY))
    db.update_task_status(task_id, 3, today=OTHER_DAY)
    [task] = db.get_tasks_by_status(0)
    assert task.status == 3
    assert task.completed_date == OTHER_DAY
    db.update_task_status(task_id, 4, today=OTHER_DAY)
    [task] = db.get_tasks_by_status(0)
    assert task.status == 4
    assert task.completed_date is None


def test_task_name_and_due_date_updates(db):
    task_id = db.add_task(TaskData(name="old", due_date=DAY))
    db.update_task_name(task_id, "new")
    db.update_task_due_date(task_id, OTHER_DAY)
    [task] = db.get_tasks_by_status(0)
    assert (task.name, task.due_date) == ("new", OTHER_DAY)


def test_habit_round_trip_and_updates(db):
    habit_id = db.add_habit(HabitData(name="run", target_frequency="每日一次"))
    db.update_habit_name(habit_id, "swim")
    db.update_habit_created_date(habit_id, DAY)
    db.update_habit_frequency(habit_id, "每周周五")
    db.update_habit_status(habit_id, 2)
    [habit] = db.get_habits_by_status(0)
    assert habit == HabitData(
        id=habit_id, name="swim", created_date=DAY, target_frequency="每周周五", status=2
    )
    assert db.get_habits_by_status(3) == [habit]
    assert db.get_habits_by_status(1) == []


def test_ids_by_name(db):
    task_id = db.add_task(TaskData(name="report", due_date=DAY))
    habit_id = db.add_habit(HabitData(name="run", target_frequency="每日一次"))
    assert db.get_task_id_by_name("report") == task_id
    assert db.get_habit_id_by_name("run") == habit_id
    with pytest.raises(LookupError):
        db.get_task_id_by_name("missing")
    with pytest.raises(LookupError):
        db.get_habit_id_by_name("missing")


def test_plans_insert_then_update_in_place(db):
    task_id = db.add_task(TaskData(name="report", due_date=DAY))
    habit_id = db.add_habit(HabitData(name="run", target_frequency="每日一次"))
    db.update_habit_plan(1, "run", 0, habit_id, DAY)
    db.update_task_plan(2, "report", 0, task_id, DAY)
    plans = db.get_plans_by_date(DAY)
    assert [(p.type, p.name, p.status) for p in plans] == [
        (PLAN_TYPE_HABIT, "run", 0),
        (PLAN_TYPE_TASK, "report", 0),
    ]
    db.update_task_plan(2, "report", 1, task_id, DAY)
    plans = db.get_plans_by_date(DAY)
    assert len(plans) == 2
    assert plans[1].status == 1
    assert db.get_plans_by_date(OTHER_DAY) == []


def test_task_plan_over_habit_slot_violates_check(db):
    task_id = db.add_task(TaskData(name="report", due_date=DAY))
    habit_id = db.add_habit(HabitData(name="run", target_frequency="每日一次"))
    db.update_habit_plan(1, "run", 0, habit_id, DAY)
    with pytest.raises(sqlite3.IntegrityError):
        db.update_task_plan(1, "report", 0, task_id, DAY)


def test_review_missing_is_empty(db):
    assert db.get_review_by_date(DAY) == ReviewData("", "")


def test_review_upsert(db):
    db.update_review("thoughts", "done", today=DAY)
    assert db.get_review_by_date(DAY) == ReviewData("thoughts", "done")
    db.update_review("more", "finished", today=DAY)
    assert db.get_review_by_date(DAY) == ReviewData("more", "finished")
    assert db.get_review_by_date(OTHER_DAY) == ReviewData()