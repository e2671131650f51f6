import datetime as dt

import pytest

from planmanage.cli import main
from planmanage.dates import format_date


@pytest.fixture
def db(tmp_path):
    return str(tmp_path / "plan.db")


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_add_task_and_list_all(db, capsys):
    assert main(["--db", db, "add-task", "写报告", "--due", "2030-01-02"]) == 0
    task_id = _lines(capsys)[0]
    assert main(["--db", db, "tasks", "--filter", "全部"]) == 0
    lines = _lines(capsys)
    assert lines[0].split("\t")[1] == "任务名称"
    row = lines[1].split("\t")
    assert row[0] == task_id
    assert row[1] == "写报告"
    assert row[3] == format_date(dt.date(2030, 1, 2))
    assert row[5] == "进行中"


def test_default_filter_shows_in_progress(db, capsys):
    main(["--db", db, "add-task", "a"])
    capsys.readouterr()
    main(["--db", db, "tasks"])
    lines = _lines(capsys)
    assert len(lines) == 2
    assert lines[1].split("\t")[3] == format_date(dt.date.today())


def test_edit_task_status_moves_between_filters(db, capsys):
    main(["--db", db, "add-task", "a"])
    task_id = _lines(capsys)[0]
    assert main(["--db", db, "edit-task", task_id, "5", "已完成"]) == 0
    main(["--db", db, "tasks", "--filter", "进行中"])
    assert len(_lines(capsys)) == 1
    main(["--db", db, "tasks", "--filter", "已完成"])
    lines = _lines(capsys)
    assert len(lines) == 2
    assert lines[1].split("\t")[5] == "已完成"


def test_edit_task_due_date_accepts_iso(db, capsys):
    main(["--db", db, "add-task", "a"])
    task_id = _lines(capsys)[0]
    main(["--db", db, "edit-task", task_id, "3", "2031-05-06"])
    main(["--db", db, "tasks", "--filter", "全部"])
    assert _lines(capsys)[1].split("\t")[3] == format_date(dt.date(2031, 5, 6))


def test_edit_read_only_column_fails(db, capsys):
    main(["--db", db, "add-task", "a"])
    task_id = _lines(capsys)[0]
    assert main(["--db", db, "edit-task", task_id, "0", "9"]) == 1


def test_add_habit_with_frequency(db, capsys):
    assert main(["--db", db, "add-habit", "跑步", "--frequency", "每周周五"]) == 0
    capsys.readouterr()
    main(["--db", db, "habits", "--filter", "全部"])
    row = _lines(capsys)[1].split("\t")
    assert row[1] == "跑步"
    assert row[3] == "每周周五"
    assert row[4] == "进行中"


def test_add_habit_rejects_unknown_frequency(db):
    with pytest.raises(SystemExit) as info:
        main(["--db", db, "add-habit", "x", "--frequency", "sometimes"])
    assert info.value.code == 2


def test_invalid_date_is_rejected(db):
    with pytest.raises(SystemExit) as info:
        main(["--db", db, "add-task", "x", "--due", "not a date"])
    assert info.value.code == 2


def test_plan_lists_daily_habit(db, capsys):
    main(["--db", db, "add-habit", "读书"])
    capsys.readouterr()
    assert main(["--db", db, "plan", "--date", "2100-01-01"]) == 0
    lines = _lines(capsys)
    assert lines[0].split("\t") == ["类型", "计划名称", "完成状态"]
    assert lines[1].split("\t") == ["习惯", "读书", "进行中"]


def test_save_then_show_plan_and_review(db, capsys):
    main(["--db", db, "add-task", "t1"])
    capsys.readouterr()
    code = main(
        [
            "--db", db, "save", "--date", "2100-01-01",
            "--entry", "任务", "t1", "已完成",
            "--reflection", "ok", "--summary", "done",
        ]
    )
    assert code == 0
    main(["--db", db, "plan", "--date", "2100-01-01"])
    lines = _lines(capsys)
    assert lines[1].split("\t") == ["任务", "t1", "已完成"]
    main(["--db", db, "plan"])
    lines = _lines(capsys)
    assert lines[-2].endswith("ok")
    assert lines[-1].endswith("done")


def test_save_unknown_task_fails(db, capsys):
    code = main(["--db", db, "save", "--entry", "任务", "missing", "进行中"])
    assert code == 1
    main(["--db", db, "plan", "--date", "2100-01-01"])
    assert len(_lines(capsys)) == 3