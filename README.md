# planmanage

A small personal planner that keeps tasks, habits, a plan for each day and a
daily review (reflection and summary) in a single SQLite file.

## What it tracks

- **Tasks** (任务): a name, a created date, a due date, a completion date and a
  status: 进行中, 已完成, 未完成, 超时完成 or 已取消. Setting a task to
  已完成 or 超时完成 records today as its completion date; 进行中, 未完成 and
  已取消 clear it.
- **Habits** (习惯): a name, a created date, a target frequency and a status:
  进行中, 已完成 or 已取消. The frequencies are 每日一次, 每二日一次,
  每三日一次, 每周周五 and 每周周六.
- **Daily plans**: for any date, an ordered list of task and habit entries,
  each 进行中, 已完成 or 未完成. When no habit entries are stored for a day,
  the habits due on that day are added to the list shown: 每日一次 every day,
  每二日一次 and 每三日一次 every second or third day counted from the habit's
  created date, 每周周五 on Fridays and 每周周六 on Saturdays. Habits created
  after the day are left out.
- **Daily reviews**: a reflection and a summary per day.

Dates are shown in the form `2024年05月01日`.

## Installing

```
pip install .
```

No third-party libraries are needed. To run the tests:

```
pip install .[test]
pytest
```

## Command line

The `planmanage` command takes a subcommand. `--db FILE` (given before the
subcommand) chooses the database file; it defaults to `PlanManage.db` in the
current directory, and the tables are created when missing.

```
planmanage tasks [--filter STATUS]
planmanage habits [--filter STATUS]
planmanage add-task NAME [--due DATE]
planmanage add-habit NAME [--frequency FREQUENCY]
planmanage edit-task ID COLUMN VALUE
planmanage edit-habit ID COLUMN VALUE
planmanage plan [--date DATE]
planmanage save [--date DATE] [--entry TYPE NAME STATUS ...] [--reflection TEXT] [--summary TEXT]
```

- `tasks` and `habits` print a tab-separated table. `--filter` is 全部 or one
  of the status names and defaults to 进行中.
- `add-task` creates a task and prints its id; the due date defaults to today.
  `add-habit` creates a habit and prints its id; the frequency defaults to
  每日一次.
- `edit-task` changes column 1 (name), 3 (due date) or 5 (status) of a task;
  `edit-habit` changes column 1 (name), 2 (created date), 3 (frequency) or
  4 (status) of a habit. Any other column is reported on standard error with
  exit status 1.
- `plan` prints the plan for a day (today by default), followed by the
  `反思:` and `总结:` lines of that day's review.
- `save` stores the given entries as the plan for a day (today by default),
  numbered from 1 in the order given; `--entry` may be repeated, with TYPE
  任务 or 习惯. Each name must be an existing task or habit; otherwise the
  error is reported, the exit status is 1 and nothing is written. The
  reflection and summary are always stored under today's date.

Dates may be written as `2024年05月01日` or `2024-05-01`.

## Using it from Python

```python
from datetime import date

from planmanage.database import Database
from planmanage.planner import Planner, PlanRow

with Database("plans.db") as db:
    planner = Planner(db)

    planner.add_task("写周报", date(2024, 5, 3))
    planner.add_habit("跑步", "每日一次")

    rows = planner.plan_rows(date(2024, 5, 1))
    rows.append(PlanRow("任务", "写周报", "进行中"))
    planner.save(date(2024, 5, 1), rows, "reflection", "summary")
```

- `planmanage.database` holds `Database`, which reads and writes the tables,
  and the `TaskData`, `HabitData`, `PlanData` and `ReviewData` records.
- `planmanage.planner` holds `Planner`, which builds the rows of the task,
  habit and plan tables and stores edits, together with `PlanRow`,
  `habit_due_on` and the `*_column_editable` checks.
- `planmanage.statuses` holds the status and frequency lists, the
  conversions between status numbers and their names, `status_color` and
  `select_option`.
- `planmanage.dates` formats and parses the dates used throughout.

## Limits

There is no graphical window; the planner is used through the command line
or from Python. Saving a plan overwrites entries by position and does not
remove entries stored at positions beyond those given.