"""Command-line front end for managing tasks, habits, daily plans and reviews."""

from __future__ import annotations

import argparse
import datetime as _dt
import sys
from collections.abc import Callable, Sequence

from planmanage.database import PLAN_TYPE_HABIT, PLAN_TYPE_TASK, Database
from planmanage.dates import format_date, parse_date
from planmanage.planner import (
    ALL_FILTER,
    HABIT_HEADERS,
    PLAN_HEADERS,
    TASK_HEADERS,
    Planner,
    PlanRow,
)
from planmanage.statuses import (
    habit_frequency_list,
    habit_status_list,
    plan_status_list,
    task_status_list,
)

DEFAULT_DB = "PlanManage.db"
DEFAULT_FILTER = "进行中"

_TASK_DATE_COLUMN = 3
_HABIT_DATE_COLUMN = 2

_Handler = Callable[[Planner, argparse.Namespace], int]


def _day(text: str) -> _dt.date:
    parsed = parse_date(text)
    if parsed is not None:
        return parsed
    try:
        return _dt.date.fromisoformat(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date: {text!r}") from None


def _print_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
    print("\t".join(headers))
    for row in rows:
        print("\t".join(row))


def _task_filters() -> list[str]:
    return [ALL_FILTER, *task_status_list()]


def _habit_filters() -> list[str]:
    return [ALL_FILTER, *habit_status_list()]


def _list_tasks(planner: Planner, args: argparse.Namespace) -> int:
    _print_table(TASK_HEADERS, planner.task_rows(_task_filters().index(args.filter)))
    return 0


def _list_habits(planner: Planner, args: argparse.Namespace) -> int:
    _print_table(HABIT_HEADERS, planner.habit_rows(_habit_filters().index(args.filter)))
    return 0


def _add_task(planner: Planner, args: argparse.Namespace) -> int:
    due = args.due if args.due is not None else _dt.date.today()
    print(planner.add_task(args.name, due))
    return 0


def _add_habit(planner: Planner, args: argparse.Namespace) -> int:
    print(planner.add_habit(args.name, args.frequency))
    return 0


def _normalise_date_value(value: str) -> str:
    try:
        return format_date(_day(value))
    except argparse.ArgumentTypeError:
        return value


def _edit_task(planner: Planner, args: argparse.Namespace) -> int:
    value = args.value
    if args.column == _TASK_DATE_COLUMN:
        value = _normalise_date_value(value)
    try:
        planner.edit_task(args.id, args.column, value)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


def _edit_habit(planner: Planner, args: argparse.Namespace) -> int:
    value = args.value
    if args.column == _HABIT_DATE_COLUMN:
        value = _normalise_date_value(value)
    try:
        planner.edit_habit(args.id, args.column, value)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


def _show_plan(planner: Planner, args: argparse.Namespace) -> int:
    day = args.date if args.date is not None else _dt.date.today()
    rows = planner.plan_rows(day)
    _print_table(PLAN_HEADERS, [(row.type, row.name, row.status) for row in rows])
    review = planner.review(day)
    print(f"反思: {review.reflection}")
    print(f"总结: {review.summary}")
    return 0


def _save_plan(planner: Planner, args: argparse.Namespace) -> int:
    day = args.date if args.date is not None else _dt.date.today()
    rows = [PlanRow(kind, name, status) for kind, name, status in args.entry]
    try:
        planner.save(day, rows, args.reflection, args.summary)
    except LookupError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="planmanage", description="计划管理软件: tasks, habits, daily plans and reviews."
    )
    parser.add_argument("--db", default=DEFAULT_DB, help="database file")
    commands = parser.add_subparsers(dest="command", required=True)

    tasks = commands.add_parser("tasks", help="list tasks")
    tasks.add_argument("--filter", choices=_task_filters(), default=DEFAULT_FILTER)
    tasks.set_defaults(handler=_list_tasks)

    habits = commands.add_parser("habits", help="list habits")
    habits.add_argument("--filter", choices=_habit_filters(), default=DEFAULT_FILTER)
    habits.set_defaults(handler=_list_habits)

    add_task = commands.add_parser("add-task", help="create a task")
    add_task.add_argument("name")
    add_task.add_argument("--due", type=_day, default=None, help="due date, today by default")
    add_task.set_defaults(handler=_add_task)

    add_habit = commands.add_parser("add-habit", help="create a habit")
    add_habit.add_argument("name")
    frequencies = habit_frequency_list()
    add_habit.add_argument("--frequency", choices=frequencies, default=frequencies[0])
    add_habit.set_defaults(handler=_add_habit)

    edit_task = commands.add_parser("edit-task", help="change a column of a task")
    edit_task.add_argument("id", type=int)
    edit_task.add_argument("column", type=int)
    edit_task.add_argument("value")
    edit_task.set_defaults(handler=_edit_task)

    edit_habit = commands.add_parser("edit-habit", help="change a column of a habit")
    edit_habit.add_argument("id", type=int)
    edit_habit.add_argument("column", type=int)
    edit_habit.add_argument("value")
    edit_habit.set_defaults(handler=_edit_habit)

    plan = commands.add_parser("plan", help="show the plan and review of a day")
    plan.add_argument("--date", type=_day, default=None)
    plan.set_defaults(handler=_show_plan)

    save = commands.add_parser("save", help="store the plan of a day and today's review")
    save.add_argument("--date", type=_day, default=None)
    save.add_argument(
        "--entry",
        nargs=3,
        action="append",
        default=[],
        metavar=("TYPE", "NAME", "STATUS"),
        help=f"plan entry; TYPE is {PLAN_TYPE_TASK} or {PLAN_TYPE_HABIT}, "
        f"STATUS one of {', '.join(plan_status_list())}",
    )
    save.add_argument("--reflection", default="")
    save.add_argument("--summary", default="")
    save.set_defaults(handler=_save_plan)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return its exit status."""
    args = _build_parser().parse_args(argv)
    handler: _Handler = args.handler
    with Database(args.db) as db:
        return handler(Planner(db), args)


if __name__ == "__main__":
    sys.exit(main())