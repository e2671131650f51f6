"""Status and frequency labels used across tasks, habits and plans."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

UNKNOWN_STATUS = "未知状态"

_TASK_STATUSES = ("进行中", "已完成", "未完成", "超时完成", "已取消")
_HABIT_STATUSES = ("进行中", "已完成", "已取消")
_HABIT_FREQUENCIES = ("每日一次", "每二日一次", "每三日一次", "每周周五", "每周周六")
_PLAN_STATUSES = ("进行中", "已完成", "未完成")

_STATUS_COLORS: dict[str, tuple[int, int, int]] = {
    "进行中": (0, 122, 204),
    "已完成": (50, 205, 50),
    "未完成": (255, 87, 34),
    "超时完成": (255, 165, 0),
    "已取消": (128, 128, 128),
}

_T = TypeVar("_T")


def task_status_list() -> list[str]:
    """Return the task status labels, ordered by their stored code."""
    return list(_TASK_STATUSES)


def habit_status_list() -> list[str]:
    """Return the habit status labels, ordered by their stored code."""
    return list(_HABIT_STATUSES)


def habit_frequency_list() -> list[str]:
    """Return the habit frequency labels."""
    return list(_HABIT_FREQUENCIES)


def plan_status_list() -> list[str]:
    """Return the plan status labels, ordered by their stored code."""
    return list(_PLAN_STATUSES)


def _label(labels: Sequence[str], status: int) -> str:
    if 0 <= status < len(labels):
        return labels[status]
    return UNKNOWN_STATUS


def _code(labels: Sequence[str], text: str) -> int:
    try:
        return labels.index(text)
    except ValueError:
        return -1


def task_status_to_string(status: int) -> str:
    """Return the label for a task status code, or the unknown-status label."""
    return _label(_TASK_STATUSES, status)


def habit_status_to_string(status: int) -> str:
    """Return the label for a habit status code, or the unknown-status label."""
    return _label(_HABIT_STATUSES, status)


def plan_status_to_string(status: int) -> str:
    """Return the label for a plan status code, or the unknown-status label."""
    return _label(_PLAN_STATUSES, status)


def task_status_from_string(text: str) -> int:
    """Return the code of a task status label, or -1 if it is not one."""
    return _code(_TASK_STATUSES, text)


def habit_status_from_string(text: str) -> int:
    """Return the code of a habit status label, or -1 if it is not one."""
    return _code(_HABIT_STATUSES, text)


def plan_status_from_string(text: str) -> int:
    """Return the code of a plan status label, or -1 if it is not one."""
    return _code(_PLAN_STATUSES, text)


def status_color(status: str, default: _T) -> tuple[int, int, int] | _T:
    """Return the RGB background colour for a status label, or ``default``."""
    return _STATUS_COLORS.get(status, default)


def select_option(options: Sequence[str], value: str, current: int) -> int:
    """Return the index of ``value`` in ``options``, keeping ``current`` if absent."""
    try:
        return list(options).index(value)
    except ValueError:
        return current