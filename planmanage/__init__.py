"""Plan manager for tasks, habits, daily plans and daily reviews kept in SQLite."""

__version__ = "0.1.0"
__all__ = ["cli", "database", "dates", "planner", "statuses"]