from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Iterable, List, Tuple

from .models import Task, priority_weight
from .store import load_tasks

NO_DUE_SENTINEL = "9999-99-99"
DEFAULT_SORT_KEY = "due"


class ListFilter(Enum):
    ALL = "all"
    PENDING = "pending"
    DONE = "done"


def _due_or_sentinel(task: Task) -> str:
    return task.due if task.due is not None else NO_DUE_SENTINEL


def _sort_tuple(task: Task, sort_key: str) -> Tuple:
    if sort_key == "due":
        primary: object = _due_or_sentinel(task)
    elif sort_key == "priority":
        primary = priority_weight(task.priority)
    elif sort_key == "id":
        primary = task.id
    else:
        primary = 0
    return (
        task.done,
        primary,
        _due_or_sentinel(task),
        priority_weight(task.priority),
        task.id,
    )


def sort_tasks(tasks: Iterable[Task], sort_key: str = DEFAULT_SORT_KEY) -> List[Task]:
    """
    Pending before done, then `sort_key` (due | priority | id; anything else
    is ignored), then due, priority weight and id. Missing due dates sort last.
    """
    return sorted(tasks, key=lambda t: _sort_tuple(t, sort_key))


def filter_tasks(tasks: Iterable[Task], which: ListFilter = ListFilter.ALL) -> List[Task]:
    if which is ListFilter.PENDING:
        return [t for t in tasks if not t.done]
    if which is ListFilter.DONE:
        return [t for t in tasks if t.done]
    return list(tasks)


def list_tasks(
    data_path: Path,
    which: ListFilter = ListFilter.ALL,
    sort_key: str = DEFAULT_SORT_KEY,
) -> List[Task]:
    # sort the whole collection first; filtering never reorders survivors
    return filter_tasks(sort_tasks(load_tasks(data_path), sort_key), which)


def format_task(task: Task) -> str:
    mark = "[x]" if task.done else "[ ]"
    due = task.due if task.due is not None else "--"
    return f"{task.id:>3}  {mark}  {task.priority}  {due}  {task.title}"
