from __future__ import annotations

from typing import Optional

from .models import DEFAULT_PRIORITY, Task

DELIMITER = "|"
NO_DUE = "-"
FIELD_COUNT = 5


class CorruptRecordError(ValueError):
    """A stored record has a field that cannot be parsed (e.g. a non-numeric id)."""


def encode_title(title: str) -> str:
    return title.replace(DELIMITER, "/").replace("\n", "").replace("\r", "")


def encode_task(task: Task) -> str:
    """
    One line, no trailing newline:
      id|done|priority|due|title
    """
    return DELIMITER.join(
        [
            str(task.id),
            "1" if task.done else "0",
            task.priority,
            task.due if task.due is not None else NO_DUE,
            encode_title(task.title),
        ]
    )


def decode_line(line: str) -> Optional[Task]:
    """
    Blank lines and lines with fewer than five fields decode to None so
    hand-edited files keep loading. A bad id is not guessed at.
    """
    if not line.strip():
        return None
    parts = line.split(DELIMITER)
    if len(parts) < FIELD_COUNT:
        return None

    raw_id, raw_done, raw_priority, raw_due, title = parts[:FIELD_COUNT]
    try:
        task_id = int(raw_id)
    except ValueError as e:
        raise CorruptRecordError(f"invalid task id {raw_id!r}") from e

    return Task(
        id=task_id,
        done=raw_done == "1",
        priority=raw_priority[0] if raw_priority else DEFAULT_PRIORITY,
        due=None if raw_due == NO_DUE else raw_due,
        title=title,
    )
