from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Iterable, Optional

from .codec import CorruptRecordError, decode_line, encode_task
from .models import DEFAULT_PRIORITY, Task

logger = logging.getLogger(__name__)


ENCODING = "utf-8"
# undecodable bytes in hand-edited files survive a load/save cycle unchanged
ENCODING_ERRORS = "surrogateescape"


def load_tasks(data_path: Path) -> list[Task]:
    if not data_path.exists():
        logger.debug("No data file at %s; starting empty", data_path)
        return []

    tasks: list[Task] = []
    text = data_path.read_bytes().decode(ENCODING, ENCODING_ERRORS)
    # only "\n" ends a record; splitlines() also breaks on form feeds and U+2028
    for lineno, line in enumerate(text.split("\n"), start=1):
        try:
            task = decode_line(line)
        except CorruptRecordError as e:
            raise CorruptRecordError(f"{data_path}:{lineno}: {e}") from e
        if task is None:
            if line.strip():
                logger.debug("Skipping malformed record at %s:%d", data_path, lineno)
            continue
        tasks.append(task)

    logger.debug("Loaded %d task(s) from %s", len(tasks), data_path)
    return tasks


def save_tasks(data_path: Path, tasks: Iterable[Task]) -> None:
    """
    Full rewrite: the file ends up holding exactly `tasks`, in order.
    """
    data_path.parent.mkdir(parents=True, exist_ok=True)
    lines = [encode_task(t) + "\n" for t in tasks]
    # encode before opening so a bad title cannot leave a truncated file
    payload = "".join(lines).encode(ENCODING, ENCODING_ERRORS)
    data_path.write_bytes(payload)
    logger.debug("Saved %d task(s) to %s", len(lines), data_path)


def next_id(tasks: Iterable[Task]) -> int:
    return max((t.id for t in tasks), default=0) + 1


def add_task(
    data_path: Path,
    *,
    title: str,
    priority: str = DEFAULT_PRIORITY,
    due: Optional[str] = None,
) -> int:
    tasks = load_tasks(data_path)
    task = Task(id=next_id(tasks), done=False, priority=priority, due=due, title=title)
    tasks.append(task)
    save_tasks(data_path, tasks)
    return task.id


def mark_done(data_path: Path, task_id: int) -> bool:
    tasks = load_tasks(data_path)
    for i, t in enumerate(tasks):
        if t.id == task_id:
            tasks[i] = replace(t, done=True)
            save_tasks(data_path, tasks)
            return True
    return False


def remove_task(data_path: Path, task_id: int) -> bool:
    tasks = load_tasks(data_path)
    for i, t in enumerate(tasks):
        if t.id == task_id:
            del tasks[i]
            save_tasks(data_path, tasks)
            return True
    return False


def clear_tasks(data_path: Path, *, everything: bool = False) -> int:
    """
    Drop completed tasks (or all of them) and return how many went away.
    """
    tasks = load_tasks(data_path)
    kept = [] if everything else [t for t in tasks if not t.done]
    save_tasks(data_path, kept)
    return len(tasks) - len(kept)
