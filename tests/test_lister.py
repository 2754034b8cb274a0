from pathlib import Path

from tasktracker import store
from tasktracker.lister import ListFilter, filter_tasks, format_task, list_tasks, sort_tasks
from tasktracker.models import Task


def _t(id, done=False, priority="M", due=None):
    return Task(id=id, done=done, priority=priority, due=due, title=f"t{id}")


def test_pending_before_done():
    tasks = [_t(1, done=True, due="2000-01-01"), _t(2)]
    assert [t.id for t in sort_tasks(tasks)] == [2, 1]


def test_sort_by_due_puts_missing_last():
    tasks = [_t(1), _t(2, due="2024-03-01"), _t(3, due="2024-01-01")]
    assert [t.id for t in sort_tasks(tasks, "due")] == [3, 2, 1]


def test_sort_by_priority_then_secondary():
    tasks = [_t(1, priority="L", due="2024-01-01"), _t(2, priority="H"), _t(3, priority="H", due="2024-06-01")]
    assert [t.id for t in sort_tasks(tasks, "priority")] == [3, 2, 1]


def test_sort_by_id_and_unknown_key():
    tasks = [_t(3, due="2024-01-01"), _t(1), _t(2, due="2023-01-01")]
    assert [t.id for t in sort_tasks(tasks, "id")] == [1, 2, 3]
    # unknown key falls through to due, priority, id
    assert [t.id for t in sort_tasks(tasks, "bogus")] == [2, 3, 1]


def test_filter_keeps_order():
    tasks = [_t(1), _t(2, done=True), _t(3)]
    assert [t.id for t in filter_tasks(tasks, ListFilter.PENDING)] == [1, 3]
    assert [t.id for t in filter_tasks(tasks, ListFilter.DONE)] == [2]
    assert [t.id for t in filter_tasks(tasks)] == [1, 2, 3]


def test_list_pending_sorted_by_due(tmp_path: Path):
    path = tmp_path / "tasks.tsv"
    store.save_tasks(path, [_t(1, done=True, due="2024-01-01"), _t(2), _t(3, due="2024-01-02")])
    assert [t.id for t in list_tasks(path, ListFilter.PENDING, "due")] == [3, 2]


def test_format_task():
    assert format_task(Task(id=4, done=False, priority="H", due=None, title="x")) == "  4  [ ]  H  --  x"
    assert format_task(Task(id=12, done=True, priority="L", due="2024-05-01", title="y")) == " 12  [x]  L  2024-05-01  y"
