import pytest

from tasktracker.codec import CorruptRecordError, decode_line, encode_task
from tasktracker.models import Task


def test_encode_layout():
    t = Task(id=7, done=True, priority="H", due="2024-05-01", title="Buy milk")
    assert encode_task(t) == "7|1|H|2024-05-01|Buy milk"


def test_encode_absent_due_and_dirty_title():
    t = Task(id=1, done=False, priority="M", due=None, title="a|b\r\nc")
    assert encode_task(t) == "1|0|M|-|a/bc"


def test_round_trip():
    t = Task(id=3, done=False, priority="L", due=None, title="Call mom, then dad")
    assert decode_line(encode_task(t)) == t


def test_blank_and_short_lines_are_skipped():
    assert decode_line("") is None
    assert decode_line("   ") is None
    assert decode_line("1|0|M|-") is None


def test_empty_priority_defaults_to_medium_and_first_char_wins():
    assert decode_line("1|0||-|x").priority == "M"
    assert decode_line("1|0|High|-|x").priority == "H"


def test_non_numeric_id_is_a_hard_error():
    with pytest.raises(CorruptRecordError):
        decode_line("abc|0|M|-|x")
