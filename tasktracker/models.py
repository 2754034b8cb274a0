from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

PRIORITIES = ("H", "M", "L")
DEFAULT_PRIORITY = "M"

_PRIORITY_WEIGHT = {"H": 0, "M": 1, "L": 2}


@dataclass(frozen=True)
class Task:
    id: int
    done: bool
    priority: str  # "H" | "M" | "L"
    due: Optional[str]  # YYYY-MM-DD, None when absent
    title: str


def priority_weight(priority: str) -> int:
    return _PRIORITY_WEIGHT.get(priority, 1)


def is_valid_date(text: str) -> bool:
    """
    Lexical YYYY-MM-DD check only; 2024-02-31 passes.
    """
    if len(text) != 10 or text[4] != "-" or text[7] != "-":
        return False
    return all(c in "0123456789" for i, c in enumerate(text) if i not in (4, 7))
