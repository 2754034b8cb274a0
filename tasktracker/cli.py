from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

from . import store
from .codec import CorruptRecordError
from .config import DATA_FILENAME, default_data_path
from .lister import DEFAULT_SORT_KEY, ListFilter, format_task, list_tasks
from .logging_setup import setup_logging
from .models import DEFAULT_PRIORITY, PRIORITIES, is_valid_date

logger = logging.getLogger(__name__)

HELP_ALIASES = {"help", "-h", "--help"}

USAGE = f"""\
Task Tracker (tt)

Usage:
  tt add <title words...> [-p H|M|L] [-d YYYY-MM-DD]
  tt list [--all|--pending|--done] [--sort=due|priority|id]
  tt done <id>
  tt rm <id>
  tt clear [--done|--all]
  tt help

Options (any command except help):
  --file PATH     Data file to use instead of ./{DATA_FILENAME}
  -v, --verbose   Debug logging on stderr

Notes:
  - 'tt list' shows ALL tasks by default; completed ones display as [x].
  - Use --pending to show only pending, or --done to show only completed.

Data file: {DATA_FILENAME} (in current directory)
"""


class UsageError(Exception):
    """Bad command line: unknown flag, missing argument, invalid value."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def _parse_priority(p: str) -> str:
    value = p.upper()
    if value not in PRIORITIES:
        raise argparse.ArgumentTypeError("Invalid priority. Use H/M/L.")
    return value


def _parse_due(d: str) -> str:
    if not is_valid_date(d):
        raise argparse.ArgumentTypeError(f"Invalid date '{d}'. Use YYYY-MM-DD.")
    return d


def _parse_id(raw: str) -> int:
    if not (raw.isascii() and raw.isdigit()):
        raise argparse.ArgumentTypeError("Invalid id.")
    return int(raw)


def _data_path_from_args(ns: argparse.Namespace) -> Path:
    if getattr(ns, "file", None):
        return Path(ns.file).expanduser().resolve()
    return default_data_path()


def _displayable(text: str) -> str:
    # raw bytes kept from the data file show as U+FFFD instead of failing print()
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def cmd_add(ns: argparse.Namespace) -> int:
    words = ns.title or []
    for word in words:
        if word.startswith("-"):
            raise UsageError(f"Unknown flag: {word}")
    title = " ".join(words).strip()
    if not title:
        raise UsageError("title required.")

    path = _data_path_from_args(ns)
    task_id = store.add_task(path, title=title, priority=ns.priority, due=ns.due)
    print(f"Added task #{task_id}")
    return 0


def cmd_list(ns: argparse.Namespace) -> int:
    path = _data_path_from_args(ns)
    for t in list_tasks(path, ns.which, ns.sort_key):
        print(_displayable(format_task(t)))
    return 0


def cmd_done(ns: argparse.Namespace) -> int:
    path = _data_path_from_args(ns)
    if not store.mark_done(path, ns.task_id):
        print("Task not found.", file=sys.stderr)
        return 1
    print(f"Marked #{ns.task_id} done.")
    return 0


def cmd_rm(ns: argparse.Namespace) -> int:
    path = _data_path_from_args(ns)
    if not store.remove_task(path, ns.task_id):
        print("Task not found.", file=sys.stderr)
        return 1
    print(f"Removed #{ns.task_id}.")
    return 0


def cmd_clear(ns: argparse.Namespace) -> int:
    path = _data_path_from_args(ns)
    removed = store.clear_tasks(path, everything=ns.everything)
    logger.debug("Cleared %d task(s)", removed)
    print("Cleared all tasks." if ns.everything else "Cleared completed tasks.")
    return 0


def build_parsers() -> dict[str, argparse.ArgumentParser]:
    """
    One parser per command. Each parses with parse_intermixed_args so that
    `tt add buy -p H milk` keeps both title words.
    """
    common = _Parser(add_help=False)
    common.add_argument("--file", help=f"Path to the data file (default: ./{DATA_FILENAME}).")
    common.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr.")

    parsers: dict[str, argparse.ArgumentParser] = {}

    def new(name: str, description: str, func) -> argparse.ArgumentParser:
        p = _Parser(
            prog=f"tt {name}",
            description=description,
            parents=[common],
            add_help=False,
            allow_abbrev=False,
        )
        p.set_defaults(func=func)
        parsers[name] = p
        return p

    s = new("add", "Add a new task.", cmd_add)
    s.add_argument("title", nargs="*", metavar="WORD", help="Title words.")
    s.add_argument("-p", dest="priority", type=_parse_priority, default=DEFAULT_PRIORITY, help="H, M or L.")
    s.add_argument("-d", dest="due", type=_parse_due, default=None, help="Due date in YYYY-MM-DD.")

    s = new("list", "List tasks.", cmd_list)
    s.add_argument("--all", dest="which", action="store_const", const=ListFilter.ALL, help="Every task (default).")
    s.add_argument("--pending", dest="which", action="store_const", const=ListFilter.PENDING, help="Only pending tasks.")
    s.add_argument("--done", dest="which", action="store_const", const=ListFilter.DONE, help="Only completed tasks.")
    s.add_argument("--sort", dest="sort_key", default=DEFAULT_SORT_KEY, metavar="KEY", help="due, priority or id.")
    s.set_defaults(which=ListFilter.ALL)

    s = new("done", "Mark a task as done.", cmd_done)
    s.add_argument("task_id", type=_parse_id, help="Task ID.")

    s = new("rm", "Remove a task.", cmd_rm)
    s.add_argument("task_id", type=_parse_id, help="Task ID.")

    s = new("clear", "Remove completed tasks, or every task with --all.", cmd_clear)
    s.add_argument("--done", action="store_true", help="Only completed tasks (default).")
    s.add_argument("--all", dest="everything", action="store_true", help="Every task.")

    return parsers


def main(argv: Optional[list[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] in HELP_ALIASES:
        print(USAGE, end="")
        return 0

    command, rest = args[0], args[1:]
    parser = build_parsers().get(command)
    if parser is None:
        print("Unknown command. Try 'tt help'.", file=sys.stderr)
        return 1

    try:
        ns = parser.parse_intermixed_args(rest)
        setup_logging(verbose=ns.verbose)
        logger.debug("Running %s with %r", command, rest)
        return int(ns.func(ns))
    except UsageError as e:
        print(f"{parser.prog}: {e}", file=sys.stderr)
        return 1
    except (CorruptRecordError, OSError, UnicodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
