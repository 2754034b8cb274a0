from __future__ import annotations

from pathlib import Path

DATA_FILENAME = "tasks.tsv"


def default_data_path() -> Path:
    """
    Default data file:
      ./tasks.tsv (relative to the current working directory)

    Override with the --file CLI option.
    """
    return (Path.cwd() / DATA_FILENAME).resolve()
