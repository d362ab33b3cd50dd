"""Provide general utility functions that would not fit in other modules."""

from pathlib import Path
from typing import Any


def load_yaml(path: Path) -> Any:
    from yaml import safe_load

    return safe_load(path.read_text(encoding="utf8"))
