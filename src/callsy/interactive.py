"""Interactive prompts for callsy."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

import questionary
from questionary import Style

from .errors import FileError

# Custom style for prompts
STYLE = Style([
    ("qmark", "fg:cyan bold"),
    ("question", "bold"),
    ("answer", "fg:cyan"),
    ("instruction", "fg:gray italic"),
])


def prompt_overwrite(path: Path) -> bool:
    """Ask whether an existing file may be replaced."""
    result = questionary.confirm(
        f"Output file {path} already exists, overwrite?",
        default=False,
        style=STYLE,
    ).ask()
    return bool(result)


def confirm_overwrites(paths: Iterable[Optional[Path]]) -> None:
    """Ask before replacing each existing file in ``paths``.

    Raises:
        FileError: The user declined (or cancelled) for any file
    """
    for path in paths:
        if path is None or not path.exists():
            continue
        if not prompt_overwrite(path):
            raise FileError(f"Refusing to overwrite existing file '{path}'")
