"""Response file writing."""

from __future__ import annotations

import json
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, Optional, Union

from ..errors import FileError
from .models import ResponseDescriptor

DEFAULT_INDENT = 2


def response_to_dict(response: ResponseDescriptor) -> dict[str, Any]:
    """Convert a ResponseDescriptor to a serializable dict."""
    return {
        "status": response.status,
        "headers": dict(response.headers),
        "body": response.body,
    }


def write_response(
    response: ResponseDescriptor,
    output_file: Union[str, Path],
    indent: Optional[int] = DEFAULT_INDENT,
) -> None:
    """Write the response document, replacing any existing file.

    Raises:
        FileError: If the file cannot be created or written
    """
    content = json.dumps(response_to_dict(response), indent=indent, ensure_ascii=False)
    _atomic_write(Path(output_file), content + "\n")


def write_body(body: Optional[str], output_file: Union[str, Path]) -> None:
    """Write the raw response body text to its own file.

    Raises:
        FileError: If the file cannot be created or written
    """
    _atomic_write(Path(output_file), body or "")


def _atomic_write(path: Path, content: str) -> None:
    """Write via a sibling temp file so a failure leaves ``path`` untouched."""
    tmp_name = None

    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
        )
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise FileError(f"Cannot write output file '{path}': {e}") from e


def _target_mode(path: Path) -> int:
    """Mode for the written file: the existing file's, else 0666 minus umask."""
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
