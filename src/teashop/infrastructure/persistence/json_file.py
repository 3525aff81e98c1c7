"""Small JSON file helpers shared by the repositories.

Writes go to a temporary sibling file that is then moved over the target
with ``os.replace``, so a crash mid-write leaves the previous file intact.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from teashop.domain.exceptions import PersistenceError


def read_json(file_path: Path, default: Any) -> Any:
    """Return the decoded file contents, or *default* if the file is absent."""
    if not file_path.exists():
        return default
    try:
        return json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise PersistenceError(f"Cannot read {file_path.name}: {exc}") from exc


def write_json(file_path: Path, data: Any) -> None:
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(json.dumps(data, indent=2, sort_keys=True) + "\n")
            os.replace(tmp_name, file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
    except OSError as exc:
        raise PersistenceError(f"Cannot write {file_path.name}: {exc}") from exc
