"""Generated-code marker for the bindings file."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from ..errors import HeaderRewriteError

# Split so license header checks do not treat this module as generated code.
GENERATED_HEADER = "// Code generated by YGOT. DO NOT" + " EDIT.\n\n"


def insert_header_prefix(path: Path | str, header: str = GENERATED_HEADER) -> None:
    """Prepend ``header`` to the file at ``path``, replacing it atomically."""
    target = Path(path)
    try:
        content = target.read_bytes()
        mode = target.stat().st_mode & 0o777
    except OSError as exc:
        raise HeaderRewriteError(f"Unable to read {target}", cause=exc) from exc

    try:
        fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
    except OSError as exc:
        raise HeaderRewriteError(f"Unable to rewrite {target}", cause=exc) from exc
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(header.encode("utf-8"))
            handle.write(content)
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, target)
    except OSError as exc:
        tmp_path.unlink(missing_ok=True)
        raise HeaderRewriteError(f"Unable to rewrite {target}", cause=exc) from exc


__all__ = ["GENERATED_HEADER", "insert_header_prefix"]
