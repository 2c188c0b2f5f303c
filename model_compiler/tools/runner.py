"""Process execution capability shared by the tool adapters."""

from __future__ import annotations

import os
import subprocess
from typing import Mapping, Protocol, Sequence


class ToolRunner(Protocol):
    """Runs an external command and reports its exit status."""

    def run(
        self,
        command: str,
        args: Sequence[str],
        env: Mapping[str, str] | None = None,
    ) -> int:  # pragma: no cover - protocol
        ...


class SubprocessToolRunner:
    """Runs tools with ``subprocess``, streaming their output to ours.

    Output is not captured and there is no timeout: the call blocks until the
    tool exits. ``OSError`` (e.g. executable not found) propagates.
    """

    def run(
        self,
        command: str,
        args: Sequence[str],
        env: Mapping[str, str] | None = None,
    ) -> int:
        effective_env = dict(os.environ if env is None else env)
        completed = subprocess.run(
            [command, *args],
            env=effective_env,
            check=False,
        )
        return completed.returncode


def format_command(command: str, args: Sequence[str]) -> str:
    return " ".join([command, *args])


__all__ = ["SubprocessToolRunner", "ToolRunner", "format_command"]
