"""Resolves the plugin version from the model's VERSION file."""

from __future__ import annotations

from pathlib import Path

from .errors import VersionReadError
from .models import DEFAULT_PLUGIN_VERSION, PluginVersion

VERSION_FILE = "VERSION"


def read_plugin_version(path: Path | str) -> str:
    """Return the first line of the VERSION file.

    Raises VersionReadError if the file is unreadable or its first line is blank.
    """
    version_file = Path(path) / VERSION_FILE
    try:
        data = version_file.read_bytes()
    except OSError as exc:
        raise VersionReadError(f"Unable to read {version_file}", cause=exc) from exc
    text = data.decode("utf-8", errors="replace").replace("\r\n", "\n")
    first_line = text.split("\n")[0]
    if not first_line.strip():
        raise VersionReadError(f"{version_file} has no version on its first line")
    return first_line


def resolve_plugin_version(path: Path | str) -> PluginVersion:
    """Resolve the plugin version, defaulting to 1.0.0.

    This never raises: a missing, unreadable or blank VERSION file is reported
    through ``PluginVersion.error`` so the caller can log it and carry on.
    """
    try:
        return PluginVersion(value=read_plugin_version(path))
    except VersionReadError as exc:
        return PluginVersion(value=DEFAULT_PLUGIN_VERSION, error=exc)


__all__ = ["VERSION_FILE", "read_plugin_version", "resolve_plugin_version"]
