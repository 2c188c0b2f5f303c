"""Loads model metadata (``metadata.yaml``) into typed records."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from .errors import ManifestError
from .models import GetStateMode, MetaData, ModelInfo, ModuleDescriptor

METADATA_FILE = "metadata.yaml"

# Scalars resolved to these tags would lose their spelling (1.10 -> 1.1, dates).
_VERBATIM_TAGS = {
    "tag:yaml.org,2002:float",
    "tag:yaml.org,2002:int",
    "tag:yaml.org,2002:timestamp",
}


class _ManifestLoader(yaml.SafeLoader):
    """SafeLoader that keeps numbers and dates as the strings written."""


_ManifestLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _VERBATIM_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def load_metadata(path: Path | str) -> MetaData:
    """Parse the metadata file found in the model directory at ``path``."""
    model_dir = Path(path)
    metadata_file = model_dir / METADATA_FILE
    if not model_dir.is_dir():
        raise ManifestError(f"Model directory {model_dir} does not exist")
    try:
        text = metadata_file.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"Unable to read {metadata_file}", cause=exc) from exc

    try:
        data = yaml.load(text, Loader=_ManifestLoader)
    except yaml.YAMLError as exc:
        raise ManifestError(f"Failed to parse {metadata_file.name}", cause=exc) from exc
    if not isinstance(data, dict):
        raise ManifestError(f"{metadata_file.name} must contain a mapping at the root")

    name = _as_str(data.get("name"))
    version = _as_str(data.get("version"))
    if not name:
        raise ManifestError(f"{metadata_file.name} is missing the model name")
    if not version:
        raise ManifestError(f"{metadata_file.name} is missing the model version")

    modules = _parse_modules(data.get("modules"), metadata_file.name)

    try:
        get_state_mode = GetStateMode.parse(data.get("getStateMode"))
    except ValueError as exc:
        raise ManifestError(f"{metadata_file.name} has an invalid getStateMode", cause=exc) from exc

    root_module = _as_str(data.get("module")) or (modules[0].name if modules else "")

    return MetaData(
        name=name,
        version=version,
        go_package=_as_str(data.get("goPackage")) or "",
        lint_model=bool(_as_bool(data.get("lintModel"))),
        get_state_mode=get_state_mode,
        module=root_module,
        modules=modules,
    )


def load_model(path: Path | str) -> Tuple[MetaData, ModelInfo]:
    """Load metadata and derive the model info advertised by the plugin."""
    metadata = load_metadata(path)
    return metadata, ModelInfo.from_metadata(metadata)


def _parse_modules(value: Any, source: str) -> Tuple[ModuleDescriptor, ...]:
    if value is None:
        raise ManifestError(f"{source} does not list any modules")
    if not isinstance(value, list):
        raise ManifestError(f"{source}: 'modules' must be a list")
    if not value:
        raise ManifestError(f"{source} does not list any modules")
    modules: List[ModuleDescriptor] = []
    for index, entry in enumerate(value):
        entry_data = _as_dict(entry)
        name = _as_str(entry_data.get("name"))
        yang_file = _as_str(entry_data.get("file"))
        if not name or not yang_file:
            raise ManifestError(f"{source}: module #{index + 1} needs both 'name' and 'file'")
        modules.append(
            ModuleDescriptor(
                name=name,
                revision=_as_str(entry_data.get("revision")) or "",
                organization=_as_str(entry_data.get("organization")) or "",
                yang_file=yang_file,
            )
        )
    return tuple(modules)


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, (str, int, float)) and not isinstance(value, bool):
        return str(value).strip()
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = ["METADATA_FILE", "load_metadata", "load_model"]
