"""Core data models shared across model-compiler components."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import IntEnum
from typing import Any, Dict, Optional, Tuple


class GetStateMode(IntEnum):
    """How the config service retrieves operational state from a device."""

    NONE = 0
    OP_STATE = 1
    EXPLICIT_RO_PATHS = 2
    EXPLICIT_RO_PATHS_EXPAND_WILDCARDS = 3

    @classmethod
    def parse(cls, value: Any) -> "GetStateMode":
        """Accept the numeric value or its manifest spelling (e.g. ``opState``)."""
        if value is None:
            return cls.NONE
        if isinstance(value, bool):
            raise ValueError(f"invalid getStateMode {value!r}")
        if isinstance(value, int):
            return cls(value)
        text = str(value).strip()
        if text.isdigit():
            return cls(int(text))
        key = text.replace("-", "").replace("_", "").lower()
        for member in cls:
            if member.name.replace("_", "").lower() == key:
                return member
        raise ValueError(f"invalid getStateMode {value!r}")


@dataclass(frozen=True)
class ModuleDescriptor:
    """One YANG module listed in the model metadata."""

    name: str
    revision: str
    organization: str
    yang_file: str


@dataclass(frozen=True)
class MetaData:
    """Model metadata as declared in ``metadata.yaml``."""

    name: str
    version: str
    go_package: str = ""
    lint_model: bool = False
    get_state_mode: GetStateMode = GetStateMode.NONE
    module: str = ""
    modules: Tuple[ModuleDescriptor, ...] = ()


@dataclass(frozen=True)
class ModelData:
    """gNMI model data entry advertised by the plugin."""

    name: str
    version: str
    organization: str


@dataclass(frozen=True)
class ReadOnlySubPath:
    sub_path: str
    value_type: str


@dataclass(frozen=True)
class ReadOnlyPath:
    path: str
    sub_paths: Tuple[ReadOnlySubPath, ...] = ()


@dataclass(frozen=True)
class ReadWritePath:
    path: str
    value_type: str
    units: str = ""
    description: str = ""
    mandatory: bool = False
    default: str = ""
    range: Tuple[str, ...] = ()
    length: Tuple[str, ...] = ()


@dataclass
class ModelInfo:
    """Protocol-facing projection of the metadata.

    The access-control path lists are filled in by a separate annotation step
    and are only passed through to the templates here.
    """

    name: str
    version: str
    model_data: Tuple[ModelData, ...]
    get_state_mode: GetStateMode = GetStateMode.NONE
    module: str = ""
    read_only_paths: Tuple[ReadOnlyPath, ...] = ()
    read_write_paths: Tuple[ReadWritePath, ...] = ()

    @classmethod
    def from_metadata(cls, metadata: MetaData) -> "ModelInfo":
        model_data = tuple(
            ModelData(
                name=module.name,
                version=module.revision,
                organization=module.organization,
            )
            for module in metadata.modules
        )
        return cls(
            name=metadata.name,
            version=metadata.version,
            model_data=model_data,
            get_state_mode=metadata.get_state_mode,
            module=metadata.module,
        )


DEFAULT_PLUGIN_VERSION = "1.0.0"


@dataclass(frozen=True)
class Dictionary:
    """Rendering context shared by every plugin artifact template."""

    name: str
    version: str
    plugin_version: str
    go_package: str
    model_data: Tuple[ModelData, ...]
    module: str
    get_state_mode: int
    read_only_paths: Tuple[ReadOnlyPath, ...] = ()
    read_write_paths: Tuple[ReadWritePath, ...] = ()

    @classmethod
    def build(
        cls,
        metadata: MetaData,
        model_info: ModelInfo,
        plugin_version: Optional[str] = None,
    ) -> "Dictionary":
        return cls(
            name=model_info.name,
            version=model_info.version,
            plugin_version=plugin_version or DEFAULT_PLUGIN_VERSION,
            go_package=metadata.go_package,
            model_data=tuple(model_info.model_data),
            module=model_info.module,
            get_state_mode=int(model_info.get_state_mode),
            read_only_paths=tuple(model_info.read_only_paths),
            read_write_paths=tuple(model_info.read_write_paths),
        )

    def as_context(self) -> Dict[str, Any]:
        """Return the dictionary as template variables."""
        return asdict(self)


@dataclass
class PluginVersion:
    """Resolved plugin version; ``error`` is set when the default was used."""

    value: str = DEFAULT_PLUGIN_VERSION
    error: Optional[Exception] = field(default=None, compare=False)

    @property
    def defaulted(self) -> bool:
        return self.error is not None


__all__ = [
    "DEFAULT_PLUGIN_VERSION",
    "Dictionary",
    "GetStateMode",
    "MetaData",
    "ModelData",
    "ModelInfo",
    "ModuleDescriptor",
    "PluginVersion",
    "ReadOnlyPath",
    "ReadOnlySubPath",
    "ReadWritePath",
]
