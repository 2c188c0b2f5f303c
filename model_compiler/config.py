"""Configuration loading for model-compiler (.model-compiler.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

CONFIG_FILE = ".model-compiler.yml"

ENV_PYANG = "MODEL_COMPILER_PYANG"
ENV_GENERATOR = "MODEL_COMPILER_GENERATOR"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ToolsConfig:
    """Executables invoked for linting, tree output and binding generation."""

    pyang: str = "pyang"
    generator: str = "generator"


@dataclass
class CompilerConfig:
    """Represents the settings defined in .model-compiler.yml."""

    root: Path
    tools: ToolsConfig = field(default_factory=ToolsConfig)
    templates_dir: Optional[Path] = None
    package_name: str = "api"


def load_config(config_path: Path, *, environ: Mapping[str, str] | None = None) -> CompilerConfig:
    """Load configuration from disk, applying environment overrides."""
    env = os.environ if environ is None else environ
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if config_file.exists():
        config = _parse_config(config_file, root)
    else:
        config = CompilerConfig(root=root)

    if env.get(ENV_PYANG):
        config.tools.pyang = env[ENV_PYANG]
    if env.get(ENV_GENERATOR):
        config.tools.generator = env[ENV_GENERATOR]
    return config


def _parse_config(config_file: Path, root: Path) -> CompilerConfig:
    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    tools = ToolsConfig()
    tools_data = _as_dict(data.get("tools"))
    pyang = _as_str(tools_data.get("pyang"))
    generator = _as_str(tools_data.get("generator"))
    if pyang:
        tools.pyang = pyang
    if generator:
        tools.generator = generator

    templates_dir_str = _as_str(data.get("templates_dir"))
    templates_dir = root / templates_dir_str if templates_dir_str else None

    package_name = _as_str(data.get("package_name")) or "api"

    return CompilerConfig(
        root=root,
        tools=tools,
        templates_dir=templates_dir,
        package_name=package_name,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILE).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


__all__ = ["CONFIG_FILE", "CompilerConfig", "ConfigError", "ToolsConfig", "load_config"]
