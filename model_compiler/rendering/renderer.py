"""Renders plugin artifacts from Jinja2 templates."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from ..errors import RenderError
from ..logging import get_logger
from ..models import Dictionary

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


class TemplateKind(Enum):
    """Plugin artifacts, with their template name, output path and description."""

    MAIN = ("main.go.j2", "plugin/main.go", "plugin main")
    PATHS = ("paths.go.j2", "plugin/paths.go", "plugin paths extraction utility")
    GO_MODULE = ("go.mod.j2", "go.mod", "plugin Go module")
    MAKEFILE = ("Makefile.j2", "Makefile", "plugin Makefile")
    DOCKERFILE = ("Dockerfile.j2", "Dockerfile", "plugin Dockerfile")

    def __init__(self, template_name: str, destination: str, description: str) -> None:
        self.template_name = template_name
        self.destination = destination
        self.description = description

    def output_path(self, model_path: Path) -> Path:
        return Path(model_path).joinpath(*self.destination.split("/"))


# Render order for a full compile.
PLUGIN_ARTIFACTS: Sequence[TemplateKind] = (
    TemplateKind.MAIN,
    TemplateKind.PATHS,
    TemplateKind.GO_MODULE,
    TemplateKind.MAKEFILE,
    TemplateKind.DOCKERFILE,
)


class TemplateRenderer:
    """Materialises plugin artifacts for a model from the shared dictionary."""

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self.templates_dir = templates_dir
        self.logger = logger or get_logger("rendering")
        self._env = self._create_env(templates_dir)

    def render_text(self, kind: TemplateKind, dictionary: Dictionary) -> str:
        """Return the rendered text for ``kind`` without touching the filesystem."""
        try:
            template = self._env.get_template(kind.template_name)
            return template.render(**dictionary.as_context())
        except (TemplateError, OSError) as exc:
            raise RenderError(f"Unable to render template {kind.template_name}", cause=exc) from exc

    def render(self, kind: TemplateKind, dictionary: Dictionary, model_path: Path) -> Path:
        """Render ``kind`` into its destination under ``model_path``, overwriting it."""
        output = kind.output_path(model_path)
        self.logger.info("Generating %s '%s'", kind.description, output)
        content = self.render_text(kind, dictionary)
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise RenderError(f"Unable to write {output}", cause=exc) from exc
        return output

    def render_all(
        self,
        dictionary: Dictionary,
        model_path: Path,
        kinds: Optional[Sequence[TemplateKind]] = None,
    ) -> List[Path]:
        return [self.render(kind, dictionary, model_path) for kind in (kinds or PLUGIN_ARTIFACTS)]

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(DEFAULT_TEMPLATES_DIR))
        # ensure uniqueness preserving order
        ordered = list(dict.fromkeys(directories))
        loader = FileSystemLoader(ordered)
        return Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )


__all__ = ["DEFAULT_TEMPLATES_DIR", "PLUGIN_ARTIFACTS", "TemplateKind", "TemplateRenderer"]
