"""Pipeline orchestration for compiling a config model directory."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .config import CompilerConfig
from .errors import CompileError, Stage, VersionReadError
from .logging import get_logger, stage_logger
from .metadata import load_model
from .models import Dictionary, MetaData, ModelInfo, PluginVersion
from .rendering import TemplateRenderer
from .tools import BindingGenerator, PyangTool, SubprocessToolRunner, ToolRunner
from .version import resolve_plugin_version


@dataclass
class CompileResult:
    """Outcome of a successful compile."""

    path: Path
    dictionary: Dictionary
    plugin_version: PluginVersion
    bindings_file: Path
    tree_file: Path
    artifacts: List[Path] = field(default_factory=list)

    @property
    def warnings(self) -> List[VersionReadError]:
        error = self.plugin_version.error
        return [error] if isinstance(error, VersionReadError) else []


@dataclass
class CompileSession:
    """State accumulated by a single compile; discarded when it returns."""

    path: Path
    metadata: Optional[MetaData] = None
    model_info: Optional[ModelInfo] = None
    plugin_version: PluginVersion = field(default_factory=PluginVersion)
    dictionary: Optional[Dictionary] = None


class ModelCompiler:
    """Compiles a config model directory into a model plugin.

    Stages run strictly in order and the first failure aborts the compile.
    Files written by earlier stages are left in place.
    """

    def __init__(
        self,
        config: CompilerConfig | None = None,
        *,
        runner: ToolRunner | None = None,
        pyang: PyangTool | None = None,
        generator: BindingGenerator | None = None,
        renderer: TemplateRenderer | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.logger = logger or get_logger("compiler")
        tool_runner = runner or SubprocessToolRunner()
        pyang_executable = config.tools.pyang if config else "pyang"
        generator_executable = config.tools.generator if config else "generator"
        package_name = config.package_name if config else "api"
        templates_dir = config.templates_dir if config else None

        self.pyang = pyang or PyangTool(
            executable=pyang_executable, runner=tool_runner, logger=self.logger
        )
        self.generator = generator or BindingGenerator(
            executable=generator_executable,
            package_name=package_name,
            runner=tool_runner,
            logger=self.logger,
        )
        self.renderer = renderer or TemplateRenderer(templates_dir, logger=self.logger)

    def compile(self, path: Path | str) -> CompileResult:
        """Compile the model at ``path``; raises a CompileError subclass on failure."""
        session = CompileSession(path=Path(path).expanduser().resolve())
        stage_logger(self.logger, Stage.LOAD_METADATA).info(
            "Compiling config model at '%s'", session.path
        )

        try:
            session.metadata, session.model_info = load_model(session.path)
        except CompileError as exc:
            self._log_failure(exc, "Unable to read model meta-data")
            raise

        version_log = stage_logger(self.logger, Stage.RESOLVE_VERSION)
        version_log.info("Resolving model plugin version")
        session.plugin_version = resolve_plugin_version(session.path)
        if session.plugin_version.defaulted:
            version_log.warning(
                "Unable to load model plugin version; defaulting to %s: %s",
                session.plugin_version.value,
                session.plugin_version.error,
            )

        metadata = session.metadata
        if metadata.lint_model:
            try:
                self.pyang.lint(session.path, metadata.modules)
            except CompileError as exc:
                self._log_failure(exc, "YANG files contain issues")
                raise

        stage_logger(self.logger, Stage.BUILD_DICTIONARY).info("Building template dictionary")
        session.dictionary = Dictionary.build(
            metadata, session.model_info, session.plugin_version.value
        )

        try:
            bindings_file = self.generator.generate(session.path)
        except CompileError as exc:
            self._log_failure(exc, "Unable to generate Golang bindings")
            raise

        try:
            tree_file = self.pyang.generate_tree(session.path, metadata.name, metadata.modules)
        except CompileError as exc:
            self._log_failure(exc, "Unable to generate YANG model tree")
            raise

        try:
            artifacts = self.renderer.render_all(session.dictionary, session.path)
        except CompileError as exc:
            self._log_failure(exc, "Unable to generate model plugin artifacts")
            raise

        self.logger.info("Compiled config model %s:%s", metadata.name, metadata.version)
        return CompileResult(
            path=session.path,
            dictionary=session.dictionary,
            plugin_version=session.plugin_version,
            bindings_file=bindings_file,
            tree_file=tree_file,
            artifacts=artifacts,
        )

    def _log_failure(self, exc: CompileError, message: str) -> None:
        stage_logger(self.logger, exc.stage).error("%s: %s", message, exc)


__all__ = ["CompileResult", "CompileSession", "ModelCompiler"]
