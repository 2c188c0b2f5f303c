"""Adapter for pyang lint and tree output."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

from ..errors import GenerationError, LintError, Stage
from ..logging import get_logger
from ..models import ModuleDescriptor
from .runner import SubprocessToolRunner, ToolRunner, format_command

YANG_DIR = "yang"

LINT_FLAGS = ("--lint", "--lint-ensure-hyphenated-names", "-W", "error")


class PyangTool:
    """Lints the model's YANG modules and renders its schema tree."""

    def __init__(
        self,
        *,
        executable: str = "pyang",
        runner: ToolRunner | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.executable = executable
        self.runner = runner or SubprocessToolRunner()
        self.logger = logger or get_logger("tools.pyang")

    @staticmethod
    def module_files(model_path: Path, modules: Sequence[ModuleDescriptor]) -> List[str]:
        """Return the root YANG file of every module, in metadata order."""
        yang_dir = Path(model_path) / YANG_DIR
        return [str(yang_dir / module.yang_file) for module in modules]

    def lint_args(self, model_path: Path, modules: Sequence[ModuleDescriptor]) -> List[str]:
        return [*LINT_FLAGS, *self.module_files(model_path, modules)]

    def tree_args(
        self,
        model_path: Path,
        tree_file: Path,
        modules: Sequence[ModuleDescriptor],
    ) -> List[str]:
        yang_dir = Path(model_path) / YANG_DIR
        args = ["-f", "tree", "-p", str(yang_dir), "-o", str(tree_file)]
        args.extend(self.module_files(model_path, modules))
        return args

    def lint(self, model_path: Path, modules: Sequence[ModuleDescriptor]) -> None:
        """Run pyang in strict lint mode; raises LintError on any issue."""
        self.logger.info("Linting YANG files")
        args = self.lint_args(model_path, modules)
        try:
            status = self._execute(args)
        except OSError as exc:
            raise LintError(f"Unable to run '{self.executable}'", cause=exc) from exc
        if status != 0:
            raise LintError(f"{self.executable} lint exited with status {status}")

    def generate_tree(
        self,
        model_path: Path,
        model_name: str,
        modules: Sequence[ModuleDescriptor],
    ) -> Path:
        """Write ``<model_name>.tree`` into the model directory."""
        tree_file = Path(model_path) / f"{model_name}.tree"
        self.logger.info("Generating YANG tree '%s'", tree_file)
        args = self.tree_args(model_path, tree_file, modules)
        try:
            status = self._execute(args)
        except OSError as exc:
            raise GenerationError(
                f"Unable to run '{self.executable}'", cause=exc, stage=Stage.GENERATE_TREE
            ) from exc
        if status != 0:
            raise GenerationError(
                f"{self.executable} tree output exited with status {status}",
                stage=Stage.GENERATE_TREE,
            )
        return tree_file

    def _execute(self, args: Sequence[str]) -> int:
        self.logger.info("Executing %s", format_command(self.executable, args))
        return self.runner.run(self.executable, args, None)


__all__ = ["LINT_FLAGS", "PyangTool", "YANG_DIR"]
