"""Adapter for the ygot Go bindings generator."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Sequence

from ..errors import GenerationError
from ..logging import get_logger
from ..postproc.header import insert_header_prefix
from .pyang import YANG_DIR
from .runner import SubprocessToolRunner, ToolRunner, format_command

API_DIR = "api"
GENERATED_FILE = "generated.go"


class BindingGenerator:
    """Generates Go bindings for every file in the model's YANG directory."""

    def __init__(
        self,
        *,
        executable: str = "generator",
        package_name: str = "api",
        runner: ToolRunner | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.executable = executable
        self.package_name = package_name
        self.runner = runner or SubprocessToolRunner()
        self.logger = logger or get_logger("tools.generator")

    @staticmethod
    def output_file(model_path: Path) -> Path:
        return Path(model_path) / API_DIR / GENERATED_FILE

    @staticmethod
    def list_yang_entries(model_path: Path) -> List[str]:
        """Return the names of all entries in the YANG directory, sorted by name."""
        return sorted(os.listdir(Path(model_path) / YANG_DIR))

    def build_args(self, model_path: Path, entries: Sequence[str]) -> List[str]:
        model_path = Path(model_path)
        args = [
            f"-path={model_path / YANG_DIR}",
            f"-output_file={self.output_file(model_path)}",
            f"-package_name={self.package_name}",
            "-generate_fakeroot",
            "--include_descriptions",
        ]
        args.extend(entries)
        return args

    def generate(self, model_path: Path) -> Path:
        """Run the generator and stamp the output with the generated-code header.

        Header failures surface as HeaderRewriteError.
        """
        model_path = Path(model_path)
        api_file = self.output_file(model_path)
        api_file.parent.mkdir(parents=True, exist_ok=True)
        self.logger.info("Generating YANG bindings '%s'", api_file)

        try:
            entries = self.list_yang_entries(model_path)
        except OSError as exc:
            raise GenerationError(f"Unable to list {model_path / YANG_DIR}", cause=exc) from exc

        args = self.build_args(model_path, entries)
        self.logger.info("Executing %s", format_command(self.executable, args))
        try:
            status = self.runner.run(self.executable, args, None)
        except OSError as exc:
            raise GenerationError(f"Unable to run '{self.executable}'", cause=exc) from exc
        if status != 0:
            raise GenerationError(f"{self.executable} exited with status {status}")

        insert_header_prefix(api_file)
        return api_file


__all__ = ["API_DIR", "BindingGenerator", "GENERATED_FILE"]
