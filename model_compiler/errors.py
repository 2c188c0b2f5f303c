"""Error taxonomy for the compilation pipeline."""

from __future__ import annotations

from enum import Enum


class Stage(str, Enum):
    """Pipeline stages in execution order."""

    LOAD_METADATA = "load-metadata"
    RESOLVE_VERSION = "resolve-version"
    LINT = "lint"
    BUILD_DICTIONARY = "build-dictionary"
    GENERATE_BINDINGS = "generate-bindings"
    REWRITE_HEADER = "rewrite-header"
    GENERATE_TREE = "generate-tree"
    RENDER_TEMPLATES = "render-templates"


class CompileError(RuntimeError):
    """Raised when a pipeline stage fails; carries the stage and underlying cause."""

    stage: Stage = Stage.LOAD_METADATA

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause

    def __str__(self) -> str:
        message = super().__str__()
        if self.cause is not None:
            return f"{message}: {self.cause}"
        return message


class ManifestError(CompileError):
    """The model metadata file is missing or malformed."""

    stage = Stage.LOAD_METADATA


class VersionReadError(CompileError):
    """The VERSION file could not be read. Never aborts a compile."""

    stage = Stage.RESOLVE_VERSION


class LintError(CompileError):
    """pyang reported schema issues or could not be started."""

    stage = Stage.LINT


class GenerationError(CompileError):
    """An external generator (bindings or tree) failed."""

    stage = Stage.GENERATE_BINDINGS

    def __init__(
        self,
        message: str,
        *,
        cause: BaseException | None = None,
        stage: Stage | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        if stage is not None:
            self.stage = stage


class RenderError(CompileError):
    """A plugin artifact template could not be read, rendered or written."""

    stage = Stage.RENDER_TEMPLATES


class HeaderRewriteError(CompileError):
    """The generated bindings file could not be prefixed with the marker header."""

    stage = Stage.REWRITE_HEADER


__all__ = [
    "CompileError",
    "GenerationError",
    "HeaderRewriteError",
    "LintError",
    "ManifestError",
    "RenderError",
    "Stage",
    "VersionReadError",
]
