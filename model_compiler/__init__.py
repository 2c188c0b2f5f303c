"""Compile YANG model directories into config model plugins."""

from .errors import CompileError
from .orchestrator import CompileResult, ModelCompiler

__all__ = ["CompileError", "CompileResult", "ModelCompiler"]
