"""Adapters for the external YANG tools."""

from .generator import BindingGenerator
from .pyang import PyangTool
from .runner import SubprocessToolRunner, ToolRunner

__all__ = ["BindingGenerator", "PyangTool", "SubprocessToolRunner", "ToolRunner"]
