"""Plugin artifact rendering."""

from .renderer import TemplateKind, TemplateRenderer

__all__ = ["TemplateKind", "TemplateRenderer"]
