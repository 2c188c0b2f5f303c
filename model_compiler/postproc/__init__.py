"""Post-processing of generated files."""

from .header import GENERATED_HEADER, insert_header_prefix

__all__ = ["GENERATED_HEADER", "insert_header_prefix"]
