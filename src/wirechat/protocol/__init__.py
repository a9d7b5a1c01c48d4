"""Server payload scanning and presentation."""

from .dispatch import ResponseKind, classify, render_response
from .tags import extract, iter_tag_values, section, trim

__all__ = ["ResponseKind", "classify", "extract", "iter_tag_values", "render_response", "section", "trim"]
