"""Host graph loading."""

from .loader import build_module_graph, load_compilation, parse_description

__all__ = [
    "build_module_graph",
    "load_compilation",
    "parse_description",
]
