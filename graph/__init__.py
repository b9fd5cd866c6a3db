"""Module graph data model."""

from .model import (
    CompilationView,
    Connection,
    DependencyRecord,
    GraphView,
    ModuleId,
    ModuleNode,
    Snapshot,
)
from .module_graph import ModuleGraph

__all__ = [
    "CompilationView",
    "Connection",
    "DependencyRecord",
    "GraphView",
    "ModuleId",
    "ModuleNode",
    "ModuleGraph",
    "Snapshot",
]
