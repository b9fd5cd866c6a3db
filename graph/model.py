"""Data model shared by the host graph, the tracker and the exporters."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping, Optional, Protocol


# A module's identity is the absolute path of its backing file.
ModuleId = str


@dataclass(frozen=True)
class ModuleNode:
    """
    One compiled unit in the host's build graph.

    ``resource`` is the backing file path; virtual or generated modules
    have none.
    """
    identifier: str
    resource: Optional[str] = None


@dataclass(frozen=True)
class Connection:
    """A directed edge from ``origin_module`` (the referrer) to ``module``."""
    origin_module: Optional[ModuleNode]
    module: Optional[ModuleNode]


class GraphView(Protocol):
    """Read-only view of the host's connection graph."""

    def outgoing_connections(self, node: ModuleNode) -> Iterable[Connection]:
        """Connections whose origin is ``node`` (modules it depends on)."""
        ...

    def incoming_connections(self, node: ModuleNode) -> Iterable[Connection]:
        """Connections whose target is ``node`` (modules that depend on it)."""
        ...


class CompilationView(Protocol):
    """What the host exposes once a compilation pass has finished."""

    @property
    def modules(self) -> Iterable[ModuleNode]:
        ...

    @property
    def module_graph(self) -> Optional[GraphView]:
        ...


@dataclass(frozen=True)
class DependencyRecord:
    """
    Dependency information for one tracked file.

    Attributes:
        file: The module's id (absolute file path).
        dependencies: Files this module references.
        used_by: Files that reference this module.
    """
    file: ModuleId
    dependencies: FrozenSet[ModuleId] = field(default_factory=frozenset)
    used_by: FrozenSet[ModuleId] = field(default_factory=frozenset)

    def to_dict(self) -> dict:
        """Return a JSON-friendly dict with sorted members."""
        return {
            "file": self.file,
            "dependencies": sorted(self.dependencies),
            "usedBy": sorted(self.used_by),
        }


# Immutable mapping of ModuleId -> DependencyRecord for one completed pass.
Snapshot = Mapping[ModuleId, DependencyRecord]

EMPTY_SNAPSHOT: Snapshot = MappingProxyType({})


def freeze_snapshot(records: Mapping[ModuleId, DependencyRecord]) -> Snapshot:
    """Wrap a freshly built dict so callers cannot mutate it."""
    return MappingProxyType(dict(records))
