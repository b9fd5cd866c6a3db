"""In-memory module graph that plays the host's role for the tracker."""

from typing import Dict, Iterator, List, Optional

from .model import Connection, ModuleNode


class ModuleGraph:
    """
    A directed multigraph of modules, as a build host would report it.

    Nodes are ``ModuleNode`` objects keyed by identifier, and each call to
    ``add_connection`` records one edge, so repeated imports between the
    same pair of modules show up as repeated connections. The graph serves
    as both the ``CompilationView`` (``modules`` / ``module_graph``) and
    the ``GraphView`` of a finished pass.
    """

    def __init__(self):
        self._nodes: Dict[str, ModuleNode] = {}
        self._outgoing: Dict[str, List[Connection]] = {}
        self._incoming: Dict[str, List[Connection]] = {}

    @property
    def modules(self) -> List[ModuleNode]:
        """Return all modules in insertion order."""
        return list(self._nodes.values())

    @property
    def module_graph(self) -> "ModuleGraph":
        return self

    def add_module(self, identifier: str, resource: Optional[str] = None) -> ModuleNode:
        """
        Add a module to the graph, replacing any module with the same identifier.

        Args:
            identifier: Host-unique module name.
            resource: Backing file path, or None for virtual modules.

        Returns:
            The stored node.
        """
        node = ModuleNode(identifier=identifier, resource=resource)
        self._nodes[identifier] = node
        self._outgoing.setdefault(identifier, [])
        self._incoming.setdefault(identifier, [])
        return node

    def get_module(self, identifier: str) -> Optional[ModuleNode]:
        return self._nodes.get(identifier)

    def add_connection(self, origin: str, target: str) -> Connection:
        """
        Record that ``origin`` references ``target``.

        Both modules must already exist.

        Raises:
            KeyError: If either identifier is unknown.
        """
        connection = Connection(origin_module=self._nodes[origin], module=self._nodes[target])
        self._outgoing[origin].append(connection)
        self._incoming[target].append(connection)
        return connection

    def outgoing_connections(self, node: ModuleNode) -> List[Connection]:
        """Get the connections from ``node`` to the modules it references."""
        return list(self._outgoing.get(node.identifier, []))

    def incoming_connections(self, node: ModuleNode) -> List[Connection]:
        """Get the connections from modules that reference ``node``."""
        return list(self._incoming.get(node.identifier, []))

    def iter_connections(self) -> Iterator[Connection]:
        """Iterate over all connections in insertion order."""
        for connections in self._outgoing.values():
            yield from connections

    def __len__(self) -> int:
        """Return the number of modules in the graph."""
        return len(self._nodes)

    def __contains__(self, identifier: str) -> bool:
        return identifier in self._nodes

    def __repr__(self) -> str:
        edge_count = sum(1 for _ in self.iter_connections())
        return f"ModuleGraph(modules={len(self._nodes)}, connections={edge_count})"
