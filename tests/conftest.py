"""Shared fixtures: synthetic host graphs and collaborator fakes."""

import pytest

from graph.module_graph import ModuleGraph


A = "/src/a.js"
B = "/src/b.js"
C = "/src/c.js"


class RecordingDiagnostics:
    """Diagnostics fake that keeps every recorded failure."""

    def __init__(self):
        self.calls = []

    def record(self, context, cause):
        self.calls.append((context, cause))


class FailingGraph:
    """Wraps a ModuleGraph and raises while walking selected modules."""

    def __init__(self, graph, fail_outgoing=(), fail_incoming=()):
        self._graph = graph
        self._fail_outgoing = set(fail_outgoing)
        self._fail_incoming = set(fail_incoming)

    @property
    def modules(self):
        return self._graph.modules

    @property
    def module_graph(self):
        return self

    def outgoing_connections(self, node):
        if node.identifier in self._fail_outgoing:
            raise RuntimeError(f"outgoing walk failed for {node.identifier}")
        return self._graph.outgoing_connections(node)

    def incoming_connections(self, node):
        if node.identifier in self._fail_incoming:
            raise RuntimeError(f"incoming walk failed for {node.identifier}")
        return self._graph.incoming_connections(node)


@pytest.fixture
def diagnostics():
    return RecordingDiagnostics()


@pytest.fixture
def abc_graph():
    """A -> B, C -> B."""
    graph = ModuleGraph()
    graph.add_module("a", A)
    graph.add_module("b", B)
    graph.add_module("c", C)
    graph.add_connection("a", "b")
    graph.add_connection("c", "b")
    return graph


@pytest.fixture
def failing_graph():
    return FailingGraph
