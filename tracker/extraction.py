"""Per-module extraction of dependency and used-by sets."""

import logging
from dataclasses import dataclass
from typing import Callable, FrozenSet, Iterable, Optional, Set

from graph.model import Connection, DependencyRecord, GraphView, ModuleId, ModuleNode
from .diagnostics import Diagnostics
from .ignore import IgnorePolicy

logger = logging.getLogger(__name__)

DEPENDENCIES = "dependencies"
USED_BY = "usedBy"

_DIRECTION_LABELS = {
    DEPENDENCIES: "Error extracting dependencies",
    USED_BY: "Error extracting used by",
}


@dataclass(frozen=True)
class ExtractionFailure:
    """A failure while walking one direction of a module's connections."""
    module_id: ModuleId
    direction: str
    cause: BaseException

    @property
    def context(self) -> str:
        return f"{_DIRECTION_LABELS[self.direction]} ({self.module_id})"


def resolve_module_id(node: Optional[ModuleNode]) -> Optional[ModuleId]:
    """Return the backing file path of ``node``, or None if it has none."""
    if node is None:
        return None
    return getattr(node, "resource", None) or None


def _collect(
    candidates: Iterable[Optional[ModuleNode]],
    policy: IgnorePolicy,
) -> FrozenSet[ModuleId]:
    found: Set[ModuleId] = set()
    for candidate in candidates:
        module_id = resolve_module_id(candidate)
        if module_id is None or policy.should_ignore(module_id):
            continue
        found.add(module_id)
    return frozenset(found)


def extract_dependencies(
    node: ModuleNode,
    graph: Optional[GraphView],
    policy: IgnorePolicy,
) -> FrozenSet[ModuleId]:
    """Files ``node`` references, minus unresolvable and ignored ones."""
    if graph is None:
        return frozenset()
    connections: Iterable[Connection] = graph.outgoing_connections(node)
    return _collect((c.module for c in connections), policy)


def extract_used_by(
    node: ModuleNode,
    graph: Optional[GraphView],
    policy: IgnorePolicy,
) -> FrozenSet[ModuleId]:
    """Files referencing ``node``, minus unresolvable and ignored ones."""
    if graph is None:
        return frozenset()
    connections: Iterable[Connection] = graph.incoming_connections(node)
    return _collect((c.origin_module for c in connections), policy)


def run_isolated(
    work: Callable[[], FrozenSet[ModuleId]],
    module_id: ModuleId,
    direction: str,
    diagnostics: Diagnostics,
) -> FrozenSet[ModuleId]:
    """
    Run one direction of extraction, degrading any failure to an empty set.

    The failure is forwarded to ``diagnostics`` with a context label and
    never propagates, so one bad module cannot abort the pass.

    Args:
        work: Zero-argument callable producing the set of ids.
        module_id: The module being extracted, for the context label.
        direction: ``DEPENDENCIES`` or ``USED_BY``.
        diagnostics: Sink for the failure.

    Returns:
        The extracted set, or an empty set if ``work`` raised.
    """
    try:
        return work()
    except Exception as exc:
        failure = ExtractionFailure(module_id=module_id, direction=direction, cause=exc)
        logger.warning("%s: %s", failure.context, exc)
        diagnostics.record(failure.context, exc)
        return frozenset()


def build_record(
    node: ModuleNode,
    graph: Optional[GraphView],
    policy: IgnorePolicy,
    diagnostics: Diagnostics,
) -> Optional[DependencyRecord]:
    """
    Build the dependency record for one module node.

    Returns:
        The record, or None if the node has no backing file or is ignored.
    """
    module_id = resolve_module_id(node)
    if module_id is None:
        return None
    if policy.should_ignore(module_id):
        return None

    dependencies = run_isolated(
        lambda: extract_dependencies(node, graph, policy),
        module_id,
        DEPENDENCIES,
        diagnostics,
    )
    used_by = run_isolated(
        lambda: extract_used_by(node, graph, policy),
        module_id,
        USED_BY,
        diagnostics,
    )
    return DependencyRecord(file=module_id, dependencies=dependencies, used_by=used_by)
