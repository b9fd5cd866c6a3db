"""Rebuilds the whole snapshot from one finished compilation pass."""

import logging
from typing import Dict

from graph.model import CompilationView, DependencyRecord, ModuleId, Snapshot, freeze_snapshot
from .diagnostics import Diagnostics
from .errors import HostGraphError
from .extraction import build_record
from .ignore import IgnorePolicy

logger = logging.getLogger(__name__)


def reconcile_pass(
    compilation: CompilationView,
    policy: IgnorePolicy,
    diagnostics: Diagnostics,
) -> Snapshot:
    """
    Build a fresh snapshot covering every tracked module of the pass.

    Modules without a backing file and ignored modules are left out. A
    module seen twice keeps its last record. Failures inside one module's
    extraction are isolated; failures of the host graph itself propagate.

    Args:
        compilation: The finished pass.
        policy: Ignore policy applied to keys and to both directions.
        diagnostics: Sink for per-module extraction failures.

    Returns:
        A new immutable snapshot.

    Raises:
        HostGraphError: If the compilation exposes no module graph.
    """
    graph = compilation.module_graph
    if graph is None:
        raise HostGraphError("compilation exposes no module graph")

    records: Dict[ModuleId, DependencyRecord] = {}
    skipped = 0
    for node in compilation.modules:
        record = build_record(node, graph, policy, diagnostics)
        if record is None:
            skipped += 1
            continue
        records[record.file] = record

    logger.info("Reconciled %d modules (%d skipped)", len(records), skipped)
    return freeze_snapshot(records)
