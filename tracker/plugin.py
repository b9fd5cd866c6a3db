"""Dependency tracker hooked into a host's "compilation finished" signal."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Tuple, Union

from exporters.json_exporter import DEFAULT_SNAPSHOT_FILE, write_snapshot
from graph.model import EMPTY_SNAPSHOT, CompilationView, DependencyRecord, ModuleId, Snapshot
from .diagnostics import DEFAULT_ERROR_LOG, Diagnostics, ErrorLog
from .ignore import IgnorePolicy
from .reconciler import reconcile_pass

logger = logging.getLogger(__name__)

PLUGIN_NAME = "DependencyTracker"
DEFAULT_PERSIST_MODE = "development"

SnapshotWriter = Callable[[Snapshot, Union[str, Path]], object]


@dataclass(frozen=True)
class TrackerOptions:
    """
    Tracker configuration, fixed for the tracker's lifetime.

    Attributes:
        ignore_patterns: Glob patterns of files to leave out.
        snapshot_path: Where the snapshot is written when persisting.
        error_log_path: Where extraction failures are appended.
        persist_mode: Build mode that triggers persistence; None disables it.
    """
    ignore_patterns: Tuple[str, ...] = ()
    snapshot_path: Union[str, Path] = DEFAULT_SNAPSHOT_FILE
    error_log_path: Union[str, Path] = DEFAULT_ERROR_LOG
    persist_mode: Optional[str] = DEFAULT_PERSIST_MODE

    def should_persist(self, mode: Optional[str]) -> bool:
        return self.persist_mode is not None and mode == self.persist_mode


class DependencyTracker:
    """
    Keeps a per-pass snapshot of which files depend on which.

    Every call to ``after_compile`` rebuilds the snapshot from scratch and
    swaps it in with a single assignment, so ``get_snapshot`` always returns
    either the previous pass or the new one in full.
    """

    def __init__(
        self,
        options: Optional[TrackerOptions] = None,
        diagnostics: Optional[Diagnostics] = None,
        writer: Optional[SnapshotWriter] = None,
    ):
        self.options = options or TrackerOptions()
        self.policy = IgnorePolicy(self.options.ignore_patterns)
        self.diagnostics = diagnostics or ErrorLog(self.options.error_log_path)
        self._writer = writer or write_snapshot
        self._snapshot: Snapshot = EMPTY_SNAPSHOT

    def apply(self, compiler) -> None:
        """
        Register with a host compiler.

        The compiler must expose ``hooks.after_compile.tap(name, callback)``;
        the callback is called with the finished compilation. The build mode
        is read from ``compiler.options.mode`` each time the hook fires, so
        a mode changed between passes is honoured.
        """
        def on_after_compile(compilation: CompilationView) -> Snapshot:
            mode = getattr(getattr(compiler, "options", None), "mode", None)
            return self.after_compile(compilation, mode)

        compiler.hooks.after_compile.tap(PLUGIN_NAME, on_after_compile)

    def after_compile(self, compilation: CompilationView, mode: Optional[str] = None) -> Snapshot:
        """
        Rebuild the snapshot for a finished pass and persist it if required.

        Raises:
            HostGraphError: If the compilation has no module graph.
        """
        snapshot = reconcile_pass(compilation, self.policy, self.diagnostics)
        self._snapshot = snapshot

        if self.options.should_persist(mode):
            self._writer(snapshot, self.options.snapshot_path)
        return snapshot

    def get_snapshot(self) -> Snapshot:
        """Return the snapshot of the last completed pass."""
        return self._snapshot

    def get_record(self, module_id: ModuleId) -> Optional[DependencyRecord]:
        return self._snapshot.get(module_id)

    def __repr__(self) -> str:
        return f"DependencyTracker(records={len(self._snapshot)}, policy={self.policy!r})"
