"""Mermaid flowchart exporter for dependency snapshots."""

import re
from pathlib import Path
from typing import Dict, List, Optional, Set

from graph.model import ModuleId, Snapshot
from .ascii_exporter import get_display_path


def to_mermaid(
    snapshot: Snapshot,
    orientation: str = "LR",
    base: Optional[Path] = None,
    show_all: bool = False,
) -> str:
    """
    Convert a snapshot to Mermaid flowchart syntax.

    Dependencies that have no record of their own are drawn with a dashed
    border.

    Args:
        snapshot: The snapshot to export.
        orientation: Flowchart orientation (LR, TD, TB, RL, BT).
        base: Optional base path for relative path display.
        show_all: If True, include modules with no connections.

    Returns:
        Mermaid flowchart string.
    """
    lines = [f"flowchart {orientation}"]

    tracked: Set[ModuleId] = set()
    for module_id, record in snapshot.items():
        if show_all or record.dependencies or record.used_by:
            tracked.add(module_id)

    untracked: Set[ModuleId] = set()
    for module_id in tracked:
        untracked.update(d for d in snapshot[module_id].dependencies if d not in snapshot)

    node_ids = _assign_ids(sorted(tracked | untracked), base)

    for module_id in sorted(tracked):
        label = _escape_label(get_display_path(module_id, base))
        lines.append(f'    {node_ids[module_id]}["{label}"]')

    if untracked:
        lines.append("")
        lines.append("    %% Untracked dependencies")
        for module_id in sorted(untracked):
            node_id = node_ids[module_id]
            label = _escape_label(get_display_path(module_id, base))
            lines.append(f'    {node_id}["{label} [UNTRACKED]"]')
            lines.append(f"    style {node_id} stroke:#ff0000,stroke-dasharray: 5 5")

    lines.append("")
    for module_id in sorted(tracked):
        for dependency in sorted(snapshot[module_id].dependencies):
            lines.append(f"    {node_ids[module_id]} --> {node_ids[dependency]}")

    return "\n".join(lines)


def _assign_ids(module_ids: List[ModuleId], base: Optional[Path]) -> Dict[ModuleId, str]:
    """Give every module a unique Mermaid node ID."""
    assigned: Dict[ModuleId, str] = {}
    used: Set[str] = set()
    for module_id in module_ids:
        candidate = _sanitize_id(get_display_path(module_id, base))
        node_id = candidate
        suffix = 2
        while node_id in used:
            node_id = f"{candidate}_{suffix}"
            suffix += 1
        used.add(node_id)
        assigned[module_id] = node_id
    return assigned


def _sanitize_id(value: str) -> str:
    """
    Sanitize a string to be a valid Mermaid ID.

    Mermaid IDs can only contain letters, digits, and underscores.
    """
    # Replace path separators and dots with underscores
    sanitized = re.sub(r"[/\\.\-]", "_", value)
    sanitized = re.sub(r"[^a-zA-Z0-9_]", "", sanitized)
    # Ensure it starts with a letter
    if sanitized and not sanitized[0].isalpha():
        sanitized = "n_" + sanitized
    return sanitized or "unknown"


def _escape_label(label: str) -> str:
    """Escape double quotes, which would end a quoted Mermaid label."""
    return label.replace('"', "#quot;")
