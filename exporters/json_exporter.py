"""JSON exporter for dependency snapshots (machine-friendly format)."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from graph.model import Snapshot

logger = logging.getLogger(__name__)

DEFAULT_SNAPSHOT_FILE = "dependency-info.json"


def snapshot_to_dict(snapshot: Snapshot) -> Dict[str, Dict[str, Any]]:
    """Convert a snapshot to plain dicts, ordered by module id."""
    return {module_id: snapshot[module_id].to_dict() for module_id in sorted(snapshot)}


def snapshot_to_json(snapshot: Snapshot, indent: int = 2) -> str:
    """
    Convert a snapshot to JSON.

    Each key is a module id mapping to ``{"file", "dependencies", "usedBy"}``.
    Keys and set members are sorted so equal snapshots serialize equally.

    Args:
        snapshot: The snapshot to export.
        indent: JSON indentation level.

    Returns:
        JSON string representation of the snapshot.
    """
    return json.dumps(snapshot_to_dict(snapshot), indent=indent)


def write_snapshot(snapshot: Snapshot, path: Union[str, Path] = DEFAULT_SNAPSHOT_FILE) -> Path:
    """
    Write ``snapshot`` as JSON, replacing any previous file.

    A relative path is resolved against the current working directory.

    Returns:
        The absolute path written.
    """
    output_path = Path(path).resolve()
    output_path.write_text(snapshot_to_json(snapshot), encoding="utf-8")
    logger.info("Wrote %d records to %s", len(snapshot), output_path)
    return output_path
