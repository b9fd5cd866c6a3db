"""Load a host graph description from a YAML or JSON file."""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Tuple

import yaml

from graph.module_graph import ModuleGraph
from tracker.errors import HostGraphError

logger = logging.getLogger(__name__)


def parse_description(file_path: Path) -> Any:
    """
    Parse a graph description file.

    ``.json`` files are read as JSON; everything else goes through the YAML
    loader, which also accepts JSON documents.

    Raises:
        HostGraphError: If the file cannot be read or parsed.
    """
    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise HostGraphError(f"cannot read {file_path}: {e}") from e

    try:
        if file_path.suffix.lower() == ".json":
            return json.loads(content)
        return yaml.safe_load(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise HostGraphError(f"cannot parse {file_path}: {e}") from e


def build_module_graph(data: Any) -> Tuple[ModuleGraph, Optional[str]]:
    """
    Build a ``ModuleGraph`` from a parsed description.

    Expected shape::

        mode: development
        modules:
          - id: app
            resource: /src/app.js
            dependencies: [util, util, runtime]
          - id: runtime          # virtual, no resource

    Dependencies may name modules declared later and may repeat.

    Returns:
        The graph and the build mode (None if not given).

    Raises:
        HostGraphError: On a malformed description or an unknown module id.
    """
    if not isinstance(data, dict):
        raise HostGraphError("graph description must be a mapping")

    entries = data.get("modules") or []
    if not isinstance(entries, list):
        raise HostGraphError("'modules' must be a list")

    graph = ModuleGraph()
    for entry in entries:
        if not isinstance(entry, dict) or "id" not in entry:
            raise HostGraphError(f"module entry without an id: {entry!r}")
        resource = entry.get("resource")
        if resource is not None and not isinstance(resource, str):
            raise HostGraphError(
                f"module {entry['id']!r} has a non-string resource: {resource!r}"
            )
        graph.add_module(str(entry["id"]), resource)

    for entry in entries:
        origin = str(entry["id"])
        for target in entry.get("dependencies") or []:
            target = str(target)
            if target not in graph:
                raise HostGraphError(f"module {origin!r} depends on unknown module {target!r}")
            graph.add_connection(origin, target)

    mode = data.get("mode")
    logger.debug("Loaded %r (mode=%s)", graph, mode)
    return graph, (str(mode) if mode is not None else None)


def load_compilation(file_path: Path) -> Tuple[ModuleGraph, Optional[str]]:
    """Read ``file_path`` and return the described graph and build mode."""
    return build_module_graph(parse_description(file_path))
