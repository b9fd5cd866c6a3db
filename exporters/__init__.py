"""Exporters for converting snapshots to various output formats."""

from .mermaid_exporter import to_mermaid
from .ascii_exporter import to_ascii
from .json_exporter import snapshot_to_json, write_snapshot

__all__ = ["to_mermaid", "to_ascii", "snapshot_to_json", "write_snapshot"]
