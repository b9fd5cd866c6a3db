"""Tracker module for extracting and reconciling module dependencies."""

from .diagnostics import Diagnostics, ErrorLog
from .errors import HostGraphError, TrackerError
from .extraction import ExtractionFailure, build_record, run_isolated
from .ignore import IgnorePolicy
from .plugin import DependencyTracker, TrackerOptions
from .reconciler import reconcile_pass

__all__ = [
    "Diagnostics",
    "ErrorLog",
    "HostGraphError",
    "TrackerError",
    "ExtractionFailure",
    "build_record",
    "run_isolated",
    "IgnorePolicy",
    "DependencyTracker",
    "TrackerOptions",
    "reconcile_pass",
]
