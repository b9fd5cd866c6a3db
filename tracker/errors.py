"""Exceptions raised by the dependency tracker."""


class TrackerError(Exception):
    """Base class for tracker errors."""


class HostGraphError(TrackerError):
    """The host did not honour its side of the graph contract."""
