"""Custom exceptions for mind2doc."""


class Mind2DocError(Exception):
    """Base exception for mind2doc operations."""


class SnapshotError(Mind2DocError, ValueError):
    """Mind map snapshot could not be loaded."""


class MalformedSnapshotError(SnapshotError):
    """Snapshot breaks the tree invariants (duplicate ids, shared nodes, cycles)."""


class UnknownFormatError(Mind2DocError, ValueError):
    """Requested export format is not registered."""


class ConfigError(Mind2DocError, ValueError):
    """Config file could not be read or validated."""
