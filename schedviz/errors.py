from __future__ import annotations


class SchedulerError(Exception):
    """Base class for errors raised by schedviz."""


class UnknownAlgorithmError(SchedulerError, ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown algorithm '{name}'")
        self.name = name


class WorkloadError(SchedulerError, ValueError):
    """
    A process list failed validation at the import boundary: malformed file
    contents, missing fields or values the engine does not accept.
    """
