"""
Exceptions raised by the Synapse matching engine.
"""


class SynapseError(Exception):
    """Base class for all matching engine errors."""


class RepositoryError(SynapseError):
    """
    Raised when a repository read or write fails.

    The enclosing compute/replace call aborts and no partial result is
    returned to the caller.
    """

    def __init__(self, operation: str, message: str | None = None):
        self.operation = operation
        super().__init__(message or f"Repository operation '{operation}' failed")


class ComputationCancelled(SynapseError):
    """Raised when the caller cancels a computation before it completes."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation} was cancelled")


__all__ = ["SynapseError", "RepositoryError", "ComputationCancelled"]
