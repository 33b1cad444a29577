"""
Error types raised by the entity store.

A missing entity is not an error: repositories return None / False for it.
These exceptions cover the conditions a caller has to handle differently.
"""

from typing import Optional


class ProEditError(Exception):
    """Base exception for the ProEdit backend."""
    pass


class DanglingReferenceError(ProEditError):
    """A create or update pointed at a parent or asset that does not exist."""

    def __init__(self, kind: str, field: str, ref_id: str):
        self.kind = kind
        self.field = field
        self.ref_id = ref_id
        super().__init__(f"{kind}.{field} references missing entity {ref_id!r}")


class InvalidTransitionError(ProEditError):
    """An export job status change that strict mode does not allow."""

    def __init__(self, job_id: str, from_status: str, to_status: str):
        self.job_id = job_id
        self.from_status = from_status
        self.to_status = to_status
        super().__init__(
            f"Export job {job_id} cannot move from {from_status!r} to {to_status!r}"
        )


class StorageError(ProEditError):
    """Unexpected failure of the storage backend."""

    def __init__(self, message: str, operation: Optional[str] = None):
        self.operation = operation
        super().__init__(message)


class InvalidEntityError(ProEditError):
    """An update would leave a stored entity in a state its create payload forbids."""

    def __init__(self, kind: str, field: str, message: str):
        self.kind = kind
        self.field = field
        super().__init__(message)
