"""
Storage backends for the entity store.

``MemoryBackend`` keeps everything in process; ``SqlBackend`` persists the
five entity tables through SQLAlchemy.
"""

from .base import Backend, Transaction
from .memory import MemoryBackend, MemoryTransaction
from .sql import SqlBackend, SqlTransaction

__all__ = [
    "Backend",
    "Transaction",
    "MemoryBackend",
    "MemoryTransaction",
    "SqlBackend",
    "SqlTransaction",
]
