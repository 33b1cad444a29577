# Core modules for ProEdit backend
from .clock import Clock, generate_uuid, utcnow
from .config import Settings, get_settings
from .errors import (
    DanglingReferenceError,
    InvalidEntityError,
    InvalidTransitionError,
    ProEditError,
    StorageError,
)
from .logging import configure_logging

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Clock
    "Clock",
    "generate_uuid",
    "utcnow",
    # Errors
    "ProEditError",
    "DanglingReferenceError",
    "InvalidEntityError",
    "InvalidTransitionError",
    "StorageError",
    # Logging
    "configure_logging",
]
