"""
Export job status lifecycle.

    pending -> processing -> completed
                          -> failed

completed and failed are terminal. completed_at is derived here: it is
stamped when a job enters a terminal status and never cleared afterwards.
Progress, error and output fields may still be patched on a terminal job.
"""

import logging
from datetime import datetime
from typing import Optional

from proedit.core.errors import InvalidTransitionError
from proedit.schemas import ExportJob, ExportJobPatch, TERMINAL_STATUSES

from .patching import merge_patch

logger = logging.getLogger(__name__)


def initial_completed_at(status: str, now: datetime) -> Optional[datetime]:
    """completed_at for a job created directly in ``status``."""
    return now if status in TERMINAL_STATUSES else None


def apply_export_patch(
    job: ExportJob,
    patch: ExportJobPatch,
    now: datetime,
    strict: bool = False,
) -> ExportJob:
    """
    Merge ``patch`` into ``job`` and derive completed_at.

    Args:
        job: Currently stored job
        patch: Caller's partial update
        now: Current clock reading
        strict: Reject moving a terminal job back to pending/processing

    Returns:
        The updated job

    Raises:
        InvalidTransitionError: In strict mode, for terminal -> non-terminal
    """
    target = patch.status if "status" in patch.model_fields_set else None

    if strict and target is not None and job.is_terminal and target not in TERMINAL_STATUSES:
        raise InvalidTransitionError(job.id, job.status, target)

    updated = merge_patch(job, patch)

    if target in TERMINAL_STATUSES and (not job.is_terminal or job.completed_at is None):
        updated.completed_at = now
        logger.info(f"Export job {job.id} finished with status {target}")
    elif target is not None and target != job.status:
        logger.debug(f"Export job {job.id}: {job.status} -> {target}")

    return updated
