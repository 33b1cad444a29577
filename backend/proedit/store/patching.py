"""
Partial-update merge.
"""

import copy
from typing import Any, TypeVar

from pydantic import BaseModel

from proedit.schemas.base import PatchModel

E = TypeVar("E", bound=BaseModel)


def patch_changes(patch: PatchModel) -> dict[str, Any]:
    """
    Field values a patch actually applies.

    Fields the caller did not supply are skipped. A supplied ``None`` is kept
    only for nullable fields; ``{"name": null}`` does not blank a project name.
    """
    changes: dict[str, Any] = {}
    for name in patch.supplied_fields():
        value = getattr(patch, name)
        if value is None and name not in patch.NULLABLE_FIELDS:
            continue
        changes[name] = copy.deepcopy(value)
    return changes


def merge_patch(entity: E, patch: PatchModel) -> E:
    """Return a copy of ``entity`` with the patch's changes applied."""
    merged = entity.model_copy(deep=True)
    for name, value in patch_changes(patch).items():
        setattr(merged, name, value)
    return merged
