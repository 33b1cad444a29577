"""
Shared pieces of the entity schemas.
"""

from typing import ClassVar, FrozenSet

from pydantic import BaseModel


class PatchModel(BaseModel):
    """
    Base class for partial-update payloads.

    Every field is optional. Only fields the caller actually supplied
    (``model_fields_set``) are merged into the stored entity. An explicit
    ``None`` is honoured only for fields listed in ``NULLABLE_FIELDS``; for
    required attributes it is treated as "not supplied".
    """

    NULLABLE_FIELDS: ClassVar[FrozenSet[str]] = frozenset()

    def supplied_fields(self) -> list[str]:
        """Names of supplied fields, in declaration order."""
        return [name for name in type(self).model_fields if name in self.model_fields_set]
