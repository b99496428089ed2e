"""Kinds of write operations a validator set can be registered for."""

from enum import Enum


class OperationKind(str, Enum):
    """Write operations on the Series aggregate."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"

    def __str__(self) -> str:
        return self.value
