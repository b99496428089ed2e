"""Domain Enums - Constant values used across the domain."""

from .operation_kind import OperationKind

__all__ = ["OperationKind"]
