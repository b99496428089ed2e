"""Application interfaces - Port definitions for external services."""

from .clock import IClock

__all__ = ["IClock"]
