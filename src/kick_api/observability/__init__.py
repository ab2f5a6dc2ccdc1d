"""Observabilidade: correlation_id propagado entre logs."""

from .correlation import get_correlation_id, reset_correlation_id, set_correlation_id

__all__ = [
    "get_correlation_id",
    "reset_correlation_id",
    "set_correlation_id",
]
