"""Operational use cases."""

from .health import CountsItem, HealthResponse, HealthUseCase
from .reset import ResetResponse, ResetUseCase

__all__ = [
    "CountsItem",
    "HealthResponse",
    "HealthUseCase",
    "ResetResponse",
    "ResetUseCase",
]
