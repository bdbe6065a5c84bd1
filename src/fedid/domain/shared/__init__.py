"""Shared kernel: error codes, base exceptions and time helpers."""

from fedid.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    ErrorCode,
    RepositoryError,
    ValidationError,
)
from fedid.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "ConflictError",
    "DomainException",
    "ErrorCode",
    "RepositoryError",
    "ValidationError",
    "ensure_tz_aware",
    "utc_now",
]
