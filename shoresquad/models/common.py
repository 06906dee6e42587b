"""Common types and helpers shared across models."""

from datetime import UTC, datetime
from enum import StrEnum


class Phase(StrEnum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class ShoreSquadError(Exception):
    """Base class for errors raised by the core."""


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_now_iso() -> str:
    return utc_now().isoformat()
