"""User-facing notification models."""

from dataclasses import dataclass
from enum import StrEnum


class NotificationLevel(StrEnum):
    SUCCESS = "success"
    INFO = "info"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    id: int
    message: str
    level: NotificationLevel
    created_at: str
    retryable: bool = False
