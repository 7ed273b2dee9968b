"""LogEvent record and run counters."""

from dataclasses import dataclass, field
from typing import Any

FIXED_FIELDS = ("timestamp", "level", "message")


@dataclass(frozen=True)
class LogEvent:
    timestamp: int
    level: str
    message: str
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Flatten back into a single JSON-ready mapping."""
        data = dict(self.extra)
        data.update(timestamp=self.timestamp, level=self.level, message=self.message)
        return data


@dataclass
class RunSummary:
    successful: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.successful + self.failed
