from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import ClassVar, List, Optional, Tuple


class MetricName(str, Enum):
    """Skill usage metrics exposed by the SMAPI metrics endpoint."""
    UNIQUE_CUSTOMERS = "uniqueCustomers"
    TOTAL_ENABLEMENTS = "totalEnablements"
    SUCCESSFUL_UTTERANCES = "successfulUtterances"
    FAILED_UTTERANCES = "failedUtterances"
    TOTAL_SESSIONS = "totalSessions"
    SUCCESSFUL_SESSIONS = "successfulSessions"
    INCOMPLETE_SESSIONS = "incompleteSessions"
    USER_ENDED_SESSIONS = "userEndedSessions"
    SKILL_ENDED_SESSIONS = "skillEndedSessions"

    @classmethod
    def supported(cls) -> List[str]:
        return [metric.value for metric in cls]


@dataclass(frozen=True)
class TimeWindow:
    """
    Value object for the query window of a metrics request.

    Timestamps are rendered with a literal "Z" suffix whether or not the
    underlying clock reading is UTC.
    """
    start: datetime
    end: datetime

    TIMESTAMP_FORMAT: ClassVar[str] = "%Y-%m-%dT%H:%M:%SZ"

    @classmethod
    def trailing(cls, days: int = 7, now: Optional[datetime] = None, use_utc: bool = False) -> "TimeWindow":
        """Build the window ending now and starting `days` days earlier."""
        if now is None:
            now = datetime.now(timezone.utc) if use_utc else datetime.now()
        return cls(start=now - timedelta(days=days), end=now)

    @property
    def start_time(self) -> str:
        return self.start.strftime(self.TIMESTAMP_FORMAT)

    @property
    def end_time(self) -> str:
        return self.end.strftime(self.TIMESTAMP_FORMAT)


@dataclass
class MetricSeries:
    """
    Domain entity for one metric's daily values.
    Timestamps and values are parallel lists in the order the API returned them.
    """
    metric: str
    timestamps: List[str] = field(default_factory=list)
    values: List[float] = field(default_factory=list)

    def __post_init__(self):
        if not self.metric:
            raise ValueError("metric is required")
        if len(self.timestamps) != len(self.values):
            raise ValueError(
                f"timestamps and values must have the same length "
                f"({len(self.timestamps)} != {len(self.values)})"
            )

    def __len__(self) -> int:
        return len(self.values)

    @property
    def points(self) -> List[Tuple[str, float]]:
        """Pair each timestamp with its value."""
        return list(zip(self.timestamps, self.values))
