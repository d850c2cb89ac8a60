"""
Transient records produced while walking a cluster.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel

from storage_stats.core.exceptions import StatsServiceError
from storage_stats.schemas.stats import StatsResult

T = TypeVar("T")


class RequestState(str, Enum):
    """Lifecycle of a /stats request."""
    IDLE = "idle"
    VALIDATING = "validating"
    CONNECTING = "connecting"
    SCANNING = "scanning"
    CLOSING_CONNECTION = "closing_connection"
    RESPONDING = "responding"
    RESPONDING_ERROR = "responding_error"


class DatabaseRecord(BaseModel):
    """A database reported by the cluster."""
    name: str


class CollectionRecord(BaseModel):
    """A collection within a database."""
    name: str
    database: str


@dataclass
class ScanOutcome(Generic[T]):
    """Result of one scan step: either a value or the error that skipped it."""
    value: Optional[T] = None
    error: Optional[StatsServiceError] = None

    @classmethod
    def ok(cls, value: T) -> "ScanOutcome[T]":
        return cls(value=value)

    @classmethod
    def skip(cls, error: StatsServiceError) -> "ScanOutcome[T]":
        return cls(error=error)

    @property
    def skipped(self) -> bool:
        return self.error is not None


@dataclass
class ScanReport:
    """
    Partial-result accumulator for one scan.

    Results keep discovery order. Skipped steps are kept for logging only
    and never reach the HTTP response.
    """
    results: List[StatsResult] = field(default_factory=list)
    skipped: List[StatsServiceError] = field(default_factory=list)

    def add(self, outcome: ScanOutcome[StatsResult]) -> None:
        """Record a stats outcome."""
        if outcome.skipped:
            self.skipped.append(outcome.error)
        elif outcome.value is not None:
            self.results.append(outcome.value)

    def skip(self, error: StatsServiceError) -> None:
        """Record a step that produced nothing."""
        self.skipped.append(error)
