"""Protocols and lightweight model types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class Availability(Enum):
    """Outcome of a single availability check."""

    AVAILABLE = "available"
    TAKEN = "taken"
    ERROR = "error"


@dataclass(frozen=True)
class AvailabilityResult:
    """Judgment for one domain with the provider's summary or an error text."""

    domain: str
    status: Availability
    reason: str

    @property
    def available(self) -> bool:
        return self.status is Availability.AVAILABLE


@dataclass
class ScanCounters:
    """Running totals for a single scan."""

    total_checked: int = 0
    available_count: int = 0
    errors: int = 0


class AvailabilityClient(Protocol):
    """Contract for domain availability providers."""

    def check(self, domain: str) -> AvailabilityResult:
        """Return an availability judgment; never raise for provider failures."""


class ResultSink(Protocol):
    """Contract for persisting available domains."""

    def record(self, domain: str) -> None:
        """Persist one available domain."""


class CredentialProvider(Protocol):
    """Contract for API key lookup."""

    def get_api_key(self) -> str | None:
        """Return the API key or None when absent."""
