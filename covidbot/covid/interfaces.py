"""
Shared interface contracts for COVID-19 reports.

- StatsClient produces FetchResult (wrapping CountryStats or a country list)
- Block builders consume CountryStats and produce MenuPage/MenuOption
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from covidbot.utils import Number, to_number

T = TypeVar('T')


# =============================================================================
# Fetch Results
# =============================================================================

class FetchStatus(str, Enum):
    """Outcome of a single upstream fetch."""
    FOUND = 'found'
    NOT_FOUND = 'not_found'            # 404 or empty list
    UPSTREAM_ERROR = 'upstream_error'  # Unreachable, non-2xx, unparsable body


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Explicit result of an upstream fetch.

    ``data`` is only set for FOUND; ``error`` is diagnostic text for logs.
    """
    status: FetchStatus
    data: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def found(cls, data: T) -> 'FetchResult[T]':
        return cls(FetchStatus.FOUND, data=data)

    @classmethod
    def not_found(cls, error: Optional[str] = None) -> 'FetchResult[T]':
        return cls(FetchStatus.NOT_FOUND, error=error)

    @classmethod
    def upstream_error(cls, error: str) -> 'FetchResult[T]':
        return cls(FetchStatus.UPSTREAM_ERROR, error=error)

    @property
    def is_found(self) -> bool:
        return self.status is FetchStatus.FOUND


# =============================================================================
# Country Contracts
# =============================================================================

@dataclass
class CountryStats:
    """Per-country (or aggregate) statistics as reported upstream."""
    name: str
    population: Number = 0
    active: Number = 0      # Currently infected
    critical: Number = 0    # Critical condition
    recovered: Number = 0
    cases: Number = 0       # Cumulative
    deaths: Number = 0      # Cumulative
    tests: Number = 0       # Cumulative

    @classmethod
    def from_payload(cls, name: str, payload: dict[str, Any]) -> 'CountryStats':
        """Build from an upstream JSON object; missing fields become 0."""
        return cls(
            name=name,
            population=to_number(payload.get('population')),
            active=to_number(payload.get('active')),
            critical=to_number(payload.get('critical')),
            recovered=to_number(payload.get('recovered')),
            cases=to_number(payload.get('cases')),
            deaths=to_number(payload.get('deaths')),
            tests=to_number(payload.get('tests')),
        )


# =============================================================================
# Menu Contracts
# =============================================================================

@dataclass(frozen=True)
class MenuOption:
    """One selectable country; value is echoed back verbatim on selection."""
    text: str
    value: str


@dataclass
class MenuPage:
    """One dropdown worth of countries."""
    number: int                 # 1-based
    label: str                  # e.g., "[2] Country: Bahrain~"
    options: list[MenuOption] = field(default_factory=list)
