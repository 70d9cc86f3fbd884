"""Domain data models for fault records, facet selections and aggregates."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import asdict, dataclass, field

from .config import IMPACT_CLASSES, SEVERITY_LEVELS


@dataclass(frozen=True, slots=True)
class FaultRecord:
    region: str = ""
    impact: str = ""
    domain: str = ""
    severity: str = ""


def _as_frozenset(values: Iterable[object] | None) -> frozenset[str]:
    if not values:
        return frozenset()
    return frozenset(str(v) for v in values if v is not None)


@dataclass(frozen=True, slots=True)
class FacetSelection:
    """Chosen values per facet. An empty set leaves that facet unrestricted."""

    regions: frozenset[str] = field(default_factory=frozenset)
    domains: frozenset[str] = field(default_factory=frozenset)
    impacts: frozenset[str] = field(default_factory=frozenset)
    severities: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_lists(
        cls,
        regions: Iterable[object] | None = None,
        domains: Iterable[object] | None = None,
        impacts: Iterable[object] | None = None,
        severities: Iterable[object] | None = None,
    ) -> FacetSelection:
        return cls(
            regions=_as_frozenset(regions),
            domains=_as_frozenset(domains),
            impacts=_as_frozenset(impacts),
            severities=_as_frozenset(severities),
        )

    @property
    def is_empty(self) -> bool:
        return not (self.regions or self.domains or self.impacts or self.severities)


@dataclass(frozen=True, slots=True)
class FacetCatalog:
    regions: tuple[str, ...] = ()
    domains: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class AggregateSummary:
    total: int = 0
    sa: int = 0
    nsa: int = 0
    sa_emergency: int = 0
    sa_critical: int = 0
    sa_major: int = 0
    sa_minor: int = 0
    nsa_emergency: int = 0
    nsa_critical: int = 0
    nsa_major: int = 0
    nsa_minor: int = 0

    def cell(self, impact: str, severity: str) -> int:
        """Count for one impact class x severity cell, e.g. ``cell("SA", "Major")``."""
        if impact not in IMPACT_CLASSES or severity not in SEVERITY_LEVELS:
            raise KeyError(f"Unknown summary cell: {impact}/{severity}")
        return getattr(self, f"{impact.lower()}_{severity.lower()}")

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class RegionBreakdown:
    region: str
    sa_count: int = 0
    nsa_count: int = 0

    @property
    def total(self) -> int:
        return self.sa_count + self.nsa_count


@dataclass(frozen=True, slots=True)
class SeriesEntry:
    name: str
    values: tuple[int, ...] = ()


@dataclass(frozen=True, slots=True)
class ChartSeries:
    labels: tuple[str, ...] = ()
    series: tuple[SeriesEntry, ...] = ()
