# consult/services/benchmarks.py
from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from consult.config import METRIC_DIRECTIONS, TEMPLATE_INDUSTRY
from consult.models.io import BenchmarkEntry, Threshold

class UnknownIndustryError(KeyError):
    pass

class UnknownMetricError(KeyError):
    pass

class ThresholdOrderError(ValueError):
    pass

class DuplicateIndustryError(ValueError):
    pass

def check_threshold(metric: str, good: float, ok: float) -> None:
    """Reject pairs whose good/ok order contradicts the metric's direction."""
    direction = METRIC_DIRECTIONS.get(metric)
    if direction is None:
        raise UnknownMetricError(metric)
    if direction == "up" and good < ok:
        raise ThresholdOrderError(f"{metric}: good ({good}) must be >= ok ({ok}) for a higher-is-better metric")
    if direction == "down" and good > ok:
        raise ThresholdOrderError(f"{metric}: good ({good}) must be <= ok ({ok}) for a lower-is-better metric")

def check_entry(entry: BenchmarkEntry) -> None:
    for metric in METRIC_DIRECTIONS:
        t = entry.metric(metric)
        check_threshold(metric, t.good, t.ok)

@dataclass(frozen=True)
class BenchmarkTable:
    """
    Industry -> BenchmarkEntry, as a value.
    Every edit returns a new table with version + 1; the seed it came from is
    carried along so reset_to_defaults needs no global.
    """
    entries: Mapping[str, BenchmarkEntry]
    version: int = 0
    defaults: Optional[Mapping[str, BenchmarkEntry]] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))
        seed = self.entries if self.defaults is None else self.defaults
        object.__setattr__(self, "defaults", MappingProxyType(dict(seed)))

    @classmethod
    def from_records(cls, records: Mapping[str, Mapping], version: int = 0) -> "BenchmarkTable":
        entries: Dict[str, BenchmarkEntry] = {}
        for name, rec in records.items():
            entry = BenchmarkEntry.model_validate(rec)
            check_entry(entry)
            entries[name] = entry
        return cls(entries=entries, version=version)

    def __contains__(self, industry: str) -> bool:
        return industry in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def industries(self) -> List[str]:
        return sorted(self.entries)

    def get(self, industry: str) -> BenchmarkEntry:
        try:
            return self.entries[industry]
        except KeyError:
            raise UnknownIndustryError(industry) from None

    def _derive(self, entries: Mapping[str, BenchmarkEntry]) -> "BenchmarkTable":
        return BenchmarkTable(entries=entries, version=self.version + 1, defaults=self.defaults)

    def set_threshold(self, industry: str, metric: str, good: float, ok: float) -> "BenchmarkTable":
        """New table with one good/ok pair replaced."""
        entry = self.get(industry)
        check_threshold(metric, good, ok)
        field_name = next(n for n, info in BenchmarkEntry.model_fields.items() if metric in (n, info.alias))
        updated = entry.model_copy(update={field_name: Threshold(good=good, ok=ok)})
        return self._derive({**self.entries, industry: updated})

    def add_industry(self, name: str, entry: Optional[BenchmarkEntry] = None,
                     overwrite: bool = False) -> "BenchmarkTable":
        """
        New table with `name` added. Without an entry, the template industry's
        values are copied (falling back to the first seeded industry).
        """
        name = (name or "").strip()
        if not name:
            raise ValueError("industry name must not be blank")
        if name in self.entries and not overwrite:
            raise DuplicateIndustryError(f"industry already exists: {name}")
        if entry is None:
            template = self.defaults.get(TEMPLATE_INDUSTRY) or next(iter(self.defaults.values()), None)
            if template is None:
                raise ValueError("no template industry available; pass an explicit entry")
            entry = template
        check_entry(entry)
        return self._derive({**self.entries, name: entry})

    def reset_to_defaults(self) -> "BenchmarkTable":
        return self._derive(self.defaults)

    def to_records(self) -> Dict[str, Dict]:
        return {k: v.model_dump(by_alias=True) for k, v in self.entries.items()}
