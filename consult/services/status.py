# consult/services/status.py
from dataclasses import dataclass
from typing import Dict, Optional

from consult.models.io import BenchmarkEntry, ClientInput
from consult.utils.format import pct
from consult.utils.math import is_missing

COLORS = {"good": "green", "ok": "yellow", "poor": "red", "n/a": "slate"}

@dataclass(frozen=True)
class Status:
    label: str
    color: str
    hint: Optional[str] = None

    def as_dict(self) -> Dict[str, Optional[str]]:
        return {"label": self.label, "color": self.color, "hint": self.hint}

def _status(label: str) -> Status:
    return Status(label=label, color=COLORS[label])

def classify(value: Optional[float], good: float, ok: float, direction: str) -> Status:
    """
    Traffic-light a metric against a good/ok pair.
      - n/a:  value missing or NaN
      - up:   value >= good -> good, value >= ok -> ok, else poor
      - down: value <= good -> good, value <= ok -> ok, else poor
    Threshold ordering is taken as given.
    """
    if is_missing(value):
        return _status("n/a")
    if direction == "up":
        if value >= good:
            return _status("good")
        if value >= ok:
            return _status("ok")
        return _status("poor")
    if direction == "down":
        if value <= good:
            return _status("good")
        if value <= ok:
            return _status("ok")
        return _status("poor")
    raise ValueError(f"direction must be 'up' or 'down', got {direction!r}")

def metric_statuses(inp: ClientInput, bm: BenchmarkEntry) -> Dict[str, Status]:
    """Scorecard statuses for the audit: CTR and LP conversion, with threshold hints."""
    out: Dict[str, Status] = {}
    for key, value, t in (("ctr", inp.ctr, bm.ctr), ("lpCv", inp.lp_cv, bm.lp_cv)):
        s = classify(value, t.good, t.ok, "up")
        out[key] = Status(s.label, s.color, hint=f"OK ≥ {pct(t.ok)} | Good ≥ {pct(t.good)}")
    return out
