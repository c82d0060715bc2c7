# consult/services/recommendations.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List

from consult.config import (
    MIN_HOOKS, MAX_WEEKS_SINCE_REFRESH, MAX_LP_LOAD_SEC,
    MAX_CAMPAIGNS, MAX_ADSETS, MIN_CAMPAIGNS,
)
from consult.models.io import BenchmarkEntry, ClientInput
from consult.services.status import classify

QUICK_WIN = "quick_win"
TEST = "test"

@dataclass(frozen=True)
class Recommendation:
    text: str
    category: str          # QUICK_WIN | TEST
    rule: str = ""

    def __str__(self) -> str:
        return self.text

    def as_dict(self):
        return {"text": self.text, "category": self.category, "rule": self.rule or None}

Predicate = Callable[[ClientInput, BenchmarkEntry], bool]

@dataclass(frozen=True)
class Rule:
    id: str
    when: Predicate
    message: str
    category: str

def _ctr_below_good(inp: ClientInput, bm: BenchmarkEntry) -> bool:
    if inp.ctr is None:
        return False
    return classify(inp.ctr, bm.ctr.good, bm.ctr.ok, "up").label != "good"

def _lpcv_below_good(inp: ClientInput, bm: BenchmarkEntry) -> bool:
    if inp.lp_cv is None:
        return False
    return classify(inp.lp_cv, bm.lp_cv.good, bm.lp_cv.ok, "up").label != "good"

# Evaluated top to bottom; each rule fires at most once.
RULES: List[Rule] = [
    Rule("creative_hooks",
         lambda i, b: i.hooks < MIN_HOOKS,
         "Increase creative diversity: 3 angles × 3–5 hooks each (≥ 9 hooks).", TEST),
    Rule("creative_refresh",
         lambda i, b: i.weeks_since_refresh > MAX_WEEKS_SINCE_REFRESH,
         "Refresh winners every 3–4 weeks to avoid fatigue.", TEST),
    Rule("ctr_raise", _ctr_below_good,
         "Raise CTR with stronger first 3 seconds, pattern breaks, and placement alignment.", TEST),
    Rule("ctr_track",
         lambda i, b: i.ctr is None,
         "Track CTR weekly to evaluate hooks.", TEST),
    Rule("lp_speed",
         lambda i, b: (i.lp_load_sec or 0) > MAX_LP_LOAD_SEC,
         "Improve LP load <3s: compress media, lazy load, CDN.", QUICK_WIN),
    Rule("lp_tests", _lpcv_below_good,
         "Run LP tests: headline clarity, risk reversal, social proof, simpler form.", TEST),
    Rule("lp_tracking",
         lambda i, b: i.lp_cv is None,
         "Add LP conversion to dashboard with UTM + events.", QUICK_WIN),
    Rule("offer_clarity",
         lambda i, b: i.offer_clarity == "Weak",
         "Clarify offer, value, and guarantee.", QUICK_WIN),
    Rule("trust_blocks",
         lambda i, b: not i.trust_blocks,
         "Add trust blocks: testimonials, reviews, guarantees, logos, FAQs.", QUICK_WIN),
    Rule("form_friction",
         lambda i, b: i.form_friction != "Low",
         "Reduce form friction: fewer fields or lead form test.", QUICK_WIN),
    Rule("pixel",
         lambda i, b: not i.pixel_working,
         "Fix pixel/Conversion API and verify via Test Events.", QUICK_WIN),
    Rule("utms",
         lambda i, b: not i.utms,
         "Standardize UTM templates across ads and links.", QUICK_WIN),
    Rule("dashboard",
         lambda i, b: not i.dashboard,
         "Stand up a KPI dashboard with CPL, CTR, LP CVR, and revenue.", TEST),
    Rule("structure_simplify",
         lambda i, b: i.campaigns > MAX_CAMPAIGNS or i.adsets > MAX_ADSETS,
         "Simplify account structure to reduce overlap and stabilize learning.", QUICK_WIN),
    Rule("structure_test_campaign",
         lambda i, b: i.campaigns < MIN_CAMPAIGNS,
         "Add a controlled test campaign to validate a distinct strategy.", QUICK_WIN),
]

def generate(inp: ClientInput, bm: BenchmarkEntry, rules: List[Rule] = RULES) -> List[Recommendation]:
    """Run the rule table once, in order, and collect every recommendation that fires."""
    return [Recommendation(r.message, r.category, r.id) for r in rules if r.when(inp, bm)]
