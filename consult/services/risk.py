# consult/services/risk.py
from typing import List

from consult.config import (
    CONFIDENCE_START, CONFIDENCE_DEDUCTIONS,
    MIN_HOOKS_RISK, MAX_WEEKS_SINCE_REFRESH_RISK, MAX_LP_LOAD_SEC_RISK,
)
from consult.models.io import BenchmarkEntry, ClientInput
from consult.utils.math import clamp

def risk_flags(inp: ClientInput, bm: BenchmarkEntry) -> List[str]:
    """Structural risks, in fixed order. Every matching flag is reported."""
    flags: List[str] = []
    if not inp.pixel_working:
        flags.append("Tracking broken")
    if not inp.dashboard:
        flags.append("No KPI dashboard")
    if (inp.lp_load_sec or 0) > MAX_LP_LOAD_SEC_RISK:
        flags.append("Slow landing page")
    if inp.hooks < MIN_HOOKS_RISK:
        flags.append("Low creative diversity")
    if inp.weeks_since_refresh > MAX_WEEKS_SINCE_REFRESH_RISK:
        flags.append("Creative fatigue risk")
    return flags

def deductions(inp: ClientInput, bm: BenchmarkEntry) -> List[str]:
    """Names of the confidence deductions that apply (keys of CONFIDENCE_DEDUCTIONS)."""
    hits = {
        "pixel_broken": not inp.pixel_working,
        "no_dashboard": not inp.dashboard,
        "slow_lp": (inp.lp_load_sec or 0) > MAX_LP_LOAD_SEC_RISK,
        "low_hooks": inp.hooks < MIN_HOOKS_RISK,
        "ctr_below_ok": inp.ctr is not None and inp.ctr < bm.ctr.ok,
        "lpcv_below_ok": inp.lp_cv is not None and inp.lp_cv < bm.lp_cv.ok,
    }
    return [k for k, hit in hits.items() if hit]

def confidence_score(inp: ClientInput, bm: BenchmarkEntry) -> int:
    """100 minus the applicable deductions, clamped to [0, 100]."""
    score = CONFIDENCE_START - sum(CONFIDENCE_DEDUCTIONS[k] for k in deductions(inp, bm))
    return int(clamp(score, 0, 100))
