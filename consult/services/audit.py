# consult/services/audit.py
from typing import Any, Dict

from consult.config import ALGO_VERSION
from consult.models.io import BenchmarkEntry, ClientInput
from consult.services.derived import derive
from consult.services.plan import compose_plan
from consult.services.priority import prioritize
from consult.services.recommendations import generate
from consult.services.risk import confidence_score, deductions, risk_flags
from consult.services.status import metric_statuses
from consult.utils.math import r2, r4

def run_audit(inp: ClientInput, bm: BenchmarkEntry) -> Dict[str, Any]:
    """
    Full consult evaluation for one client snapshot against one benchmark entry.
    Pure: same (inp, bm) always gives the same dict.
    """
    derived = derive(inp, bm)
    statuses = metric_statuses(inp, bm)
    recs = generate(inp, bm)
    prioritized = prioritize(recs)

    return {
        "input": inp.model_dump(by_alias=True),
        "statuses": {k: s.as_dict() for k, s in statuses.items()},
        "derived": {
            "cac_cap": r2(derived["cac_cap"]),
            "cpl_guardrail": r2(derived["cpl_guardrail"]),
            "roas_target": r4(derived["roas_target"]),
        },
        "recommendations": [r.as_dict() for r in recs],
        "plan": prioritized,
        "risk": {
            "flags": risk_flags(inp, bm),
            "confidence": confidence_score(inp, bm),
            "deductions": deductions(inp, bm),
        },
        "plan_text": compose_plan(inp, bm, derived, prioritized),
        "meta": {"industry": inp.industry, "algo_version": ALGO_VERSION},
    }
