# consult/services/plan.py
from typing import Dict, List, Optional

from consult.models.io import BenchmarkEntry, ClientInput
from consult.utils.format import currency, pct

def _numbered(items: List[str]) -> List[str]:
    return [f"{i}. {x}" for i, x in enumerate(items, start=1)]

def guardrail_lines(bm: BenchmarkEntry, derived: Dict[str, Optional[float]]) -> List[str]:
    lines = [
        f"• CTR target: ≥ {pct(bm.ctr.ok)} (good: {pct(bm.ctr.good)})",
        f"• LP conversion: ≥ {pct(bm.lp_cv.ok)} (good: {pct(bm.lp_cv.good)})",
    ]
    cpl = derived.get("cpl_guardrail")
    if cpl:
        lines.append(f"• CPL guardrail: {currency(cpl)}")
    else:
        lines.append(f"• CPL guardrail: below {currency(bm.cpl.ok)} (good {currency(bm.cpl.good)})")
    roas = derived.get("roas_target")
    if roas:
        lines.append(f"• Breakeven ROAS target: {roas:.2f}x")
    return lines

def compose_plan(inp: ClientInput,
                 bm: BenchmarkEntry,
                 derived: Dict[str, Optional[float]],
                 prioritized: Dict[str, List[str]]) -> str:
    """One-pager action plan text. Pure assembly of values already computed."""
    lines = [
        f"Action Plan for {inp.company or 'Client'}",
        f"Industry: {inp.industry}",
        f"Goals (30–90 days): {inp.win30 or '-'}",
        "Quick Wins (7 days):",
        *_numbered(prioritized.get("quick_wins", [])),
        "Priority Tests (30 days):",
        *_numbered(prioritized.get("tests", [])),
        "Guardrails:",
        *guardrail_lines(bm, derived),
    ]
    return "\n".join(lines)
