# consult/services/derived.py
from typing import Dict, Optional

from consult.models.io import BenchmarkEntry, ClientInput
from consult.utils.math import positive, safe_div

def cac_cap(ltv: Optional[float], cac_to_ltv_ok: Optional[float]) -> Optional[float]:
    """Max affordable CAC: ltv * acceptable CAC:LTV ratio. None unless both are positive."""
    ltv, ratio = positive(ltv), positive(cac_to_ltv_ok)
    if ltv is None or ratio is None:
        return None
    return ltv * ratio

def cpl_guardrail(cap: Optional[float], close_rate: Optional[float]) -> Optional[float]:
    """CPL ceiling implied by the CAC cap: a lead is worth cap * close_rate."""
    close = positive(close_rate)
    if cap is None or close is None:
        return None
    return cap * close

def roas_target(margin: Optional[float]) -> Optional[float]:
    """Breakeven ROAS: 1 / margin."""
    return safe_div(1.0, positive(margin))

def derive(inp: ClientInput, bm: BenchmarkEntry) -> Dict[str, Optional[float]]:
    """
    Guardrail figures from the account economics.
    Each value is independent; missing inputs give None, never 0.
    """
    cap = cac_cap(inp.ltv, bm.cac_to_ltv.ok)
    return {
        "cac_cap": cap,
        "cpl_guardrail": cpl_guardrail(cap, inp.close_rate),
        "roas_target": roas_target(inp.margin),
    }
