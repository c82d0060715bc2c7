import csv
from typing import Any, Dict, List, Optional

import pandas as pd

_DERIVED_KEYS = {"cac_cap": "cacCap", "cpl_guardrail": "cplGuardrail", "roas_target": "roasTarget"}

def _cell(v: Any) -> str:
    if v is None:
        return ""
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    return str(v)

def consult_record(inp: Dict[str, Any],
                   derived: Dict[str, Optional[float]],
                   confidence: int,
                   flags: List[str]) -> Dict[str, Any]:
    """Flat key/value record: input fields, then guardrails, confidence and flags."""
    rec = dict(inp)
    rec.update({_DERIVED_KEYS.get(k, k): v for k, v in derived.items()})
    rec["confidence"] = confidence
    rec["flags"] = "; ".join(flags)
    return rec

def to_csv(record: Dict[str, Any]) -> str:
    df = pd.DataFrame({"key": list(record.keys()), "value": [_cell(v) for v in record.values()]})
    body = df.to_csv(index=False, header=False, quoting=csv.QUOTE_ALL, lineterminator="\n")
    return "key,value\n" + body
