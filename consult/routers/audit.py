import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends

from consult.models.io import AuditOut, ClientInput
from consult.routers.deps import entry_for, get_table
from consult.services.audit import run_audit
from consult.services.benchmarks import BenchmarkTable

log = logging.getLogger(__name__)

router = APIRouter(tags=["audit"])

@router.post("/audit", response_model=AuditOut)
def audit(req: ClientInput, table: BenchmarkTable = Depends(get_table)) -> Dict[str, Any]:
    bm = entry_for(table, req)
    out = run_audit(req, bm)
    out["meta"]["benchmark_version"] = table.version
    log.debug("audit industry=%s confidence=%s recs=%d",
              req.industry, out["risk"]["confidence"], len(out["recommendations"]))
    return out
