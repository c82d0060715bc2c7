import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Request

from consult.data.loader import get_key_meta
from consult.models.io import AddIndustryIn, BenchmarkEntry, BenchmarkTableOut, MetricName, ThresholdIn
from consult.routers.deps import get_table, set_table
from consult.services.benchmarks import (
    BenchmarkTable, DuplicateIndustryError, ThresholdOrderError,
    UnknownIndustryError, UnknownMetricError,
)

log = logging.getLogger(__name__)

router = APIRouter(prefix="/benchmarks", tags=["benchmarks"])

def _table_out(table: BenchmarkTable) -> Dict[str, Any]:
    return {"version": table.version, "industries": dict(table.entries)}

@router.get("/meta")
def benchmarks_meta(limit: int = 2000, table: BenchmarkTable = Depends(get_table)) -> List[Dict[str, Any]]:
    return get_key_meta(table)[:limit]

@router.get("", response_model=BenchmarkTableOut)
def list_benchmarks(table: BenchmarkTable = Depends(get_table)) -> Dict[str, Any]:
    return _table_out(table)

@router.get("/{industry}", response_model=BenchmarkEntry)
def get_benchmark(industry: str, table: BenchmarkTable = Depends(get_table)) -> BenchmarkEntry:
    try:
        return table.get(industry)
    except UnknownIndustryError:
        raise HTTPException(status_code=404, detail=f"Industry not found: {industry}")

@router.put("/{industry}/{metric}", response_model=BenchmarkTableOut)
def update_threshold(industry: str, metric: MetricName, body: ThresholdIn, request: Request,
                     table: BenchmarkTable = Depends(get_table)) -> Dict[str, Any]:
    try:
        new = table.set_threshold(industry, metric, body.good, body.ok)
    except UnknownIndustryError:
        raise HTTPException(status_code=404, detail=f"Industry not found: {industry}")
    except UnknownMetricError:
        raise HTTPException(status_code=404, detail=f"Metric not found: {metric}")
    except ThresholdOrderError as e:
        raise HTTPException(status_code=400, detail=str(e))
    log.info("benchmark %s.%s set to good=%s ok=%s (v%d)", industry, metric, body.good, body.ok, new.version)
    return _table_out(set_table(request, new))

@router.post("", response_model=BenchmarkTableOut)
def add_industry(body: AddIndustryIn, request: Request,
                 table: BenchmarkTable = Depends(get_table)) -> Dict[str, Any]:
    try:
        new = table.add_industry(body.name, body.entry, overwrite=body.overwrite)
    except (DuplicateIndustryError, ThresholdOrderError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    log.info("industry added: %s (v%d)", body.name.strip(), new.version)
    return _table_out(set_table(request, new))

@router.post("/reset", response_model=BenchmarkTableOut)
def reset_benchmarks(request: Request, table: BenchmarkTable = Depends(get_table)) -> Dict[str, Any]:
    new = table.reset_to_defaults()
    log.info("benchmarks reset to defaults (v%d)", new.version)
    return _table_out(set_table(request, new))
