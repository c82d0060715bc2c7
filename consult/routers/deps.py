from fastapi import HTTPException, Request

from consult.data.loader import get_seed_table
from consult.models.io import BenchmarkEntry, ClientInput
from consult.services.benchmarks import BenchmarkTable, UnknownIndustryError

def get_table(request: Request) -> BenchmarkTable:
    """Session benchmark table held on app.state; seeded lazily."""
    table = getattr(request.app.state, "benchmarks", None)
    if table is None:
        table = get_seed_table()
        request.app.state.benchmarks = table
    return table

def set_table(request: Request, table: BenchmarkTable) -> BenchmarkTable:
    request.app.state.benchmarks = table
    return table

def entry_for(table: BenchmarkTable, inp: ClientInput) -> BenchmarkEntry:
    try:
        return table.get(inp.industry)
    except UnknownIndustryError:
        raise HTTPException(status_code=404, detail=f"Industry not found: {inp.industry}")
