import logging
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from consult.config import ALGO_VERSION, ALLOW_ORIGINS, APP_TITLE, APP_VERSION
from consult.data.loader import data_meta, init_data
from consult.routers import audit, benchmarks, export
from consult.routers.deps import get_table

log = logging.getLogger(__name__)

app = FastAPI(title=APP_TITLE, version=APP_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOW_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(audit.router)
app.include_router(benchmarks.router)
app.include_router(export.router)

@app.on_event("startup")
def _startup():
    try:
        init_data()
    except (FileNotFoundError, ValueError):
        log.exception("Failed to load benchmark snapshot at startup")
        raise

@app.get("/health")
def health():
    return {"ok": True}

@app.get("/version")
def version(request: Request) -> Dict[str, Any]:
    table = get_table(request)
    return {
        "version": app.version,
        "algo_version": ALGO_VERSION,
        "bench_version": table.version,
        "data": data_meta(),
    }
