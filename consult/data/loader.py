# consult/data/loader.py

import json
import hashlib
import logging
import time
from pathlib import Path
from typing import Dict, Any, List, Optional

from consult.config import DATA_FILE  # absolute import to avoid relative package issues
from consult.services.benchmarks import BenchmarkTable

log = logging.getLogger(__name__)

# In-memory cache of the seed snapshot
_SEED: Optional[BenchmarkTable] = None
_VERSION: Optional[str] = None
_CHECKSUM: Optional[str] = None
_LOADED_AT: Optional[float] = None
_PATH: Optional[Path] = None


def _checksum(txt: str) -> str:
    return hashlib.sha256(txt.encode("utf-8")).hexdigest()[:12]


def read_snapshot(path: Path) -> Dict[str, Any]:
    """Parse a benchmark snapshot file and return its payload dict."""
    if not path.exists():
        raise FileNotFoundError(f"Missing benchmarks file: {path}")
    payload_txt = path.read_text(encoding="utf-8-sig")
    try:
        payload = json.loads(payload_txt)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(payload, dict) or not isinstance(payload.get("records"), dict):
        raise ValueError("Benchmark snapshot missing 'records' object")
    payload["_checksum"] = _checksum(payload_txt)
    return payload


def init_data(path: Optional[Path] = None) -> None:
    """Load the seed benchmarks into memory and compute simple metadata."""
    global _SEED, _VERSION, _CHECKSUM, _LOADED_AT, _PATH

    path = path or DATA_FILE
    payload = read_snapshot(path)
    _SEED = BenchmarkTable.from_records(payload["records"])
    _VERSION = payload.get("version") or payload.get("date") or path.stem
    _CHECKSUM = payload["_checksum"]
    _LOADED_AT = time.time()
    _PATH = path
    log.info("Loaded %d benchmark industries from %s (version %s)", len(_SEED), path.name, _VERSION)


def get_seed_table() -> BenchmarkTable:
    """Return the cached seed table, initializing if empty."""
    if _SEED is None:
        init_data()
    return _SEED


def get_key_meta(table: BenchmarkTable) -> List[Dict[str, Any]]:
    """Return sorted list of {key, seeded} for the UI."""
    seeded = set(table.defaults)
    return [{"key": k, "seeded": k in seeded} for k in table.industries()]


def data_meta() -> Dict[str, Any]:
    """Health/meta info for the /version endpoint."""
    return {
        "data_version": _VERSION,
        "checksum": _CHECKSUM,
        "loaded_at": _LOADED_AT,
        "path": str(_PATH) if _PATH else None,
    }
