from pathlib import Path
import re
from typing import List, Tuple

DATA_DIR = Path(__file__).resolve().parent

_re_dash = re.compile(r"^(\d{4}-\d{2}-\d{2})-benchmarks\.json$", re.I)

def list_snapshots(data_dir: Path = DATA_DIR) -> List[Tuple[str, Path]]:
    """Return (YYYY-MM-DD, path) pairs for every dated benchmark snapshot, oldest first."""
    dated = []
    for p in data_dir.glob("*-benchmarks.json"):
        m = _re_dash.match(p.name)
        if m:
            dated.append((m.group(1), p))
    dated.sort(key=lambda t: t[0])
    return dated

def latest_bench_path(data_dir: Path = DATA_DIR) -> Path:
    dated = list_snapshots(data_dir)
    if not dated:
        raise FileNotFoundError(f"No benchmark snapshots found in {data_dir}")
    return dated[-1][1]
