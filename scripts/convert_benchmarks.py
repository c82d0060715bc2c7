# scripts/convert_benchmarks.py
"""
Turn a house-numbers CSV into a dated benchmark snapshot.

Expected columns (one row per industry):
  Industry, CPL Good, CPL OK, CTR Good, CTR OK, LP CVR Good, LP CVR OK,
  ROAS Good, ROAS OK, CAC:LTV Good, CAC:LTV OK
Percent columns may be written as "2.5%" or 0.025.
"""
import hashlib
import json
import re
import sys
from datetime import date
from pathlib import Path

import pandas as pd

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from consult.services.benchmarks import BenchmarkTable

DATA = ROOT / "consult" / "data"
OUT = DATA / f"{date.today():%Y-%m-%d}-benchmarks.json"

COLUMNS = {
    "cpl": ("CPL Good", "CPL OK"),
    "ctr": ("CTR Good", "CTR OK"),
    "lpCv": ("LP CVR Good", "LP CVR OK"),
    "roas": ("ROAS Good", "ROAS OK"),
    "cacToLtv": ("CAC:LTV Good", "CAC:LTV OK"),
}

def norm(s) -> str:
    s = "" if pd.isna(s) else str(s).strip()
    return re.sub(r"\s+", " ", s)

def _f(x):
    if pd.isna(x):
        return None
    s = str(x).strip().replace("$", "").replace(",", "")
    if not s:
        return None
    if s.endswith("%"):
        return float(s[:-1]) / 100.0
    return float(s)

def load_rows(fp: Path) -> dict:
    df = pd.read_csv(fp, dtype=str, encoding="utf-8-sig")
    df.columns = [norm(c) for c in df.columns]
    wanted = ["Industry"] + [c for pair in COLUMNS.values() for c in pair]
    missing = [c for c in wanted if c not in df.columns]
    if missing:
        raise ValueError(f"CSV missing columns: {missing}")
    rows = {}
    for _, row in df.iterrows():
        name = norm(row["Industry"])
        if not name:
            continue
        rec = {}
        for metric, (good_col, ok_col) in COLUMNS.items():
            good, ok = _f(row[good_col]), _f(row[ok_col])
            if good is None or ok is None:
                raise ValueError(f"{name}: {metric} needs both good and ok values")
            rec[metric] = {"good": good, "ok": ok}
        rows[name] = rec
    return rows

def main():
    if len(sys.argv) < 2:
        print("usage: convert_benchmarks.py <house-benchmarks.csv>", file=sys.stderr)
        sys.exit(1)
    records = load_rows(Path(sys.argv[1]))
    # raises on out-of-order good/ok pairs
    BenchmarkTable.from_records(records)

    blob = json.dumps(records, ensure_ascii=False, separators=(",", ":"))
    checksum = hashlib.sha256(blob.encode("utf-8")).hexdigest()
    payload = {"version": f"{date.today():%Y-%m-%d}", "checksum": checksum, "records": records}
    OUT.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")

    print(f"Wrote: {OUT.name}")
    print(f"Records: {len(records)}")
    print(f"Checksum: {checksum}")

if __name__ == "__main__":
    main()
