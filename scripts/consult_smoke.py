# scripts/consult_smoke.py
import sys
from pathlib import Path

# Add the project root to the python path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from consult.data.loader import get_seed_table, data_meta
from consult.models.io import ClientInput
from consult.services.audit import run_audit

print("Running smoke test for the consult engine...")

try:
    table = get_seed_table()
    print(f"✅ Loaded {len(table)} industries (snapshot {data_meta()['data_version']})")

    inp = ClientInput(company="Smoke Test Co", ltv=1200, hooks=5, weeksSinceRefresh=5, pixelWorking=False)
    out = run_audit(inp, table.get(inp.industry))
    print(f"✅ Confidence {out['risk']['confidence']}/100, flags: {out['risk']['flags']}")
    print(out["plan_text"])
    print("Smoke test passed!")

except Exception as e:
    print(f"❌ Smoke test failed: {e}")
    raise
