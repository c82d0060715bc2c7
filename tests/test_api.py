# tests/test_api.py
import pytest
from fastapi.testclient import TestClient

from consult.data.loader import get_seed_table
from consult.main import app

client = TestClient(app)

@pytest.fixture(autouse=True)
def fresh_table():
    app.state.benchmarks = get_seed_table()
    yield
    app.state.benchmarks = None

def test_health_and_version():
    assert client.get("/health").json() == {"ok": True}
    v = client.get("/version").json()
    assert v["version"] == app.version
    assert v["bench_version"] == 0

def test_audit_response_shape():
    r = client.post("/audit", json={
        "industry": "B2B SaaS", "company": "Acme", "ltv": 1200, "closeRate": 0.2,
        "hooks": 5, "weeksSinceRefresh": 5, "pixelWorking": False,
    })
    assert r.status_code == 200
    d = r.json()
    assert d["input"]["pixelWorking"] is False
    assert d["statuses"]["ctr"] == {"label": "n/a", "color": "slate", "hint": "OK ≥ 1.5% | Good ≥ 2.0%"}
    assert d["derived"]["cac_cap"] == 396.0           # 1200 * 0.33
    assert d["derived"]["cpl_guardrail"] == 79.2
    assert d["derived"]["roas_target"] == 1.6667
    assert d["risk"]["flags"] == ["Tracking broken", "No KPI dashboard", "Low creative diversity"]
    assert d["risk"]["confidence"] == 100 - 25 - 15 - 10
    assert d["plan"]["quick_wins"][-1].startswith("Fix pixel")
    assert d["plan_text"].startswith("Action Plan for Acme\nIndustry: B2B SaaS")
    assert d["recommendations"][0]["category"] == "test"
    assert d["meta"]["benchmark_version"] == 0

def test_audit_unknown_industry_is_404():
    assert client.post("/audit", json={"industry": "Crypto"}).status_code == 404

def test_audit_rejects_out_of_range_rates():
    assert client.post("/audit", json={"ctr": 1.5}).status_code == 422
    assert client.post("/audit", json={"offerClarity": "Meh"}).status_code == 422

def test_edit_threshold_changes_next_audit():
    body = {"industry": "Ecommerce", "ctr": 0.02, "dashboard": True}
    before = client.post("/audit", json=body).json()
    assert before["statuses"]["ctr"]["label"] == "ok"

    r = client.put("/benchmarks/Ecommerce/ctr", json={"good": 0.019, "ok": 0.01})
    assert r.status_code == 200
    assert r.json()["version"] == 1
    assert r.json()["industries"]["Ecommerce"]["ctr"] == {"good": 0.019, "ok": 0.01}

    after = client.post("/audit", json=body).json()
    assert after["statuses"]["ctr"]["label"] == "good"
    assert after["meta"]["benchmark_version"] == 1

def test_edit_threshold_errors():
    assert client.put("/benchmarks/Ecommerce/ctr", json={"good": 0.01, "ok": 0.02}).status_code == 400
    assert client.put("/benchmarks/Crypto/ctr", json={"good": 0.02, "ok": 0.01}).status_code == 404
    assert client.put("/benchmarks/Ecommerce/cpc", json={"good": 1, "ok": 2}).status_code == 422

def test_add_and_reset_industries():
    r = client.post("/benchmarks", json={"name": "Legal"})
    assert r.status_code == 200
    assert "Legal" in r.json()["industries"]
    assert client.post("/benchmarks", json={"name": "Legal"}).status_code == 400
    assert client.post("/audit", json={"industry": "Legal"}).status_code == 200

    meta = client.get("/benchmarks/meta").json()
    assert {"key": "Legal", "seeded": False} in meta

    r = client.post("/benchmarks/reset")
    assert "Legal" not in r.json()["industries"]
    assert client.get("/benchmarks/Legal").status_code == 404

def test_get_single_benchmark_uses_wire_names():
    d = client.get("/benchmarks/Healthcare").json()
    assert set(d) == {"cpl", "ctr", "lpCv", "roas", "cacToLtv"}
