# tests/test_derived.py
import pytest

from consult.models.io import BenchmarkEntry, ClientInput
from consult.services.derived import derive

def _bm(cac_ok=0.3) -> BenchmarkEntry:
    return BenchmarkEntry.model_validate({
        "cpl": {"good": 60, "ok": 90}, "ctr": {"good": 0.025, "ok": 0.015},
        "lpCv": {"good": 0.08, "ok": 0.04}, "roas": {"good": 3.0, "ok": 2.0},
        "cacToLtv": {"good": 0.25, "ok": cac_ok},
    })

def test_guardrails_from_ltv_and_close_rate():
    d = derive(ClientInput(ltv=1200, closeRate=0.2), _bm(0.3))
    assert d["cac_cap"] == pytest.approx(360)
    assert d["cpl_guardrail"] == pytest.approx(72)

def test_roas_target_from_margin():
    assert derive(ClientInput(margin=0.6), _bm())["roas_target"] == pytest.approx(1.6667, abs=1e-4)
    assert derive(ClientInput(margin=None), _bm())["roas_target"] is None
    assert derive(ClientInput(margin=0), _bm())["roas_target"] is None

def test_missing_ltv_gives_unknown_not_zero():
    d = derive(ClientInput(ltv=None, closeRate=0.2), _bm())
    assert d["cac_cap"] is None
    assert d["cpl_guardrail"] is None

def test_zero_ltv_is_unknown():
    assert derive(ClientInput(ltv=0), _bm())["cac_cap"] is None

def test_cpl_guardrail_needs_positive_close_rate():
    assert derive(ClientInput(ltv=1200, closeRate=None), _bm())["cpl_guardrail"] is None
    d = derive(ClientInput(ltv=1200, closeRate=0), _bm())
    assert d["cac_cap"] == pytest.approx(360)
    assert d["cpl_guardrail"] is None

def test_derive_is_idempotent():
    inp, bm = ClientInput(ltv=950, closeRate=0.15, margin=0.4), _bm()
    assert derive(inp, bm) == derive(inp, bm)
