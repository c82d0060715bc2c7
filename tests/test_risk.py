# tests/test_risk.py
from consult.models.io import ClientInput
from consult.services import risk
from consult.services.risk import confidence_score, risk_flags

HEALTHY = dict(pixelWorking=True, dashboard=True, lpLoadSec=2, hooks=10, weeksSinceRefresh=1)

def test_no_flags_when_nothing_matches(saas):
    assert risk_flags(ClientInput(**HEALTHY), saas) == []

def test_all_flags_in_fixed_order(saas):
    inp = ClientInput(pixelWorking=False, dashboard=False, lpLoadSec=5, hooks=3, weeksSinceRefresh=7)
    assert risk_flags(inp, saas) == [
        "Tracking broken", "No KPI dashboard", "Slow landing page",
        "Low creative diversity", "Creative fatigue risk",
    ]

def test_flag_boundaries(saas):
    assert risk_flags(ClientInput(**{**HEALTHY, "lpLoadSec": 4}), saas) == []
    assert risk_flags(ClientInput(**{**HEALTHY, "lpLoadSec": None}), saas) == []
    assert risk_flags(ClientInput(**{**HEALTHY, "hooks": 6}), saas) == []
    assert risk_flags(ClientInput(**{**HEALTHY, "weeksSinceRefresh": 6}), saas) == []

def test_perfect_account_scores_100(saas):
    assert confidence_score(ClientInput(**HEALTHY, ctr=0.05, lpCv=0.1), saas) == 100

def test_all_six_deductions(saas):
    inp = ClientInput(pixelWorking=False, dashboard=False, lpLoadSec=5, hooks=3, ctr=0.001, lpCv=0.001)
    assert confidence_score(inp, saas) == 100 - 25 - 15 - 10 - 10 - 10 - 10 == 20

def test_absent_rates_do_not_deduct(saas):
    assert confidence_score(ClientInput(**HEALTHY, ctr=None, lpCv=None), saas) == 100

def test_rate_deduction_uses_ok_threshold(saas):
    # between ok and good: no deduction (it is a recommendation, not a risk)
    assert confidence_score(ClientInput(**HEALTHY, ctr=0.016), saas) == 100
    assert confidence_score(ClientInput(**HEALTHY, ctr=0.014), saas) == 90

def test_score_is_clamped_at_zero(saas, monkeypatch):
    monkeypatch.setitem(risk.CONFIDENCE_DEDUCTIONS, "pixel_broken", 500)
    assert confidence_score(ClientInput(pixelWorking=False), saas) == 0

def test_scores_are_idempotent(saas):
    inp = ClientInput(pixelWorking=False, hooks=2, lpCv=0.01)
    assert risk_flags(inp, saas) == risk_flags(inp, saas)
    assert confidence_score(inp, saas) == confidence_score(inp, saas)
