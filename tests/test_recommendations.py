# tests/test_recommendations.py
from consult.models.io import ClientInput
from consult.services.recommendations import QUICK_WIN, RULES, TEST, generate

def _ids(recs):
    return [r.rule for r in recs]

# everything healthy: no rule should fire
CLEAN = dict(hooks=12, weeksSinceRefresh=2, ctr=0.05, lpLoadSec=1.5, lpCv=0.1,
             offerClarity="Strong", trustBlocks=True, formFriction="Low",
             pixelWorking=True, utms=True, dashboard=True, campaigns=3, adsets=6)

def _mk(**overrides):
    return ClientInput(**{**CLEAN, **overrides})

def test_clean_account_has_no_recommendations(saas):
    assert generate(_mk(), saas) == []

def test_rule_order_is_stable(saas):
    inp = ClientInput(hooks=5, weeksSinceRefresh=5, ctr=None, pixelWorking=False)
    ids = _ids(generate(inp, saas))
    expected = ["creative_hooks", "creative_refresh", "ctr_track", "pixel"]
    assert [i for i in ids if i in expected] == expected
    # defaults also trip LP tracking, form friction and the dashboard rule
    assert ids == ["creative_hooks", "creative_refresh", "ctr_track", "lp_tracking",
                   "form_friction", "pixel", "dashboard"]

def test_ctr_branches_are_exclusive(saas):
    assert _ids(generate(_mk(ctr=None), saas)) == ["ctr_track"]
    assert _ids(generate(_mk(ctr=0.016), saas)) == ["ctr_raise"]
    assert _ids(generate(_mk(ctr=0.02), saas)) == []

def test_lpcv_branches_are_exclusive(saas):
    assert _ids(generate(_mk(lpCv=None), saas)) == ["lp_tracking"]
    assert _ids(generate(_mk(lpCv=0.01), saas)) == ["lp_tests"]
    assert _ids(generate(_mk(lpCv=0.06), saas)) == []

def test_lp_load_absent_does_not_fire(saas):
    assert _ids(generate(_mk(lpLoadSec=None), saas)) == []
    assert _ids(generate(_mk(lpLoadSec=3), saas)) == []
    assert _ids(generate(_mk(lpLoadSec=3.1), saas)) == ["lp_speed"]

def test_structure_rules(saas):
    assert _ids(generate(_mk(campaigns=7), saas)) == ["structure_simplify"]
    assert _ids(generate(_mk(adsets=13), saas)) == ["structure_simplify"]
    assert _ids(generate(_mk(campaigns=1), saas)) == ["structure_test_campaign"]

def test_every_rule_fires_at_most_once(saas):
    worst = ClientInput(hooks=0, weeksSinceRefresh=10, ctr=0.001, lpLoadSec=9, lpCv=0.001,
                        offerClarity="Weak", trustBlocks=False, formFriction="High",
                        pixelWorking=False, utms=False, dashboard=False, campaigns=8, adsets=20)
    ids = _ids(generate(worst, saas))
    assert len(ids) == len(set(ids))
    assert "ctr_track" not in ids and "lp_tracking" not in ids

def test_rules_are_tagged():
    assert all(r.category in (QUICK_WIN, TEST) for r in RULES)
    tags = {r.id: r.category for r in RULES}
    assert tags["pixel"] == QUICK_WIN
    assert tags["dashboard"] == TEST
    assert tags["structure_simplify"] == QUICK_WIN

def test_generate_is_idempotent(saas):
    inp = ClientInput(hooks=4, ctr=0.01, pixelWorking=False)
    assert generate(inp, saas) == generate(inp, saas)
