from typing import Optional, Dict, Any, List, Literal
from pydantic import BaseModel, ConfigDict, Field, conint, confloat

StatusLabel = Literal["good", "ok", "poor", "n/a"]
StatusColor = Literal["green", "yellow", "red", "slate"]
Direction = Literal["up", "down"]
Category = Literal["quick_win", "test"]
MetricName = Literal["cpl", "ctr", "lpCv", "roas", "cacToLtv"]

class Threshold(BaseModel):
    model_config = ConfigDict(frozen=True)

    good: float
    ok: float

class BenchmarkEntry(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    cpl: Threshold
    ctr: Threshold
    lp_cv: Threshold = Field(..., alias="lpCv")
    roas: Threshold
    cac_to_ltv: Threshold = Field(..., alias="cacToLtv")

    def metric(self, name: str) -> Threshold:
        """Look up a threshold pair by its wire name (e.g. 'lpCv')."""
        for field_name, info in type(self).model_fields.items():
            if name in (field_name, info.alias):
                return getattr(self, field_name)
        raise KeyError(name)

class ClientInput(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # context (inert to the engine apart from the plan header)
    industry: str = Field("Local Service", min_length=1)
    company: str = ""
    win30: str = ""
    challenges: str = ""
    mgr: Literal["Agency", "Freelancer", "In-house", "Founder", "None"] = "None"
    tools: str = ""
    events: str = "Lead, Schedule, Purchase"
    guided: bool = False
    notes: str = ""

    # economics
    monthly_revenue: Optional[confloat(ge=0)] = Field(None, alias="monthlyRevenue")
    monthly_ad_spend: Optional[confloat(ge=0)] = Field(None, alias="monthlyAdSpend")
    ltv: Optional[confloat(ge=0)] = None
    close_rate: Optional[confloat(ge=0, le=1)] = Field(0.2, alias="closeRate")
    margin: Optional[confloat(ge=0, le=1)] = 0.6
    monthly_lead_goal: Optional[confloat(ge=0)] = Field(None, alias="monthlyLeadGoal")

    # audit
    campaigns: conint(ge=0) = 3
    adsets: conint(ge=0) = 6
    ctr: Optional[confloat(ge=0, le=1)] = None
    hooks: conint(ge=0) = 9
    weeks_since_refresh: confloat(ge=0) = Field(3, alias="weeksSinceRefresh")
    lp_load_sec: Optional[confloat(ge=0)] = Field(3, alias="lpLoadSec")
    lp_cv: Optional[confloat(ge=0, le=1)] = Field(None, alias="lpCv")
    offer_clarity: Literal["Weak", "OK", "Strong"] = Field("OK", alias="offerClarity")
    trust_blocks: bool = Field(True, alias="trustBlocks")
    form_friction: Literal["Low", "Medium", "High"] = Field("Medium", alias="formFriction")
    pixel_working: bool = Field(True, alias="pixelWorking")
    utms: bool = True
    dashboard: bool = False

class ThresholdIn(BaseModel):
    good: float
    ok: float

class AddIndustryIn(BaseModel):
    name: str = Field(..., min_length=1)
    entry: Optional[BenchmarkEntry] = None
    overwrite: bool = False

class StatusOut(BaseModel):
    label: StatusLabel
    color: StatusColor
    hint: Optional[str] = None

class RecommendationOut(BaseModel):
    text: str
    category: Category
    rule: Optional[str] = None

class AuditOut(BaseModel):
    input: Dict[str, Any]
    statuses: Dict[str, StatusOut]
    derived: Dict[str, Optional[float]]
    recommendations: List[RecommendationOut]
    plan: Dict[str, List[str]]   # {"quick_wins": [...], "tests": [...]}
    risk: Dict[str, Any]         # {"flags": [...], "confidence": int}
    plan_text: str
    meta: Dict[str, Any]

class BenchmarkTableOut(BaseModel):
    version: int
    industries: Dict[str, BenchmarkEntry]
