import re

def slug(company: str) -> str:
    """File-name stem for exports; falls back to 'client'."""
    name = (company or "").strip() or "client"
    return re.sub(r"[^\w.-]+", "_", name)

def plan_filename(company: str, ext: str = "txt") -> str:
    return f"{slug(company)}-action-plan.{ext}"

def consult_filename(company: str) -> str:
    return f"{slug(company)}-consult.csv"
