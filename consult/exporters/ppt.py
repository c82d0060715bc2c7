from io import BytesIO
from typing import Any, Dict, List

from pptx import Presentation
from pptx.util import Pt

from consult.services.plan import guardrail_lines

def _bullets_slide(prs, title: str, items: List[str], empty: str = "None this round.") -> None:
    slide = prs.slides.add_slide(prs.slide_layouts[1])
    slide.shapes.title.text = title
    body = slide.placeholders[1].text_frame
    lines = items or [empty]
    body.text = lines[0]
    for line in lines[1:]:
        p = body.add_paragraph()
        p.text = line
    for p in body.paragraphs:
        for run in p.runs:
            run.font.size = Pt(18)

def build_ppt(d: Dict[str, Any], bm, title: str = "Action Plan") -> BytesIO:
    """Deck from a run_audit() result: title, quick wins, tests, guardrails."""
    prs = Presentation()
    slide = prs.slides.add_slide(prs.slide_layouts[0])
    slide.shapes.title.text = title
    risk = d.get("risk", {})
    subtitle = slide.placeholders[1]
    subtitle.text = (f"Industry: {d.get('meta', {}).get('industry')} | "
                     f"Confidence: {risk.get('confidence')}/100")

    plan = d.get("plan", {})
    _bullets_slide(prs, "Quick Wins (7 days)", [f"{i}. {x}" for i, x in enumerate(plan.get("quick_wins", []), 1)])
    _bullets_slide(prs, "Priority Tests (30 days)", [f"{i}. {x}" for i, x in enumerate(plan.get("tests", []), 1)])
    guard = [line.lstrip("• ") for line in guardrail_lines(bm, d.get("derived", {}))]
    _bullets_slide(prs, "Guardrails", guard + [f"Risk flags: {'; '.join(risk.get('flags') or []) or 'None detected'}"])

    bio = BytesIO()
    prs.save(bio)
    bio.seek(0)
    return bio
