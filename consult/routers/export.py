from typing import Dict

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response, StreamingResponse

from consult.exporters.email import email_draft
from consult.exporters.ppt import build_ppt
from consult.exporters.tabular import consult_record, to_csv
from consult.exporters.text import consult_filename, plan_filename
from consult.models.io import ClientInput
from consult.routers.deps import entry_for, get_table
from consult.services.audit import run_audit
from consult.services.benchmarks import BenchmarkTable

router = APIRouter(prefix="/export", tags=["export"])

def _attachment(filename: str) -> Dict[str, str]:
    return {"Content-Disposition": f'attachment; filename="{filename}"'}

@router.post("/txt")
def export_txt(req: ClientInput, table: BenchmarkTable = Depends(get_table)):
    data = run_audit(req, entry_for(table, req))
    return PlainTextResponse(data["plan_text"], headers=_attachment(plan_filename(req.company)))

@router.post("/csv")
def export_csv(req: ClientInput, table: BenchmarkTable = Depends(get_table)):
    bm = entry_for(table, req)
    data = run_audit(req, bm)
    record = consult_record(req.model_dump(by_alias=True), data["derived"],
                            data["risk"]["confidence"], data["risk"]["flags"])
    return Response(to_csv(record), media_type="text/csv", headers=_attachment(consult_filename(req.company)))

@router.post("/email")
def export_email(req: ClientInput, to: str = "", table: BenchmarkTable = Depends(get_table)) -> Dict[str, str]:
    data = run_audit(req, entry_for(table, req))
    return email_draft(req.company, data["plan_text"], to=to)

@router.post("/pptx")
def export_pptx(req: ClientInput, table: BenchmarkTable = Depends(get_table)):
    bm = entry_for(table, req)
    data = run_audit(req, bm)
    deck = build_ppt(data, bm, title=f"Action Plan – {req.company or 'Client'}")
    return StreamingResponse(
        deck,
        media_type="application/vnd.openxmlformats-officedocument.presentationml.presentation",
        headers=_attachment(plan_filename(req.company, "pptx")),
    )
