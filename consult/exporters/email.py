import html
from typing import Dict
from urllib.parse import quote

from consult.config import EMAIL_SIGNATURE

def _safe(s: str) -> str:
    return html.escape(s, quote=False).replace("\n", "<br>")

def email_html(company: str, plan_text: str) -> str:
    """HTML body for pasting into a mail client."""
    title = f"{company} — 48 Hour Action Plan" if company else "48 Hour Action Plan"
    return (
        '<!doctype html><html><body style="font-family:Inter,Arial,sans-serif;color:#111;line-height:1.5;padding:16px">'
        f'<h2 style="margin:0 0 8px">{html.escape(title)}</h2>'
        '<p style="color:#444">Below is your quick-win plan and 30 day test roadmap. If you want us to execute this, '
        'we run it inside our 90 day block and you will not have to do a thing.</p>'
        '<pre style="white-space:pre-wrap;background:#f6f7f9;border:1px solid #e4e7eb;padding:12px;border-radius:8px;'
        f'font-family:ui-monospace,Menlo,Consolas,monospace">{_safe(plan_text)}</pre>'
        f'<p style="margin-top:16px;color:#444">— {html.escape(EMAIL_SIGNATURE)}</p>'
        '</body></html>'
    )

def email_draft(company: str, plan_text: str, to: str = "") -> Dict[str, str]:
    """Subject, plain body, HTML body and a mailto: link for the plan."""
    subject = f"{company or 'Your'} 48 Hour Action Plan"
    body = (
        "Attached below is your 48 hour action plan.\n\n"
        f"{plan_text}\n\n"
        "If you would like us to implement this, we will run it inside our 90 day block "
        "and you will not have to do a thing.\n"
        f"— {EMAIL_SIGNATURE}"
    )
    return {
        "subject": subject,
        "body": body,
        "html": email_html(company or "Client", plan_text),
        "mailto": f"mailto:{quote(to, safe='@')}?subject={quote(subject)}&body={quote(body)}",
    }
