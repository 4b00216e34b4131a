import re
import unicodedata
from io import BytesIO
from urllib.parse import quote

from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from policy_desk.db.models.policy import Policy as PolicyModel
from policy_desk.domain.notifications import format_display_date

REPORT_TITLE = "Insurance Policy Report"


def report_filename(policy: PolicyModel) -> str:
    """e.g. 'Jane_Doe_Policy_Report.pdf'."""
    return re.sub(r"\s+", "_", policy.name) + "_Policy_Report.pdf"


def report_content_disposition(policy: PolicyModel) -> str:
    """
    Attachment header for the report download.

    Carries a plain ASCII ``filename`` for old clients and the full UTF-8
    name as ``filename*`` (RFC 5987). Header values must be Latin-1, so
    holder names outside it only appear percent-encoded.
    """
    filename = report_filename(policy)
    fallback = unicodedata.normalize("NFKD", filename).encode("ascii", "ignore").decode("ascii")
    fallback = re.sub(r'["\\]', "", fallback).lstrip("_") or "Policy_Report.pdf"
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"


def report_lines(policy: PolicyModel) -> list[str]:
    return [
        f"Name: {policy.name}",
        f"Email: {policy.email}",
        f"Phone: {policy.phone_number}",
        f"Insurance Type: {policy.insurance_type}",
        f"Insurance Company: {policy.insurance_company}",
        f"Policy Number: {policy.policy_number}",
        f"Policy Start Date: {format_display_date(policy.policy_start_date)}",
        f"Policy End Date: {format_display_date(policy.policy_end_date)}",
        f"Premium Amount: ${policy.premium_amount:.2f}",
    ]


def render_policy_report(policy: PolicyModel) -> bytes:
    """Render a single-page PDF summary of the policy."""
    buffer = BytesIO()
    p = canvas.Canvas(buffer, pagesize=letter)
    p.setTitle(REPORT_TITLE)
    width, height = letter

    p.setFont("Helvetica-Bold", 20)
    p.drawCentredString(width / 2, height - 72, REPORT_TITLE)

    p.setFont("Helvetica", 12)
    y = height - 120
    for line in report_lines(policy):
        p.drawString(72, y, line)
        y -= 20

    p.showPage()
    p.save()
    return buffer.getvalue()
