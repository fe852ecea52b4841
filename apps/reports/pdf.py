from datetime import datetime
from io import BytesIO

from django.utils import timezone

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from config.constants import SITE_NAME

HEADER_BG = colors.HexColor('#f2f2f2')
HEADER_FG = colors.HexColor('#1e40af')

TABLE_STYLE = TableStyle([
    ('BACKGROUND', (0, 0), (-1, 0), HEADER_BG),
    ('TEXTCOLOR', (0, 0), (-1, 0), HEADER_FG),
    ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
    ('FONTSIZE', (0, 0), (-1, -1), 9),
    ('GRID', (0, 0), (-1, -1), 0.5, colors.grey),
    ('VALIGN', (0, 0), (-1, -1), 'TOP'),
    ('BOTTOMPADDING', (0, 0), (-1, -1), 4),
])


def _student_table(students, date_label, date_attr):
    rows = [["Name", "Email", "Destination", date_label]]
    for student in students:
        value = getattr(student, date_attr)
        if isinstance(value, datetime):
            value = timezone.localtime(value)
        if hasattr(value, 'strftime'):
            value = value.strftime('%Y-%m-%d')
        rows.append([
            student.full_name,
            student.email,
            student.preferred_study_destination or "N/A",
            value or "N/A",
        ])
    table = Table(rows, repeatRows=1, hAlign='LEFT')
    table.setStyle(TABLE_STYLE)
    return table


def render_report_pdf(report):
    """Build the counselor report PDF and return its bytes."""
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer, pagesize=A4, rightMargin=40, leftMargin=40, topMargin=40, bottomMargin=40,
        title=f"Counselor Report - {report.counselor}",
    )
    styles = getSampleStyleSheet()
    story = [
        Paragraph(f"{SITE_NAME} Counselor Report", styles['Title']),
        Paragraph(
            f"{report.counselor} &middot; {report.start_date:%d %b %Y} to {report.end_date:%d %b %Y}",
            styles['Normal'],
        ),
        Spacer(1, 12),
    ]

    summary = Table([["Metric", "Value"]] + [[label, str(value)] for label, value in report.summary_rows()],
                    hAlign='LEFT', colWidths=[220, 120])
    summary.setStyle(TABLE_STYLE)
    story += [summary, Spacer(1, 18)]

    sections = [
        ("Newly Assigned Students", report.newly_assigned, "Added", 'timestamp'),
        ("Visas Approved", report.visas_approved, "Visa Updated", 'visa_status_update_date'),
        ("Visas Rejected", report.visas_rejected, "Visa Updated", 'visa_status_update_date'),
        ("Fees Paid in Period", report.fees_paid_in_period, "Fee Paid", 'service_fee_paid_date'),
    ]
    for heading, students, date_label, date_attr in sections:
        story.append(Paragraph(f"{heading} ({len(students)})", styles['Heading2']))
        if students:
            story.append(_student_table(students, date_label, date_attr))
        else:
            story.append(Paragraph("No students in this period.", styles['Italic']))
        story.append(Spacer(1, 12))

    doc.build(story)
    return buffer.getvalue()
