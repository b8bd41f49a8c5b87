"""
Spreadsheet and PDF renderings of a filtered project list.

Both formats use a fixed column set and no aggregation; the only formatting
applied is reducing dates to ISO ``YYYY-MM-DD``.
"""

import logging

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font
from openpyxl.utils import get_column_letter
from reportlab.lib.pagesizes import A4, landscape
from reportlab.pdfgen import canvas

logger = logging.getLogger(__name__)

XLSX_CONTENT_TYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'

# (header, model attribute, column width)
EXCEL_COLUMNS = [
    ('PID', 'pid', 10),
    ('Project Name', 'project_name', 30),
    ('Ministry/Dept', 'ministry_dept', 25),
    ('Type', 'type', 15),
    ('Status', 'status', 30),
    ('Funding', 'fund_available', 15),
    ('Start Date', 'start_date', 15),
    ('Completion Date', 'completion_date', 15),
    ('Contract Value', 'contract_value', 15),
]

# (header, model attribute, x offset, max characters)
PDF_COLUMNS = [
    ('PID', 'pid', 30, None),
    ('Project Name', 'project_name', 70, 35),
    ('Ministry', 'ministry_dept', 250, 25),
    ('Type', 'type', 400, None),
    ('Funding', 'fund_available', 500, None),
    ('Value', 'contract_value', 580, None),
    ('Start Date', 'start_date', 650, None),
]

PDF_TITLE = 'Projects Report'
# Vertical offsets are measured from the top of the page
PDF_TABLE_TOP = 100
PDF_CONTINUATION_TOP = 50
PDF_ROW_HEIGHT = 20
PDF_PAGE_BREAK_AT = 500


def format_cell(value):
    """Dates become ISO dates, ``None`` becomes an empty string."""
    if value is None:
        return ''
    if hasattr(value, 'isoformat'):
        return value.isoformat()[:10]
    return value


def build_projects_workbook(projects):
    wb = Workbook()
    ws = wb.active
    ws.title = 'Projects'

    ws.append([header for header, _attr, _width in EXCEL_COLUMNS])
    header_font = Font(bold=True)
    for cell in ws[1]:
        cell.font = header_font
        cell.alignment = Alignment(vertical='center')

    count = 0
    for project in projects:
        ws.append([format_cell(getattr(project, attr)) for _header, attr, _width in EXCEL_COLUMNS])
        # Free text such as '=== Phase 2 ===' must stay text, never a formula
        for cell in ws[ws.max_row]:
            if isinstance(cell.value, str):
                cell.data_type = 's'
        count += 1

    for i, (_header, _attr, width) in enumerate(EXCEL_COLUMNS, 1):
        ws.column_dimensions[get_column_letter(i)].width = width
    ws.freeze_panes = 'A2'

    logger.info("Built projects workbook with %d rows", count)
    return wb


def _pdf_text(project, attr, max_chars):
    value = format_cell(getattr(project, attr))
    text = str(value)
    return text[:max_chars] if max_chars else text


def render_projects_pdf(projects, buffer):
    """
    Draw the projects as a simple fixed-column table onto ``buffer``.

    A new landscape page starts whenever the next row would fall below the
    page-break offset; the header line is repeated on every page.

    Returns the number of pages written.
    """
    page_width, page_height = landscape(A4)
    pdf = canvas.Canvas(buffer, pagesize=(page_width, page_height))
    pdf.setTitle(PDF_TITLE)

    def draw_header(y):
        pdf.setFont('Helvetica-Bold', 10)
        for header, _attr, x, _max in PDF_COLUMNS:
            pdf.drawString(x, page_height - y, header)
        pdf.setFont('Helvetica', 9)
        return y + PDF_ROW_HEIGHT

    pdf.setFont('Helvetica-Bold', 18)
    pdf.drawCentredString(page_width / 2, page_height - 50, PDF_TITLE)
    y = draw_header(PDF_TABLE_TOP)
    pages = 1
    rows = 0

    for project in projects:
        if y > PDF_PAGE_BREAK_AT:
            pdf.showPage()
            pages += 1
            y = draw_header(PDF_CONTINUATION_TOP)
        for _header, attr, x, max_chars in PDF_COLUMNS:
            pdf.drawString(x, page_height - y, _pdf_text(project, attr, max_chars))
        y += PDF_ROW_HEIGHT
        rows += 1

    pdf.showPage()
    pdf.save()
    logger.info("Rendered projects PDF with %d rows on %d pages", rows, pages)
    return pages
