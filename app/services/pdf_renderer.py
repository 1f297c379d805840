from __future__ import annotations
import io, logging
from reportlab.pdfgen import canvas

log = logging.getLogger("pdf_renderer")

PAGE_SIZE = (600, 400)
TITLE = "Entry Pass Details"
TITLE_X, TITLE_Y = 200, 370
TITLE_FONT = ("Helvetica-Bold", 20)
LABEL_FONT = ("Helvetica-Bold", 12)
VALUE_FONT = ("Helvetica", 12)
LABEL_X, VALUE_X = 50, 150
FIRST_ROW_Y = 340
ROW_STEP = 20


def entry_rows(record: dict) -> list[tuple[str, str]]:
    """
    Label/value pairs in page order. No checks: a missing key or a gender
    without a label raises here, as does a value that is not text or that
    Helvetica's WinAnsi encoding cannot draw.
    """
    rows = [
        ("Name:",    record["name"]),
        ("Gender:",  record["gender"]["label"]),
        ("Email:",   record["email"]),
        ("Phone:",   record["phone"]),
        ("Address:", record["address"]),
        ("Pincode:", record["pincode"]),
        ("Date:",    record["date"]),
        ("Time:",    record["time"]),
        ("Reason:",  record["reason"]),
    ]
    for label, value in rows:
        if not isinstance(value, str):
            raise TypeError(f"{label} expected text, got {type(value).__name__}")
        value.encode("cp1252")  # UnicodeEncodeError for glyphs Helvetica lacks
    return rows


def render_entry_pass(record: dict) -> bytes:
    rows = entry_rows(record)

    buf = io.BytesIO()
    pdf = canvas.Canvas(buf, pagesize=PAGE_SIZE)
    pdf.setTitle(TITLE)
    pdf.setFillColorRGB(0, 0, 0)

    pdf.setFont(*TITLE_FONT)
    pdf.drawString(TITLE_X, TITLE_Y, TITLE)

    y = FIRST_ROW_Y
    for label, value in rows:
        pdf.setFont(*LABEL_FONT)
        pdf.drawString(LABEL_X, y, label)
        pdf.setFont(*VALUE_FONT)
        pdf.drawString(VALUE_X, y, value)
        y -= ROW_STEP

    pdf.showPage()
    pdf.save()
    data = buf.getvalue()
    log.info("rendered entry pass: %d bytes", len(data))
    return data
