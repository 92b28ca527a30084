import io
import logging
from typing import Iterable, Optional
from xml.sax.saxutils import escape

from pypdf import PdfReader
from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from bento.domain.Scaling import ScalingResult, ScaledIngredientLine
from bento.logic.imports.errors import NoTextExtractedError
from bento.utilities.currency import format_currency

logger = logging.getLogger(__name__)


def extract_pdf_text(data: bytes) -> str:
    """Return the text layer of every page, pages separated by a blank line."""
    try:
        reader = PdfReader(io.BytesIO(data))
        pages = [(page.extract_text() or "").strip() for page in reader.pages]
    except Exception as e:
        logger.warning("Unreadable PDF upload: %s", e)
        raise NoTextExtractedError("The PDF appears to be damaged or unreadable") from e
    text = "\n\n".join(p for p in pages if p)
    if not text.strip():
        raise NoTextExtractedError("The PDF appears to be empty or has no text layer")
    return text


def generate_scaled_recipe_pdf(title: str, result: ScalingResult, lines: Iterable[ScaledIngredientLine],
                               currency: str = "USD", original_setup: Optional[str] = None):
    """Generate a one-page production sheet: scaling summary + ingredient table with new weights/costs."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    summary = f"Scaling factor x{result.scaling_factor:.2f} - yield {result.new_yield} pieces - " \
              f"total {result.new_total_weight:.0f} g"
    elements = [
        Paragraph(f"Scaled Recipe – {escape(title)}", styles["Title"]),
        Paragraph(summary, styles["Normal"]),
    ]
    if original_setup:
        elements.append(Paragraph(f"From: {escape(original_setup)}", styles["Normal"]))
    if result.pan_description:
        elements.append(Paragraph(f"Pan setup: {escape(result.pan_description)}", styles["Normal"]))
    elements.append(Spacer(1, 16))

    data = [["Ingredient", "Baker's %", "Original (g)", "New (g)", "New cost"]]
    total_cost = 0.0
    for line in lines:
        total_cost += line.new_cost
        data.append([
            line.name,
            f"{line.baker_percentage:.1f}%",
            f"{line.original_weight:.1f}",
            f"{line.new_weight:.1f}",
            format_currency(line.new_cost, currency),
        ])
    data.append(["Total", "", "", "", format_currency(total_cost, currency)])

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#E07A2F")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (1,0), (-1,-1), "RIGHT"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTNAME", (0,-1), (-1,-1), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
