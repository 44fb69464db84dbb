import io
from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet
from xml.sax.saxutils import escape

from mealmate.domain.ShoppingList import GroceryList


def generate_pdf_for_grocery_list(grocery_list: GroceryList, title: str = "Grocery List"):
    """Generate a PDF with one Item / Amount / Meals table per aisle."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(escape(title), styles["Title"]),
        Spacer(1, 16),
    ]

    for aisle, items in grocery_list.grouped_by_aisle.items():
        elements.append(Paragraph(escape(aisle), styles["Heading2"]))
        data = [["Item", "Amount", "Meals"]]
        for item in items:
            data.append([item.name, item.amount, ", ".join(item.sources)])

        table = Table(data, repeatRows=1)
        table.setStyle(TableStyle([
            ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
            ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
            ("ALIGN", (0,0), (-1,-1), "LEFT"),
            ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
            ("FONTSIZE", (0,0), (-1,0), 12),
            ("BOTTOMPADDING", (0,0), (-1,0), 10),
            ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
        ]))
        elements.append(table)
        elements.append(Spacer(1, 12))

    summary = grocery_list.summary
    elements.append(Paragraph(
        f"{summary.total_items} items from {summary.meals_included} meals "
        f"({summary.items_in_pantry} already on hand)",
        styles["Normal"],
    ))
    doc.build(elements)
    return buf.getvalue()
