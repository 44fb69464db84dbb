"""Plain-text, CSV and JSON renderings of a generated grocery list."""
import csv
import io
import json
import logging
from datetime import datetime
from mealmate.domain.ShoppingList import GroceryList

logger = logging.getLogger(__name__)

TEXT_FORMATS = {
    "text": "text/plain",
    "csv": "text/csv",
    "json": "application/json",
    "simple": "text/plain",
}


def to_text(grocery_list: GroceryList, title: str) -> str:
    """Checklist grouped by aisle, with a total line."""
    lines = [title, "=" * len(title), ""]
    for aisle, items in grocery_list.grouped_by_aisle.items():
        lines.append(f"{aisle}:")
        for item in items:
            lines.append(f"  [ ] {item.name} ({item.amount})")
        lines.append("")
    lines.append("")
    lines.append(f"Total: {len(grocery_list)} items")
    return "\n".join(lines)


def to_csv(grocery_list: GroceryList) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(["Name", "Quantity", "Aisle", "Sources"])
    for item in grocery_list.get_items():
        writer.writerow([item.name, item.amount, item.aisle or "Other", "; ".join(item.sources)])
    return buf.getvalue()


def to_json(grocery_list: GroceryList, title: str) -> str:
    payload = {
        "name": title,
        "exportedAt": datetime.now().isoformat(),
        "items": [item.to_dict() for item in grocery_list.get_items()],
        "summary": grocery_list.summary.to_dict(),
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


def to_simple_list(grocery_list: GroceryList, title: str) -> str:
    """Bulleted list for pasting into a message."""
    lines = [title, ""]
    lines.extend(f"• {item.name} ({item.amount})" for item in grocery_list.get_items())
    lines.append("")
    lines.append(f"{len(grocery_list)} items total")
    return "\n".join(lines)


def export_grocery_list(grocery_list: GroceryList, fmt: str, title: str) -> str:
    """Render the list in one of TEXT_FORMATS. Raises ValueError for anything else."""
    fmt = (fmt or "").lower()
    if fmt == "text":
        content = to_text(grocery_list, title)
    elif fmt == "csv":
        content = to_csv(grocery_list)
    elif fmt == "json":
        content = to_json(grocery_list, title)
    elif fmt == "simple":
        content = to_simple_list(grocery_list, title)
    else:
        raise ValueError(f"Unsupported export format: {fmt!r}")
    logger.info("Exported %s grocery items as %s", len(grocery_list), fmt)
    return content


__all__ = ["TEXT_FORMATS", "to_text", "to_csv", "to_json", "to_simple_list", "export_grocery_list"]
