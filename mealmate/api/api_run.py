from fastapi import (
    FastAPI,
    Query,
    Body,
)
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

import logging

from mealmate.domain.Meal import PlannedMeal
from mealmate.domain.Pantry import Pantry
from mealmate.domain.ShoppingList import GroceryList
from mealmate.infra.pdf_utils import generate_pdf_for_grocery_list
from mealmate.logic.shopping.export import TEXT_FORMATS, export_grocery_list
from mealmate.logic.shopping.list_builder import build_grocery_list
from mealmate.utilities.config import GROCERY_LIST_TITLE
from mealmate.utilities.constants import AISLES, EXPORT_FORMATS
from mealmate.utilities.validators import GenerateGroceryListRequest

# Logging
logger = logging.getLogger("mealmate_app")

FAILURE_MESSAGE = "Failed to generate grocery list"

EXPORT_EXTENSIONS = {
    "text": "txt",
    "csv": "csv",
    "json": "json",
    "simple": "txt",
    "pdf": "pdf",
}

# Initialize FastAPI app
app = FastAPI(title="MealMate Grocery List API")


# -------------------- Helpers --------------------
def _failure(error: str, status_code: int = 500) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": error})


@app.exception_handler(RequestValidationError)
async def _invalid_body(request, exc):
    # Unparseable bodies get the same generic failure as engine errors
    logger.warning("Rejected request body on %s: %s", request.url.path, exc.errors())
    return _failure(FAILURE_MESSAGE)


def _grocery_list_from_payload(payload: dict) -> GroceryList:
    """Validate the request body and run the list builder on it."""
    request = GenerateGroceryListRequest.model_validate(payload)
    meals = [PlannedMeal.from_dict(m.model_dump()) for m in request.meals]
    pantry = Pantry().from_dict([p.model_dump() for p in request.pantry_items])
    logger.info(
        "Grocery list request household=%s meals=%s pantry_items=%s exclude_staples=%s",
        request.household_id, len(meals), len(pantry), request.exclude_staples,
    )
    return build_grocery_list(meals, pantry.get_items(), exclude_staples=request.exclude_staples)


# -------------------- API: Grocery List --------------------
@app.post('/api/generate-grocery-list')
@app.post('/api/generate-grocery-list/')
def api_generate_grocery_list(payload: dict = Body(...)):
    try:
        grocery_list = _grocery_list_from_payload(payload)
    except Exception:
        logger.exception("Error generating grocery list")
        return _failure(FAILURE_MESSAGE)
    logger.info("Generated grocery list with %s items (%s on hand)",
                grocery_list.summary.total_items, grocery_list.summary.items_in_pantry)
    return {"success": True, "groceryList": grocery_list.to_dict()}


@app.post('/api/grocery-list/export')
@app.post('/api/grocery-list/export/')
def api_export_grocery_list(payload: dict = Body(...),
                            format: str = Query(default="text"),
                            title: str = Query(default=GROCERY_LIST_TITLE)):
    fmt = format.lower()
    if fmt not in EXPORT_FORMATS:
        return _failure(f"Unsupported export format: {format}", status_code=400)
    try:
        grocery_list = _grocery_list_from_payload(payload)
        if fmt == "pdf":
            content = generate_pdf_for_grocery_list(grocery_list, title)
            media_type = "application/pdf"
        else:
            content = export_grocery_list(grocery_list, fmt, title)
            media_type = TEXT_FORMATS[fmt]
    except Exception:
        logger.exception("Error exporting grocery list as %s", fmt)
        return _failure(FAILURE_MESSAGE)

    return Response(
        content=content,
        media_type=media_type,
        headers={
            "Content-Disposition": f"attachment; filename=grocery_list.{EXPORT_EXTENSIONS[fmt]}"
        },
    )


@app.get('/api/grocery-list/aisles')
def api_aisles():
    return {"aisles": list(AISLES), "count": len(AISLES)}


@app.get('/health')
def health():
    return {"status": "ok"}
