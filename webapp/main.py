from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict
from urllib.parse import urlencode

from fastapi import FastAPI, Form, Request
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates

from expense_tracker.config import build_ledger, load_config
from expense_tracker.core.models import DEFAULT_CATEGORY
from expense_tracker.errors import InvalidExpenseError, StorageError
from expense_tracker.ledger import ExpenseLedger
from expense_tracker.views import build_page

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).with_name("templates")
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def _redirect(**params: str) -> RedirectResponse:
    query = urlencode({key: value for key, value in params.items() if value})
    return RedirectResponse(f"/?{query}" if query else "/", status_code=303)


def create_app(config: Dict[str, object], ledger: ExpenseLedger | None = None) -> FastAPI:
    app = FastAPI(title="Expense Tracker")
    app.state.config = config
    app.state.ledger = ledger if ledger is not None else build_ledger(config)
    currency_symbol = str(config.get("currency_symbol", "$"))

    @app.get("/")
    def index(
        request: Request,
        category: str | None = None,
        message: str | None = None,
        error: str | None = None,
    ):
        page = build_page(app.state.ledger.expenses, currency_symbol, selected_category=category)
        return templates.TemplateResponse(
            request,
            "index.html",
            {"page": page, "message": message, "error": error},
        )

    @app.post("/expenses")
    def add_expense(
        description: str = Form(""),
        amount: str = Form(""),
        category: str = Form(DEFAULT_CATEGORY),
    ):
        try:
            app.state.ledger.add_expense(description, amount, category, strict=True)
        except (InvalidExpenseError, StorageError) as exc:
            return _redirect(category=category, error=str(exc))
        return _redirect(category=category, message="Expense added")

    @app.post("/expenses/{expense_id}/delete")
    def delete_expense(expense_id: str):
        try:
            deleted = app.state.ledger.delete_expense(expense_id)
        except StorageError as exc:
            return _redirect(error=str(exc))
        if not deleted:
            logger.debug("Delete requested for unknown expense %s", expense_id)
        return _redirect()

    return app


def get_app() -> FastAPI:
    """App factory for `uvicorn --factory webapp.main:get_app`."""
    return create_app(load_config())
