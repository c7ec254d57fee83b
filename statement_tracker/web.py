from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict
from urllib.parse import urlencode

from fastapi import FastAPI, Form, Request
from fastapi.responses import JSONResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from statement_tracker.config import load_config
from statement_tracker.core.aggregator import compute, statements
from statement_tracker.core.models import Category, ValidationError
from statement_tracker.core.store import TransactionStore
from statement_tracker.forms import parse_transaction_form
from statement_tracker.outputs.base import EmptyExportError
from statement_tracker.outputs.excel_output import DEFAULT_FILENAME, ExcelOutput
from statement_tracker.utils import format_peso

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).with_name("templates")
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _redirect(message: str | None = None, error: str | None = None) -> RedirectResponse:
    params = {k: v for k, v in (("message", message), ("error", error)) if v}
    url = "/?" + urlencode(params) if params else "/"
    return RedirectResponse(url, status_code=303)


def _statements_payload(store: TransactionStore) -> Dict[str, Any]:
    txs = store.all()
    totals = compute(txs)
    return {
        "transactions": [
            {
                "index": idx,
                "date": tx.date.isoformat(),
                "description": tx.description,
                "category": tx.category.value,
                "amount": format_peso(tx.amount),
            }
            for idx, tx in enumerate(txs)
        ],
        "statements": [
            {
                "title": statement.title,
                "rows": [{"label": label, "amount": format_peso(amount)} for label, amount in statement.rows],
            }
            for statement in statements(totals)
        ],
    }


def create_app(config: Dict[str, object] | None = None, store: TransactionStore | None = None) -> FastAPI:
    """Build the web app around a single session-owned store."""
    cfg = config or load_config()
    app = FastAPI(title="pesobooks")
    app.state.config = cfg
    app.state.store = store if store is not None else TransactionStore()
    templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
    templates.env.filters["peso"] = format_peso
    exporter = ExcelOutput(cfg)
    filename = cfg.get("export_filename") or DEFAULT_FILENAME

    @app.get("/")
    async def index(request: Request, message: str | None = None, error: str | None = None):
        txs = app.state.store.all()
        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "transactions": txs,
                "statements": statements(compute(txs)),
                "categories": list(Category),
                "message": message,
                "error": error,
            },
        )

    @app.post("/transactions")
    async def add_transaction(
        date: str = Form(""),
        description: str = Form(""),
        category: str = Form(""),
        amount: str = Form(""),
    ):
        form = {"date": date, "description": description, "category": category, "amount": amount}
        try:
            tx = parse_transaction_form(form)
            app.state.store.append(tx)
        except ValidationError as exc:
            logger.info("Rejected form submission on field %s", exc.field)
            return _redirect(error=str(exc))
        return _redirect(message="Transaction added")

    @app.post("/transactions/{index}/delete")
    async def delete_transaction(index: int):
        try:
            app.state.store.remove_at(index)
        except IndexError as exc:
            logger.warning("Ignoring removal request: %s", exc)
            return _redirect(error=str(exc))
        return _redirect(message="Transaction removed")

    @app.get("/export")
    async def export_workbook():
        txs = app.state.store.all()
        try:
            body = exporter.render(txs, compute(txs))
        except EmptyExportError as exc:
            return _redirect(error=str(exc))
        logger.info("Exporting %d transaction(s) as %s", len(txs), filename)
        return Response(
            content=body,
            media_type=XLSX_MEDIA_TYPE,
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    @app.get("/api/statements")
    async def statements_json():
        return JSONResponse(_statements_payload(app.state.store))

    return app
