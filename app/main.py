from __future__ import annotations
import os, logging
from fastapi import FastAPI, Request, Response, HTTPException, status
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.concurrency import run_in_threadpool
from pydantic import ValidationError
from dotenv import load_dotenv

from .schemas import EntryForm, GENDERS, COUNTRY_CODES, FIELD_RULES, form_errors
from .services import pdf_renderer

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
APP_TITLE = os.getenv("APP_TITLE", "Entry Pass Generator")
PDF_FILENAME = "form-data.pdf"

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
log = logging.getLogger("entry_pass")

app = FastAPI(title=APP_TITLE)
app.mount("/static", StaticFiles(directory=str(os.path.join(os.path.dirname(__file__), "..", "static"))), name="static")
templates = Jinja2Templates(directory=str(os.path.join(os.path.dirname(__file__), "..", "templates")))


def _form_context(values: dict | None = None, errors: dict | None = None) -> dict:
    return {
        "genders": GENDERS,
        "country_codes": COUNTRY_CODES,
        "rules": FIELD_RULES,
        "values": values or {},
        "errors": errors or {},
        "filename": PDF_FILENAME,
    }


def _pdf_response(data: bytes) -> Response:
    return Response(
        content=data,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{PDF_FILENAME}"'},
    )


async def _render(record) -> Response:
    try:
        data = await run_in_threadpool(pdf_renderer.render_entry_pass, record)
    except Exception:
        log.exception("entry pass rendering failed")
        return JSONResponse({"ok": False, "error": "Failed to generate PDF"},
                            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return _pdf_response(data)


@app.get("/", response_class=HTMLResponse)
def home(request: Request):
    return templates.TemplateResponse(request, "index.html", _form_context())


@app.post("/api/generate-pdf")
async def api_generate_pdf(request: Request):
    try:
        record = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid JSON body")
    return await _render(record)


@app.post("/generate")
async def generate_from_form(request: Request):
    """Fallback for browsers without the form script: validate here instead."""
    form = await request.form()
    values = {k: (form.get(k) or "") for k in FIELD_RULES}
    try:
        entry = EntryForm(**values)
    except ValidationError as e:
        errors = form_errors(e)
        log.info("entry form rejected: %s", ", ".join(sorted(errors)))
        return templates.TemplateResponse(request, "index.html", _form_context(values, errors),
                                          status_code=422)
    return await _render(entry.to_record())
