from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

from fastapi import Body, Depends, FastAPI, Form, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

from storefront_kit.browser import browser_session
from storefront_kit.cloner import Cloned, clone_with_computed_styles, to_html
from storefront_kit.engine import StyleEngine
from storefront_kit.errors import CatalogError, InvalidSelectorError, StructureMismatchError
from storefront_kit.io import DEFAULT_CSV_FILENAME, parse_catalog
from storefront_kit.settings import load_settings
from storefront_kit.transform import convert_json_to_csv


log = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

app = FastAPI(title="Storefront Kit API", version="0.1.0")
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

CSV_MEDIA_TYPE = "text/csv; charset=utf-8"


class CloneRequest(BaseModel):
    html: str
    selector: str


class CloneResponse(BaseModel):
    found: bool
    selector: str
    html: str = ""
    pseudo_rules: List[str] = []


def get_engine() -> Iterator[StyleEngine]:
    with browser_session(load_settings()) as engine:
        yield engine


def _attachment(csv_text: str, filename: str) -> Response:
    return Response(
        content=csv_text,
        media_type=CSV_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


def _clone(engine: StyleEngine, html: str, selector: str):
    engine.load_html(html)
    try:
        return clone_with_computed_styles(engine, selector)
    except (InvalidSelectorError, StructureMismatchError) as e:
        raise HTTPException(400, str(e))


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
def ui_home(request: Request):
    return templates.TemplateResponse(request, "index.html", {"default_filename": DEFAULT_CSV_FILENAME})


@app.post("/export")
def export_csv(catalog: Union[Dict[str, Any], List[Dict[str, Any]]] = Body(...)):
    return Response(content=convert_json_to_csv(catalog), media_type=CSV_MEDIA_TYPE)


@app.post("/export/download")
def export_download(
    catalog: Union[Dict[str, Any], List[Dict[str, Any]]] = Body(...),
    filename: Optional[str] = Query(None),
):
    name = filename or load_settings().get("csv_filename") or DEFAULT_CSV_FILENAME
    return _attachment(convert_json_to_csv(catalog), name)


@app.post("/clone", response_model=CloneResponse)
def clone(req: CloneRequest, engine: StyleEngine = Depends(get_engine)):
    result = _clone(engine, req.html, req.selector)
    if not isinstance(result, Cloned):
        raise HTTPException(404, f"Element not found: {req.selector}")
    return CloneResponse(found=True, selector=req.selector, html=to_html(result), pseudo_rules=result.pseudo_rules)


@app.post("/ui/export")
def ui_export(catalog_json: str = Form(...), filename: str = Form(DEFAULT_CSV_FILENAME)):
    try:
        catalog = parse_catalog(catalog_json, source="form")
    except CatalogError as e:
        raise HTTPException(400, str(e))
    return _attachment(convert_json_to_csv(catalog), filename or DEFAULT_CSV_FILENAME)


@app.post("/ui/clone", response_class=HTMLResponse)
def ui_clone(
    request: Request,
    html: str = Form(...),
    selector: str = Form(...),
    engine: StyleEngine = Depends(get_engine),
):
    result = _clone(engine, html, selector)
    ctx = {"selector": selector, "found": result.found, "clone_html": to_html(result)}
    return templates.TemplateResponse(request, "clone.html", ctx, status_code=200 if result.found else 404)
