from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from llm_providers import COMPARE_TARGETS, model_catalog

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def index(request: Request):
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "models": model_catalog(),
            "compare_targets": [
                {"provider": target.provider, "model": target.model} for target in COMPARE_TARGETS
            ],
        },
    )
