"""Static upload page."""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["pages"])

_INDEX_HTML = (Path(__file__).parent.parent / "static" / "index.html").read_text(
    encoding="utf-8"
)


@router.get("/", response_class=HTMLResponse)
def index() -> HTMLResponse:
    """Returns the upload page."""
    return HTMLResponse(_INDEX_HTML)
