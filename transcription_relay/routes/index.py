"""Client entry page."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from transcription_relay.templates import INDEX_PAGE

router = APIRouter(tags=["client"])


@router.get("/", response_class=HTMLResponse)
def index() -> str:
    return INDEX_PAGE
