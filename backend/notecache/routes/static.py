"""
notecache — Static Asset Route
===============================

What:  Serves the upload form at GET /UploadForm.html for manual testing.
How:   Reads the configured HTML file (Settings.upload_form) on every request;
       any read failure becomes StaticAssetError → 500.
"""

import logging

import aiofiles
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from notecache.exceptions import StaticAssetError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Static"])


@router.get(
    "/UploadForm.html",
    response_class=HTMLResponse,
    summary="HTML form for creating a note by hand",
    responses={500: {"description": "Form file could not be read"}},
)
async def upload_form(request: Request) -> HTMLResponse:
    path = request.app.state.settings.upload_form
    try:
        async with aiofiles.open(path, "r", encoding="utf-8") as f:
            html = await f.read()
    except (OSError, ValueError) as e:
        raise StaticAssetError(context={"path": str(path), "error": str(e)})
    return HTMLResponse(html)
