"""
notecache — Notes Route Handlers
=================================

What:  The five note endpoints.
How:   Each handler reads its inputs, runs the existence gate against the
       NoteStore, then acts. Outcomes map to status codes:

    GET    /notes             → 200 JSON [{name, text}, ...]
    GET    /notes/{noteName}  → 200 text | 404 "Note not found"
    POST   /write             → 201 text | 400 "Note already exists"
    PUT    /notes/{noteName}  → 200 text | 404 "Note does not exist"
    DELETE /notes/{noteName}  → 200 empty | 404 "Note not found"

Existence gate:
    Create requires the note to be absent; update and delete require it to
    be present. The check and the following write are separate awaits, so
    two concurrent requests for the same name can both pass the gate.

Request bodies:
    POST and PUT accept multipart/form-data, urlencoded forms, or a JSON
    object carrying the same field names.
"""

import logging
from typing import Dict, List

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import PlainTextResponse

from notecache.exceptions import InvalidRequestError, NoteExistsError, NotFoundError
from notecache.schemas.note import NoteEntry
from notecache.services import get_note_store
from notecache.services.note_store import NoteStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Notes"])


def _form_body(*fields: str) -> dict:
    """OpenAPI requestBody for a form/JSON body with required string fields."""
    schema = {
        "type": "object",
        "properties": {name: {"type": "string"} for name in fields},
        "required": list(fields),
    }
    return {
        "requestBody": {
            "required": True,
            "content": {
                "multipart/form-data": {"schema": schema},
                "application/x-www-form-urlencoded": {"schema": schema},
                "application/json": {"schema": schema},
            },
        }
    }


async def read_body_fields(request: Request, *fields: str) -> Dict[str, str]:
    """
    Extract required string fields from a form or JSON request body.

    Raises:
        InvalidRequestError: malformed JSON, or a field missing / not a string.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError:
            raise InvalidRequestError(message="Request body is not valid JSON")
        if not isinstance(payload, dict):
            raise InvalidRequestError(message="Request body must be a JSON object")
    else:
        payload = await request.form()

    values = {}
    for field in fields:
        value = payload.get(field)
        if not isinstance(value, str):
            raise InvalidRequestError(
                message=f"Missing required field '{field}'",
                field=field,
            )
        values[field] = value
    return values


@router.get(
    "/notes",
    response_model=List[NoteEntry],
    summary="List every stored note with its content",
    responses={500: {"description": "Cache directory unreadable"}},
)
async def list_notes(store: NoteStore = Depends(get_note_store)) -> List[NoteEntry]:
    return await store.list_notes()


@router.get(
    "/notes/{note_name}",
    response_class=PlainTextResponse,
    summary="Read one note",
    responses={
        200: {"description": "Raw note text", "content": {"text/plain": {}}},
        404: {"description": "Note not found"},
    },
)
async def get_note(note_name: str, store: NoteStore = Depends(get_note_store)):
    content = await store.fetch(note_name)
    if content is None:
        raise NotFoundError(note_name)
    return PlainTextResponse(content)


@router.post(
    "/write",
    status_code=201,
    response_class=PlainTextResponse,
    summary="Create a note",
    responses={
        201: {"description": "Note successfully created"},
        400: {"description": "Note already exists, or a field is missing"},
    },
    openapi_extra=_form_body("note_name", "note"),
)
async def write_note(request: Request, store: NoteStore = Depends(get_note_store)):
    body = await read_body_fields(request, "note_name", "note")
    note_name = body["note_name"]

    if await store.fetch(note_name) is not None:
        raise NoteExistsError(note_name)

    await store.save(note_name, body["note"])
    return PlainTextResponse("Note successfully created", status_code=201)


@router.put(
    "/notes/{note_name}",
    response_class=PlainTextResponse,
    summary="Replace the content of an existing note",
    responses={
        200: {"description": "Note successfully updated"},
        400: {"description": "noteContent field missing"},
        404: {"description": "Note does not exist"},
    },
    openapi_extra=_form_body("noteContent"),
)
async def update_note(
    note_name: str,
    request: Request,
    store: NoteStore = Depends(get_note_store),
):
    if await store.fetch(note_name) is None:
        raise NotFoundError(note_name, message="Note does not exist")

    body = await read_body_fields(request, "noteContent")
    await store.save(note_name, body["noteContent"])
    return PlainTextResponse("Note successfully updated")


@router.delete(
    "/notes/{note_name}",
    summary="Delete a note",
    responses={
        200: {"description": "Note deleted (empty body)"},
        404: {"description": "Note not found"},
    },
)
async def delete_note(note_name: str, store: NoteStore = Depends(get_note_store)):
    if await store.fetch(note_name) is None:
        raise NotFoundError(note_name)

    await store.remove(note_name)
    return Response(status_code=200)
