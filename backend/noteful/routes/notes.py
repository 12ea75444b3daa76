"""
Noteful API — Notes Route Handlers
===================================

What:  GET/POST /api/notes and GET/PUT/DELETE /api/notes/{id}.
How:   Extracts query parameters and bodies, delegates to NoteService,
       sets status codes and the Location header.

Status codes:
    200  list / read / update
    201  create (Location: /api/notes/<id>)
    204  delete
    400  missing title, malformed id, bad folderId or tags
    404  unknown id
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.config import settings
from noteful.database import get_db_session
from noteful.schemas.common import ErrorResponse
from noteful.schemas.note import NoteResponse, NoteWrite
from noteful.services.note_service import note_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix=settings.api_prefix, tags=["Notes"])

_ERRORS = {
    400: {"description": "Invalid input", "model": ErrorResponse},
    404: {"description": "Note not found", "model": ErrorResponse},
}


@router.get(
    "/notes",
    response_model=List[NoteResponse],
    responses={400: _ERRORS[400]},
    summary="List notes",
    description=(
        "Returns all notes with populated tags. Filter by folder and/or tag, "
        "or pass a searchTerm to get relevance-ranked text search results."
    ),
)
async def list_notes(
    search_term: Optional[str] = Query(
        default=None,
        alias="searchTerm",
        description='Words, "quoted phrases" and -excluded words matched against title and content',
    ),
    folder_id: Optional[str] = Query(default=None, alias="folderId"),
    tag_id: Optional[str] = Query(default=None, alias="tagId"),
    db: AsyncSession = Depends(get_db_session),
) -> List[NoteResponse]:
    return await note_service.list_notes(
        db=db,
        search_term=search_term,
        folder_id=folder_id,
        tag_id=tag_id,
    )


@router.get(
    "/notes/{note_id}",
    response_model=NoteResponse,
    responses=_ERRORS,
    summary="Get a single note by ID",
)
async def get_note(
    note_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    return await note_service.get_note(db=db, note_id=note_id)


@router.post(
    "/notes",
    status_code=201,
    response_model=NoteResponse,
    responses={400: _ERRORS[400]},
    summary="Create a note",
)
async def create_note(
    payload: NoteWrite,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    """
    Create a note.

    The Location header points at the new resource so clients can follow
    it without building the URL themselves.
    """
    result = await note_service.create_note(db=db, payload=payload)
    response.headers["Location"] = f"{request.url.path}/{result.id}"
    return result


@router.put(
    "/notes/{note_id}",
    response_model=NoteResponse,
    responses=_ERRORS,
    summary="Update a note",
)
async def update_note(
    note_id: str,
    payload: NoteWrite,
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    return await note_service.update_note(db=db, note_id=note_id, payload=payload)


@router.delete(
    "/notes/{note_id}",
    status_code=204,
    response_class=Response,
    responses=_ERRORS,
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await note_service.delete_note(db=db, note_id=note_id)
    return Response(status_code=204)
