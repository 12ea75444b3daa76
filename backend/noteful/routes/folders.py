"""
Noteful API — Folder Route Handlers
====================================

What:  CRUD for /api/folders. Deleting a folder keeps its notes and clears
       their folderId.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.config import settings
from noteful.database import get_db_session
from noteful.schemas.common import ErrorResponse
from noteful.schemas.folder import FolderResponse, NamedItemWrite
from noteful.services.named_item_service import folder_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix=settings.api_prefix, tags=["Folders"])

_ERRORS = {
    400: {"description": "Missing name, duplicate name or invalid id", "model": ErrorResponse},
    404: {"description": "Folder not found", "model": ErrorResponse},
}


@router.get("/folders", response_model=List[FolderResponse], summary="List folders by name")
async def list_folders(db: AsyncSession = Depends(get_db_session)) -> List[FolderResponse]:
    return await folder_service.list_items(db)


@router.get("/folders/{folder_id}", response_model=FolderResponse, responses=_ERRORS)
async def get_folder(folder_id: str, db: AsyncSession = Depends(get_db_session)) -> FolderResponse:
    return await folder_service.get_item(db, folder_id)


@router.post("/folders", status_code=201, response_model=FolderResponse, responses=_ERRORS)
async def create_folder(
    payload: NamedItemWrite,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> FolderResponse:
    result = await folder_service.create_item(db, payload)
    response.headers["Location"] = f"{request.url.path}/{result.id}"
    return result


@router.put("/folders/{folder_id}", response_model=FolderResponse, responses=_ERRORS)
async def update_folder(
    folder_id: str,
    payload: NamedItemWrite,
    db: AsyncSession = Depends(get_db_session),
) -> FolderResponse:
    return await folder_service.update_item(db, folder_id, payload)


@router.delete("/folders/{folder_id}", status_code=204, response_class=Response, responses=_ERRORS)
async def delete_folder(folder_id: str, db: AsyncSession = Depends(get_db_session)) -> Response:
    await folder_service.delete_item(db, folder_id)
    return Response(status_code=204)
