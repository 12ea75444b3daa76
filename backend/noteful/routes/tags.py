"""Tag route handlers. Deleting a tag removes it from every note."""

from typing import List

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.config import settings
from noteful.database import get_db_session
from noteful.schemas.common import ErrorResponse
from noteful.schemas.folder import NamedItemWrite
from noteful.schemas.tag import TagResponse
from noteful.services.named_item_service import tag_service

router = APIRouter(prefix=settings.api_prefix, tags=["Tags"])

_ERRORS = {
    400: {"description": "Missing name, duplicate name or invalid id", "model": ErrorResponse},
    404: {"description": "Tag not found", "model": ErrorResponse},
}


@router.get("/tags", response_model=List[TagResponse], summary="List tags by name")
async def list_tags(db: AsyncSession = Depends(get_db_session)) -> List[TagResponse]:
    return await tag_service.list_items(db)


@router.get("/tags/{tag_id}", response_model=TagResponse, responses=_ERRORS)
async def get_tag(tag_id: str, db: AsyncSession = Depends(get_db_session)) -> TagResponse:
    return await tag_service.get_item(db, tag_id)


@router.post("/tags", status_code=201, response_model=TagResponse, responses=_ERRORS)
async def create_tag(
    payload: NamedItemWrite,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> TagResponse:
    result = await tag_service.create_item(db, payload)
    response.headers["Location"] = f"{request.url.path}/{result.id}"
    return result


@router.put("/tags/{tag_id}", response_model=TagResponse, responses=_ERRORS)
async def update_tag(
    tag_id: str,
    payload: NamedItemWrite,
    db: AsyncSession = Depends(get_db_session),
) -> TagResponse:
    return await tag_service.update_item(db, tag_id, payload)


@router.delete("/tags/{tag_id}", status_code=204, response_class=Response, responses=_ERRORS)
async def delete_tag(tag_id: str, db: AsyncSession = Depends(get_db_session)) -> Response:
    await tag_service.delete_item(db, tag_id)
    return Response(status_code=204)
