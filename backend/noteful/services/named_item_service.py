"""
Noteful API — Folder & Tag Services
====================================

What:  CRUD for the two "named item" resources: folders and tags.
Why:   Both resources have the same shape (a unique name) and the same
       rules, differing only in how notes are detached on delete.
How:   NamedItemService implements the operations for a model class;
       FolderService and TagService plug in the model, the response schema
       and the detach step.

Rules:
    - name is required and non-blank        → 400 "Missing `name` in request body"
    - name is unique                        → 400 "The <resource> name already exists"
    - ids are ObjectId-format               → 400 "The `id` is not valid"
    - unknown id                            → 404
    - delete folder: notes keep existing but lose their folderId
    - delete tag:    the tag is pulled from every note
"""

import logging
from typing import List, Type

from pydantic import BaseModel
from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.exceptions import DatabaseError, NotefulError, NotFoundError, ValidationError
from noteful.models.folder import Folder, utcnow
from noteful.models.note import Note, note_tags
from noteful.models.tag import Tag
from noteful.schemas.folder import FolderResponse, NamedItemWrite
from noteful.schemas.tag import TagResponse
from noteful.services.validation import require_object_id, require_text

logger = logging.getLogger(__name__)


class NamedItemService:
    """Shared CRUD logic for folders and tags."""

    model: Type = None
    response_model: Type[BaseModel] = None
    resource: str = "item"

    async def list_items(self, db: AsyncSession) -> List[BaseModel]:
        """All items sorted by name."""
        try:
            result = await db.execute(select(self.model).order_by(self.model.name))
            return [self.response_model.model_validate(item) for item in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error("Database error listing %ss: %s", self.resource, str(e), exc_info=True)
            raise DatabaseError(
                message=f"Could not retrieve {self.resource}s. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def get_item(self, db: AsyncSession, item_id: str) -> BaseModel:
        item_id = require_object_id(item_id)
        try:
            item = await self._load(db, item_id)
            return self.response_model.model_validate(item)
        except NotefulError:
            raise
        except SQLAlchemyError as e:
            logger.error("Database error fetching %s %s: %s", self.resource, item_id, str(e))
            raise DatabaseError(
                message=f"Could not retrieve the {self.resource}. Please try again.",
                context={f"{self.resource}_id": item_id},
            )

    async def create_item(self, db: AsyncSession, payload: NamedItemWrite) -> BaseModel:
        name = require_text(payload.name, "name")
        try:
            item = self.model(name=name)
            db.add(item)
            await db.flush()
            logger.info("%s created: %s", self.resource.capitalize(), item.id)
            return self.response_model.model_validate(item)
        except IntegrityError:
            raise self._duplicate_name(name)
        except SQLAlchemyError as e:
            logger.error("Database error creating %s: %s", self.resource, str(e), exc_info=True)
            raise DatabaseError(
                message=f"Could not save the {self.resource}. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def update_item(
        self, db: AsyncSession, item_id: str, payload: NamedItemWrite
    ) -> BaseModel:
        name = require_text(payload.name, "name")
        item_id = require_object_id(item_id)
        try:
            item = await self._load(db, item_id)
            item.name = name
            item.updated_at = utcnow()
            await db.flush()
            logger.info("%s updated: %s", self.resource.capitalize(), item.id)
            return self.response_model.model_validate(item)
        except NotefulError:
            raise
        except IntegrityError:
            raise self._duplicate_name(name)
        except SQLAlchemyError as e:
            logger.error("Database error updating %s %s: %s", self.resource, item_id, str(e), exc_info=True)
            raise DatabaseError(
                message=f"Could not update the {self.resource}. Please try again.",
                context={f"{self.resource}_id": item_id},
            )

    async def delete_item(self, db: AsyncSession, item_id: str) -> None:
        item_id = require_object_id(item_id)
        try:
            exists = await db.execute(select(self.model.id).where(self.model.id == item_id))
            if exists.scalar_one_or_none() is None:
                raise NotFoundError(resource=self.resource, resource_id=item_id)

            await self._detach_notes(db, item_id)
            await db.execute(delete(self.model).where(self.model.id == item_id))
            logger.info("%s deleted: %s", self.resource.capitalize(), item_id)
        except NotefulError:
            raise
        except SQLAlchemyError as e:
            logger.error("Database error deleting %s %s: %s", self.resource, item_id, str(e), exc_info=True)
            raise DatabaseError(
                message=f"Could not delete the {self.resource}. Please try again.",
                context={f"{self.resource}_id": item_id},
            )

    # ── Hooks & helpers ───────────────────────────────────────────────────

    async def _detach_notes(self, db: AsyncSession, item_id: str) -> None:
        raise NotImplementedError

    async def _load(self, db: AsyncSession, item_id: str):
        result = await db.execute(select(self.model).where(self.model.id == item_id))
        item = result.scalar_one_or_none()
        if item is None:
            raise NotFoundError(resource=self.resource, resource_id=item_id)
        return item

    def _duplicate_name(self, name: str) -> ValidationError:
        logger.info("Rejected duplicate %s name: %s", self.resource, name)
        return ValidationError(
            message=f"The {self.resource} name already exists",
            field="name",
        )


class FolderService(NamedItemService):
    model = Folder
    response_model = FolderResponse
    resource = "folder"

    async def _detach_notes(self, db: AsyncSession, item_id: str) -> None:
        # Notes survive their folder
        await db.execute(
            update(Note)
            .where(Note.folder_id == item_id)
            .values(folder_id=None)
            .execution_options(synchronize_session=False)
        )


class TagService(NamedItemService):
    model = Tag
    response_model = TagResponse
    resource = "tag"

    async def _detach_notes(self, db: AsyncSession, item_id: str) -> None:
        await db.execute(delete(note_tags).where(note_tags.c.tag_id == item_id))


folder_service = FolderService()
tag_service = TagService()
