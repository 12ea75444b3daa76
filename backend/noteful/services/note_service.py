"""
Noteful API — Note Service
===========================

What:  CRUD and search for notes, including folder/tag reference checks.
Why:   Keeps validation and query composition out of the route handlers.
How:   Each method receives the request's AsyncSession and returns Pydantic
       response models built while the session is still open.
Who:   Called by the /api/notes route handlers.

Query composition (GET /api/notes):
    ┌────────────┐    ┌──────────────┐    ┌──────────────┐    ┌─────────┐
    │ folderId   │───▶│ tagId        │───▶│ searchTerm   │───▶│ ORDER   │
    │ = filter   │    │ EXISTS tag   │    │ match+score  │    │ BY      │
    └────────────┘    └──────────────┘    └──────────────┘    └─────────┘
    Without a search term the order is created_at, id (oldest first).
    With one it is score DESC, then created_at, id.

Error Handling Strategy:
    Application exceptions (ValidationError, NotFoundError) propagate as-is.
    Any other SQLAlchemyError is logged and wrapped in DatabaseError.
"""

import logging
from typing import Any, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.exceptions import DatabaseError, NotefulError, NotFoundError, ValidationError
from noteful.ids import is_valid_object_id
from noteful.models.folder import Folder, utcnow
from noteful.models.note import Note, note_tags
from noteful.models.tag import Tag
from noteful.schemas.note import NoteResponse, NoteWrite
from noteful.services.search import match_condition, parse_search_term, score_expression
from noteful.services.validation import require_object_id, require_text

logger = logging.getLogger(__name__)


def _to_response(note: Note, score: Optional[float] = None) -> NoteResponse:
    response = NoteResponse.model_validate(note)
    # Freshly assigned tags keep request order; loaded ones come back by name
    response.tags.sort(key=lambda tag: tag.name)
    if score is not None:
        response.score = float(score)
    return response


class NoteService:
    """
    Business logic layer for note operations.

    Responsibilities:
        - list_notes(): filtered listing and text search
        - get_note(): single note with populated tags
        - create_note() / update_note(): title rule plus reference checks
        - delete_note(): removes the note and its tag links
    """

    async def list_notes(
        self,
        db: AsyncSession,
        search_term: Optional[str] = None,
        folder_id: Optional[str] = None,
        tag_id: Optional[str] = None,
    ) -> List[NoteResponse]:
        """
        List notes, optionally filtered by folder and tag and ranked by a search term.

        Args:
            db: Async database session
            search_term: Free text; see services.search for the syntax
            folder_id: Only notes filed in this folder
            tag_id: Only notes carrying this tag

        Raises:
            ValidationError: folder_id or tag_id is not a valid ObjectId (→ 400)
        """
        if folder_id:
            folder_id = require_object_id(folder_id, "folderId")
        if tag_id:
            tag_id = require_object_id(tag_id, "tagId")

        try:
            query = select(Note)
            if folder_id:
                query = query.where(Note.folder_id == folder_id)
            if tag_id:
                query = query.where(Note.tags.any(Tag.id == tag_id))

            if search_term and search_term.strip():
                parsed = parse_search_term(search_term)
                score = score_expression(parsed).label("score")
                query = (
                    query.add_columns(score)
                    .where(match_condition(parsed))
                    .order_by(score.desc(), Note.created_at, Note.id)
                )
                result = await db.execute(query)
                return [_to_response(note, score=value) for note, value in result.all()]

            query = query.order_by(Note.created_at, Note.id)
            result = await db.execute(query)
            return [_to_response(note) for note in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error("Database error listing notes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve notes. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def get_note(self, db: AsyncSession, note_id: str) -> NoteResponse:
        """
        Retrieve a single note by ID.

        Raises:
            ValidationError: note_id is not a valid ObjectId (→ 400)
            NotFoundError: Note with given ID does not exist (→ 404)
            DatabaseError: Query execution failed (→ 500)
        """
        note_id = require_object_id(note_id)
        try:
            note = await self._load(db, note_id)
            return _to_response(note)
        except NotefulError:
            raise
        except SQLAlchemyError as e:
            logger.error("Database error fetching note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the note. Please try again.",
                context={"note_id": note_id},
            )

    async def create_note(self, db: AsyncSession, payload: NoteWrite) -> NoteResponse:
        """
        Create a note from a POST body.

        Raises:
            ValidationError: Missing title, bad folderId, bad tags (→ 400)
        """
        title = require_text(payload.title, "title")
        try:
            folder_id = await self._resolve_folder(db, payload.folder_id)
            tags = await self._resolve_tags(db, payload.tags)

            note = Note(
                title=title,
                content=payload.content or "",
                folder_id=folder_id,
                tags=tags,
            )
            db.add(note)
            await db.flush()
            logger.info("Note created: %s", note.id)
            return _to_response(note)

        except NotefulError:
            raise
        except SQLAlchemyError as e:
            logger.error("Database error creating note: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the note. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def update_note(
        self, db: AsyncSession, note_id: str, payload: NoteWrite
    ) -> NoteResponse:
        """
        Update a note from a PUT body and return the updated note.

        The title is always required. `content`, `folderId` and `tags` are
        only changed when present in the body; an explicit null or "" for
        `folderId` removes the note from its folder.

        Raises:
            ValidationError: Missing title, invalid id, bad folderId/tags (→ 400)
            NotFoundError: No note with this id (→ 404)
        """
        title = require_text(payload.title, "title")
        note_id = require_object_id(note_id)
        provided = payload.model_fields_set

        try:
            note = await self._load(db, note_id)
            note.title = title
            if "content" in provided:
                note.content = payload.content or ""
            if "folder_id" in provided:
                note.folder_id = await self._resolve_folder(db, payload.folder_id)
            if "tags" in provided:
                note.tags = await self._resolve_tags(db, payload.tags)
            note.updated_at = utcnow()

            await db.flush()
            logger.info("Note updated: %s", note.id)
            return _to_response(note)

        except NotefulError:
            raise
        except SQLAlchemyError as e:
            logger.error("Database error updating note %s: %s", note_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not update the note. Please try again.",
                context={"note_id": note_id},
            )

    async def delete_note(self, db: AsyncSession, note_id: str) -> None:
        """
        Delete a note and its tag links.

        Raises:
            ValidationError: note_id is not a valid ObjectId (→ 400)
            NotFoundError: No note with this id (→ 404)
        """
        note_id = require_object_id(note_id)
        try:
            exists = await db.execute(select(Note.id).where(Note.id == note_id))
            if exists.scalar_one_or_none() is None:
                raise NotFoundError(resource="note", resource_id=note_id)

            await db.execute(delete(note_tags).where(note_tags.c.note_id == note_id))
            await db.execute(delete(Note).where(Note.id == note_id))
            logger.info("Note deleted: %s", note_id)

        except NotefulError:
            raise
        except SQLAlchemyError as e:
            logger.error("Database error deleting note %s: %s", note_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not delete the note. Please try again.",
                context={"note_id": note_id},
            )

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _load(self, db: AsyncSession, note_id: str) -> Note:
        result = await db.execute(select(Note).where(Note.id == note_id))
        note = result.scalar_one_or_none()
        if note is None:
            raise NotFoundError(resource="note", resource_id=note_id)
        return note

    async def _resolve_folder(self, db: AsyncSession, folder_id: Optional[str]) -> Optional[str]:
        """Validate a folder reference; None or "" means "no folder"."""
        if not folder_id:
            return None
        folder_id = require_object_id(folder_id, "folderId")
        result = await db.execute(select(Folder.id).where(Folder.id == folder_id))
        if result.scalar_one_or_none() is None:
            raise ValidationError(message="The `folderId` does not exist", field="folderId")
        return folder_id

    async def _resolve_tags(self, db: AsyncSession, tags: Any) -> List[Tag]:
        """Validate a tag id array and return the Tag rows in request order."""
        if tags is None:
            return []
        if not isinstance(tags, list):
            raise ValidationError(message="The `tags` property must be an array", field="tags")
        if not all(is_valid_object_id(tag_id) for tag_id in tags):
            raise ValidationError(message="The `tags` array contains an invalid `id`", field="tags")

        tag_ids = list(dict.fromkeys(tag_id.lower() for tag_id in tags))
        if not tag_ids:
            return []

        result = await db.execute(select(Tag).where(Tag.id.in_(tag_ids)))
        found = {tag.id: tag for tag in result.scalars().all()}
        missing = [tag_id for tag_id in tag_ids if tag_id not in found]
        if missing:
            raise ValidationError(
                message="The `tags` array contains an unknown `id`",
                field="tags",
                context={"unknown": missing},
            )
        return [found[tag_id] for tag_id in tag_ids]


# ── Singleton Instance ────────────────────────────────────────────────────
# NoteService is stateless; the session is passed to every call
note_service = NoteService()
