"""API routes for problem notes."""

from litestar import Controller, Request, Response, delete, get, post, put
from litestar.exceptions import HTTPException, NotFoundException
from litestar.params import Parameter
from litestar.status_codes import (
    HTTP_200_OK,
    HTTP_201_CREATED,
    HTTP_204_NO_CONTENT,
    HTTP_400_BAD_REQUEST,
)
from loguru import logger

from api.schemas.note import ImportResponse, NoteListResponse, NoteRequest, NoteResponse
from domain.models import QueryCriteria
from services.notes import NoteStore


class NoteController(Controller):
    """Controller for note endpoints."""

    path = "/notes"

    @get("/", status_code=HTTP_200_OK)
    async def list_notes(
        self,
        note_store: NoteStore,
        q: str = "",
        rating: str | None = None,
        tags: str | None = Parameter(default=None, description="Comma-separated tag terms"),
    ) -> NoteListResponse:
        """
        List notes, newest first, filtered by text, exact rating and tags.

        Query parameters:
        - q: text matched against link, notes, name and tags
        - rating: exact rating, e.g. "1900"
        - tags: comma-separated terms that must all appear in the tags
        """
        criteria = QueryCriteria.from_inputs(text=q, rating=rating, tags=tags)
        logger.debug(f"API request to list notes: {criteria}")

        notes = note_store.query(criteria)
        return NoteListResponse(
            total=len(note_store.list_all()),
            notes=[NoteResponse.from_note(note) for note in notes],
        )

    @get("/export", status_code=HTTP_200_OK)
    async def export_notes(self, note_store: NoteStore) -> Response[bytes]:
        """Download the whole collection as a JSON file."""
        filename = note_store.export_filename()
        return Response(
            content=note_store.export_all().encode("utf-8"),
            media_type="application/json",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    @post("/import", status_code=HTTP_200_OK)
    async def import_notes(self, request: Request, note_store: NoteStore) -> ImportResponse:
        """Merge an exported JSON array into the collection."""
        payload = await request.body()
        result = await note_store.import_all(payload)

        if not result.ok:
            raise HTTPException(
                status_code=HTTP_400_BAD_REQUEST,
                detail=f"Error importing file: {result.error}",
            )
        return ImportResponse(imported=result.imported)

    @get("/{note_id:str}", status_code=HTTP_200_OK)
    async def get_note(self, note_id: str, note_store: NoteStore) -> NoteResponse:
        note = note_store.get(note_id)
        if note is None:
            raise NotFoundException(detail=f"Note {note_id} not found")
        return NoteResponse.from_note(note)

    @post("/", status_code=HTTP_201_CREATED)
    async def create_note(self, data: NoteRequest, note_store: NoteStore) -> NoteResponse:
        logger.debug(f"API request to create note: link={data.link}")

        note = await note_store.create(data.link, data.notes)
        return NoteResponse.from_note(note)

    @put("/{note_id:str}", status_code=HTTP_200_OK)
    async def update_note(
        self, note_id: str, data: NoteRequest, note_store: NoteStore
    ) -> NoteResponse:
        logger.debug(f"API request to update note {note_id}: link={data.link}")

        note = await note_store.update(note_id, data.link, data.notes)
        if note is None:
            raise NotFoundException(detail=f"Note {note_id} not found")
        return NoteResponse.from_note(note)

    @delete("/{note_id:str}", status_code=HTTP_204_NO_CONTENT)
    async def delete_note(self, note_id: str, note_store: NoteStore) -> None:
        logger.debug(f"API request to delete note {note_id}")
        await note_store.delete(note_id)
