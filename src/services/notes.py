"""Service owning the problem-note collection and its persisted form."""

import asyncio
import json
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, timezone

from loguru import logger

from domain.exceptions import ImportFormatError, StorageError
from domain.models import NotePatch, ProblemNote, QueryCriteria
from domain.query import filter_notes
from domain.reconciler import is_importable, merge_existing, merge_imported, sort_by_date_desc
from infrastructure.storage import KeyValueStoreProtocol
from services.metadata import MetadataResolver

COLLECTION_KEY = "problems"


@dataclass
class ImportResult:
    """Outcome of an import: how many notes were merged, or why nothing was."""

    imported: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def new_note_id() -> str:
    return uuid.uuid4().hex


def utc_timestamp() -> str:
    """Current time as ISO-8601 with millisecond precision, e.g. 2024-05-01T10:00:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class NoteStore:
    """
    Sole owner of the note collection.

    Every mutation resolves metadata if needed, merges through the
    reconciler, writes the whole collection to the key-value store and only
    then replaces the in-memory list. Mutations are serialised by a lock and
    refuse to run until the persisted collection has been read, so a failed
    read can never be followed by a write that replaces it.
    """

    def __init__(
        self,
        *,
        storage: KeyValueStoreProtocol,
        resolver: MetadataResolver,
        key: str = COLLECTION_KEY,
        id_factory: Callable[[], str] = new_note_id,
        clock: Callable[[], str] = utc_timestamp,
    ):
        """Initialize store with dependencies."""
        self.storage = storage
        self.resolver = resolver
        self.key = key
        self.id_factory = id_factory
        self.clock = clock
        self._notes: list[ProblemNote] = []
        self._loaded = False
        self._lock = asyncio.Lock()

    async def load(self) -> list[ProblemNote]:
        """
        Load the persisted collection.

        An unreadable store leaves the collection empty and unloaded: queries
        see no notes and mutations raise StorageError until a read succeeds.
        """
        try:
            await self._read_collection()
        except StorageError:
            logger.exception("Failed to load notes, mutations disabled until storage is readable")
        return self.list_all()

    def list_all(self) -> list[ProblemNote]:
        """Notes in display order."""
        return list(self._notes)

    def get(self, note_id: str) -> ProblemNote | None:
        return next((note for note in self._notes if note.id == note_id), None)

    def query(self, criteria: QueryCriteria) -> list[ProblemNote]:
        return filter_notes(self._notes, criteria)

    async def create(self, link: str, notes: str) -> ProblemNote:
        """
        Create a note, resolving its metadata.

        Raises:
            StorageError: If the collection could not be read or saved
        """
        async with self._lock:
            await self._ensure_loaded()
            resolution = await self.resolver.resolve(link)
            patch = resolution.to_patch(link, notes)
            note = merge_existing(ProblemNote(id=self.id_factory(), link=link, date=self.clock()), patch)

            await self._commit([note, *self._notes])

        logger.info(f"Created note {note.id} for {link}")
        return note

    async def update(self, note_id: str, link: str, notes: str) -> ProblemNote | None:
        """
        Edit a note in place. Metadata is only looked up again if the link changed.

        Returns:
            The updated note, or None if the id is unknown

        Raises:
            StorageError: If the collection could not be read or saved
        """
        async with self._lock:
            await self._ensure_loaded()
            position = self._position(note_id)
            if position is None:
                logger.debug(f"Update of unknown note {note_id} ignored")
                return None

            existing = self._notes[position]
            if existing.link == link:
                patch = NotePatch(
                    link=link,
                    notes=notes,
                    name=existing.name,
                    rating=existing.rating,
                    tags=existing.tags,
                    contest_id=existing.contest_id,
                    index=existing.index,
                )
            else:
                resolution = await self.resolver.resolve(link)
                patch = resolution.to_patch(link, notes)

            note = merge_existing(existing, patch)
            updated = list(self._notes)
            updated[position] = note

            await self._commit(updated)

        logger.info(f"Updated note {note_id}")
        return note

    async def delete(self, note_id: str) -> bool:
        """
        Remove a note. Unknown ids are a no-op.

        Returns:
            True if a note was removed

        Raises:
            StorageError: If the collection could not be read or saved
        """
        async with self._lock:
            await self._ensure_loaded()
            remaining = [note for note in self._notes if note.id != note_id]
            removed = len(remaining) != len(self._notes)

            await self._commit(remaining)

        if removed:
            logger.info(f"Deleted note {note_id}")
        return removed

    def export_all(self) -> str:
        """Serialize the whole collection as a JSON array."""
        return json.dumps([note.to_dict() for note in self._notes], indent=2, ensure_ascii=False)

    @staticmethod
    def export_filename(today: date | None = None) -> str:
        today = today or datetime.now(timezone.utc).date()
        return f"cf-notes-backup-{today.isoformat()}.json"

    async def import_all(self, payload: str | bytes) -> ImportResult:
        """
        Merge an exported collection into this one.

        Entries without an id or link are skipped. A payload that is not a
        JSON array is rejected with no changes made.

        Raises:
            StorageError: If the collection could not be read or saved
        """
        try:
            entries = self._parse_import_payload(payload)
        except ImportFormatError as e:
            logger.warning(f"Import rejected: {e}")
            return ImportResult(error=str(e))

        async with self._lock:
            await self._ensure_loaded()
            merged = list(self._notes)
            positions = {note.id: i for i, note in enumerate(merged)}
            count = 0

            for entry in entries:
                if not is_importable(entry):
                    logger.debug(f"Skipping import entry without id or link: {entry!r}")
                    continue

                entry_id = str(entry["id"])
                position = positions.get(entry_id)
                if position is not None:
                    merged[position] = merge_imported(merged[position], entry)
                else:
                    positions[entry_id] = len(merged)
                    merged.append(merge_imported(None, entry))
                count += 1

            await self._commit(sort_by_date_desc(merged))

        logger.info(f"Imported {count} note(s)")
        return ImportResult(imported=count)

    @staticmethod
    def _parse_import_payload(payload: str | bytes) -> list:
        try:
            data = json.loads(payload)
        except ValueError as e:
            raise ImportFormatError(f"Invalid JSON: {e}") from e
        if not isinstance(data, list):
            raise ImportFormatError("Invalid format: Expected an array of notes")
        return data

    def _position(self, note_id: str) -> int | None:
        return next((i for i, note in enumerate(self._notes) if note.id == note_id), None)

    async def _read_collection(self) -> None:
        raw = await self.storage.get(self.key)

        notes = []
        for entry in raw if isinstance(raw, list) else []:
            if not is_importable(entry):
                logger.warning(f"Skipping stored entry without id or link: {entry!r}")
                continue
            notes.append(ProblemNote.from_dict(entry))

        self._notes = notes
        self._loaded = True
        logger.info(f"Loaded {len(notes)} note(s)")

    async def _ensure_loaded(self) -> None:
        """Retry the initial read; raises StorageError if storage is still unreadable."""
        if self._loaded:
            return
        try:
            await self._read_collection()
        except StorageError:
            logger.exception("Notes were never loaded, refusing to overwrite storage")
            raise

    async def _commit(self, notes: list[ProblemNote]) -> None:
        """Persist the collection, then make it current. Raises StorageError if the write failed."""
        try:
            await self.storage.set(self.key, [note.to_dict() for note in notes])
        except StorageError:
            logger.exception("Failed to persist notes, keeping previous state")
            raise

        self._notes = notes
