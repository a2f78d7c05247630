from typing import TYPE_CHECKING

from services.notes import NoteStore

if TYPE_CHECKING:
    from litestar.datastructures import State


async def provide_note_store(state: "State") -> NoteStore:
    return state.note_store
