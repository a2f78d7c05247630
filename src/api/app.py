"""Litestar application factory."""

from litestar import Litestar, Request, Response
from litestar.datastructures import State
from litestar.di import Provide
from litestar.status_codes import HTTP_503_SERVICE_UNAVAILABLE
from loguru import logger

from api.dependencies import provide_note_store
from api.routes import NoteController, health
from domain.exceptions import StorageError
from infrastructure.config import Settings, get_settings
from infrastructure.logging_setup import configure_logging
from services import create_note_store
from services.notes import NoteStore


def storage_error_handler(request: Request, exc: StorageError) -> Response:
    """A mutation that could not be read or saved leaves the collection unchanged."""
    logger.warning(f"{request.method} {request.url.path} failed: {exc}")
    return Response(
        content={"status_code": HTTP_503_SERVICE_UNAVAILABLE, "detail": "Failed to save notes"},
        status_code=HTTP_503_SERVICE_UNAVAILABLE,
    )


def create_app(
    settings: Settings | None = None,
    note_store: NoteStore | None = None,
) -> Litestar:
    """
    Build the application.

    Args:
        settings: Settings to use (read from the environment if omitted)
        note_store: Pre-built store, e.g. for tests; created on startup if omitted
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    async def on_startup(app: Litestar) -> None:
        if app.state.get("note_store") is None:
            app.state.note_store = await create_note_store(settings)
        logger.info("cf-notes API started")

    async def on_shutdown(app: Litestar) -> None:
        store = app.state.get("note_store")
        if store is not None:
            await store.storage.close()
        logger.info("cf-notes API stopped")

    return Litestar(
        route_handlers=[NoteController, health],
        dependencies={"note_store": Provide(provide_note_store)},
        state=State({"note_store": note_store}),
        on_startup=[on_startup],
        on_shutdown=[on_shutdown],
        exception_handlers={StorageError: storage_error_handler},
    )
