from api.routes.health import health
from api.routes.notes import NoteController

__all__ = ["NoteController", "health"]
