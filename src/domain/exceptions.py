"""Exceptions raised by the note store and its collaborators."""


class NotesError(Exception):
    """Base error for cf-notes."""

    pass


class URLParsingError(NotesError, ValueError):
    """Invalid URL format or unable to parse URL."""

    pass


class ImportFormatError(NotesError):
    """Import payload is not a JSON array of notes."""

    pass


class StorageError(NotesError):
    """Reading from or writing to the key-value store failed."""

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.key = key
