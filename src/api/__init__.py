"""HTTP API for the note store."""
