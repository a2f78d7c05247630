from infrastructure.config import Settings, get_settings
from infrastructure.storage import KeyValueStoreProtocol
from services.metadata import MetadataResolver
from services.notes import ImportResult, NoteStore


def create_metadata_resolver(settings: Settings) -> MetadataResolver:
    """Factory function to create the resolver with its API client."""
    from infrastructure.codeforces_client import CodeforcesApiClient
    from infrastructure.http_client import AsyncHTTPClient

    http_client = AsyncHTTPClient(timeout=settings.codeforces_timeout)
    api_client = CodeforcesApiClient(http_client, base_url=settings.codeforces_api_url)

    return MetadataResolver(api_client=api_client)


async def create_storage(settings: Settings) -> KeyValueStoreProtocol:
    """Factory function to create the configured key-value store."""
    if settings.storage_backend == "redis":
        from infrastructure.storage import AsyncRedisStore

        store = AsyncRedisStore(settings.redis_url)
        await store.connect()
        return store

    from infrastructure.storage import JSONFileStore

    return JSONFileStore(settings.data_path)


async def create_note_store(settings: Settings | None = None) -> NoteStore:
    """Factory function to create a loaded note store with all dependencies."""
    settings = settings or get_settings()

    note_store = NoteStore(
        storage=await create_storage(settings),
        resolver=create_metadata_resolver(settings),
    )
    await note_store.load()
    return note_store


__all__ = [
    "ImportResult",
    "MetadataResolver",
    "NoteStore",
    "create_metadata_resolver",
    "create_note_store",
    "create_storage",
]
