from src.db.session import async_session
from src.services.search import SqlAlchemyStorage, StoragePort


def get_storage() -> StoragePort:
    """Storage port for citizen search. Overridden in tests with an InMemoryStorage."""
    return SqlAlchemyStorage(async_session)
