"""Citizen search: filter validation, predicate composition, storage adapters, paging."""

from .filter_validator import FilterSpec, SearchValidationError, validate_filters
from .memory_storage import InMemoryStorage
from .pagination import Page, assemble_page
from .predicate_builder import build_predicate
from .search import run_search, search_citizens, search_service
from .sql_storage import SqlAlchemyStorage
from .storage import DEFAULT_SORT, StorageError, StoragePort

__all__ = [
    "FilterSpec",
    "SearchValidationError",
    "validate_filters",
    "InMemoryStorage",
    "Page",
    "assemble_page",
    "build_predicate",
    "run_search",
    "search_citizens",
    "search_service",
    "SqlAlchemyStorage",
    "DEFAULT_SORT",
    "StorageError",
    "StoragePort",
]
