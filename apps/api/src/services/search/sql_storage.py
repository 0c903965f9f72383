"""
SQLAlchemy storage adapter: compiles the predicate tree into a WHERE clause over citizens.

Exists nodes become correlated EXISTS sub-queries via relationship.any(); Contains is ILIKE
with LIKE wildcards escaped. Count and row-window reads each use their own session so the
caller may run them concurrently.
"""

import logging
from typing import Sequence

from sqlalchemy import Select, and_, func, or_, select, true
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload
from sqlalchemy.sql.elements import ColumnElement

from src.db.models import Citizen
from .predicates import And, Between, Contains, Eq, Exists, MatchAll, Or, Predicate
from .storage import DEFAULT_SORT, SortKey, StorageError

logger = logging.getLogger(__name__)


def _attr(model, name: str):
    attr = getattr(model, name, None)
    if attr is None:
        raise ValueError(f"{model.__name__} has no field {name!r}")
    return attr


def _escape_like(fragment: str) -> str:
    return fragment.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def compile_predicate(predicate: Predicate, model=Citizen) -> ColumnElement[bool]:
    """Translate a predicate tree into a SQLAlchemy boolean clause rooted at ``model``."""
    if isinstance(predicate, MatchAll):
        return true()
    if isinstance(predicate, Eq):
        return _attr(model, predicate.field) == predicate.value
    if isinstance(predicate, Contains):
        return _attr(model, predicate.field).ilike(f"%{_escape_like(predicate.fragment)}%", escape="\\")
    if isinstance(predicate, Between):
        col = _attr(model, predicate.field)
        conds = []
        if predicate.lower is not None:
            conds.append(col >= predicate.lower)
        if predicate.upper is not None:
            conds.append(col <= predicate.upper)
        return and_(*conds) if conds else true()
    if isinstance(predicate, Exists):
        rel = _attr(model, predicate.collection)
        target = rel.property.mapper.class_
        return rel.any(compile_predicate(predicate.where, target))
    if isinstance(predicate, And):
        return and_(*(compile_predicate(c, model) for c in predicate.children))
    if isinstance(predicate, Or):
        return or_(*(compile_predicate(c, model) for c in predicate.children))
    raise TypeError(f"Unsupported predicate node: {type(predicate).__name__}")


def _order_by(sort: SortKey, model=Citizen) -> list:
    return [
        _attr(model, s.field).desc() if s.descending else _attr(model, s.field).asc()
        for s in sort
    ]


def build_count_statement(predicate: Predicate) -> Select:
    return select(func.count()).select_from(Citizen).where(compile_predicate(predicate))


def build_rows_statement(
    predicate: Predicate,
    sort: SortKey = DEFAULT_SORT,
    skip: int = 0,
    take: int = 20,
) -> Select:
    return (
        select(Citizen)
        .where(compile_predicate(predicate))
        .options(
            selectinload(Citizen.passports),
            selectinload(Citizen.family_relationships),
        )
        .order_by(*_order_by(sort))
        .offset(skip)
        .limit(take)
    )


class SqlAlchemyStorage:
    """StoragePort over the citizens tables."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def count(self, predicate: Predicate) -> int:
        stmt = build_count_statement(predicate)
        try:
            async with self._session_factory() as db:
                result = await db.execute(stmt)
                return int(result.scalar_one())
        except (SQLAlchemyError, OSError) as exc:
            logger.warning("Citizen count query failed: %s", exc)
            raise StorageError("citizen count query failed") from exc

    async def fetch_rows(
        self,
        predicate: Predicate,
        *,
        sort: SortKey = DEFAULT_SORT,
        skip: int = 0,
        take: int = 20,
    ) -> Sequence[Citizen]:
        stmt = build_rows_statement(predicate, sort=sort, skip=skip, take=take)
        try:
            async with self._session_factory() as db:
                result = await db.execute(stmt)
                return list(result.scalars().all())
        except (SQLAlchemyError, OSError) as exc:
            logger.warning("Citizen rows query failed: %s", exc)
            raise StorageError("citizen rows query failed") from exc
