"""
Generic repository providing CRUD operations for SQLAlchemy models.

A repository is composed from a model class and the mapping of public field
names to its columns; one class serves every entity. Each method receives the
``AsyncSession`` it runs on, so the caller decides how sessions are scoped.
"""

import logging
from dataclasses import dataclass, field
from typing import (
    Any,
    Dict,
    Generic,
    List,
    Mapping,
    Optional,
    Sequence,
    Type,
    TypeVar,
    Union,
    overload,
)

from sqlalchemy import and_, delete, func, insert, inspect, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from storefront.api.filtering import ColumnMap, FilterCondition, build_filter_predicate
from storefront.api.sorting import SortCondition, build_sort_order
from storefront.db.transaction import run_in_transaction
from storefront.errors.constraints import translate_integrity_error
from storefront.errors.exceptions import (
    AppError,
    BadRequestError,
    DBError,
    NotFoundError,
)

ModelType = TypeVar("ModelType")


@dataclass(frozen=True)
class QueryOptions:
    """
    Options for list and count queries.

    Attributes:
        filters: Conditions ANDed together
        sorts: Sort keys, most significant first; empty means the default sort
        where: Extra predicate from the calling layer, e.g. to scope a
            sub-resource to its parent
    """

    filters: Sequence[FilterCondition] = field(default_factory=list)
    sorts: Sequence[SortCondition] = field(default_factory=list)
    where: Optional[ColumnElement] = None


class BaseRepository(Generic[ModelType]):
    """
    Generic repository providing basic CRUD operations for SQLAlchemy models.

    Attributes:
        model: Mapped model class
        columns: Public field name -> column, the only fields clients can
            filter, sort or project on
    """

    def __init__(self, model: Type[ModelType], columns: ColumnMap) -> None:
        self.model = model
        self.columns: Mapping[str, Any] = dict(columns)
        mapper = inspect(model)
        self.primary_key = getattr(
            model, mapper.get_property_by_column(mapper.primary_key[0]).key
        )
        self.logger = logging.getLogger(f"{self.__class__.__name__}.{model.__name__}")

    @property
    def _name(self) -> str:
        return self.model.__name__

    def _predicate(self, options: Optional[QueryOptions]) -> Optional[ColumnElement]:
        if options is None:
            return None
        clauses = [
            clause
            for clause in (build_filter_predicate(self.columns, options.filters), options.where)
            if clause is not None
        ]
        if not clauses:
            return None
        return clauses[0] if len(clauses) == 1 else and_(*clauses)

    def _error(self, operation: str, exc: Exception) -> AppError:
        if isinstance(exc, IntegrityError):
            translated = translate_integrity_error(exc)
            self.logger.debug(f"{operation} on {self._name} rejected: {translated.message}")
            return translated
        self.logger.error(f"Error in {operation}: {exc}")
        return DBError(message=str(exc), details={"error": str(exc)})

    async def get_all(
        self,
        session: AsyncSession,
        limit: int,
        offset: int = 0,
        options: Optional[QueryOptions] = None,
    ) -> List[ModelType]:
        """
        List rows matching the options, ordered and sliced.

        Args:
            session: Session to run on
            limit: Maximum number of rows
            offset: Rows to skip
            options: Filters, sorts and extra predicate

        Returns:
            The page of model instances
        """
        stmt = select(self.model)
        predicate = self._predicate(options)
        if predicate is not None:
            stmt = stmt.where(predicate)
        sorts = options.sorts if options else []
        stmt = stmt.order_by(
            *build_sort_order(self.columns, sorts, tie_breaker=self.primary_key)
        )
        stmt = stmt.limit(limit).offset(offset)

        try:
            result = await session.execute(stmt)
        except SQLAlchemyError as e:
            raise self._error("get_all", e) from e
        items = list(result.scalars().all())
        self.logger.debug(f"Listed {len(items)} items of {self._name}")
        return items

    @overload
    async def get_by_id(self, session: AsyncSession, id: Any) -> Optional[ModelType]:
        ...

    @overload
    async def get_by_id(
        self, session: AsyncSession, id: Any, columns: Sequence[str]
    ) -> Dict[str, Any]:
        ...

    async def get_by_id(
        self,
        session: AsyncSession,
        id: Any,
        columns: Optional[Sequence[str]] = None,
    ) -> Union[Optional[ModelType], Dict[str, Any]]:
        """
        Retrieve a single row by primary key.

        Without ``columns`` the full model instance is returned, or None when
        there is no such row. With ``columns`` a dict of the named public
        fields is returned and a missing row raises ``NotFoundError``.

        Raises:
            BadRequestError: If a projected field is not a known column
            NotFoundError: Projection requested and no row has this id
        """
        if columns is None:
            stmt = select(self.model).where(self.primary_key == id)
            try:
                result = await session.execute(stmt)
            except SQLAlchemyError as e:
                raise self._error("get_by_id", e) from e
            instance = result.scalars().one_or_none()
            self.logger.debug(
                f"Fetched {self._name} id={id}" if instance else f"No {self._name} id={id}"
            )
            return instance

        unknown = [name for name in columns if name not in self.columns]
        if unknown or not columns:
            raise BadRequestError(
                message=f"Invalid fields: {', '.join(unknown)}" if unknown else "No fields requested",
                code="INVALID_FIELDS",
                details={"fields": unknown},
            )

        stmt = select(*[self.columns[name].label(name) for name in columns]).where(
            self.primary_key == id
        )
        try:
            result = await session.execute(stmt)
        except SQLAlchemyError as e:
            raise self._error("get_by_id", e) from e
        row = result.mappings().one_or_none()
        if row is None:
            raise NotFoundError(resource_type=self._name, resource_id=id)
        self.logger.debug(f"Fetched {self._name} id={id} fields={list(columns)}")
        return dict(row)

    async def count(
        self, session: AsyncSession, options: Optional[QueryOptions] = None
    ) -> int:
        """
        Count rows matching the options' filters and extra predicate.

        Raises:
            DBError: If the database does not return an integer
        """
        stmt = select(func.count()).select_from(self.model)
        predicate = self._predicate(options)
        if predicate is not None:
            stmt = stmt.where(predicate)

        try:
            result = await session.execute(stmt)
        except SQLAlchemyError as e:
            raise self._error("count", e) from e
        total = result.scalar()
        if not isinstance(total, int) or isinstance(total, bool):
            self.logger.error(f"Count of {self._name} returned {total!r}")
            raise DBError(message=f"Count of {self._name} did not return an integer")
        return total

    async def create(self, session: AsyncSession, data: Dict[str, Any]) -> ModelType:
        """
        Insert a row and return it.

        Raises:
            ConstraintViolationError: On unique, foreign-key or not-null violations
            DBError: If no row comes back or the database fails otherwise
        """

        async def operation() -> ModelType:
            result = await session.execute(
                insert(self.model).values(**data).returning(self.model)
            )
            instance = result.scalars().one_or_none()
            if instance is None:
                raise DBError(message=f"Failed to create {self._name}")
            return instance

        try:
            instance = await run_in_transaction(session, operation)
        except SQLAlchemyError as e:
            raise self._error("create", e) from e
        self.logger.debug(f"Created {self._name} id={getattr(instance, 'id', None)}")
        return instance

    async def update(
        self, session: AsyncSession, id: Any, data: Dict[str, Any]
    ) -> ModelType:
        """
        Apply a partial update to a row and return the updated row.

        Raises:
            BadRequestError: If ``data`` is empty
            NotFoundError: If no row has this id
            ConstraintViolationError: On unique, foreign-key or not-null violations
        """
        if not data:
            raise BadRequestError(message="No fields to update")

        async def operation() -> ModelType:
            result = await session.execute(
                update(self.model)
                .where(self.primary_key == id)
                .values(**data)
                .returning(self.model)
            )
            instance = result.scalars().one_or_none()
            if instance is None:
                raise NotFoundError(resource_type=self._name, resource_id=id)
            return instance

        try:
            instance = await run_in_transaction(session, operation)
        except SQLAlchemyError as e:
            raise self._error("update", e) from e
        self.logger.debug(f"Updated {self._name} id={id}")
        return instance

    async def delete(self, session: AsyncSession, id: Any) -> Any:
        """
        Delete a row and return its id.

        Raises:
            NotFoundError: If no row has this id
            ConstraintViolationError: If other rows still reference it
        """

        async def operation() -> Any:
            result = await session.execute(
                delete(self.model).where(self.primary_key == id).returning(self.primary_key)
            )
            deleted = result.scalar_one_or_none()
            if deleted is None:
                raise NotFoundError(resource_type=self._name, resource_id=id)
            return deleted

        try:
            deleted = await run_in_transaction(session, operation)
        except SQLAlchemyError as e:
            raise self._error("delete", e) from e
        self.logger.debug(f"Deleted {self._name} id={deleted}")
        return deleted
