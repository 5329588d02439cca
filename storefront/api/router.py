"""
CRUD router factory.

Every entity exposes the same five endpoints. ``create_crud_router`` builds
them from a ``Resource``: the repository to call, the whitelist for list
queries and the pydantic schemas for request and response bodies.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Type, Union

from fastapi import APIRouter, Depends, Path, Query, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from storefront.api.dependencies import ListQuery, list_query
from storefront.api.filtering import INTEGER_MAX
from storefront.api.pagination import paginate
from storefront.api.whitelist import FieldWhitelist
from storefront.db.manager import get_db, get_session_factory
from storefront.db.repository import BaseRepository
from storefront.errors.exceptions import NotFoundError
from storefront.schemas import DataResponse, PaginatedData
from storefront.schemas.entity import DeletedItem


@dataclass(frozen=True)
class Resource:
    """
    Everything needed to serve one entity over HTTP.

    Attributes:
        name: Singular display name used in messages ("User")
        plural: Plural display name used in messages ("users")
        path: Route prefix ("/users")
        repository: Repository for the entity
        whitelist: Filterable and sortable fields for list requests
        read_schema: Response schema for a row
        create_schema: Request body schema for POST
        update_schema: Request body schema for PUT
    """

    name: str
    plural: str
    path: str
    repository: BaseRepository
    whitelist: FieldWhitelist
    read_schema: Type[BaseModel]
    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]

    def __post_init__(self) -> None:
        self.whitelist.check_columns(self.repository.columns)


def id_path() -> Any:
    """Path parameter for a row id, bounded to the ``Integer`` key range."""
    return Path(..., ge=1, le=INTEGER_MAX, description="Row id")


def parse_fields(fields: Optional[str]) -> Optional[list]:
    """Split a ``fields=a,b`` projection parameter; None when absent."""
    if fields is None:
        return None
    return [name.strip() for name in fields.split(",") if name.strip()]


def create_crud_router(resource: Resource) -> APIRouter:
    """
    Build the list, get, create, update and delete endpoints for a resource.

    Args:
        resource: Entity description

    Returns:
        Router mounted at ``resource.path``
    """
    repository = resource.repository
    read_schema = resource.read_schema
    create_schema = resource.create_schema
    update_schema = resource.update_schema

    router = APIRouter(prefix=resource.path, tags=[resource.plural])

    @router.get("", response_model=DataResponse[PaginatedData[read_schema]])
    async def list_items(
        query: ListQuery = Depends(list_query(resource.whitelist)),
        session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
    ):
        page = await paginate(
            repository, session_factory, query.pagination, query.options(), schema=read_schema
        )
        return DataResponse(
            data=page, message=f"Successfully fetched all {resource.plural}"
        )

    @router.get(
        "/{item_id}", response_model=DataResponse[Union[read_schema, Dict[str, Any]]]
    )
    async def get_item(
        item_id: int = id_path(),
        fields: Optional[str] = Query(
            None, description="Comma-separated fields to return"
        ),
        session: AsyncSession = Depends(get_db),
    ):
        columns = parse_fields(fields)
        if columns is not None:
            data = await repository.get_by_id(session, item_id, columns=columns)
        else:
            instance = await repository.get_by_id(session, item_id)
            if instance is None:
                raise NotFoundError(resource_type=resource.name, resource_id=item_id)
            data = read_schema.model_validate(instance)
        return DataResponse(data=data, message=f"Successfully fetched {resource.name}")

    @router.post(
        "",
        response_model=DataResponse[read_schema],
        status_code=status.HTTP_201_CREATED,
    )
    async def create_item(
        payload: create_schema,
        session: AsyncSession = Depends(get_db),
    ):
        instance = await repository.create(session, payload.model_dump())
        return DataResponse(
            data=read_schema.model_validate(instance),
            message=f"Successfully created {resource.name}",
        )

    @router.put("/{item_id}", response_model=DataResponse[read_schema])
    async def update_item(
        payload: update_schema,
        item_id: int = id_path(),
        session: AsyncSession = Depends(get_db),
    ):
        instance = await repository.update(
            session, item_id, payload.model_dump(exclude_unset=True)
        )
        return DataResponse(
            data=read_schema.model_validate(instance),
            message=f"Successfully updated {resource.name}",
        )

    @router.delete("/{item_id}", response_model=DataResponse[DeletedItem])
    async def delete_item(
        item_id: int = id_path(),
        session: AsyncSession = Depends(get_db),
    ):
        deleted_id = await repository.delete(session, item_id)
        return DataResponse(
            data=DeletedItem(id=deleted_id),
            message=f"Successfully deleted {resource.name}",
        )

    return router
