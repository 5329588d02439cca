from storefront.api.router import Resource, create_crud_router
from storefront.api.whitelist import FieldWhitelist, TEXT_OPERATORS
from storefront.db.repository import BaseRepository
from storefront.models import User
from storefront.resources.common import ID_FILTER, timestamp_columns, timestamp_filters
from storefront.schemas.users import UserCreate, UserRead, UserUpdate

USER_COLUMNS = {
    "id": User.id,
    "name": User.name,
    "email": User.email,
    **timestamp_columns(User),
}

USER_WHITELIST = FieldWhitelist.build(
    filters={
        **ID_FILTER,
        "name": TEXT_OPERATORS,
        "email": TEXT_OPERATORS,
        **timestamp_filters(),
    },
    sorts=["id", "name", "email", "createdAt", "updatedAt"],
)

user_repository = BaseRepository(User, USER_COLUMNS)

users = Resource(
    name="User",
    plural="users",
    path="/users",
    repository=user_repository,
    whitelist=USER_WHITELIST,
    read_schema=UserRead,
    create_schema=UserCreate,
    update_schema=UserUpdate,
)

router = create_crud_router(users)
