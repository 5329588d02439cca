"""
Shared pydantic base model for API payloads.

Python attributes stay snake_case while the JSON contract is camelCase
(``page_size`` <-> ``pageSize``). Either spelling is accepted on input.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialising field names as camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
