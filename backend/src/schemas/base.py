"""Shared base model for API schemas."""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """
    Base schema for all API payloads.

    Fields are snake_case in Python and camelCase on the wire
    (e.g. `category_id` <-> `categoryId`). Requests accept either form.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
