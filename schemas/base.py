"""
Shared pydantic configuration.

The HTTP contract uses camelCase keys (unitNumber, createdAt, ...) while the
Python side keeps snake_case attribute names.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
     """Base schema: camelCase on the wire, snake_case in Python, ORM-readable."""

     model_config = ConfigDict(
          alias_generator=to_camel,
          populate_by_name=True,
          from_attributes=True,
     )
