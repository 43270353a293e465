"""
homefix/core/schemas.py

Core Schemas

Defines core Pydantic models used across the application, including:
- CamelModel: base for every wire schema (camelCase on the wire).
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base schema whose JSON field names are camelCase (`workerId`, `advanceAmount`)
    while Python attributes stay snake_case. Accepts either form on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

