"""
Shared schema definitions

Base model and generic responses used by every module
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys; snake_case is accepted on input"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SuccessResponse(CamelModel):
    """Result of a delete-style operation"""
    success: bool = Field(default=True, description="Whether the operation succeeded")
