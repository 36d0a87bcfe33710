"""Common Pydantic schemas."""

from http import HTTPStatus
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema exchanging camelCase JSON keys with snake_case attributes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiResponse(BaseModel):
    """Uniform envelope returned by write operations."""

    status: HTTPStatus = Field(..., description="HTTP status code of the outcome")
    message: str = Field(..., description="Human-readable outcome message")


class Violation(BaseModel):
    """Validation error violation."""

    path: str = Field(..., description="JSON path to the invalid field")
    message: str = Field(..., description="Validation error message")


class Problem(BaseModel):
    """RFC 9457 Problem Details response."""

    type: Optional[str] = Field(None, description="Problem type URI")
    title: str = Field(..., description="Short human-readable summary")
    status: int = Field(..., description="HTTP status code")
    detail: Optional[str] = Field(None, description="Human-readable explanation")
    instance: Optional[str] = Field(None, description="URI reference for this occurrence")
    operation: Optional[str] = Field(None, description="Operation that failed")
    error_id: Optional[str] = Field(None, description="Identifier for correlating server logs")
    violations: Optional[List[Violation]] = Field(None, description="Validation errors")
