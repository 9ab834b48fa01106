"""
Common Pydantic schemas shared across endpoints.
"""
from pydantic import BaseModel, Field
from typing import Optional, Union

Number = Union[int, float]


class SelectionEcho(BaseModel):
    """The selection a derived response was computed for."""
    metric: str
    gender: str
    age_band: str
    social_category: str
    economic_class: str
    key: str = Field(..., description="Canonical demographic key, e.g. all_all_all_all")


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    store_status: str
    area_count: int
    error: Optional[str] = None


class ErrorResponse(BaseModel):
    """Body returned by the exception handlers."""
    error: str
    error_type: Optional[str] = None
    status_code: int
