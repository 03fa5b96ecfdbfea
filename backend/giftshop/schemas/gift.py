"""
Gift request/response schemas.
"""
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class GiftCreate(BaseModel):
    """Create gift request."""
    title: str = Field(..., description="Gift title")
    description: Optional[str] = Field(None, description="Gift description")
    price: float = Field(..., description="Gift price")
    category: Optional[str] = Field(None, description="Gift category")
    image: Optional[str] = Field(None, description="Image URL")


class GiftUpdate(BaseModel):
    """
    Update gift request.

    Only the fields present in the body are replaced. ``title`` and
    ``price`` may be omitted but not cleared.
    """
    title: Optional[str] = Field(None, description="Gift title")
    description: Optional[str] = Field(None, description="Gift description")
    price: Optional[float] = Field(None, description="Gift price")
    category: Optional[str] = Field(None, description="Gift category")
    image: Optional[str] = Field(None, description="Image URL")

    @field_validator("title", "price")
    @classmethod
    def required_fields_not_null(cls, value):
        if value is None:
            raise ValueError("field is required and cannot be null")
        return value


class GiftResponse(BaseModel):
    """Gift response."""
    id: str = Field(..., description="Gift ID")
    title: str = Field(..., description="Gift title")
    description: Optional[str] = Field(None, description="Gift description")
    price: float = Field(..., description="Gift price")
    category: Optional[str] = Field(None, description="Gift category")
    image: Optional[str] = Field(None, description="Image URL")
    owner_id: str = Field(..., description="Owner user ID")
