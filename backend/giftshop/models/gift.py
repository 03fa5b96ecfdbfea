"""
Gift model for the resource store.
"""
from typing import Optional

from pydantic import BaseModel, Field


class Gift(BaseModel):
    """
    Gift document model for MongoDB gifts collection.

    ``owner_id`` is always taken from the verified token of the creating
    user and is never changed afterwards.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    title: str = Field(..., description="Gift title")
    description: Optional[str] = Field(None, description="Optional description")
    price: float = Field(..., description="Gift price")
    category: Optional[str] = Field(None, description="Optional category")
    image: Optional[str] = Field(None, description="Optional image URL")
    owner_id: str = Field(..., description="Owner user ID")

    class Config:
        populate_by_name = True
