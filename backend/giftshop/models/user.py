"""
User model for the credential store.
"""
from typing import Optional

from pydantic import BaseModel, Field


class User(BaseModel):
    """
    User document model for MongoDB users collection.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Unique email address")
    hashed_password: str = Field(..., description="Bcrypt hashed password")

    class Config:
        populate_by_name = True
