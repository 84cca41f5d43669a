from pydantic import EmailStr, Field
from typing import Optional
from datetime import datetime

from src.common.schemas import CamelModel

# User schemas
class UserBase(CamelModel):
    username: str = Field(min_length=3, max_length=100)
    email: EmailStr
    name: Optional[str] = None

class UserCreate(UserBase):
    password: str = Field(min_length=6)

class User(UserBase):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True
