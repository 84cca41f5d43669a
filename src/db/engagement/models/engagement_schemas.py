from pydantic import EmailStr, Field
from typing import Optional
from datetime import datetime

from src.common.schemas import CamelModel

# Testimonial schemas
class TestimonialBase(CamelModel):
    name: str
    role: str
    image: Optional[str] = None
    content: str

class TestimonialCreate(TestimonialBase):
    pass

class Testimonial(TestimonialBase):
    id: int

    class Config:
        from_attributes = True

# ContactMessage schemas
class ContactMessageCreate(CamelModel):
    name: str = Field(min_length=2)
    email: EmailStr
    subject: str = Field(min_length=1)
    message: str = Field(min_length=10)

class ContactMessage(CamelModel):
    id: int
    name: str
    email: str
    subject: str
    message: str
    created_at: datetime

    class Config:
        from_attributes = True

# Subscription schemas
class SubscriptionCreate(CamelModel):
    email: EmailStr

class Subscription(CamelModel):
    id: int
    email: str
    created_at: datetime

    class Config:
        from_attributes = True
