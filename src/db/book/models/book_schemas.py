from pydantic import Field
from typing import Optional
from datetime import datetime

from src.common.schemas import CamelModel

# Book schemas
class BookBase(CamelModel):
    title: str
    author: str
    description: str
    cover_image: str
    price: float = Field(ge=0)
    original_price: Optional[float] = None
    publisher: str
    publication_date: str
    pages: int
    language: str
    category: str
    rating: float = Field(ge=0, le=5)
    review_count: int
    is_bestseller: bool = False
    is_new_release: bool = False
    is_featured: bool = False
    sample_text: str

class BookCreate(BookBase):
    pass

class Book(BookBase):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True

# Category schemas
class CategoryBase(CamelModel):
    name: str
    icon: str
    book_count: int = 0

class CategoryCreate(CategoryBase):
    pass

class Category(CategoryBase):
    id: int

    class Config:
        from_attributes = True
