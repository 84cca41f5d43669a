from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, Float, CheckConstraint
from datetime import datetime

from src.db.common.database_connection import Base

class Book(Base):
    """Model cho sách trong catalog"""
    __tablename__ = "books"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_books_price_non_negative"),
        CheckConstraint("rating >= 0 AND rating <= 5", name="ck_books_rating_range"),
    )

    id = Column(Integer, primary_key=True, index=True)
    title = Column(Text, nullable=False)
    author = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    cover_image = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    original_price = Column(Float)  # Giá gốc trước khi giảm, có thể null
    publisher = Column(Text, nullable=False)
    publication_date = Column(Text, nullable=False)  # vd: "June 15, 2023"
    pages = Column(Integer, nullable=False)
    language = Column(Text, nullable=False)
    category = Column(String(100), nullable=False, index=True)
    rating = Column(Float, nullable=False)
    review_count = Column(Integer, nullable=False)
    is_bestseller = Column(Boolean, default=False, nullable=False)
    is_new_release = Column(Boolean, default=False, nullable=False)
    is_featured = Column(Boolean, default=False, nullable=False)
    sample_text = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)


class Category(Base):
    """Model cho danh mục sách"""
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False)
    icon = Column(String(100), nullable=False)
    book_count = Column(Integer, default=0, nullable=False)
