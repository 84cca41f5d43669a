#!/usr/bin/env python3
"""
Script khởi tạo database cho BookHub storefront.
Tạo tables và dữ liệu mẫu (categories, testimonials, books) nếu bảng còn trống.

Chạy: python -m src.db.init_db
"""

import sys
from sqlalchemy import text
from sqlalchemy.orm import Session
from loguru import logger

from src.db.common.database_connection import init_database, engine, SessionLocal
from src.db.book.models.book_models import Book, Category
from src.db.book.models.book_schemas import BookCreate, CategoryCreate
from src.db.book.services.book_service import BookService, CategoryService
from src.db.engagement.models.engagement_models import Testimonial
from src.db.engagement.models.engagement_schemas import TestimonialCreate
from src.db.engagement.services.engagement_service import EngagementService

SAMPLE_CATEGORIES = [
    CategoryCreate(name="Science Fiction", icon="rocket", book_count=142),
    CategoryCreate(name="Romance", icon="heart", book_count=286),
    CategoryCreate(name="Mystery", icon="magnifying-glass", book_count=189),
    CategoryCreate(name="Business", icon="briefcase", book_count=127),
    CategoryCreate(name="Self-Help", icon="brain", book_count=173),
    CategoryCreate(name="History", icon="landmark", book_count=98),
]

SAMPLE_TESTIMONIALS = [
    TestimonialCreate(
        name="Jennifer Smith",
        role="Avid Reader",
        image="https://randomuser.me/api/portraits/women/17.jpg",
        content="I've been using BookHub for the past year and it has completely transformed my reading "
                "experience. The recommendations are spot-on and I love the preview feature!"
    ),
    TestimonialCreate(
        name="Michael Johnson",
        role="Book Blogger",
        image="https://randomuser.me/api/portraits/men/32.jpg",
        content="As someone who reads and reviews books professionally, I can say that BookHub offers one "
                "of the best digital reading experiences out there. Their selection is outstanding."
    ),
    TestimonialCreate(
        name="Sarah Williams",
        role="Entrepreneur",
        image="https://randomuser.me/api/portraits/women/37.jpg",
        content="The business section on BookHub has been invaluable for my professional growth. I've "
                "discovered some amazing titles that have helped me scale my startup."
    ),
]

SAMPLE_BOOKS = [
    BookCreate(
        title="The Future Is Now",
        author="Alexandra Chen",
        description="A thought-provoking journey into the near future where technology has transformed "
                    "every aspect of human life.",
        cover_image="https://images.unsplash.com/photo-1544947950-fa07a98d237f?auto=format&fit=crop&w=800&h=1200",
        price=12.99,
        original_price=15.99,
        publisher="Horizon Press",
        publication_date="June 15, 2023",
        pages=348,
        language="English",
        category="Science Fiction",
        rating=4.5,
        review_count=128,
        is_bestseller=True,
        is_new_release=False,
        is_featured=True,
        sample_text="Chapter 1: The Beginning\n\nThe alarm clock buzzed incessantly, pulling Sarah from a "
                    "dream she couldn't quite remember."
    ),
    BookCreate(
        title="Strategic Growth",
        author="Michael J. Roberts",
        description="A comprehensive guide to scaling businesses and achieving sustainable growth in "
                    "competitive markets.",
        cover_image="https://images.unsplash.com/photo-1589829085413-56de8ae18c73?auto=format&fit=crop&w=800&h=1200",
        price=15.99,
        original_price=None,
        publisher="Business Elite Publishing",
        publication_date="March 22, 2023",
        pages=412,
        language="English",
        category="Business",
        rating=5.0,
        review_count=247,
        is_bestseller=True,
        is_new_release=False,
        is_featured=True,
        sample_text="Chapter 1: Rethinking Growth\n\nMost businesses fail not because they lack good products "
                    "or talented people, but because they don't understand what true growth means."
    ),
    BookCreate(
        title="Mindful Living",
        author="Sarah Johnson",
        description="A practical guide to incorporating mindfulness into everyday activities for reduced "
                    "stress and enhanced well-being.",
        cover_image="https://images.unsplash.com/photo-1544716278-e513176f20b5?auto=format&fit=crop&w=800&h=1200",
        price=10.99,
        original_price=13.99,
        publisher="Serenity Books",
        publication_date="January 5, 2023",
        pages=256,
        language="English",
        category="Self-Help",
        rating=4.0,
        review_count=189,
        is_bestseller=False,
        is_new_release=True,
        is_featured=True,
        sample_text="Chapter 1: The Present Moment\n\nTake a deep breath. Feel the air filling your lungs. "
                    "Notice the sensation as it enters through your nostrils."
    ),
]

def seed_initial_data(db: Session) -> None:
    """Seed dữ liệu mẫu, mỗi bảng chỉ seed khi còn trống"""
    if db.query(Category).count() == 0:
        for category in SAMPLE_CATEGORIES:
            CategoryService.create_category(db, category)
        logger.info("Seeded {} categories", len(SAMPLE_CATEGORIES))

    if db.query(Testimonial).count() == 0:
        for testimonial in SAMPLE_TESTIMONIALS:
            EngagementService.create_testimonial(db, testimonial)
        logger.info("Seeded {} testimonials", len(SAMPLE_TESTIMONIALS))

    if db.query(Book).count() == 0:
        for book in SAMPLE_BOOKS:
            BookService.create_book(db, book)
        logger.info("Seeded {} books", len(SAMPLE_BOOKS))

def create_sample_data():
    """Tạo dữ liệu mẫu bằng session mới"""
    db = SessionLocal()
    try:
        seed_initial_data(db)
    finally:
        db.close()

def check_connection() -> bool:
    """Test kết nối database"""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Database connection successful")
        return True
    except Exception as e:
        logger.error("Database connection failed: {}", e)
        return False

def main():
    """Main function"""
    logger.info("Initializing database for BookHub...")

    if not check_connection():
        logger.error("Please check your DATABASE_URL in .env file")
        sys.exit(1)

    init_database()
    create_sample_data()
    logger.info("Database initialization completed")

if __name__ == "__main__":
    main()
