from sqlalchemy.orm import Session
from sqlalchemy import and_, or_
from typing import List, Optional

from src.db.book.models.book_models import Book, Category
from src.db.book.models.book_schemas import BookCreate, CategoryCreate
from src.db.common.database_connection import id_in_range

# Tab "All Categories" trên storefront nghĩa là không lọc theo category
ALL_CATEGORIES = "All Categories"

class BookService:
    @staticmethod
    def get_book(db: Session, book_id: int) -> Optional[Book]:
        """Lấy book theo ID, ID ngoài khoảng của cột trả về None"""
        if not id_in_range(book_id):
            return None
        return db.query(Book).filter(Book.id == book_id).first()

    @staticmethod
    def get_featured_books(db: Session) -> List[Book]:
        """Lấy các sách nổi bật"""
        return db.query(Book).filter(Book.is_featured == True).all()

    @staticmethod
    def get_new_releases(db: Session, category: Optional[str] = None) -> List[Book]:
        """Lấy sách mới phát hành, lọc thêm theo category nếu có"""
        query = db.query(Book)
        if category and category != ALL_CATEGORIES:
            return query.filter(
                and_(Book.is_new_release == True, Book.category == category)
            ).all()
        return query.filter(Book.is_new_release == True).all()

    @staticmethod
    def get_bestsellers(db: Session) -> List[Book]:
        """Lấy sách bán chạy"""
        return db.query(Book).filter(Book.is_bestseller == True).all()

    @staticmethod
    def search_books(db: Session, query: str) -> List[Book]:
        """Tìm sách theo title, author hoặc description"""
        pattern = f"%{query}%"
        return db.query(Book).filter(
            or_(
                Book.title.like(pattern),
                Book.author.like(pattern),
                Book.description.like(pattern)
            )
        ).all()

    @staticmethod
    def create_book(db: Session, book: BookCreate) -> Book:
        """Tạo book mới"""
        db_book = Book(**book.model_dump())
        db.add(db_book)
        db.commit()
        db.refresh(db_book)
        return db_book

class CategoryService:
    @staticmethod
    def get_categories(db: Session) -> List[Category]:
        """Lấy tất cả categories"""
        return db.query(Category).all()

    @staticmethod
    def get_category(db: Session, category_id: int) -> Optional[Category]:
        """Lấy category theo ID, ID ngoài khoảng của cột trả về None"""
        if not id_in_range(category_id):
            return None
        return db.query(Category).filter(Category.id == category_id).first()

    @staticmethod
    def create_category(db: Session, category: CategoryCreate) -> Category:
        """Tạo category mới"""
        db_category = Category(**category.model_dump())
        db.add(db_category)
        db.commit()
        db.refresh(db_category)
        return db_category
