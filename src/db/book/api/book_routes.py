from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from src.common.errors import NotFoundError, ValidationError
from src.db.common.database_connection import get_db
from src.db.book.services.book_service import BookService, CategoryService
from src.db.book.models.book_schemas import Book, Category

router = APIRouter()

def parse_id(value: str, message: str) -> int:
    """Parse path param thành int, sai định dạng thì raise ValidationError"""
    try:
        return int(value)
    except ValueError:
        raise ValidationError(message)

# Book routes
@router.get("/books/featured", response_model=List[Book])
def get_featured_books(db: Session = Depends(get_db)):
    """Lấy danh sách sách nổi bật"""
    return BookService.get_featured_books(db)

@router.get("/books/new-releases", response_model=List[Book])
def get_new_releases(
    category: Optional[str] = Query(None, description="Tên category, 'All Categories' = không lọc"),
    db: Session = Depends(get_db)
):
    """Lấy sách mới phát hành"""
    return BookService.get_new_releases(db, category)

@router.get("/books/bestsellers", response_model=List[Book])
def get_bestsellers(db: Session = Depends(get_db)):
    """Lấy sách bán chạy"""
    return BookService.get_bestsellers(db)

@router.get("/books/search", response_model=List[Book])
def search_books(q: Optional[str] = Query(None), db: Session = Depends(get_db)):
    """Tìm sách theo title / author / description"""
    if not q or not q.strip():
        raise ValidationError("Search query is required")
    return BookService.search_books(db, q.strip())

@router.get("/books/{book_id}", response_model=Book)
def get_book(book_id: str, db: Session = Depends(get_db)):
    """Lấy chi tiết sách theo ID"""
    db_book = BookService.get_book(db, parse_id(book_id, "Invalid book ID"))
    if not db_book:
        raise NotFoundError("Book not found")
    return db_book

# Category routes
@router.get("/categories", response_model=List[Category])
def get_categories(db: Session = Depends(get_db)):
    """Lấy tất cả categories"""
    return CategoryService.get_categories(db)

@router.get("/categories/{category_id}", response_model=Category)
def get_category(category_id: str, db: Session = Depends(get_db)):
    """Lấy category theo ID"""
    db_category = CategoryService.get_category(db, parse_id(category_id, "Invalid category ID"))
    if not db_category:
        raise NotFoundError("Category not found")
    return db_category
