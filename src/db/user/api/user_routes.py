from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from src.common.errors import NotFoundError
from src.db.common.database_connection import get_db
from src.db.user.services.user_service import UserService
from src.db.user.models.user_schemas import User, UserCreate

router = APIRouter()

@router.post("/users", response_model=User, status_code=status.HTTP_201_CREATED)
def create_user(user: UserCreate, db: Session = Depends(get_db)):
    """Tạo user mới"""
    return UserService.create_user(db, user)

@router.get("/users/{user_id}", response_model=User)
def get_user(user_id: int, db: Session = Depends(get_db)):
    """Lấy thông tin user theo ID"""
    db_user = UserService.get_user(db, user_id)
    if not db_user:
        raise NotFoundError("User not found")
    return db_user
