from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from passlib.context import CryptContext
from typing import Optional

from src.common.errors import ConflictError
from src.db.common.database_connection import id_in_range
from src.db.user.models.user_models import User
from src.db.user.models.user_schemas import UserCreate

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

class UserService:
    @staticmethod
    def get_user(db: Session, user_id: int) -> Optional[User]:
        """Lấy user theo ID"""
        if not id_in_range(user_id):
            return None
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    def get_user_by_username(db: Session, username: str) -> Optional[User]:
        """Lấy user theo username"""
        return db.query(User).filter(User.username == username).first()

    @staticmethod
    def create_user(db: Session, user: UserCreate) -> User:
        """
        Tạo user mới, password được hash trước khi lưu

        Raises:
            ConflictError: Username hoặc email đã tồn tại
        """
        db_user = User(
            username=user.username,
            email=user.email,
            name=user.name,
            hashed_password=pwd_context.hash(user.password)
        )
        db.add(db_user)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise ConflictError("Username or email is already registered")
        db.refresh(db_user)
        return db_user
