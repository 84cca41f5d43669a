from sqlalchemy import Column, Integer, String, Text, DateTime
from datetime import datetime

from src.db.common.database_connection import Base

class Testimonial(Base):
    """Model cho cảm nhận của độc giả"""
    __tablename__ = "testimonials"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    role = Column(String(255), nullable=False)
    image = Column(Text)
    content = Column(Text, nullable=False)


class ContactMessage(Base):
    """Model cho form liên hệ"""
    __tablename__ = "contact_messages"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    subject = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)


class Subscription(Base):
    """Model cho đăng ký nhận newsletter"""
    __tablename__ = "subscriptions"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)  # Unique constraint chặn email trùng
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
