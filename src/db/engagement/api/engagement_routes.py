from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from src.db.common.database_connection import get_db
from src.db.engagement.services.engagement_service import EngagementService
from src.db.engagement.models.engagement_schemas import (
    Testimonial, ContactMessage, ContactMessageCreate, Subscription, SubscriptionCreate
)

router = APIRouter()

@router.get("/testimonials", response_model=List[Testimonial])
def get_testimonials(db: Session = Depends(get_db)):
    """Lấy danh sách testimonials"""
    return EngagementService.get_testimonials(db)

@router.post("/subscriptions", response_model=Subscription, status_code=status.HTTP_201_CREATED)
def add_subscription(subscription: SubscriptionCreate, db: Session = Depends(get_db)):
    """Đăng ký nhận newsletter, email trùng trả về 400"""
    return EngagementService.add_subscription(db, subscription)

@router.post("/contact", response_model=ContactMessage, status_code=status.HTTP_201_CREATED)
def add_contact_message(message: ContactMessageCreate, db: Session = Depends(get_db)):
    """Gửi tin nhắn liên hệ"""
    return EngagementService.add_contact_message(db, message)
