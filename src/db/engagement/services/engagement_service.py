from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from typing import List
from loguru import logger

from src.common.errors import ConflictError
from src.db.engagement.models.engagement_models import Testimonial, ContactMessage, Subscription
from src.db.engagement.models.engagement_schemas import (
    TestimonialCreate, ContactMessageCreate, SubscriptionCreate
)

class EngagementService:
    @staticmethod
    def get_testimonials(db: Session) -> List[Testimonial]:
        """Lấy tất cả testimonials"""
        return db.query(Testimonial).all()

    @staticmethod
    def create_testimonial(db: Session, testimonial: TestimonialCreate) -> Testimonial:
        """Tạo testimonial mới"""
        db_testimonial = Testimonial(**testimonial.model_dump())
        db.add(db_testimonial)
        db.commit()
        db.refresh(db_testimonial)
        return db_testimonial

    @staticmethod
    def add_contact_message(db: Session, message: ContactMessageCreate) -> ContactMessage:
        """Lưu tin nhắn từ form liên hệ"""
        db_message = ContactMessage(**message.model_dump())
        db.add(db_message)
        db.commit()
        db.refresh(db_message)
        logger.info("Contact message {} received (subject={})", db_message.id, db_message.subject)
        return db_message

    @staticmethod
    def add_subscription(db: Session, subscription: SubscriptionCreate) -> Subscription:
        """
        Đăng ký email nhận newsletter

        Không SELECT trước khi insert: unique constraint của bảng subscriptions
        quyết định email trùng, IntegrityError được chuyển thành ConflictError.

        Raises:
            ConflictError: Email đã được đăng ký
        """
        db_subscription = Subscription(email=subscription.email)
        db.add(db_subscription)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            logger.warning("Duplicate subscription rejected for {}", subscription.email)
            raise ConflictError("This email is already subscribed")
        db.refresh(db_subscription)
        return db_subscription
