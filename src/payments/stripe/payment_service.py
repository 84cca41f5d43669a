import math
import os
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Dict, Union
from sqlalchemy.orm import Session
from loguru import logger

from src.common.errors import GatewayError, InvalidAmountError
from src.db.book.services.book_service import BookService
from .payment_schemas import CreatePaymentIntentResponse, PaymentStatusResponse
from .stripe_service import StripeService

# Số tiền lớn nhất gateway nhận cho một payment intent (minor units)
MAX_MINOR_AMOUNT = 99_999_999

def to_minor_units(amount: float) -> int:
    """12.99 -> 1299, làm tròn half-up"""
    return int((Decimal(str(amount)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))

def from_minor_units(amount: int) -> float:
    """1299 -> 12.99"""
    return float(Decimal(amount) / 100)

class PaymentService:
    """Điều phối checkout: gắn thông tin sách vào payment intent và hỏi trạng thái từ gateway"""

    def __init__(self, gateway: StripeService, currency: Optional[str] = None):
        self.gateway = gateway
        self.currency = (currency or os.getenv("PAYMENT_CURRENCY", "usd")).lower()

    def build_metadata(self, db: Session, book_id: Optional[Union[int, str]]) -> Dict[str, str]:
        """
        Metadata cho payment intent từ sách

        Book ID không hợp lệ hoặc sách không tồn tại thì trả về dict rỗng
        """
        if not book_id:
            return {}
        try:
            book = BookService.get_book(db, int(book_id))
        except (TypeError, ValueError):
            return {}
        if not book:
            logger.info("Book {} not found, creating payment intent without metadata", book_id)
            return {}
        return {
            "bookId": str(book.id),
            "bookTitle": book.title,
            "bookAuthor": book.author
        }

    def create_payment_intent(
        self,
        db: Session,
        amount: Optional[float],
        book_id: Optional[Union[int, str]] = None
    ) -> CreatePaymentIntentResponse:
        """
        Tạo payment intent cho một lần checkout

        Args:
            db: Database session
            amount: Số tiền theo major units (vd 12.99)
            book_id: ID sách, optional

        Returns:
            CreatePaymentIntentResponse với client secret của gateway

        Raises:
            InvalidAmountError: amount không có, không hữu hạn, <= 0 hoặc vượt MAX_MINOR_AMOUNT
            GatewayError: Gateway trả về lỗi
        """
        if amount is None or not math.isfinite(amount) or amount <= 0 or amount * 100 > MAX_MINOR_AMOUNT:
            raise InvalidAmountError("Invalid amount")

        metadata = self.build_metadata(db, book_id)
        minor_amount = to_minor_units(amount)

        result = self.gateway.create_payment_intent(minor_amount, self.currency, metadata)
        if not result.success:
            logger.error("Error creating payment intent: {} ({})", result.message, result.error_code)
            raise GatewayError(
                "Failed to create payment intent",
                error=result.message,
                error_code=result.error_code
            )

        logger.info("Payment intent {} created for {} {}", result.data.get("id"), minor_amount, self.currency)
        return CreatePaymentIntentResponse(
            client_secret=result.data.get("client_secret", ""),
            amount=amount
        )

    def get_payment_status(self, payment_intent_id: str) -> PaymentStatusResponse:
        """
        Lấy trạng thái payment intent cho trang xác nhận thanh toán

        Raises:
            GatewayError: Gateway trả về lỗi (vd: ID không tồn tại)
        """
        result = self.gateway.retrieve_payment_intent(payment_intent_id)
        if not result.success:
            logger.error("Error retrieving payment intent {}: {}", payment_intent_id, result.message)
            raise GatewayError(
                "Failed to retrieve payment status",
                error=result.message,
                error_code=result.error_code
            )

        return PaymentStatusResponse(
            status=result.data.get("status", ""),
            amount=from_minor_units(result.data.get("amount", 0)),
            metadata=result.data.get("metadata") or {}
        )
