from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from src.db.common.database_connection import get_db
from .payment_schemas import (
    CreatePaymentIntentRequest, CreatePaymentIntentResponse, PaymentStatusResponse
)
from .payment_service import PaymentService
from .stripe_service import StripeService, get_payment_gateway

router = APIRouter()

@router.post("/create-payment-intent", response_model=CreatePaymentIntentResponse)
def create_payment_intent(
    request: CreatePaymentIntentRequest,
    db: Session = Depends(get_db),
    gateway: StripeService = Depends(get_payment_gateway)
):
    """
    Tạo payment intent cho checkout

    - **amount**: Số tiền (major units, vd 12.99)
    - **bookId**: ID sách, optional, dùng để gắn metadata
    """
    return PaymentService(gateway).create_payment_intent(db, request.amount, request.book_id)

@router.get("/payment-status/{payment_intent_id}", response_model=PaymentStatusResponse)
def get_payment_status(
    payment_intent_id: str,
    gateway: StripeService = Depends(get_payment_gateway)
):
    """Lấy trạng thái thanh toán sau khi gateway redirect về trang success"""
    return PaymentService(gateway).get_payment_status(payment_intent_id)
