from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, Union

from src.common.schemas import CamelModel

# Gateway client result
class GatewayResult(BaseModel):
    """Kết quả một lần gọi payment gateway: success hoặc failure có error_code"""
    success: bool
    data: Dict[str, Any] = Field(default_factory=dict)
    error_code: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def ok(cls, data: Dict[str, Any]) -> "GatewayResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error_code: str, message: str) -> "GatewayResult":
        return cls(success=False, error_code=error_code, message=message)

# Checkout request/response schemas
class CreatePaymentIntentRequest(CamelModel):
    amount: Optional[float] = None
    book_id: Optional[Union[int, str]] = None

class CreatePaymentIntentResponse(CamelModel):
    client_secret: str
    amount: float

class PaymentStatusResponse(CamelModel):
    status: str
    amount: float
    metadata: Dict[str, str] = Field(default_factory=dict)
