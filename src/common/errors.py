from typing import Optional


class StoreError(Exception):
    """Base error của API, mang theo code và HTTP status để map ra JSON {message}"""

    code = "INTERNAL"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"message": self.message}


class ValidationError(StoreError):
    """Input sai định dạng hoặc thiếu field"""

    code = "VALIDATION"
    status_code = 400


class NotFoundError(StoreError):
    """Không tìm thấy book / category / user"""

    code = "NOT_FOUND"
    status_code = 404


class ConflictError(StoreError):
    """Vi phạm ràng buộc unique (vd: email đã subscribe)"""

    code = "CONFLICT"
    status_code = 400


class InvalidAmountError(StoreError):
    """Số tiền thanh toán <= 0 hoặc không có"""

    code = "INVALID_AMOUNT"
    status_code = 400


class GatewayError(StoreError):
    """
    Payment gateway trả về lỗi

    Args:
        message: Message trả về cho client
        error: Message gốc từ gateway
        error_code: Code lỗi có cấu trúc từ gateway client
    """

    code = "GATEWAY_ERROR"
    status_code = 500

    def __init__(self, message: str, error: Optional[str] = None, error_code: Optional[str] = None):
        super().__init__(message)
        self.error = error
        self.error_code = error_code

    def to_dict(self) -> dict:
        body = {"message": self.message}
        if self.error is not None:
            body["error"] = self.error
        return body
