import os
import requests
from typing import Dict, Any, Optional
from loguru import logger

from .payment_schemas import GatewayResult

class StripeService:
    """
    Client cho payment-intent API của Stripe, gọi trực tiếp qua HTTP

    Mọi method trả về GatewayResult thay vì raise, lỗi được phân loại bằng
    error_code: not_configured, network_error, hoặc code/type gateway trả về.
    """

    def __init__(
        self,
        secret_key: Optional[str] = None,
        api_base: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        self.secret_key = secret_key if secret_key is not None else os.getenv("STRIPE_SECRET_KEY", "")
        self.api_base = (api_base or os.getenv("STRIPE_API_BASE", "https://api.stripe.com")).rstrip("/")
        self.timeout = timeout if timeout is not None else float(os.getenv("STRIPE_TIMEOUT", "30"))
        self.session = session or requests.Session()

    def create_payment_intent(
        self,
        amount: int,
        currency: str,
        metadata: Optional[Dict[str, str]] = None
    ) -> GatewayResult:
        """
        Tạo payment intent

        Args:
            amount: Số tiền theo minor units (cents)
            currency: Mã tiền tệ, vd "usd"
            metadata: Thông tin đính kèm (bookId, bookTitle, bookAuthor)

        Returns:
            GatewayResult, data là payment intent gateway trả về
        """
        form = {
            "amount": str(amount),
            "currency": currency,
        }
        # Stripe nhận metadata dạng form field metadata[key]
        for key, value in (metadata or {}).items():
            form[f"metadata[{key}]"] = value

        return self._request("POST", "/v1/payment_intents", data=form)

    def retrieve_payment_intent(self, payment_intent_id: str) -> GatewayResult:
        """
        Lấy trạng thái hiện tại của payment intent

        Args:
            payment_intent_id: ID của payment intent (pi_...)

        Returns:
            GatewayResult, data là payment intent gateway trả về
        """
        path = f"/v1/payment_intents/{requests.utils.quote(payment_intent_id, safe='')}"
        return self._request("GET", path)

    def _request(self, method: str, path: str, data: Optional[Dict[str, Any]] = None) -> GatewayResult:
        if not self.secret_key:
            return GatewayResult.fail("not_configured", "Missing required Stripe secret: STRIPE_SECRET_KEY")

        url = f"{self.api_base}{path}"
        try:
            response = self.session.request(
                method,
                url,
                data=data,
                auth=(self.secret_key, ""),
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error("Payment gateway request {} {} failed: {}", method, path, e)
            return GatewayResult.fail("network_error", str(e))

        try:
            body = response.json()
        except ValueError:
            body = {}

        if 200 <= response.status_code < 300:
            return GatewayResult.ok(body)

        error = body.get("error", {}) if isinstance(body, dict) else {}
        error_code = error.get("code") or error.get("type") or f"http_{response.status_code}"
        message = error.get("message") or response.text or f"Payment gateway returned {response.status_code}"
        logger.warning("Payment gateway {} {} returned {} ({})", method, path, response.status_code, error_code)
        return GatewayResult.fail(error_code, message)


def get_payment_gateway() -> StripeService:
    """Dependency tạo gateway client từ env, test override bằng fake gateway"""
    return StripeService()
