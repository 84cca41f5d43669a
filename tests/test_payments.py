"""Tests for the checkout flow: payment intent creation and status lookup."""

import pytest

from src.common.errors import GatewayError, InvalidAmountError
from src.db.book.services.book_service import BookService
from src.payments.stripe.payment_schemas import GatewayResult
from src.payments.stripe.payment_service import PaymentService, from_minor_units, to_minor_units


class TestMinorUnits:
    @pytest.mark.parametrize(
        "amount,expected",
        [(12.99, 1299), (0.01, 1), (10, 1000), (19.995, 2000), (0.285, 29)],
    )
    def test_to_minor_units(self, amount, expected):
        assert to_minor_units(amount) == expected

    def test_from_minor_units(self):
        assert from_minor_units(1299) == 12.99
        assert from_minor_units(0) == 0.0


class TestPaymentService:
    def test_rejects_non_positive_amount_without_gateway_call(self, db, gateway):
        service = PaymentService(gateway)
        for amount in (0, -5, None):
            with pytest.raises(InvalidAmountError):
                service.create_payment_intent(db, amount)
        assert gateway.create_calls == []

    @pytest.mark.parametrize("amount", [float("nan"), float("inf"), float("-inf"), 1e30, 1_000_000])
    def test_rejects_non_finite_and_oversized_amounts(self, db, gateway, amount):
        with pytest.raises(InvalidAmountError):
            PaymentService(gateway).create_payment_intent(db, amount)
        assert gateway.create_calls == []

    def test_accepts_largest_amount(self, db, gateway):
        PaymentService(gateway).create_payment_intent(db, 999999.99)
        assert gateway.create_calls[0]["amount"] == 99_999_999

    def test_uses_configured_currency(self, db, gateway):
        PaymentService(gateway, currency="EUR").create_payment_intent(db, 5)
        assert gateway.create_calls[0]["currency"] == "eur"

    def test_gateway_failure_becomes_gateway_error(self, db, gateway):
        gateway.fail_with = GatewayResult.fail("card_declined", "Your card was declined.")
        with pytest.raises(GatewayError) as excinfo:
            PaymentService(gateway).create_payment_intent(db, 5)
        assert excinfo.value.error == "Your card was declined."
        assert excinfo.value.error_code == "card_declined"


class TestCreatePaymentIntentRoute:
    def test_known_book_attaches_metadata(self, client, seeded_db, gateway):
        book = BookService.get_featured_books(seeded_db)[0]

        response = client.post("/api/create-payment-intent", json={"amount": 12.99, "bookId": book.id})

        assert response.status_code == 200
        body = response.json()
        assert body["amount"] == 12.99
        assert body["clientSecret"] == "pi_test_1_secret_abc"
        call = gateway.create_calls[0]
        assert call["amount"] == 1299
        assert call["currency"] == "usd"
        assert call["metadata"] == {
            "bookId": str(book.id),
            "bookTitle": book.title,
            "bookAuthor": book.author,
        }

    def test_book_id_as_string(self, client, seeded_db, gateway):
        book = BookService.get_featured_books(seeded_db)[0]
        response = client.post("/api/create-payment-intent", json={"amount": 3, "bookId": str(book.id)})
        assert response.status_code == 200
        assert gateway.create_calls[0]["metadata"]["bookId"] == str(book.id)

    @pytest.mark.parametrize("book_id", [999999, 99999999999999999999, "99999999999999999999", "not-a-number", None])
    def test_unknown_book_omits_metadata(self, client, seeded_db, gateway, book_id):
        response = client.post("/api/create-payment-intent", json={"amount": 7.5, "bookId": book_id})
        assert response.status_code == 200
        assert gateway.create_calls[0]["metadata"] == {}

    @pytest.mark.parametrize("payload", [{"amount": 0}, {"amount": -1.5}, {}])
    def test_invalid_amount(self, client, gateway, payload):
        response = client.post("/api/create-payment-intent", json=payload)
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid amount"}
        assert gateway.create_calls == []

    @pytest.mark.parametrize("raw_amount", ["NaN", "Infinity", "-Infinity", "1e30"])
    def test_non_finite_or_huge_amount_is_invalid(self, client, gateway, raw_amount):
        response = client.post(
            "/api/create-payment-intent",
            content='{"amount": ' + raw_amount + "}",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid amount"}
        assert gateway.create_calls == []

    def test_gateway_error_is_500_with_underlying_message(self, client, gateway):
        gateway.fail_with = GatewayResult.fail("api_key_invalid", "Invalid API Key provided")
        response = client.post("/api/create-payment-intent", json={"amount": 5})
        assert response.status_code == 500
        assert response.json() == {
            "message": "Failed to create payment intent",
            "error": "Invalid API Key provided",
        }


class TestPaymentStatusRoute:
    def test_round_trip_amount_and_metadata(self, client, seeded_db, gateway):
        book = BookService.get_featured_books(seeded_db)[0]
        client.post("/api/create-payment-intent", json={"amount": 12.99, "bookId": book.id})
        intent_id = next(iter(gateway.intents))

        response = client.get(f"/api/payment-status/{intent_id}")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "requires_payment_method"
        assert body["amount"] == 12.99
        assert body["metadata"]["bookTitle"] == book.title

    def test_unknown_intent_is_500(self, client, gateway):
        response = client.get("/api/payment-status/pi_missing")
        assert response.status_code == 500
        body = response.json()
        assert body["message"] == "Failed to retrieve payment status"
        assert "pi_missing" in body["error"]
