"""Tests for testimonials, contact messages and newsletter subscriptions."""

import pytest

from src.common.errors import ConflictError
from src.db.engagement.models.engagement_schemas import SubscriptionCreate
from src.db.engagement.services.engagement_service import EngagementService


VALID_CONTACT = {
    "name": "Ada Reader",
    "email": "ada@example.com",
    "subject": "Orders",
    "message": "Where can I find my purchased ebooks?",
}


class TestTestimonials:
    def test_list_testimonials(self, client, seeded_db):
        response = client.get("/api/testimonials")
        assert response.status_code == 200
        names = [t["name"] for t in response.json()]
        assert names == ["Jennifer Smith", "Michael Johnson", "Sarah Williams"]


class TestContact:
    def test_contact_message_created(self, client):
        response = client.post("/api/contact", json=VALID_CONTACT)
        assert response.status_code == 201
        body = response.json()
        assert body["id"] > 0
        assert body["subject"] == "Orders"
        assert "createdAt" in body

    def test_short_message_rejected_with_field_message(self, client):
        response = client.post("/api/contact", json={**VALID_CONTACT, "message": "Too short"})
        assert response.status_code == 400
        message = response.json()["message"]
        assert message.startswith("Validation error:")
        assert '"message"' in message

    @pytest.mark.parametrize(
        "field,value",
        [("name", "A"), ("email", "not-an-email"), ("subject", "")],
    )
    def test_invalid_fields_rejected(self, client, field, value):
        response = client.post("/api/contact", json={**VALID_CONTACT, field: value})
        assert response.status_code == 400
        assert f'"{field}"' in response.json()["message"]

    def test_missing_fields_rejected(self, client):
        response = client.post("/api/contact", json={"name": "Ada Reader"})
        assert response.status_code == 400
        message = response.json()["message"]
        assert '"email"' in message and '"message"' in message


class TestSubscriptions:
    def test_subscribe_then_duplicate_conflicts(self, client):
        first = client.post("/api/subscriptions", json={"email": "reader@example.com"})
        assert first.status_code == 201
        assert first.json()["email"] == "reader@example.com"

        second = client.post("/api/subscriptions", json={"email": "reader@example.com"})
        assert second.status_code == 400
        assert second.json() == {"message": "This email is already subscribed"}

    def test_invalid_email_rejected(self, client):
        response = client.post("/api/subscriptions", json={"email": "nope"})
        assert response.status_code == 400
        assert '"email"' in response.json()["message"]

    def test_service_raises_conflict_and_session_stays_usable(self, db):
        EngagementService.add_subscription(db, SubscriptionCreate(email="a@example.com"))

        with pytest.raises(ConflictError):
            EngagementService.add_subscription(db, SubscriptionCreate(email="a@example.com"))

        other = EngagementService.add_subscription(db, SubscriptionCreate(email="b@example.com"))
        assert other.id is not None
