"""
Unit tests for notification adapters and message building.
"""
from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from tableside.domain.enums import OrderStatus
from tableside.infrastructure.adapters.notifications import (
    LoggingNotificationService,
    WebhookNotificationService,
)
from tableside.infrastructure.adapters.notifications.messages import (
    order_confirmed_messages,
    order_status_changed_messages,
)
from tableside.settings.sections.notifications import NotificationSettings


OCCURRED_AT = datetime(2025, 6, 1, 20, 30, tzinfo=timezone.utc)


def test_order_confirmed_messages_target_table_and_kitchen():
    messages = order_confirmed_messages("order-1", 7, OCCURRED_AT)

    assert [(m.group, m.method) for m in messages] == [
        ("table_7", "OrderConfirmed"),
        ("kitchen", "NewOrder"),
    ]
    assert messages[0].payload == {
        "type": "OrderConfirmed",
        "orderId": "order-1",
        "tableNumber": 7,
        "occurredAt": "2025-06-01T20:30:00+00:00",
    }


def test_status_changed_payload_uses_status_names():
    messages = order_status_changed_messages(
        "order-1", 7, OrderStatus.PREPARING, OrderStatus.READY, OCCURRED_AT
    )

    assert [m.group for m in messages] == ["table_7", "kitchen"]
    payload = messages[1].to_dict()["payload"]
    assert payload["oldStatus"] == "Preparing"
    assert payload["newStatus"] == "Ready"


@pytest.mark.asyncio
async def test_logging_service_records_notifications():
    service = LoggingNotificationService()

    await service.notify_order_confirmed("order-1", 3, OCCURRED_AT)
    await service.notify_order_status_changed(
        "order-1", 3, OrderStatus.DRAFT, OrderStatus.CONFIRMED, OCCURRED_AT
    )

    notifications = service.get_notifications()
    assert len(notifications) == 4
    assert notifications[2].payload["newStatus"] == "Confirmed"

    service.clear()
    assert service.get_notifications() == []


@pytest.mark.asyncio
async def test_webhook_without_url_skips_delivery():
    service = WebhookNotificationService(NotificationSettings(webhook_enabled=True, webhook_url=""))

    with patch("aiohttp.ClientSession") as client_session:
        await service.notify_order_confirmed("order-1", 3, OCCURRED_AT)

    client_session.assert_not_called()


@pytest.mark.asyncio
async def test_webhook_transport_errors_are_not_raised():
    service = WebhookNotificationService(
        NotificationSettings(webhook_enabled=True, webhook_url="http://127.0.0.1:9/hook")
    )

    with patch("aiohttp.ClientSession", side_effect=OSError("connection refused")):
        await service.notify_order_status_changed(
            "order-1", 3, OrderStatus.READY, OrderStatus.DELIVERED, OCCURRED_AT
        )
