"""
Notification message building.

Each notification goes to two groups: the screens of the table
("table_<n>") and the kitchen dashboard ("kitchen").
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from tableside.domain.enums import OrderStatus


KITCHEN_GROUP = "kitchen"


def table_group(table_number: int) -> str:
    return f"table_{table_number}"


@dataclass(frozen=True)
class NotificationMessage:
    """One message addressed to one subscriber group."""

    group: str
    method: str
    payload: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return {"group": self.group, "method": self.method, "payload": self.payload}


def order_confirmed_messages(
    order_id: str,
    table_number: int,
    occurred_at: datetime,
) -> List[NotificationMessage]:
    payload = {
        "type": "OrderConfirmed",
        "orderId": order_id,
        "tableNumber": table_number,
        "occurredAt": occurred_at.isoformat(),
    }
    return [
        NotificationMessage(table_group(table_number), "OrderConfirmed", payload),
        NotificationMessage(KITCHEN_GROUP, "NewOrder", payload),
    ]


def order_status_changed_messages(
    order_id: str,
    table_number: int,
    old_status: Optional[OrderStatus],
    new_status: OrderStatus,
    occurred_at: datetime,
) -> List[NotificationMessage]:
    payload = {
        "type": "OrderStatusChanged",
        "orderId": order_id,
        "tableNumber": table_number,
        "oldStatus": old_status.value if old_status is not None else None,
        "newStatus": new_status.value,
        "occurredAt": occurred_at.isoformat(),
    }
    return [
        NotificationMessage(table_group(table_number), "OrderStatusChanged", payload),
        NotificationMessage(KITCHEN_GROUP, "OrderStatusChanged", payload),
    ]
