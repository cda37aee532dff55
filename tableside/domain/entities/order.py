"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from ..enums import OrderStatus
from ..events.base import DomainEvent
from ..events.order_events import OrderConfirmedEvent, OrderStatusChangedEvent
from ..exceptions import InvalidStateError, NotFoundError, ValidationError
from ..value_objects import (
    OrderId,
    OrderLineId,
    Price,
    ProductId,
    Quantity,
    SessionId,
    TableId,
)


ORDER_CURRENCY = "EUR"


@dataclass
class OrderLine:
    """
    Individual line within an order.

    product_name and unit_price are snapshots taken when the line is
    created; later catalog edits never reach existing lines.
    """
    id: OrderLineId
    product_id: ProductId
    product_name: str
    unit_price: Price
    quantity: Quantity
    subtotal: Price = field(init=False)

    def __post_init__(self):
        self.subtotal = self._calculate_subtotal()

    @classmethod
    def create(
        cls,
        product_id: ProductId,
        product_name: str,
        unit_price: Price,
        quantity: Quantity,
    ) -> "OrderLine":
        if not product_name or not product_name.strip():
            raise ValidationError("Product name is required on an order line.")
        return cls(
            id=OrderLineId.generate(),
            product_id=product_id,
            product_name=product_name,
            unit_price=unit_price,
            quantity=quantity,
        )

    def update_quantity(self, quantity: Quantity) -> None:
        """Replace quantity and recompute subtotal."""
        self.quantity = quantity
        self.subtotal = self._calculate_subtotal()

    def _calculate_subtotal(self) -> Price:
        return self.unit_price.multiply(self.quantity.value)


@dataclass
class Order:
    """
    Order aggregate root.

    One shared order per active table session. Lines can only change
    while the order is a Draft; total always equals the sum of line
    subtotals.

    Status chain:
        Draft -> Confirmed -> Preparing -> Ready -> Delivered
        Draft | Confirmed -> Cancelled
    """
    id: OrderId
    table_id: TableId
    session_id: SessionId
    lines: List[OrderLine] = field(default_factory=list)
    status: OrderStatus = OrderStatus.DRAFT
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    confirmed_at: Optional[datetime] = None
    total: Price = field(init=False)

    # Pending events, drained by the use case after persistence
    _domain_events: List[DomainEvent] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self):
        self._recalculate_total()

    @classmethod
    def create(cls, table_id: TableId, session_id: SessionId) -> "Order":
        """
        Factory method to create a new Draft order.

        Args:
            table_id: Table the order belongs to
            session_id: Active session of that table

        Returns:
            New Order with no lines and a zero EUR total
        """
        return cls(
            id=OrderId.generate(),
            table_id=table_id,
            session_id=session_id,
            status=OrderStatus.DRAFT,
        )

    # =========================================================================
    # LINE MUTATIONS (Draft only)
    # =========================================================================

    def add_product(
        self,
        product_id: ProductId,
        product_name: str,
        unit_price: Price,
        quantity: Quantity,
    ) -> None:
        """
        Add a product, merging into the existing line for the same product.

        Raises:
            InvalidStateError: If the order is not a Draft
            ValidationError: If the merged quantity exceeds the maximum or the
                price is not in the order currency
        """
        self._ensure_can_be_modified()

        if unit_price.currency != ORDER_CURRENCY:
            raise ValidationError(
                f"Order lines must be priced in {ORDER_CURRENCY}. "
                f"Received: {unit_price.currency}"
            )

        existing_line = self._find_line_by_product(product_id)
        if existing_line is not None:
            # Quantity.add raises before anything is touched
            existing_line.update_quantity(existing_line.quantity.add(quantity))
        else:
            self.lines.append(
                OrderLine.create(product_id, product_name, unit_price, quantity)
            )

        self._recalculate_total()

    def remove_line(self, line_id: OrderLineId) -> None:
        """Remove a line by id."""
        self._ensure_can_be_modified()
        line = self._get_line(line_id)
        self.lines.remove(line)
        self._recalculate_total()

    def update_line_quantity(self, line_id: OrderLineId, quantity: Quantity) -> None:
        """Replace the quantity of a line."""
        self._ensure_can_be_modified()
        line = self._get_line(line_id)
        line.update_quantity(quantity)
        self._recalculate_total()

    # =========================================================================
    # STATUS TRANSITIONS
    # =========================================================================

    def confirm(self) -> None:
        """
        Business rule: send a non-empty Draft order to the kitchen.

        Records OrderConfirmedEvent and OrderStatusChangedEvent.
        """
        if not self.lines:
            raise InvalidStateError("Cannot confirm an empty order.")

        if self.status != OrderStatus.DRAFT:
            raise InvalidStateError(
                f"Cannot confirm order in status {self.status.value}. "
                f"Only Draft orders can be confirmed."
            )

        previous_status = self.status
        self.status = OrderStatus.CONFIRMED
        self.confirmed_at = datetime.now(timezone.utc)

        self._record_event(
            OrderConfirmedEvent(
                order_id=str(self.id),
                table_number=self.table_id.value,
            )
        )
        self._record_status_change(previous_status, self.status)

    def cancel(self) -> None:
        """Business rule: only Draft or Confirmed orders can be cancelled."""
        if self.status == OrderStatus.DELIVERED:
            raise InvalidStateError("Cannot cancel an order that has been delivered.")

        if self.status == OrderStatus.CANCELLED:
            raise InvalidStateError("Order is already cancelled.")

        if not self.status.is_open:
            raise InvalidStateError(
                f"Cannot cancel order in status {self.status.value}. "
                f"Only Draft or Confirmed orders can be cancelled."
            )

        previous_status = self.status
        self.status = OrderStatus.CANCELLED
        self._record_status_change(previous_status, self.status)

    def mark_as_preparing(self) -> None:
        self._advance(
            required=OrderStatus.CONFIRMED,
            target=OrderStatus.PREPARING,
            error="Only confirmed orders can be marked as preparing.",
        )

    def mark_as_ready(self) -> None:
        self._advance(
            required=OrderStatus.PREPARING,
            target=OrderStatus.READY,
            error="Only preparing orders can be marked as ready.",
        )

    def mark_as_delivered(self) -> None:
        self._advance(
            required=OrderStatus.READY,
            target=OrderStatus.DELIVERED,
            error="Only ready orders can be marked as delivered.",
        )

    @property
    def is_empty(self) -> bool:
        return not self.lines

    # =========================================================================
    # EVENT COLLECTION
    # =========================================================================

    def get_domain_events(self) -> List[DomainEvent]:
        """
        Get all domain events collected by this aggregate.

        Returns:
            Copy of the pending events, oldest first
        """
        return list(self._domain_events)

    def clear_domain_events(self) -> None:
        """Clear all collected domain events (after dispatch)."""
        self._domain_events.clear()

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _advance(self, required: OrderStatus, target: OrderStatus, error: str) -> None:
        if self.status != required:
            raise InvalidStateError(error)
        previous_status = self.status
        self.status = target
        self._record_status_change(previous_status, target)

    def _ensure_can_be_modified(self) -> None:
        if self.status != OrderStatus.DRAFT:
            raise InvalidStateError(
                f"Cannot modify order in status {self.status.value}. "
                f"Only Draft orders can be modified."
            )

    def _find_line_by_product(self, product_id: ProductId) -> Optional[OrderLine]:
        return next((l for l in self.lines if l.product_id == product_id), None)

    def _get_line(self, line_id: OrderLineId) -> OrderLine:
        line = next((l for l in self.lines if l.id == line_id), None)
        if line is None:
            raise NotFoundError(f"Order line with ID {line_id} not found.")
        return line

    def _recalculate_total(self) -> None:
        """Internal: Sum all line subtotals."""
        total = Price.zero(ORDER_CURRENCY)
        for line in self.lines:
            total = total.add(line.subtotal)
        self.total = total

    def _record_status_change(self, previous_status: OrderStatus, new_status: OrderStatus) -> None:
        self._record_event(
            OrderStatusChangedEvent(
                order_id=str(self.id),
                table_number=self.table_id.value,
                old_status=previous_status,
                new_status=new_status,
            )
        )

    def _record_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)
