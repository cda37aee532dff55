"""
Base Domain Event.

All domain events inherit from this base class. Aggregates record them in
an instance-owned buffer; the orchestrating use case hands them to
collaborators after a successful save and then clears the buffer.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
import uuid


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class DomainEvent:
    """
    Base class for all domain events.

    Events are records of things that have happened.
    """

    # Event metadata
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    event_type: str = field(init=False)

    # Aggregate information
    aggregate_id: str = field(default="")
    aggregate_type: str = field(init=False)

    # Timestamp
    occurred_at: datetime = field(default_factory=_utc_now)

    def __post_init__(self):
        """Set event type and aggregate type from class name."""
        if not getattr(self, "event_type", None):
            object.__setattr__(self, "event_type", self.__class__.__name__)

        if not getattr(self, "aggregate_type", None):
            object.__setattr__(self, "aggregate_type", self._get_aggregate_type())

    def _get_aggregate_type(self) -> str:
        """
        Extract aggregate type from event type.

        Example: OrderConfirmedEvent -> Order
        """
        event_name = self.__class__.__name__

        # Remove 'Event' suffix
        if event_name.endswith("Event"):
            event_name = event_name[:-5]

        # Extract aggregate name (first word before action)
        for i, char in enumerate(event_name):
            if i > 0 and char.isupper():
                return event_name[:i]

        return event_name
