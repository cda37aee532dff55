"""Application services."""
from .event_dispatcher import OrderEventDispatcher

__all__ = ["OrderEventDispatcher"]
