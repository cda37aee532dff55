"""Persistence adapters."""
from .in_memory import (
    InMemoryCategoryRepository,
    InMemoryOrderRepository,
    InMemoryPaymentRepository,
    InMemoryProductRepository,
    InMemoryTableRepository,
)

__all__ = [
    "InMemoryCategoryRepository",
    "InMemoryOrderRepository",
    "InMemoryPaymentRepository",
    "InMemoryProductRepository",
    "InMemoryTableRepository",
]
