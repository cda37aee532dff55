"""Infrastructure adapters (persistence, payments, notifications)."""
