"""Application layer - use cases orchestrating the domain."""
from .results import Result

__all__ = ["Result"]
