"""Entity package: Review."""

from .entity import Review
from .repository import ReviewRepository
from .table import ReviewTable

__all__ = ["Review", "ReviewRepository", "ReviewTable"]
