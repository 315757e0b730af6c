"""Domain policies package."""

from .ownership import effective_owner_name
from .transaction_filters import FilterCriteria

__all__ = ["effective_owner_name", "FilterCriteria"]
