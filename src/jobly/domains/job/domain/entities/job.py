"""
Job posting entity and list filter criteria.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

# Largest value a 64-bit integer column can hold
MAX_INTEGER = 2 ** 63 - 1
MAX_HANDLE_LENGTH = 64


@dataclass
class Job:
    """A posted position. ``id`` is assigned by the store."""

    id: int
    title: str
    company_handle: str
    salary: Optional[int] = None
    equity: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the public (camelCase) field names."""
        return {
            "id": self.id,
            "title": self.title,
            "salary": self.salary,
            "equity": self.equity,
            "companyHandle": self.company_handle,
        }


@dataclass(frozen=True)
class JobFilters:
    """Typed, request-scoped criteria narrowing a job listing.

    ``has_equity`` only ever constrains when True; False and None both mean
    "no equity constraint".
    """

    min_salary: Optional[int] = None
    has_equity: Optional[bool] = None
    name_like: Optional[str] = None
