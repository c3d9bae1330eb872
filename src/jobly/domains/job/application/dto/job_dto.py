"""
Data Transfer Objects declaring the accepted shape of job input.

Field declaration order is the order validation errors are reported in.
Unknown fields are rejected by every schema.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, field_validator, model_validator

from jobly.domains.job.domain.entities import MAX_HANDLE_LENGTH, MAX_INTEGER, JobFilters


def parse_equity(value: Any) -> Optional[float]:
    """Accept a number or decimal string within [0, 1]."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError("must be a number or a decimal string")

    try:
        amount = Decimal(value.strip() if isinstance(value, str) else str(value))
    except InvalidOperation:
        raise ValueError("must be a number or a decimal string")

    if not amount.is_finite() or amount < 0 or amount > 1:
        raise ValueError("must be between 0 and 1")
    return float(amount)


class JobNewDTO(BaseModel):
    """Body of a create request."""

    model_config = ConfigDict(extra="forbid")

    title: StrictStr = Field(..., min_length=1)
    salary: Optional[StrictInt] = Field(None, ge=0, le=MAX_INTEGER)
    equity: Optional[float] = None
    company_handle: StrictStr = Field(..., alias="companyHandle", min_length=1, max_length=MAX_HANDLE_LENGTH)

    @field_validator("equity", mode="before")
    @classmethod
    def check_equity(cls, v):
        return parse_equity(v)


class JobUpdateDTO(BaseModel):
    """Body of a partial update. Any non-empty subset of the mutable fields."""

    model_config = ConfigDict(extra="forbid")

    title: StrictStr = Field(None, min_length=1)
    salary: Optional[StrictInt] = Field(None, ge=0, le=MAX_INTEGER)
    equity: Optional[float] = None
    company_handle: StrictStr = Field(None, alias="companyHandle", min_length=1, max_length=MAX_HANDLE_LENGTH)

    @field_validator("equity", mode="before")
    @classmethod
    def check_equity(cls, v):
        return parse_equity(v)

    @model_validator(mode="after")
    def check_not_empty(self):
        if not self.model_fields_set:
            raise ValueError("at least one field must be supplied")
        return self

    def to_patch(self) -> dict:
        """Only the supplied fields, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class JobQueryDTO(BaseModel):
    """Normalized query string of a list request."""

    model_config = ConfigDict(extra="forbid")

    min_salary: Optional[StrictInt] = Field(None, alias="minSalary", ge=0, le=MAX_INTEGER)
    has_equity: Optional[StrictBool] = Field(None, alias="hasEquity")
    name_like: Optional[StrictStr] = Field(None, alias="nameLike", min_length=1)

    def to_filters(self) -> JobFilters:
        return JobFilters(
            min_salary=self.min_salary,
            has_equity=self.has_equity,
            name_like=self.name_like,
        )
