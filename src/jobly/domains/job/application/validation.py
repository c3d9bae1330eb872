"""
Schema validation for job input.

Each validate_* function checks one schema and returns either ``Valid`` with
the parsed value or ``Invalid`` with an ordered list of human readable error
messages. ``ensure_valid`` turns an ``Invalid`` result into a
``ValidationException`` so the pipeline stops before the store is reached.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, List, Type, TypeVar, Union
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from jobly.shared.application.exceptions import ValidationException
from .dto import JobNewDTO, JobQueryDTO, JobUpdateDTO

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class Valid(Generic[T]):
    value: T
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True)
class Invalid:
    errors: List[str]
    ok: bool = field(default=False, init=False)


ValidationResult = Union[Valid[T], Invalid]


def format_error(error: dict) -> str:
    """Render one pydantic error as ``"<field>: <message>"``."""
    if error["type"] == "value_error" and "error" in error.get("ctx", {}):
        message = str(error["ctx"]["error"])
    else:
        message = error["msg"]

    location = ".".join(str(part) for part in error["loc"])
    return f"{location}: {message}" if location else message


def validate(schema: Type[T], data: Any) -> ValidationResult[T]:
    """Validate ``data`` against ``schema`` without raising."""
    try:
        return Valid(schema.model_validate(data))
    except PydanticValidationError as e:
        return Invalid([format_error(error) for error in e.errors()])


def validate_job_new(data: Any) -> ValidationResult[JobNewDTO]:
    return validate(JobNewDTO, data)


def validate_job_update(data: Any) -> ValidationResult[JobUpdateDTO]:
    return validate(JobUpdateDTO, data)


def validate_job_query(data: Any) -> ValidationResult[JobQueryDTO]:
    return validate(JobQueryDTO, data)


def ensure_valid(result: ValidationResult[T]) -> T:
    """Return the validated value or raise ``ValidationException``."""
    if isinstance(result, Invalid):
        raise ValidationException(result.errors)
    return result.value
