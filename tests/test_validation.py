"""
Tests for job schema validation.
"""

import pytest

from jobly.domains.job.application.dto import parse_equity
from jobly.domains.job.domain.entities import JobFilters
from jobly.domains.job.application.validation import (
    Invalid,
    Valid,
    ensure_valid,
    validate_job_new,
    validate_job_query,
    validate_job_update,
)
from jobly.shared.application.exceptions import ValidationException


class TestValidateJobNew:
    """Create schema: title and companyHandle required, strict types."""

    def test_valid_payload(self, job_payload):
        result = validate_job_new(job_payload)
        assert isinstance(result, Valid)
        assert result.ok
        assert result.value.title == "Software Engineer"
        assert result.value.company_handle == "acme"
        assert result.value.salary == 120000
        assert result.value.equity == 0.05

    def test_optional_fields_may_be_omitted(self):
        result = validate_job_new({"title": "Engineer", "companyHandle": "acme"})
        assert isinstance(result, Valid)
        assert result.value.salary is None
        assert result.value.equity is None

    def test_missing_required_fields_in_declaration_order(self):
        result = validate_job_new({})
        assert isinstance(result, Invalid)
        assert not result.ok
        assert result.errors == [
            "title: Field required",
            "companyHandle: Field required",
        ]

    def test_missing_title(self):
        result = validate_job_new({"companyHandle": "acme"})
        assert result.errors == ["title: Field required"]

    def test_unknown_field_rejected(self, job_payload):
        result = validate_job_new({**job_payload, "id": 99})
        assert isinstance(result, Invalid)
        assert result.errors == ["id: Extra inputs are not permitted"]

    def test_snake_case_name_is_unknown(self):
        result = validate_job_new({"title": "Engineer", "company_handle": "acme"})
        assert isinstance(result, Invalid)
        assert result.errors[0] == "companyHandle: Field required"
        assert result.errors[1].startswith("company_handle:")

    def test_errors_follow_schema_order(self):
        result = validate_job_new({"color": "red", "salary": -1, "title": 5})
        assert isinstance(result, Invalid)
        fields = [error.split(":")[0] for error in result.errors]
        assert fields == ["title", "salary", "companyHandle", "color"]

    def test_salary_string_not_coerced(self, job_payload):
        result = validate_job_new({**job_payload, "salary": "50000"})
        assert isinstance(result, Invalid)
        assert result.errors[0].startswith("salary:")

    def test_salary_boolean_rejected(self, job_payload):
        result = validate_job_new({**job_payload, "salary": True})
        assert isinstance(result, Invalid)

    def test_negative_salary_rejected(self, job_payload):
        result = validate_job_new({**job_payload, "salary": -1})
        assert result.errors == ["salary: Input should be greater than or equal to 0"]

    def test_empty_title_rejected(self, job_payload):
        result = validate_job_new({**job_payload, "title": ""})
        assert isinstance(result, Invalid)
        assert result.errors[0].startswith("title:")

    def test_equity_decimal_string_accepted(self, job_payload):
        result = validate_job_new({**job_payload, "equity": "0.25"})
        assert isinstance(result, Valid)
        assert result.value.equity == 0.25

    def test_equity_out_of_range(self, job_payload):
        result = validate_job_new({**job_payload, "equity": 1.5})
        assert result.errors == ["equity: must be between 0 and 1"]

    def test_non_object_body_rejected(self):
        for body in [None, [], "job", 42]:
            result = validate_job_new(body)
            assert isinstance(result, Invalid)
            assert len(result.errors) == 1

    def test_deterministic(self):
        payload = {"salary": "x", "equity": 3}
        first = validate_job_new(payload)
        second = validate_job_new(payload)
        assert first == second


class TestValidateJobUpdate:
    """Update schema: any non-empty subset of the mutable fields."""

    def test_single_field(self):
        result = validate_job_update({"salary": 1000})
        assert isinstance(result, Valid)
        assert result.value.to_patch() == {"salary": 1000}

    def test_patch_uses_attribute_names(self):
        result = validate_job_update({"companyHandle": "beta", "title": "New"})
        assert result.value.to_patch() == {"title": "New", "company_handle": "beta"}

    def test_empty_patch_rejected(self):
        result = validate_job_update({})
        assert isinstance(result, Invalid)
        assert result.errors == ["at least one field must be supplied"]

    def test_id_cannot_be_patched(self):
        result = validate_job_update({"id": 5, "title": "New"})
        assert result.errors == ["id: Extra inputs are not permitted"]

    def test_nullable_fields_can_be_cleared(self):
        result = validate_job_update({"salary": None, "equity": None})
        assert isinstance(result, Valid)
        assert result.value.to_patch() == {"salary": None, "equity": None}

    def test_required_fields_cannot_be_cleared(self):
        result = validate_job_update({"title": None})
        assert isinstance(result, Invalid)
        assert result.errors[0].startswith("title:")

    def test_invalid_values_rejected(self):
        result = validate_job_update({"salary": -10, "equity": "abc"})
        assert result.errors == [
            "salary: Input should be greater than or equal to 0",
            "equity: must be a number or a decimal string",
        ]


class TestValidateJobQuery:
    """List filter schema: every filter optional, unknown keys rejected."""

    def test_no_filters(self):
        result = validate_job_query({})
        assert isinstance(result, Valid)
        assert result.value.to_filters() == JobFilters()

    def test_typed_filters(self):
        result = validate_job_query({"minSalary": 50000, "hasEquity": True, "nameLike": "eng"})
        filters = result.value.to_filters()
        assert filters.min_salary == 50000
        assert filters.has_equity is True
        assert filters.name_like == "eng"

    def test_unparsed_min_salary_rejected(self):
        result = validate_job_query({"minSalary": "abc"})
        assert isinstance(result, Invalid)
        assert result.errors[0].startswith("minSalary:")

    def test_negative_min_salary_rejected(self):
        result = validate_job_query({"minSalary": -1})
        assert isinstance(result, Invalid)

    def test_unknown_filter_rejected(self):
        result = validate_job_query({"color": "red"})
        assert result.errors == ["color: Extra inputs are not permitted"]

    def test_empty_name_like_rejected(self):
        result = validate_job_query({"nameLike": ""})
        assert isinstance(result, Invalid)


class TestEnsureValid:

    def test_returns_value(self):
        value = ensure_valid(validate_job_update({"title": "New"}))
        assert value.title == "New"

    def test_raises_with_ordered_errors(self):
        with pytest.raises(ValidationException) as exc_info:
            ensure_valid(validate_job_new({}))
        assert exc_info.value.status_code == 400
        assert exc_info.value.errors == [
            "title: Field required",
            "companyHandle: Field required",
        ]


class TestParseEquity:

    @pytest.mark.parametrize("value, expected", [
        (0, 0.0),
        (1, 1.0),
        (0.5, 0.5),
        ("0.125", 0.125),
        (" 1 ", 1.0),
        (None, None),
    ])
    def test_accepted(self, value, expected):
        assert parse_equity(value) == expected

    @pytest.mark.parametrize("value", [-0.1, 1.01, "2", "NaN", "Infinity"])
    def test_out_of_range(self, value):
        with pytest.raises(ValueError, match="between 0 and 1"):
            parse_equity(value)

    @pytest.mark.parametrize("value", [True, "abc", [0.5], {"v": 1}])
    def test_wrong_type(self, value):
        with pytest.raises(ValueError, match="number or a decimal string"):
            parse_equity(value)
