"""
Tests for query string normalization.
"""

from jobly.domains.job.application.filters import normalize_job_filters


class TestHasEquity:
    """hasEquity is an on/off switch: only the exact string "true" turns it on."""

    def test_true_string_becomes_boolean(self):
        assert normalize_job_filters({"hasEquity": "true"}) == {"hasEquity": True}

    def test_false_string_drops_key(self):
        assert normalize_job_filters({"hasEquity": "false"}) == {}

    def test_match_is_case_sensitive(self):
        assert normalize_job_filters({"hasEquity": "TRUE"}) == {}
        assert normalize_job_filters({"hasEquity": "True"}) == {}

    def test_other_values_drop_key(self):
        for value in ["", "1", "yes", "true "]:
            assert "hasEquity" not in normalize_job_filters({"hasEquity": value})


class TestMinSalary:
    """minSalary is parsed as an integer when it looks like one."""

    def test_numeric_string_becomes_int(self):
        result = normalize_job_filters({"minSalary": "50000"})
        assert result == {"minSalary": 50000}
        assert isinstance(result["minSalary"], int)

    def test_signed_values_are_parsed(self):
        assert normalize_job_filters({"minSalary": "-5"}) == {"minSalary": -5}
        assert normalize_job_filters({"minSalary": "+5"}) == {"minSalary": 5}

    def test_unparseable_value_passes_through(self):
        """Invalid numbers are left for validation rather than coerced to 0."""
        assert normalize_job_filters({"minSalary": "abc"}) == {"minSalary": "abc"}
        assert normalize_job_filters({"minSalary": ""}) == {"minSalary": ""}

    def test_non_decimal_forms_are_not_parsed(self):
        for value in ["1_000", "1e5", "10.5", " 42"]:
            assert normalize_job_filters({"minSalary": value}) == {"minSalary": value}


class TestPassThrough:
    """Other parameters are untouched."""

    def test_name_like_unchanged(self):
        assert normalize_job_filters({"nameLike": "Eng"}) == {"nameLike": "Eng"}

    def test_unknown_keys_kept_for_validation(self):
        assert normalize_job_filters({"color": "red"}) == {"color": "red"}

    def test_empty_params(self):
        assert normalize_job_filters({}) == {}

    def test_input_not_mutated(self):
        params = {"minSalary": "10", "hasEquity": "false"}
        normalize_job_filters(params)
        assert params == {"minSalary": "10", "hasEquity": "false"}
