"""
Query string normalization for job listings.

Query values always arrive as strings. This converts the known filters to
their typed form so the list schema can validate them.
"""

import re
from typing import Any, Dict, Mapping

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def normalize_job_filters(params: Mapping[str, str]) -> Dict[str, Any]:
    """Return a typed copy of ``params``.

    - ``minSalary``: parsed as a base-10 integer. A value that does not parse
      is passed through unchanged so validation rejects it instead of it being
      coerced to 0.
    - ``hasEquity``: only the exact string ``"true"`` turns the filter on.
      Any other value, ``"false"`` included, drops the key: the filter is
      either on or absent, never a negative constraint.
    - everything else passes through unchanged.
    """
    normalized: Dict[str, Any] = dict(params)

    if "minSalary" in normalized:
        raw = normalized["minSalary"]
        if isinstance(raw, str) and _INTEGER_RE.fullmatch(raw):
            normalized["minSalary"] = int(raw)

    if "hasEquity" in normalized:
        if normalized["hasEquity"] == "true":
            normalized["hasEquity"] = True
        else:
            del normalized["hasEquity"]

    return normalized
