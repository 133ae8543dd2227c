# tests/models/test_lookup.py

import pytest

from carbonregions.core.exceptions import ProviderError
from carbonregions.models.lookup import LookupResult, LookupStatus


def test_found_returns_code():
    result = LookupResult.found("electricity_maps", "FR")

    assert result.status == LookupStatus.FOUND
    assert result.code_or_raise() == "FR"


def test_found_with_empty_code_is_no_coverage():
    result = LookupResult.found("watttime", "")

    assert result.status == LookupStatus.NO_COVERAGE
    assert result.code_or_raise() == ""


def test_no_coverage_is_not_an_error():
    assert LookupResult.no_coverage("watttime").code_or_raise() == ""


def test_failure_raises_provider_error():
    result = LookupResult.failure("electricity_maps", status_code=500)

    with pytest.raises(ProviderError) as exc_info:
        result.code_or_raise()

    assert exc_info.value.status_code == 500
    assert exc_info.value.provider == "electricity_maps"
    assert "expected 200 response got 500" in str(exc_info.value)
