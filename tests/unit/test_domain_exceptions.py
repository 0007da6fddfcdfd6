"""Tests for domain exceptions (error_code, message, details) and paging validation."""

import pytest

from app.application.dtos.pagination import PageRequest
from app.domain.exceptions import (
    PolicyVaultException,
    SearchBackendException,
    StoreUnavailableException,
    ValidationException,
)


def test_base_exception_default_error_code() -> None:
    """Base PolicyVaultException uses class name as error_code when not provided."""
    exc = PolicyVaultException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "PolicyVaultException"
    assert exc.details == {}


def test_to_dict() -> None:
    exc = PolicyVaultException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field in details."""
    exc = ValidationException("Invalid format", field="page")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "page"}
    assert ValidationException("Invalid").details == {}


def test_store_unavailable_exception() -> None:
    exc = StoreUnavailableException("memory")
    assert exc.error_code == "SERVICE_UNAVAILABLE"
    assert exc.details == {"backend": "memory"}


def test_search_backend_exception_carries_kind_and_operation_only() -> None:
    exc = SearchBackendException("claim", "count")
    assert exc.error_code == "SEARCH_BACKEND_ERROR"
    assert exc.details == {"kind": "claim", "operation": "count"}
    assert "claim" in exc.message


@pytest.mark.parametrize(("page", "page_size"), [(0, 10), (-1, 10), (1, 0)])
def test_page_request_rejects_non_positive_values(page: int, page_size: int) -> None:
    with pytest.raises(ValidationException):
        PageRequest(page=page, page_size=page_size)


def test_page_request_skip() -> None:
    assert PageRequest(page=1, page_size=20).skip == 0
    assert PageRequest(page=4, page_size=5).skip == 15
