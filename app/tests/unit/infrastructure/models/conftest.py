"""Fixtures for infrastructure models tests."""

import pytest


@pytest.fixture
def make_error_response():
    """Factory fixture for creating ErrorResponse instances."""

    def _make(error="Error", error_code="ERROR", details=None):
        from infrastructure.models import ErrorResponse

        return ErrorResponse(
            error=error,
            error_code=error_code,
            details=details,
        )

    return _make
