"""
Tests de la jerarquía de errores.

pytest tests/test_errors.py -v
"""

import pytest

from bugreports.errors import (
    ApiBugReportError,
    BugReportClientError,
    BugReportNetworkError,
    MissingConfigurationError,
    NotFoundBugReportError,
)


class TestApiErrors:
    """Tests de errores con meta del servidor."""

    def test_api_error_message(self):
        """Debe formatear código y mensaje del servidor."""
        error = ApiBugReportError({"code": 400, "status": "error", "message": "Bad request"})

        assert str(error) == "API Error [400]: Bad request"
        assert error.code == 400
        assert error.status == "error"
        assert error.error_code == "API_ERROR"
        assert error.meta == {"code": 400, "status": "error", "message": "Bad request"}

    def test_not_found_is_api_error(self):
        """NotFound es un caso particular de error del API."""
        error = NotFoundBugReportError({"code": 404, "status": "error", "message": "Missing"})

        assert isinstance(error, ApiBugReportError)
        assert isinstance(error, BugReportClientError)
        assert str(error) == "Not Found Error [404]: Missing"
        assert error.error_code == "NOT_FOUND"

    def test_can_be_caught_as_base(self):
        """Todos los errores se capturan con BugReportClientError."""
        for error in (
            MissingConfigurationError("API URL is required"),
            BugReportNetworkError(),
            ApiBugReportError({"code": 500, "message": "boom"}),
        ):
            with pytest.raises(BugReportClientError):
                raise error

    def test_base_error_code_defaults_to_class_name(self):
        """Sin error_code explícito se usa el nombre de la clase."""
        assert BugReportClientError("x").error_code == "BugReportClientError"
