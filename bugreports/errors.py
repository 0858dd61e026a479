"""
Error hierarchy for the bug report API client.

Every error raised by the client derives from BugReportClientError so callers
can handle all of them with a single except clause.
"""

from typing import Any, Mapping, Optional

from config.constants import ERROR_MESSAGES, ErrorCode


class BugReportClientError(Exception):
    """Base exception for all bug report client errors."""

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__


class MissingConfigurationError(BugReportClientError):
    """Client was built without its base URL or app credentials."""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.MISSING_CONFIGURATION.value)


class InvalidBugReportError(BugReportClientError):
    """Report payload failed local validation; nothing was sent."""

    def __init__(self, detail: Any):
        super().__init__(
            f"{ERROR_MESSAGES[ErrorCode.INVALID_BUG_REPORT]}: {detail}",
            ErrorCode.INVALID_BUG_REPORT.value
        )
        self.detail = detail


class BugReportNetworkError(BugReportClientError):
    """The API could not be reached (DNS, connection, timeout...)."""

    def __init__(self):
        super().__init__(
            ERROR_MESSAGES[ErrorCode.NETWORK_ERROR],
            ErrorCode.NETWORK_ERROR.value
        )


class ApiBugReportError(BugReportClientError):
    """
    The API answered with a non-2xx status.

    Carries the `meta` block returned by the server (code, status, message).
    """

    label = ERROR_MESSAGES[ErrorCode.API_ERROR]
    default_error_code = ErrorCode.API_ERROR

    def __init__(self, meta: Mapping[str, Any]):
        self.code = meta.get("code")
        self.status = meta.get("status", "error")
        self.server_message = meta.get("message", "")
        super().__init__(
            f"{self.label} [{self.code}]: {self.server_message}",
            self.default_error_code.value
        )

    @property
    def meta(self) -> dict:
        return {
            "code": self.code,
            "status": self.status,
            "message": self.server_message,
        }


class NotFoundBugReportError(ApiBugReportError):
    """The API answered 404 for the requested resource."""

    label = ERROR_MESSAGES[ErrorCode.NOT_FOUND]
    default_error_code = ErrorCode.NOT_FOUND
