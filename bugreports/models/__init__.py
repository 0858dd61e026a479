"""Modelos Pydantic del cliente de bug reports."""

from bugreports.models.bug_report import (
    BugReport,
    BugSeverity,
    BugTag,
)
from bugreports.models.responses import (
    ApiErrorResponse,
    ApiResponse,
    BugReportApiResponse,
    BugReportResponse,
    BugReportStatus,
    BugTagsApiResponse,
    ResponseMeta,
)

__all__ = [
    "BugReport",
    "BugSeverity",
    "BugTag",
    "ApiErrorResponse",
    "ApiResponse",
    "BugReportApiResponse",
    "BugReportResponse",
    "BugReportStatus",
    "BugTagsApiResponse",
    "ResponseMeta",
]
