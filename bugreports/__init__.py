"""
Bug Reports - Cliente para el API remoto de bug reports.

Componentes:
- models/: Modelos Pydantic del reporte y de las respuestas del API
- services/: Validación de payloads
- http/: Cliente HTTP async (JSON, progreso, multipart)
- errors: Jerarquía de errores del cliente
"""

from bugreports.errors import (
    ApiBugReportError,
    BugReportClientError,
    BugReportNetworkError,
    InvalidBugReportError,
    MissingConfigurationError,
    NotFoundBugReportError,
)
from bugreports.http import (
    BugReportClient,
    parse_bug_report_response,
    parse_bug_tags_response,
)
from bugreports.models import (
    BugReport,
    BugReportResponse,
    BugReportStatus,
    BugSeverity,
    BugTag,
)

__all__ = [
    # Cliente
    "BugReportClient",
    "parse_bug_report_response",
    "parse_bug_tags_response",
    # Modelos
    "BugReport",
    "BugReportResponse",
    "BugReportStatus",
    "BugSeverity",
    "BugTag",
    # Errores
    "ApiBugReportError",
    "BugReportClientError",
    "BugReportNetworkError",
    "InvalidBugReportError",
    "MissingConfigurationError",
    "NotFoundBugReportError",
]
