from enum import Enum


class Endpoints(str, Enum):
    """Paths del API de bug reports (relativos a BUG_REPORT_API_URL)"""

    REPORTS = "/bugs/reports"
    REPORT_DETAIL = "/bugs/{report_id}"
    TAGS = "/bugs/tags"


class LogLevel(str, Enum):
    """Niveles de logging"""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# Campo multipart bajo el cual se envian los archivos adjuntos
UPLOAD_FILE_FIELD = "file"

# Content-type de adjuntos segun extension
UPLOAD_CONTENT_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".pdf": "application/pdf",
    ".txt": "text/plain",
    ".log": "text/plain",
    ".json": "application/json",
    ".zip": "application/zip",
}
DEFAULT_UPLOAD_CONTENT_TYPE = "application/octet-stream"


# Codigos de error

class ErrorCode(str, Enum):
    """Codigos de error estandarizados"""

    MISSING_CONFIGURATION = "MISSING_CONFIGURATION"
    INVALID_BUG_REPORT = "INVALID_BUG_REPORT"
    API_ERROR = "API_ERROR"
    NOT_FOUND = "NOT_FOUND"
    NETWORK_ERROR = "NETWORK_ERROR"


# Mensajes de error

ERROR_MESSAGES = {
    ErrorCode.MISSING_CONFIGURATION: "Configuracion del cliente incompleta",
    ErrorCode.INVALID_BUG_REPORT: "Invalid bug report data",
    ErrorCode.API_ERROR: "API Error",
    ErrorCode.NOT_FOUND: "Not Found Error",
    ErrorCode.NETWORK_ERROR: "Network error: unable to reach the bug report API",
}
