"""
Modelos de respuesta del API de bug reports.

Todas las respuestas vienen envueltas en {"meta": {...}, "data": ...}.
"""

from enum import Enum
from datetime import datetime
from typing import Generic, List, Literal, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from bugreports.models.bug_report import BugTag

T = TypeVar("T")


class BugReportStatus(str, Enum):
    """Estados posibles de un reporte en el servidor."""
    SUBMITTED = "SUBMITTED"
    PROCESSING = "PROCESSING"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


class ResponseMeta(BaseModel):
    """Bloque meta presente en toda respuesta."""
    code: int
    status: Literal["success", "error"]
    message: str


class ApiResponse(BaseModel, Generic[T]):
    """Respuesta genérica del API."""
    meta: ResponseMeta
    data: Optional[T] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "meta": {"code": 200, "status": "success", "message": "Bug report submitted"},
                "data": {"id": "123", "status": "SUBMITTED", "createdAt": "2026-01-23T10:30:00Z"}
            }
        }
    }


class ApiErrorResponse(BaseModel):
    """Respuesta de error (solo meta)."""
    meta: ResponseMeta


class BugReportResponse(BaseModel):
    """Reporte tal como lo devuelve el servidor."""
    id: str
    status: BugReportStatus
    created_at: datetime = Field(..., alias="createdAt")

    model_config = ConfigDict(populate_by_name=True)


BugReportApiResponse = ApiResponse[BugReportResponse]
BugTagsApiResponse = ApiResponse[List[BugTag]]
