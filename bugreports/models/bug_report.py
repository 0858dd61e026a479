"""
Modelos Pydantic del bug report que se envía al API.

El payload se valida localmente antes de cualquier request; los nombres
en el wire usan camelCase (createdAt) como espera el API.
"""

import json
from enum import Enum
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BugSeverity(str, Enum):
    """Severidad del reporte, de menor a mayor urgencia."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class BugTag(str, Enum):
    """Tags predefinidos aceptados por el API."""
    UI = "UI"
    FUNCTIONALITY = "FUNCTIONALITY"
    PERFORMANCE = "PERFORMANCE"
    SECURITY = "SECURITY"
    CRASH = "CRASH"
    NETWORK = "NETWORK"
    DATABASE = "DATABASE"
    OTHER = "OTHER"

    @classmethod
    def list(cls):
        """Retornar lista de tags"""
        return [t.value for t in cls]


class BugReport(BaseModel):
    """
    Reporte de bug a enviar.

    Acepta tanto `created_at` como `createdAt` al construirse. Si no se
    indica fecha de creación, se usa la hora del request al serializar.
    """
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    severity: BugSeverity
    tags: List[BugTag] = Field(..., min_length=1)
    image: Optional[Union[str, List[str]]] = Field(
        default=None,
        description="Imagen(es) codificadas en base64"
    )
    metadata: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "title": "Botón de guardar no responde",
                "description": "Al hacer click en guardar no pasa nada",
                "severity": "HIGH",
                "tags": ["UI", "FUNCTIONALITY"],
                "metadata": {"browser": "Chrome", "version": "1.0.0"},
            }
        }
    )

    @field_validator("tags")
    @classmethod
    def unique_tags(cls, v: List[BugTag]) -> List[BugTag]:
        """Los tags son un conjunto: se descartan repetidos manteniendo el orden."""
        return list(dict.fromkeys(v))

    def with_created_at(self, now: Optional[datetime] = None) -> "BugReport":
        """Copia del reporte con created_at definido (hora actual UTC por defecto)."""
        if self.created_at is not None:
            return self
        return self.model_copy(
            update={"created_at": now or datetime.now(timezone.utc)}
        )

    def to_payload(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        """Serializar para el body JSON del request."""
        return self.with_created_at(now).model_dump(
            mode="json", by_alias=True, exclude_none=True
        )

    def to_form_fields(self, now: Optional[datetime] = None) -> Dict[str, str]:
        """
        Serializar como campos de formulario multipart.

        Los campos compuestos (tags, metadata) van como JSON string.
        La imagen base64 no se incluye: en multipart los adjuntos van como archivos.
        """
        payload = self.to_payload(now)
        fields = {
            "title": payload["title"],
            "description": payload["description"],
            "severity": payload["severity"],
            "tags": json.dumps(payload["tags"]),
            "createdAt": payload["createdAt"],
        }
        if "metadata" in payload:
            fields["metadata"] = json.dumps(payload["metadata"], ensure_ascii=False)
        return fields
