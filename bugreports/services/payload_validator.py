"""
Validar payloads de bug reports antes de enviarlos.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import ValidationError

from bugreports.errors import InvalidBugReportError
from bugreports.models.bug_report import BugReport

logger = logging.getLogger(__name__)


class PayloadValidator:
    """
    Validar bug reports usando Pydantic.

    Example:
        validator = PayloadValidator()
        report = validator.validate_report({
            "title": "Crash al iniciar",
            "description": "La app se cierra",
            "severity": "CRITICAL",
            "tags": ["CRASH"],
        })
    """

    def __init__(self):
        self.schema = BugReport

    def validate_report(
        self,
        report: Union[BugReport, Mapping[str, Any]]
    ) -> BugReport:
        """
        Args:
            report: BugReport ya construido o diccionario raw

        Returns:
            BugReport validado

        Raises:
            InvalidBugReportError si el payload no cumple el schema
        """
        try:
            if isinstance(report, BugReport):
                # Revalidar: el modelo pudo construirse con model_construct o mutarse
                return self.schema.model_validate(report.model_dump(by_alias=True))
            return self.schema.model_validate(report)
        except ValidationError as e:
            logger.warning(f"Bug report inválido: {e.error_count()} error(es)")
            raise InvalidBugReportError(e) from e

    def to_payload(
        self,
        report: Union[BugReport, Mapping[str, Any]],
        now: Optional[datetime] = None
    ) -> Dict[str, Any]:
        """
        Args:
            report: BugReport o diccionario raw
            now: Fecha a usar como createdAt si el reporte no trae una

        Returns:
            Diccionario listo para serializar como JSON
        """
        return self.validate_report(report).to_payload(now)


# Singleton
_payload_validator: Optional[PayloadValidator] = None


def get_payload_validator() -> PayloadValidator:
    global _payload_validator
    if _payload_validator is None:
        _payload_validator = PayloadValidator()
    return _payload_validator
