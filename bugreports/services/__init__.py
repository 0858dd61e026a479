"""
Services - Validación de payloads del cliente
"""

from bugreports.services.payload_validator import PayloadValidator, get_payload_validator

__all__ = [
    "PayloadValidator",
    "get_payload_validator",
]
