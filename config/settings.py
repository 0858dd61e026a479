from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class GeneralSettings(BaseSettings):
    """Configuracion general"""

    ENVIRONMENT: str = Field(
        default="development",
        description="Entorno: development, staging, production"
    )
    DEBUG: bool = Field(
        default=False,
        description="Modo debug (verbose logging)"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Nivel de logging: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


class BugReportAPISettings(BaseSettings):
    """Configuracion del API remoto de bug reports"""

    BUG_REPORT_API_URL: str = Field(
        default="",
        description="URL base del API de bug reports"
    )
    BUG_REPORT_APP_NAME: str = Field(
        default="",
        description="Nombre de la aplicacion (header X-App-Name)"
    )
    BUG_REPORT_APP_KEY: str = Field(
        default="",
        description="App Key (header X-App-Key)"
    )
    BUG_REPORT_APP_SECRET: str = Field(
        default="",
        description="App Secret enviado como Bearer token"
    )
    BUG_REPORT_TIMEOUT: float = Field(
        default=30,
        description="Timeout en segundos para requests"
    )
    BUG_REPORT_UPLOAD_CHUNK_SIZE: int = Field(
        default=64 * 1024,
        description="Tamaño en bytes de cada chunk al subir con progreso"
    )

    @field_validator("BUG_REPORT_API_URL")
    @classmethod
    def validate_api_url(cls, v):
        """Remover trailing slash de la URL"""
        if v.endswith("/"):
            return v.rstrip("/")
        return v

    @field_validator("BUG_REPORT_UPLOAD_CHUNK_SIZE")
    @classmethod
    def validate_chunk_size(cls, v):
        if v <= 0:
            raise ValueError("BUG_REPORT_UPLOAD_CHUNK_SIZE debe ser mayor a 0")
        return v

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


class LoggingSettings(BaseSettings):
    """Configuracion de logging"""

    LOG_TO_FILE: bool = Field(
        default=False,
        description="Escribir logs tambien a archivo con rotacion diaria"
    )
    LOG_DIR: str = Field(
        default="logs",
        description="Directorio de archivos de log"
    )
    LOG_RETENTION_DAYS: int = Field(
        default=7,
        description="Numero de dias de logs rotados a mantener"
    )

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


class Settings(BaseSettings):
    """
    Clase principal que agrupa todas las configuraciones
    Uso: from config.settings import settings
         settings.bug_report_api.BUG_REPORT_API_URL, settings.LOG_LEVEL, etc
    """

    # Subconfigurations
    general: GeneralSettings = Field(default_factory=GeneralSettings)
    bug_report_api: BugReportAPISettings = Field(default_factory=BugReportAPISettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    # Shortcuts para acceso directo
    @property
    def ENVIRONMENT(self) -> str:
        return self.general.ENVIRONMENT

    @property
    def DEBUG(self) -> bool:
        return self.general.DEBUG

    @property
    def LOG_LEVEL(self) -> str:
        return self.general.LOG_LEVEL

    @property
    def BUG_REPORT_API_URL(self) -> str:
        return self.bug_report_api.BUG_REPORT_API_URL

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Singleton instance
@lru_cache()
def get_settings() -> Settings:
    """
    Obtener instancia singleton de Settings
    Uso: from config.settings import get_settings
         settings = get_settings()
    """
    return Settings()


# Instancia global (para imports directos)
settings = get_settings()
