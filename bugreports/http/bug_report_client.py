"""
Bug Report Client - Cliente HTTP async para el API de bug reports.

Maneja la comunicación con los endpoints del API:
- POST /bugs/reports: Enviar un reporte (JSON, JSON con progreso o multipart con archivos)
- GET /bugs/{id}: Consultar un reporte
- GET /bugs/tags: Listar tags disponibles

Las respuestas 2xx se devuelven tal cual (JSON decodificado); cualquier
otro status se convierte en ApiBugReportError / NotFoundBugReportError.
"""

import logging
from pathlib import Path
from urllib.parse import quote
from typing import (
    Any,
    AsyncIterator,
    Callable,
    Dict,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Union,
)

import httpx

from config.constants import (
    DEFAULT_UPLOAD_CONTENT_TYPE,
    UPLOAD_CONTENT_TYPES,
    UPLOAD_FILE_FIELD,
    Endpoints,
)
from config.settings import Settings, get_settings
from bugreports.errors import (
    ApiBugReportError,
    BugReportNetworkError,
    InvalidBugReportError,
    MissingConfigurationError,
    NotFoundBugReportError,
)
from bugreports.models.bug_report import BugReport
from bugreports.models.responses import BugReportApiResponse, BugTagsApiResponse
from bugreports.services.payload_validator import get_payload_validator

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float], None]
ReportInput = Union[BugReport, Mapping[str, Any]]
# Ruta a un archivo, o (nombre, contenido) / (nombre, contenido, content_type)
FileInput = Union[str, Path, Tuple[str, bytes], Tuple[str, bytes, str]]


class BugReportClient:
    """Cliente HTTP async para el API de bug reports."""

    # Endpoints
    REPORTS_ENDPOINT = Endpoints.REPORTS.value
    REPORT_DETAIL_ENDPOINT = Endpoints.REPORT_DETAIL.value
    TAGS_ENDPOINT = Endpoints.TAGS.value

    def __init__(
        self,
        api_url: str,
        app_name: str,
        app_key: str,
        app_secret: str,
        headers: Optional[Dict[str, str]] = None,
        timeout: float = 30,
        upload_chunk_size: int = 64 * 1024,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Args:
            api_url: URL base del API (sin los paths /bugs/...)
            app_name: Nombre de la app (header X-App-Name)
            app_key: App Key (header X-App-Key)
            app_secret: Secret enviado como Authorization: Bearer
            headers: Headers extra; pisan a los headers por defecto
            timeout: Timeout en segundos por request
            upload_chunk_size: Tamaño de chunk al subir con progreso
            transport: Transporte httpx alternativo (tests, proxies)

        Raises:
            MissingConfigurationError si falta la URL o alguna credencial
        """
        if not api_url:
            raise MissingConfigurationError("API URL is required")

        if not app_name or not app_key or not app_secret:
            raise MissingConfigurationError(
                "App credentials (App Name, App Key, App Secret) are required"
            )

        if upload_chunk_size <= 0:
            raise MissingConfigurationError("upload_chunk_size must be greater than 0")

        self.api_url = api_url.rstrip("/")
        self.headers: Dict[str, str] = {
            "Content-Type": "application/json",
            "X-App-Name": app_name,
            "X-App-Key": app_key,
            "Authorization": f"Bearer {app_secret}",
            **(headers or {}),
        }
        self.timeout = timeout
        self.upload_chunk_size = upload_chunk_size
        self._transport = transport
        self.validator = get_payload_validator()

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        **kwargs
    ) -> "BugReportClient":
        """
        Crear cliente a partir de la configuración (variables de entorno / .env).

        Args:
            settings: Settings a usar; por defecto get_settings()
            **kwargs: headers, transport u otros argumentos del constructor
        """
        api = (settings or get_settings()).bug_report_api
        kwargs.setdefault("timeout", api.BUG_REPORT_TIMEOUT)
        kwargs.setdefault("upload_chunk_size", api.BUG_REPORT_UPLOAD_CHUNK_SIZE)
        return cls(
            api_url=api.BUG_REPORT_API_URL,
            app_name=api.BUG_REPORT_APP_NAME,
            app_key=api.BUG_REPORT_APP_KEY,
            app_secret=api.BUG_REPORT_APP_SECRET,
            **kwargs
        )

    async def submit_bug_report(self, report: ReportInput) -> Any:
        """
        Enviar un bug report como JSON.

        Endpoint: POST {api_url}/bugs/reports

        Args:
            report: BugReport o diccionario con los campos del reporte

        Returns:
            Body JSON de la respuesta ({"meta": ..., "data": ...})

        Raises:
            InvalidBugReportError si el reporte no es válido (no se hace request)
            ApiBugReportError si el API responde con error
            BugReportNetworkError si no se pudo contactar al API
        """
        payload = self.validator.to_payload(report)

        logger.info(f"Enviando bug report: {payload['title'][:50]}")

        return await self._request("POST", self.REPORTS_ENDPOINT, json=payload)

    async def submit_bug_report_with_progress(
        self,
        report: ReportInput,
        on_progress: ProgressCallback
    ) -> Any:
        """
        Enviar un bug report como JSON reportando el progreso de subida.

        El body se envía en chunks de `upload_chunk_size` bytes; `on_progress`
        recibe el porcentaje acumulado (0-100] cada vez que el transporte
        consume un chunk.

        Args:
            report: BugReport o diccionario con los campos del reporte
            on_progress: Callback con el porcentaje subido

        Returns:
            Body JSON de la respuesta
        """
        payload = self.validator.to_payload(report)

        logger.info(f"Enviando bug report con progreso: {payload['title'][:50]}")

        return await self._request(
            "POST",
            self.REPORTS_ENDPOINT,
            json=payload,
            on_progress=on_progress
        )

    async def submit_bug_report_with_files(
        self,
        report: ReportInput,
        files: Sequence[FileInput],
        on_progress: Optional[ProgressCallback] = None
    ) -> Any:
        """
        Enviar un bug report con archivos adjuntos.

        Endpoint: POST {api_url}/bugs/reports
        Content-Type: multipart/form-data

        Campos: title, description, severity, tags (JSON), metadata (JSON,
        si existe), createdAt y cada archivo bajo el campo "file".

        Args:
            report: BugReport o diccionario con los campos del reporte
            files: Rutas o tuplas (nombre, contenido[, content_type])
            on_progress: Callback opcional con el porcentaje subido

        Returns:
            Body JSON de la respuesta
        """
        validated = self.validator.validate_report(report)
        form_files = self._prepare_files(files)
        fields = validated.to_form_fields()

        logger.info(
            f"Enviando bug report con {len(form_files)} archivo(s): "
            f"{validated.title[:50]}"
        )

        # Sin Content-Type: httpx lo genera con el boundary del multipart
        headers = {
            key: value for key, value in self.headers.items()
            if key.lower() != "content-type"
        }

        return await self._request(
            "POST",
            self.REPORTS_ENDPOINT,
            headers=headers,
            data=fields,
            files=form_files,
            on_progress=on_progress
        )

    async def get_bug_report(self, report_id: Union[str, int]) -> Any:
        """
        Consultar un bug report por ID.

        Endpoint: GET {api_url}/bugs/{id}

        Raises:
            NotFoundBugReportError si el reporte no existe (404)
            ApiBugReportError ante cualquier otro error del API
            InvalidBugReportError si el ID está vacío o es "." / ".."
        """
        report_id = str(report_id)
        # "." y ".." se normalizan como segmentos de ruta aun escapados
        if report_id in ("", ".", ".."):
            raise InvalidBugReportError(f"invalid report id: {report_id!r}")

        # El ID ocupa un solo segmento: "/", "?" y "#" se escapan
        path = self.REPORT_DETAIL_ENDPOINT.format(report_id=quote(report_id, safe=""))
        return await self._request("GET", path)

    async def get_bug_tags(self) -> Any:
        """
        Listar los tags disponibles.

        Endpoint: GET {api_url}/bugs/tags
        """
        return await self._request("GET", self.TAGS_ENDPOINT)

    def _http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def _request(
        self,
        method: str,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        on_progress: Optional[ProgressCallback] = None,
        **kwargs
    ) -> Any:
        """
        Ejecutar un request contra el API y mapear la respuesta.

        Args:
            method: Método HTTP
            path: Path relativo a api_url
            headers: Headers a usar en lugar de self.headers
            on_progress: Si se indica, el body se envía en chunks con progreso
            **kwargs: json, data o files para httpx

        Returns:
            Body de la respuesta 2xx
        """
        url = f"{self.api_url}{path}"
        request_headers = self.headers if headers is None else headers

        try:
            async with self._http_client() as client:
                request = client.build_request(
                    method, url, headers=request_headers, **kwargs
                )
                if on_progress is not None:
                    request = self._with_progress(request, on_progress)

                logger.debug(f"{method} {url}")
                response = await client.send(request)

        except httpx.RequestError as e:
            logger.error(f"Error de red en {method} {url}: {e!r}")
            raise BugReportNetworkError() from e

        return self._handle_response(response)

    def _with_progress(
        self,
        request: httpx.Request,
        on_progress: ProgressCallback
    ) -> httpx.Request:
        """Rearmar el request para que el body se consuma en chunks con progreso."""
        body = request.read()
        return httpx.Request(
            request.method,
            request.url,
            headers=request.headers,
            content=self._iter_with_progress(body, on_progress)
        )

    async def _iter_with_progress(
        self,
        body: bytes,
        on_progress: ProgressCallback
    ) -> AsyncIterator[bytes]:
        total = len(body)
        if total == 0:
            on_progress(100.0)
            return

        loaded = 0
        for start in range(0, total, self.upload_chunk_size):
            chunk = body[start:start + self.upload_chunk_size]
            loaded += len(chunk)
            on_progress(loaded / total * 100)
            yield chunk

    def _handle_response(self, response: httpx.Response) -> Any:
        """
        Mapear la respuesta HTTP.

        Returns:
            JSON decodificado para 2xx (texto si el body no es JSON, None si está vacío)

        Raises:
            NotFoundBugReportError para 404
            ApiBugReportError para cualquier otro status no 2xx
        """
        if response.is_success:
            if not response.content:
                return None
            try:
                return response.json()
            except ValueError:
                logger.warning(
                    f"Respuesta {response.status_code} sin JSON válido, se devuelve como texto"
                )
                return response.text

        meta = self._error_meta(response)

        if response.status_code == 404:
            logger.warning(f"Recurso no encontrado: {response.request.url}")
            raise NotFoundBugReportError(meta)

        logger.warning(
            f"Error del API [{response.status_code}] en "
            f"{response.request.method} {response.request.url}: {meta['message']}"
        )
        raise ApiBugReportError(meta)

    @staticmethod
    def _error_meta(response: httpx.Response) -> Dict[str, Any]:
        """
        Extraer el bloque meta de una respuesta de error.

        Si el body no trae meta (o no es JSON) se arma con el status HTTP.
        """
        meta: Dict[str, Any] = {}
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and isinstance(body.get("meta"), dict):
            meta = dict(body["meta"])

        meta.setdefault("code", response.status_code)
        meta.setdefault("status", "error")
        meta.setdefault(
            "message",
            response.text.strip() or response.reason_phrase
        )
        return meta

    @staticmethod
    def _content_type_for(filename: str) -> str:
        return UPLOAD_CONTENT_TYPES.get(
            Path(filename).suffix.lower(), DEFAULT_UPLOAD_CONTENT_TYPE
        )

    def _prepare_files(
        self,
        files: Sequence[FileInput]
    ) -> List[Tuple[str, Tuple[str, bytes, str]]]:
        """
        Preparar adjuntos para multipart, todos bajo el campo "file".

        Raises:
            InvalidBugReportError si no hay archivos o alguna ruta no existe
        """
        if not files:
            raise InvalidBugReportError("at least one file is required")

        prepared = []
        for item in files:
            if isinstance(item, (str, Path)):
                path = Path(item)
                if not path.is_file():
                    raise InvalidBugReportError(f"file not found: {path}")
                prepared.append((
                    UPLOAD_FILE_FIELD,
                    (path.name, path.read_bytes(), self._content_type_for(path.name))
                ))
            else:
                filename, content, *rest = item
                content_type = rest[0] if rest else self._content_type_for(filename)
                prepared.append((UPLOAD_FILE_FIELD, (filename, content, content_type)))
        return prepared


def parse_bug_report_response(body: Mapping[str, Any]) -> BugReportApiResponse:
    """Vista tipada del body devuelto por submit_* / get_bug_report."""
    return BugReportApiResponse.model_validate(body)


def parse_bug_tags_response(body: Mapping[str, Any]) -> BugTagsApiResponse:
    """Vista tipada del body devuelto por get_bug_tags."""
    return BugTagsApiResponse.model_validate(body)
