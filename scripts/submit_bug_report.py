#!/usr/bin/env python
"""
Script para enviar y consultar bug reports desde la línea de comandos.

La conexión se toma de la configuración (.env / variables de entorno):
BUG_REPORT_API_URL, BUG_REPORT_APP_NAME, BUG_REPORT_APP_KEY, BUG_REPORT_APP_SECRET

Uso:
    python -m scripts.submit_bug_report submit --title "Crash" \\
        --description "La app se cierra" --severity CRITICAL --tag CRASH
    python -m scripts.submit_bug_report submit ... --file captura.png --progress
    python -m scripts.submit_bug_report get 123
    python -m scripts.submit_bug_report tags
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from config.logging_config import setup_logging
from bugreports.errors import BugReportClientError
from bugreports.http import BugReportClient
from bugreports.models import BugSeverity, BugTag

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bugreports",
        description="Cliente de línea de comandos para el API de bug reports"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    submit = subparsers.add_parser("submit", help="Enviar un bug report")
    submit.add_argument("--title", required=True)
    submit.add_argument("--description", required=True)
    submit.add_argument(
        "--severity",
        required=True,
        choices=[s.value for s in BugSeverity]
    )
    submit.add_argument(
        "--tag",
        dest="tags",
        action="append",
        required=True,
        choices=BugTag.list(),
        help="Tag del reporte (repetible)"
    )
    submit.add_argument(
        "--file",
        dest="files",
        action="append",
        default=[],
        help="Archivo adjunto (repetible); envía el reporte como multipart"
    )
    submit.add_argument(
        "--progress",
        action="store_true",
        help="Mostrar el progreso de subida"
    )

    get = subparsers.add_parser("get", help="Consultar un bug report por ID")
    get.add_argument("report_id")

    subparsers.add_parser("tags", help="Listar tags disponibles")

    return parser


def _print_progress(percent: float) -> None:
    print(f"\rSubiendo... {percent:5.1f}%", end="", file=sys.stderr, flush=True)
    if percent >= 100:
        print(file=sys.stderr)


async def run(args: argparse.Namespace, client: BugReportClient):
    """Ejecutar el subcomando y retornar el body de la respuesta."""
    if args.command == "submit":
        report = {
            "title": args.title,
            "description": args.description,
            "severity": args.severity,
            "tags": args.tags,
        }
        on_progress = _print_progress if args.progress else None

        if args.files:
            return await client.submit_bug_report_with_files(
                report, args.files, on_progress=on_progress
            )
        if on_progress is not None:
            return await client.submit_bug_report_with_progress(report, on_progress)
        return await client.submit_bug_report(report)

    if args.command == "get":
        return await client.get_bug_report(args.report_id)

    return await client.get_bug_tags()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    # stdout queda reservado para el JSON de la respuesta
    setup_logging("bugreports", stream=sys.stderr)

    try:
        client = BugReportClient.from_settings()
        result = asyncio.run(run(args, client))
    except BugReportClientError as e:
        logger.error(f"[{e.error_code}] {e.message}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
