"""
Subpaquete HTTP - Cliente para el API de bug reports.

Proporciona un cliente async para enviar y consultar bug reports.

Uso:
    from bugreports.http import BugReportClient

    client = BugReportClient.from_settings()
    await client.submit_bug_report(report)
    await client.get_bug_report("123")
"""

from bugreports.http.bug_report_client import (
    BugReportClient,
    parse_bug_report_response,
    parse_bug_tags_response,
)

__all__ = [
    "BugReportClient",
    "parse_bug_report_response",
    "parse_bug_tags_response",
]
