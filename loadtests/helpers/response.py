"""Response error extraction for load test observability.

Parses storefront API error responses into human-readable messages.
Handles three response shapes:

- Catalogued errors: {"name": "...", "code": 400, "message": "...", "cause": ...}
- Product add results: {"messages": ["...", ...]}
- Unmatched routes: {"message": "Page not found"}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def _format_cause(cause) -> str:
    if isinstance(cause, list):
        parts = []
        for err in cause:
            if isinstance(err, dict):
                loc = ".".join(str(p) for p in err.get("loc", []))
                msg = err.get("msg", str(err))
                parts.append(f"{loc}: {msg}" if loc else msg)
            else:
                parts.append(str(err))
        return " | ".join(parts)
    if isinstance(cause, dict):
        return " | ".join(f"{k}: {v}" for k, v in cause.items())
    return str(cause)


def extract_error_detail(response: Response) -> str:
    """Extract a human-readable error message from an API error response.

    Returns a compact string suitable for Locust failure messages and log lines.
    """
    try:
        body = response.json()
    except ValueError:
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if isinstance(body, dict) and "name" in body:
        detail = f"{body['name']}: {body.get('message', '')}"
        if body.get("cause"):
            detail += f" ({_format_cause(body['cause'])})"
        return detail

    if isinstance(body, dict) and "messages" in body:
        return " | ".join(body["messages"])

    if isinstance(body, dict) and "message" in body:
        return str(body["message"])

    return str(body)[:300]
