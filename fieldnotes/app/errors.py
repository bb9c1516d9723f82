"""Request errors and their JSON rendering.

Every failure is returned as a structured JSON object with a 4xx/5xx
status; nothing is ever reported as a partial 200 response.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..config.settings import settings

logger = logging.getLogger(__name__)


class ParseRequestError(Exception):
    """Base class for errors that map to an HTTP error response."""

    status_code = 500

    def __init__(self, error: str, url: Optional[str] = None, details: Optional[str] = None):
        super().__init__(details or error)
        self.error = error
        self.url = url
        self.details = details

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"success": False, "error": self.error}
        if self.details is not None:
            payload["details"] = self.details
        payload["url"] = self.url
        return payload


class MissingInputError(ParseRequestError):
    """No URL in the query string or JSON body."""

    status_code = 400

    def __init__(self, method: str, received_query: dict, received_body: Any):
        super().__init__("URL required")
        self.method = method
        self.received_query = received_query
        self.received_body = received_body

    def to_payload(self) -> dict[str, Any]:
        base = settings.public_base_url.rstrip("/")
        return {
            "error": self.error,
            "example": (
                f"GET: {base}/api/parse?url=https://example.com/article "
                'OR POST: {"url": "https://example.com/article"}'
            ),
            "method": self.method,
            "received_query": self.received_query,
            "received_body": self.received_body or {},
        }


class InvalidInputError(ParseRequestError):
    """URL present but malformed."""

    status_code = 400

    def __init__(self, url: Any, details: str):
        super().__init__("Invalid URL format", url=url, details=details)

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.error, "details": self.details, "url": self.url}


class ExtractionFailure(ParseRequestError):
    """The article extractor raised or returned nothing."""

    status_code = 500


class InternalFailure(ParseRequestError):
    """Any other exception while building the report."""

    status_code = 500

    def __init__(self, url: Optional[str], details: str):
        super().__init__("Internal server error", url=url, details=details)


async def handle_parse_request_error(request: Request, exc: ParseRequestError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("[PARSE] %s for %s: %s", exc.error, exc.url, exc.details)
    else:
        logger.info("[PARSE] Rejected %s request: %s", request.method, exc.error)
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ParseRequestError, handle_parse_request_error)
