"""FastAPI web application for Field Notes article intelligence."""

import logging

from dotenv import load_dotenv

load_dotenv()

from ..config.settings import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import Response

from .errors import InternalFailure, MissingInputError, ParseRequestError, register_error_handlers
from .models import ParseResponse
from .pipeline import analyze_url, validate_url

logger = logging.getLogger(__name__)

app = FastAPI(title="Field Notes Article Intelligence")
register_error_handlers(app)

# Automation platforms call this API cross-origin
_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


@app.middleware("http")
async def add_cors_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers.update(_CORS_HEADERS)
    return response


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.options("/api/parse")
async def parse_preflight():
    """CORS preflight: empty 200, no parsing."""
    return Response(status_code=200)


async def _read_body(request: Request):
    """Return the decoded JSON body, or {} when it is empty or not JSON."""
    raw = await request.body()
    if not raw:
        return {}
    try:
        return await request.json()
    except ValueError:
        logger.info("[PARSE] Ignoring non-JSON request body")
        return {}


@app.api_route("/api/parse", methods=["GET", "POST"], response_model=ParseResponse)
async def parse_article(request: Request):
    """Extract an article and return its intelligence report.

    GET reads ``?url=``; POST reads ``{"url": ...}`` from the JSON body.
    """
    query = dict(request.query_params)
    body = {}
    if request.method == "POST":
        body = await _read_body(request)
        url = body.get("url") if isinstance(body, dict) else None
    else:
        url = query.get("url")

    if not url:
        raise MissingInputError(request.method, query, body)

    url = validate_url(url)
    logger.info("[PARSE] %s %s", request.method, url)

    try:
        return await analyze_url(url)
    except ParseRequestError:
        raise
    except Exception as e:
        logger.exception("Handler error")
        raise InternalFailure(url, str(e)) from e


if __name__ == "__main__":
    uvicorn.run(
        "fieldnotes.app.main:app",
        host=settings.host,
        port=settings.port,
    )
