# contact_relay/main.py
from fastapi import FastAPI, Request
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from contact_relay.core.cors import cors_headers
from contact_relay.core.settings import settings
from contact_relay.routers.contact import error_response, router as contact_router

log = logging.getLogger("uvicorn.error")

# Only POST /api/contact exists; docs routes and slash redirects would answer
# paths that must 404.
app = FastAPI(
    title=settings.api_title,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    redirect_slashes=False,
)

log.info(f"[main] allowed origins = {settings.origin_allow_list()}")


@app.middleware("http")
async def cors_and_errors(request: Request, call_next):
    headers = cors_headers(request.headers.get("origin"), settings.origin_allow_list())

    if request.method == "OPTIONS":
        return Response(status_code=204, headers=headers)

    try:
        response = await call_next(request)
    except Exception:
        log.exception("[main] unhandled error processing request")
        response = error_response(500, "Internal server error")

    response.headers.update(headers)
    return response


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unknown paths (404) and wrong methods (405) share one envelope
    if exc.status_code in (404, 405):
        return error_response(404, "Not Found")
    return error_response(exc.status_code, str(exc.detail))


# Routers
app.include_router(contact_router)
