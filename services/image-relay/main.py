"""FastAPI application entry point."""

import uvicorn
from ddtrace import patch_all
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from relay_common.logging import setup_logging
from starlette.exceptions import HTTPException as StarletteHTTPException

from dependencies import get_config
from routes import credentials_router, pages_router, upload_router

patch_all()

logger = setup_logging()

app = FastAPI(title="Image Relay Service")
app.include_router(pages_router)
app.include_router(upload_router)
app.include_router(credentials_router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Renders errors as {"error": ...}; unknown paths and methods become a plain 404."""
    if exc.status_code in (404, 405):
        return PlainTextResponse("Not Found", status_code=404)
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(
        "Request validation failed",
        extra={"path": request.url.path, "errors": str(exc.errors())},
    )
    return JSONResponse({"error": "Invalid request"}, status_code=400)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error", extra={"path": request.url.path})
    return JSONResponse({"error": "Internal server error"}, status_code=500)


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=get_config().port)
