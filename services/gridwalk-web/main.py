"""FastAPI application entry point."""

from ddtrace import patch_all
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from gridwalk_common import GridwalkError
from gridwalk_common.logging import setup_logging

from routes import (
    auth_router,
    connections_router,
    leads_router,
    os_maps_router,
    projects_router,
    tiles_router,
    uploads_router,
    workspaces_router,
)

patch_all()

logger = setup_logging()

app = FastAPI(title="GridWalk Web")
app.include_router(auth_router)
app.include_router(workspaces_router)
app.include_router(projects_router)
app.include_router(connections_router)
app.include_router(uploads_router)
app.include_router(tiles_router)
app.include_router(os_maps_router)
app.include_router(leads_router)


@app.exception_handler(GridwalkError)
def handle_gridwalk_error(request: Request, exc: GridwalkError) -> JSONResponse:
    """Renders domain errors as ``{success: false, error}`` with the kind's status."""
    logger.error(
        exc.message,
        extra={"path": request.url.path, "kind": exc.kind.value, "status": exc.status_code},
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.message},
    )


@app.exception_handler(RequestValidationError)
def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reports the first invalid field as a 400."""
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    logger.warning("Invalid request", extra={"path": request.url.path, "error": message})
    return JSONResponse(status_code=400, content={"success": False, "error": message})
