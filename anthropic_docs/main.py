import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from anthropic_docs.config import settings
from anthropic_docs.routers import tools as tools_routes
from anthropic_docs.tools import TOOLS

logger = logging.getLogger(__name__)


app = FastAPI(
    title="Anthropic Docs",
    description="Claude 4.5 model specifications, pricing, cost calculation and documentation search",
    version=settings.SERVER_VERSION,
)

app.include_router(tools_routes.router, tags=["tools"])


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": settings.SERVER_NAME,
        "version": settings.SERVER_VERSION,
        "tools": len(TOOLS),
    }


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Log unexpected errors and return a generic JSON error."""
    logger.exception(
        f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}",
        extra={"method": request.method, "path": request.url.path},
    )
    return JSONResponse(
        {"error": "internal_error", "error_type": type(exc).__name__, "message": str(exc)},
        status_code=500,
    )
