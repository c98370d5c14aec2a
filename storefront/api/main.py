"""FastAPI application main module.

This module defines the main FastAPI application instance for the Storefront
service, wires in logging, error handling and the routers, and provides the
health check and metrics endpoints.
"""

import logging
from typing import Dict

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from storefront.api.exceptions import StorefrontException
from storefront.api.logging_config import RequestLoggingMiddleware, setup_logging
from storefront.api.metrics import metrics_service
from storefront.api.routes import cart, orders, products, recommend, users
from storefront.config import settings

logger = logging.getLogger(__name__)

setup_logging(settings.log_level)

# Create FastAPI application instance
app = FastAPI(
    title=settings.app_name,
    description="E-commerce storefront with activity-based recommendations",
    version=settings.version,
)

app.add_middleware(RequestLoggingMiddleware)

# Include routers
app.include_router(users.router)
app.include_router(products.router)
app.include_router(cart.router)
app.include_router(orders.router)
app.include_router(recommend.router)


@app.exception_handler(StorefrontException)
async def storefront_exception_handler(
    request: Request, exc: StorefrontException
) -> JSONResponse:
    """Render Storefront exceptions as JSON error responses."""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        exc.message,
        extra={
            "path": str(request.url.path),
            "status_code": exc.status_code,
            "error_type": type(exc).__name__,
        },
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": type(exc).__name__,
            "message": exc.message,
            "details": exc.details,
        },
    )


@app.get("/ping")
def ping() -> Dict[str, str]:
    """Health check endpoint.

    Returns:
        Dictionary with status key set to "ok".

    Example:
        >>> response = client.get("/ping")
        >>> assert response.json() == {"status": "ok"}
    """
    return {"status": "ok"}


@app.get("/metrics")
def metrics() -> Dict:
    """Recommendation request counters and latency."""
    return metrics_service.get_metrics()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "storefront.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
