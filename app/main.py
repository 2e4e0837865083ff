"""
Glide Script to Wolken JS Converter - FastAPI Application

Converts ServiceNow client scripts into Wolken JS event handlers.
The conversion runs in-process; the service has no external dependencies.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from app import __version__
from app.config import settings, log_settings
from app.api.routes import health, converter

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup logs the effective configuration; there is nothing to tear down.
    """
    logger.info("=" * 60)
    logger.info("Starting Glide Script to Wolken JS Converter")
    logger.info("=" * 60)

    log_settings()

    logger.info(f"Service ready on port {settings.SERVICE_PORT}")

    yield

    logger.info("Shutdown complete")


# Create FastAPI application
app = FastAPI(
    title="Glide Script to Wolken JS Converter",
    description="""
Converts ServiceNow Glide Script into Wolken JS (Angular compatible) event handlers.

## Conversion

| Glide Script | Wolken JS |
|--------------|-----------|
| `gs.addInfoMessage(msg)` | `ele.showNotification("info", msg)` |
| `g_form.getValue("f")` | `ele.<formType>.get("f").value` |
| `current.field` | `ele.current["field"]` |
| `alert(msg)` | `ele.messageSnackbarService.showMessageSnackBar(msg)` |

Calls with no matching rule are kept as comments for manual conversion.

## Form Types

- `requestForm` - Request Creation
- `modifiedFields` - Request Summary
- `mainFormGroup` - Task Summary
""",
    version=__version__,
    lifespan=lifespan,
    docs_url="/api/converter/docs",
    redoc_url="/api/converter/redoc",
    openapi_url="/api/converter/openapi.json"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

API_PREFIX = "/api/converter"

app.include_router(health.router, prefix=API_PREFIX, tags=["Health"])
app.include_router(converter.router, prefix=API_PREFIX, tags=["Converter"])


# Root health check (for direct container health checks)
@app.get("/health")
async def root_health():
    """Root health check for container/load balancer"""
    return {"status": "UP", "service": settings.SERVICE_NAME}


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "Glide Script to Wolken JS Converter",
        "version": __version__,
        "port": settings.SERVICE_PORT,
        "endpoints": {
            "health": f"{API_PREFIX}/health",
            "convert": f"{API_PREFIX}/convert",
            "options": f"{API_PREFIX}/options",
            "sample": f"{API_PREFIX}/sample",
            "docs": f"{API_PREFIX}/docs"
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=settings.SERVICE_PORT,
        reload=True
    )
