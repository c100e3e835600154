"""
WidgetPilot API

Presentation decisions for the procurement assistant over HTTP.

Endpoints:
    GET  /health      - Liveness probe with loaded table sizes
    GET  /rules       - Selection rule table
    GET  /widgets     - Widget registry
    POST /select      - Select the component for a turn
    POST /expand      - Expand a component to a richer surface
    POST /confidence  - Classify the sources behind a response
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from widgetpilot import __version__
from widgetpilot.api.routes import catalog, confidence, selection
from widgetpilot.api.schemas.responses import HealthResponse
from widgetpilot.config import get_settings
from widgetpilot.engine import ComponentSelector
from widgetpilot.exceptions import InvalidContextError, InvalidSurfaceError, WidgetPilotError
from widgetpilot.log import configure_logging
from widgetpilot.packs import load_confidence_policy, load_widget_registry

logger = logging.getLogger("widgetpilot.api")

settings = get_settings()
configure_logging(settings.log_level, settings.log_format)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the widget registry and confidence policy packs on startup."""
    registry = load_widget_registry(settings.widget_registry_path)
    policy = load_confidence_policy(settings.confidence_policy_path)

    selector = ComponentSelector(registry=registry)
    selection.set_selector(selector)
    confidence.set_policy(policy)

    logger.info(
        "WidgetPilot API ready: %d rules, %d widget types",
        len(selector.rules), len(registry),
        extra={"policy_version": policy.version},
    )

    yield

    logger.info("Shutting down")


# Create app
app = FastAPI(
    title="WidgetPilot API",
    description="""
**Component selection and source confidence for the procurement assistant.**

Given the classified intent of a conversational turn and the data retrieved
for it, WidgetPilot decides which presentation component to render, on which
surface, and how far the evidence behind the answer can be trusted.

## Quick Start

1. `GET /rules` - See the selection table
2. `POST /select` - Select a component for a turn
3. `POST /confidence` - Classify response sources
    """,
    version=__version__,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(selection.router)
app.include_router(confidence.router)
app.include_router(catalog.router)


@app.exception_handler(WidgetPilotError)
async def widgetpilot_error_handler(request: Request, exc: WidgetPilotError):
    """Input errors are the caller's fault; anything else is ours."""
    status = 422 if isinstance(exc, (InvalidSurfaceError, InvalidContextError)) else 500
    if status == 500:
        logger.error("Request failed: %s", exc)
    return JSONResponse(status_code=status, content={"detail": exc.to_dict()})


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health():
    """Health check endpoint."""
    selector = selection.current_selector()
    return HealthResponse(
        healthy=True,
        version=__version__,
        rules_loaded=len(selector.rules),
        widget_types_loaded=len(selector.registry),
        registry_version=selector.registry.version,
        policy_version=confidence.current_policy().version,
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
