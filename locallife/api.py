"""
LocalLife API Server

Read-only FastAPI endpoints exposing the analysis engine.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .analysis_service import shutdown_analysis_service
from .config import settings, configure_logging
from .database import init_db
from .errors import LocalLifeException, format_error_response
from .routers import health_router, insights_router, stats_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging, make sure the record table exists, stop workers on exit."""
    configure_logging()
    init_db()
    yield
    shutdown_analysis_service()


# === FastAPI App ===

app = FastAPI(
    title="LocalLife",
    description="Correlations, weather patterns and year statistics for your daily records.",
    version=__version__,
    lifespan=lifespan
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)


@app.exception_handler(LocalLifeException)
async def locallife_exception_handler(request: Request, exc: LocalLifeException):
    return JSONResponse(status_code=exc.status_code, content=format_error_response(exc))


app.include_router(health_router)
app.include_router(insights_router)
app.include_router(stats_router)


# === Run Server ===

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
