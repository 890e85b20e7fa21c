"""
FastAPI application entry point.
bunyan-view - pretty-printing of structured JSON logs over HTTP.
"""

from fastapi import FastAPI

from bunyan_view import __version__
from bunyan_view.config import configure_logging, get_settings
from bunyan_view.api.routes import router


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Formats bunyan/pino JSON log lines as human-readable text.",
    version=__version__,
)

# Include API routes
app.include_router(router)


if __name__ == "__main__":
    import uvicorn
    configure_logging()
    uvicorn.run(
        "bunyan_view.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
