from fastapi import FastAPI

from ogreader.config.logging_config import setup_logging
from ogreader.exceptions.handlers import register_exception_handlers
from ogreader.routers import router

setup_logging()

app = FastAPI(
    title="Open Graph Reader",
    description="Reads, mines and renders Open Graph metadata",
    version="1.0.0"
)

register_exception_handlers(app)

app.include_router(router, prefix="/api")
