from fastapi import FastAPI
import logging

from bento.api.routes import converter, imports
from bento.events.Event_Bus import start_log_listeners

# Logging
logger = logging.getLogger("bento_app")

# Initialize FastAPI app
app = FastAPI(title="BentoHub Costing & Import API")

# Include routers
app.include_router(converter.router)
app.include_router(imports.router)


@app.on_event("startup")
def _startup_event_listeners():
    """Register event bus subscribers that log import/scaling activity."""
    start_log_listeners()
    logger.info("Event log listeners started")


@app.get("/health")
def health():
    return {"status": "ok"}
