from fastapi import FastAPI

from src.core.config import load_config
from src.core.utils.logging import configure_logging
from src.webhooks.router import router as webhook_router

# --- Application Setup ---

_settings = load_config()
configure_logging(_settings.logging.level, json_output=_settings.logging.json_output)

app = FastAPI(
    title="Workflow Relay",
    description="Relays GitHub push and pull request webhooks to GitHub Actions workflow dispatches.",
    version="0.1.0",
)

# --- Include Routers ---

app.include_router(webhook_router, prefix="/webhooks", tags=["GitHub Webhooks"])

# --- Root Endpoint ---


@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the service is running."""
    return {"status": "ok", "message": "Workflow relay is running."}
