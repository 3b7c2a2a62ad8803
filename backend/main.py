from fastapi import FastAPI
from backend.api.health_routes import router as health_router
from backend.api.parse_routes import router as parse_router
from backend.core.config import settings
from backend.core.logging import setup_logging

setup_logging()

app = FastAPI(
    title="Identity QR Scanner Backend",
    version="1.0.0",
)

app.include_router(health_router)
app.include_router(parse_router, prefix=settings.api_prefix)
