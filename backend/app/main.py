"""FastAPI application entry point."""
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

from app.config import settings
from app.api.routes import wallets
from app.utils.logging import configure_logging

STATIC_DIR = Path(__file__).parent / "static"

configure_logging(settings.log_level, settings.log_format)

app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
    description="Find wallets holding an unclaimed airdrop balance"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(wallets.router, prefix=settings.api_prefix, tags=["wallets"])


@app.get("/", include_in_schema=False)
async def index():
    """Wallet submission form."""
    return FileResponse(STATIC_DIR / "index.html")


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
