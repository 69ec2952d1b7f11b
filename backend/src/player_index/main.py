"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from player_index import __version__
from player_index.config import settings
from player_index.api.routes.lookup import router as lookup_router
from player_index.services.profile_resolver import ProfileResolver


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Tests may install their own resolver before startup
    if not hasattr(app.state, "resolver"):
        app.state.resolver = ProfileResolver.from_settings(settings)
    yield
    app.state.resolver.close()


app = FastAPI(
    title="Player Index",
    description="Player name to identifier lookups",
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "player-index"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Player Index API",
        "version": __version__,
        "docs": "/docs",
    }


app.include_router(lookup_router)
