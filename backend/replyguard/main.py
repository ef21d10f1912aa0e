"""
ReplyGuard - FastAPI Backend
============================
Drafts short clinic chat replies and releases them only when they pass
the reply validation pipeline.
Main entry point for the API server.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from datetime import datetime

from .config import settings
from .db import init_db
from .api.v1.router import api_router

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    yield


# =============================================================
# APP INITIALIZATION
# =============================================================
app = FastAPI(
    title=settings.project_name,
    description="""
## Clinic Reply Drafting with Safety Gating
Every drafted reply is normalized and validated before it is released.

### Checks:
- Approved greeting
- 3-4 lines, one sentence per line
- No banned closing or reassurance phrases
- Scenario rules (MRI timing, pain in pregnancy, iron deficiency)

Replies that fail are returned for manual review and never stored.
    """,
    version=settings.version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# =============================================================
# MIDDLEWARE
# =============================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =============================================================
# ROUTES
# =============================================================
app.include_router(api_router)

@app.get("/", tags=["Root"])
async def root():
    """Welcome endpoint."""
    return {
        "name": settings.project_name,
        "version": settings.version,
        "environment": settings.environment,
        "status": "healthy",
        "docs": "/docs",
    }

@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "version": settings.version,
        "environment": settings.environment,
    }
