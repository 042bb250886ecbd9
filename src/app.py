"""Reputation FastAPI application.

Web server for vendor onboarding, review submission, upvotes, and the
read-time projections (badges, insights, review pages).

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from reputation/domain.toml:
#   - unset / "test" → in-memory providers
#   - "production"   → postgresql via DATABASE_URL
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers
from reputation.domain import reputation  # noqa: E402
from reputation.utils.logging import configure_logging

configure_logging()
reputation.init()

_DOMAIN_PREFIXES = ("/vendors", "/reviews")


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Reputation API",
    description="Vendor trust scores, badges, review listings and upvotes",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the Reputation domain context for domain routes."""
    if request.url.path.startswith(_DOMAIN_PREFIXES):
        with reputation.domain_context():
            response = await call_next(request)
        return response
    # Health check, docs, etc.
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from reputation.api import review_router, vendor_router  # noqa: E402

app.include_router(vendor_router)
app.include_router(review_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": reputation.name})
