"""Reputation domain API package."""

from reputation.api.routes import review_router, vendor_router

__all__ = ["vendor_router", "review_router"]
