"""API routes."""

from fastapi import APIRouter

from dealfeed.routes import catalog, deals, shopping, social

api_router = APIRouter(prefix="/api")

# Feed: deals, likes, comments
api_router.include_router(deals.router, tags=["deals"])

# Shopping lists, items and sharing
api_router.include_router(shopping.router, tags=["shopping-lists"])

# Follow graph, profiles, chat
api_router.include_router(social.router, tags=["social"])

# Stores, categories, upload, barcode scan
api_router.include_router(catalog.router, tags=["catalog"])
