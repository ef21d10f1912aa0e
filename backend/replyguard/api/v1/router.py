"""
ReplyGuard - API Router Aggregator
"""
from fastapi import APIRouter
from ...config import settings
from .replies import router as replies_router

api_router = APIRouter(prefix=settings.api_v1_prefix)
api_router.include_router(replies_router)
