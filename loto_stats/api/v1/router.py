"""Aggregate API v1 router."""

from fastapi import APIRouter

from loto_stats.api.v1.endpoints import statistics

api_router = APIRouter()

api_router.include_router(statistics.router, prefix="/stats", tags=["statistics"])
