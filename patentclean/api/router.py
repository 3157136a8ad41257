"""Aggregate API router for the FastAPI application."""

from fastapi import APIRouter

from patentclean.api.routes import records, sources

api_router = APIRouter()
api_router.include_router(records.router)
api_router.include_router(sources.router)
