from fastapi import APIRouter

from app.api.v1 import export_check, health, reports

api_router = APIRouter()

api_router.include_router(health.router, prefix="/v1", tags=["health"])
api_router.include_router(export_check.router, prefix="/v1/export-check", tags=["export-check"])
api_router.include_router(reports.router, prefix="/v1/reports", tags=["reports"])
