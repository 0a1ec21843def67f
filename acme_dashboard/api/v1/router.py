from fastapi import APIRouter
from acme_dashboard.api.v1.endpoints import customers, dashboard, invoices

api_router = APIRouter()
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(invoices.router, prefix="/invoices", tags=["invoices"])
api_router.include_router(customers.router, prefix="/customers", tags=["customers"])
