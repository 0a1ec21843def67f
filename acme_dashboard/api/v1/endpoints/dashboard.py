from typing import List

from fastapi import APIRouter, HTTPException

from acme_dashboard.repositories.base import DataFetchError
from acme_dashboard.repositories.dashboard_repository import DashboardRepository
from acme_dashboard.repositories.invoice_repository import InvoiceRepository
from acme_dashboard.repositories.revenue_repository import RevenueRepository
from acme_dashboard.schemas.dashboard import CardData, LatestInvoice, RevenueRecord

router = APIRouter()


@router.get("/revenue", response_model=List[RevenueRecord])
async def get_revenue():
    """Monthly revenue for the revenue chart."""
    try:
        return await RevenueRepository.fetch_revenue()
    except DataFetchError as exc:
        raise HTTPException(status_code=500, detail=str(exc))


@router.get("/latest-invoices", response_model=List[LatestInvoice])
async def get_latest_invoices():
    try:
        return await InvoiceRepository.fetch_latest_invoices()
    except DataFetchError as exc:
        raise HTTPException(status_code=500, detail=str(exc))


@router.get("/cards", response_model=CardData)
async def get_card_data():
    try:
        return await DashboardRepository.fetch_card_data()
    except DataFetchError as exc:
        raise HTTPException(status_code=500, detail=str(exc))
