import logging
from typing import List

from fastapi import APIRouter, HTTPException, Query

from acme_dashboard.repositories.base import DataFetchError
from acme_dashboard.repositories.invoice_repository import InvoiceRepository
from acme_dashboard.schemas.dashboard import InvoiceForm, InvoicesTableRow

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[InvoicesTableRow])
async def read_invoices(
    query: str = Query("", description="Matched against customer name/email, amount, date and status"),
    page: int = Query(1, description="1-based page number"),
):
    try:
        return await InvoiceRepository.fetch_filtered_invoices(query, page)
    except DataFetchError as exc:
        raise HTTPException(status_code=500, detail=str(exc))


@router.get("/pages")
async def read_invoice_pages(query: str = Query("")):
    try:
        total = await InvoiceRepository.fetch_invoices_pages(query)
    except DataFetchError as exc:
        raise HTTPException(status_code=500, detail=str(exc))
    return {"totalPages": total}


@router.get("/{invoice_id}", response_model=InvoiceForm)
async def read_invoice(invoice_id: str):
    try:
        invoice = await InvoiceRepository.fetch_invoice_by_id(invoice_id)
    except DataFetchError as exc:
        raise HTTPException(status_code=500, detail=str(exc))
    if invoice is None:
        logger.info(f"Invoice {invoice_id} not found")
        raise HTTPException(status_code=404, detail="Invoice not found")
    return invoice
