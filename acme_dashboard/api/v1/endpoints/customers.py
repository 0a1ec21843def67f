from typing import List

from fastapi import APIRouter, HTTPException, Query

from acme_dashboard.repositories.base import DataFetchError
from acme_dashboard.repositories.customer_repository import CustomerRepository
from acme_dashboard.schemas.dashboard import CustomerField, CustomersTableRow

router = APIRouter()


@router.get("", response_model=List[CustomerField])
async def read_customers():
    try:
        return await CustomerRepository.fetch_customers()
    except DataFetchError as exc:
        raise HTTPException(status_code=500, detail=str(exc))


@router.get("/table", response_model=List[CustomersTableRow])
async def read_customers_table(query: str = Query("")):
    try:
        return await CustomerRepository.fetch_filtered_customers(query)
    except DataFetchError as exc:
        raise HTTPException(status_code=500, detail=str(exc))
