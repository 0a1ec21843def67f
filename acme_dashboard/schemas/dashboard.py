import datetime
from typing import Literal

from pydantic import BaseModel

InvoiceStatus = Literal["pending", "paid"]


class RevenueRecord(BaseModel):
    month: str
    revenue: int


class LatestInvoice(BaseModel):
    id: str
    name: str
    image_url: str
    email: str
    amount: str  # formatted, e.g. "$1,234.56"


class InvoicesTableRow(BaseModel):
    """Row of the invoices listing; amount stays in cents for the UI to format."""
    id: str
    name: str
    email: str
    image_url: str
    date: datetime.date
    amount: int
    status: InvoiceStatus


class InvoiceForm(BaseModel):
    """Invoice as loaded for editing, amount in dollars."""
    id: str
    customer_id: str
    amount: float
    status: InvoiceStatus


class CustomerField(BaseModel):
    id: str
    name: str


class CustomersTableRow(BaseModel):
    id: str
    name: str
    email: str
    image_url: str
    total_invoices: int
    total_pending: str
    total_paid: str


class CardData(BaseModel):
    number_of_customers: int
    number_of_invoices: int
    total_paid_invoices: str
    total_pending_invoices: str


class UserRecord(BaseModel):
    id: str
    name: str
    email: str
    password: str
