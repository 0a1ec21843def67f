from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from acme_dashboard.core.database import with_connection
from acme_dashboard.models.customer import Customer
from acme_dashboard.models.invoice import Invoice
from acme_dashboard.repositories.base import fetch_guard, matches_any, search_pattern
from acme_dashboard.schemas.dashboard import InvoiceForm, InvoicesTableRow, LatestInvoice
from acme_dashboard.utils.currency import cents_to_units, format_currency, to_number
from acme_dashboard.utils.pagination import ITEMS_PER_PAGE, page_offset, total_pages

LATEST_INVOICES_LIMIT = 5


def _invoice_search(db: Session, query: str, *columns):
    pattern = search_pattern(query)
    return (
        db.query(*columns)
        .select_from(Invoice)
        .join(Customer, Invoice.customer_id == Customer.id)
        .filter(
            matches_any(
                pattern,
                Customer.name,
                Customer.email,
                Invoice.amount,
                Invoice.date,
                Invoice.status,
            )
        )
    )


class InvoiceRepository:
    @staticmethod
    @fetch_guard("Failed to fetch the latest invoices.")
    def _latest_invoices(db: Session) -> List[LatestInvoice]:
        rows = (
            db.query(
                Invoice.amount,
                Customer.name,
                Customer.image_url,
                Customer.email,
                Invoice.id,
            )
            .join(Customer, Invoice.customer_id == Customer.id)
            .order_by(Invoice.date.desc())
            .limit(LATEST_INVOICES_LIMIT)
            .all()
        )
        return [
            LatestInvoice(
                id=row.id,
                name=row.name,
                image_url=row.image_url,
                email=row.email,
                amount=format_currency(row.amount),
            )
            for row in rows
        ]

    @staticmethod
    async def fetch_latest_invoices() -> List[LatestInvoice]:
        return await with_connection(InvoiceRepository._latest_invoices)

    @staticmethod
    async def fetch_filtered_invoices(query: str, page: int) -> List[InvoicesTableRow]:
        offset = page_offset(page)

        @fetch_guard("Failed to fetch invoices.")
        def operation(db: Session) -> List[InvoicesTableRow]:
            rows = (
                _invoice_search(
                    db,
                    query,
                    Invoice.id,
                    Invoice.amount,
                    Invoice.date,
                    Invoice.status,
                    Customer.name,
                    Customer.email,
                    Customer.image_url,
                )
                .order_by(Invoice.date.desc())
                .limit(ITEMS_PER_PAGE)
                .offset(offset)
                .all()
            )
            return [InvoicesTableRow(**row._mapping) for row in rows]

        return await with_connection(operation)

    @staticmethod
    async def fetch_invoices_pages(query: str) -> int:
        @fetch_guard("Failed to fetch total number of invoices.")
        def operation(db: Session) -> int:
            count = _invoice_search(db, query, func.count(Invoice.id)).scalar()
            return total_pages(to_number(count))

        return await with_connection(operation)

    @staticmethod
    async def fetch_invoice_by_id(invoice_id: str) -> Optional[InvoiceForm]:
        @fetch_guard("Failed to fetch invoice.")
        def operation(db: Session) -> Optional[InvoiceForm]:
            row = (
                db.query(Invoice.id, Invoice.customer_id, Invoice.amount, Invoice.status)
                .filter(Invoice.id == invoice_id)
                .first()
            )
            if not row:
                return None
            return InvoiceForm(
                id=row.id,
                customer_id=row.customer_id,
                amount=cents_to_units(row.amount),
                status=row.status,
            )

        return await with_connection(operation)
