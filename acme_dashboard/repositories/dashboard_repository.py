import asyncio
from typing import Tuple

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from acme_dashboard.core.database import with_connection
from acme_dashboard.models.customer import Customer
from acme_dashboard.models.invoice import Invoice
from acme_dashboard.repositories.base import fetch_guard
from acme_dashboard.schemas.dashboard import CardData
from acme_dashboard.utils.currency import format_currency, to_number

CARD_DATA_ERROR = "Failed to fetch card data."


class DashboardRepository:
    @staticmethod
    @fetch_guard(CARD_DATA_ERROR)
    def _count_invoices(db: Session):
        return db.query(func.count(Invoice.id)).scalar()

    @staticmethod
    @fetch_guard(CARD_DATA_ERROR)
    def _count_customers(db: Session):
        return db.query(func.count(Customer.id)).scalar()

    @staticmethod
    @fetch_guard(CARD_DATA_ERROR)
    def _totals_by_status(db: Session) -> Tuple:
        row = db.query(
            func.sum(case((Invoice.status == "paid", Invoice.amount), else_=0)).label("paid"),
            func.sum(case((Invoice.status == "pending", Invoice.amount), else_=0)).label("pending"),
        ).one()
        return row.paid, row.pending

    @staticmethod
    async def fetch_card_data() -> CardData:
        """
        Summary cards: invoice and customer counts plus paid and pending totals.

        The three queries run concurrently, each on its own connection; if any
        of them fails the whole call fails.
        """
        invoice_count, customer_count, (paid, pending) = await asyncio.gather(
            with_connection(DashboardRepository._count_invoices),
            with_connection(DashboardRepository._count_customers),
            with_connection(DashboardRepository._totals_by_status),
        )
        return CardData(
            number_of_customers=to_number(customer_count),
            number_of_invoices=to_number(invoice_count),
            total_paid_invoices=format_currency(paid),
            total_pending_invoices=format_currency(pending),
        )
