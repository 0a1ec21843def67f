from typing import List

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from acme_dashboard.core.database import with_connection
from acme_dashboard.models.customer import Customer
from acme_dashboard.models.invoice import Invoice
from acme_dashboard.repositories.base import fetch_guard, matches_any, search_pattern
from acme_dashboard.schemas.dashboard import CustomerField, CustomersTableRow
from acme_dashboard.utils.currency import format_currency, to_number


def _sum_by_status(status: str):
    return func.sum(case((Invoice.status == status, Invoice.amount), else_=0))


class CustomerRepository:
    @staticmethod
    @fetch_guard("Failed to fetch all customers.")
    def _all_customers(db: Session) -> List[CustomerField]:
        rows = db.query(Customer.id, Customer.name).order_by(Customer.name.asc()).all()
        return [CustomerField(id=row.id, name=row.name) for row in rows]

    @staticmethod
    async def fetch_customers() -> List[CustomerField]:
        """Id and name of every customer, for selection lists."""
        return await with_connection(CustomerRepository._all_customers)

    @staticmethod
    async def fetch_filtered_customers(query: str) -> List[CustomersTableRow]:
        """
        Customers whose name or email contains ``query``, with their invoice
        count and pending/paid totals. Customers without invoices are kept.
        """
        pattern = search_pattern(query)

        @fetch_guard("Failed to fetch customer table.")
        def operation(db: Session) -> List[CustomersTableRow]:
            rows = (
                db.query(
                    Customer.id,
                    Customer.name,
                    Customer.email,
                    Customer.image_url,
                    func.count(Invoice.id).label("total_invoices"),
                    _sum_by_status("pending").label("total_pending"),
                    _sum_by_status("paid").label("total_paid"),
                )
                .outerjoin(Invoice, Customer.id == Invoice.customer_id)
                .filter(matches_any(pattern, Customer.name, Customer.email))
                .group_by(Customer.id, Customer.name, Customer.email, Customer.image_url)
                .order_by(Customer.name.asc())
                .all()
            )
            return [
                CustomersTableRow(
                    id=row.id,
                    name=row.name,
                    email=row.email,
                    image_url=row.image_url,
                    total_invoices=to_number(row.total_invoices),
                    total_pending=format_currency(row.total_pending),
                    total_paid=format_currency(row.total_paid),
                )
                for row in rows
            ]

        return await with_connection(operation)
