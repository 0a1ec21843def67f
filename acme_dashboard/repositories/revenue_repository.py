from typing import List

from sqlalchemy.orm import Session

from acme_dashboard.core.database import with_connection
from acme_dashboard.models.revenue import Revenue
from acme_dashboard.repositories.base import fetch_guard
from acme_dashboard.schemas.dashboard import RevenueRecord


class RevenueRepository:
    @staticmethod
    @fetch_guard("Failed to fetch revenue data.")
    def _all_revenue(db: Session) -> List[RevenueRecord]:
        return [RevenueRecord(month=row.month, revenue=row.revenue) for row in db.query(Revenue).all()]

    @staticmethod
    async def fetch_revenue() -> List[RevenueRecord]:
        return await with_connection(RevenueRepository._all_revenue)
