from datetime import date
from unittest.mock import patch

import pytest

from acme_dashboard.core import database
from acme_dashboard.core.database import Base
from acme_dashboard.models import Invoice, Revenue
from acme_dashboard.repositories.base import DataFetchError
from acme_dashboard.repositories.dashboard_repository import DashboardRepository
from acme_dashboard.repositories.revenue_repository import RevenueRepository
from tests.conftest import make_customer, make_invoice


@pytest.mark.asyncio
async def test_card_data_on_empty_store(engine):
    cards = await DashboardRepository.fetch_card_data()

    assert cards.number_of_invoices == 0
    assert cards.number_of_customers == 0
    assert cards.total_paid_invoices == "$0.00"
    assert cards.total_pending_invoices == "$0.00"


@pytest.mark.asyncio
async def test_card_data_totals(seed):
    seed(
        make_customer("c1", "Lee Robinson"),
        make_customer("c2", "Amy Burns"),
        make_customer("c3", "Evil Rabbit"),
        make_invoice("i1", "c1", 1000, "paid", date(2023, 1, 1)),
        make_invoice("i2", "c2", 500, "pending", date(2023, 1, 2)),
    )

    cards = await DashboardRepository.fetch_card_data()

    assert cards.number_of_invoices == 2
    assert cards.number_of_customers == 3
    assert cards.total_paid_invoices == "$10.00"
    assert cards.total_pending_invoices == "$5.00"


@pytest.mark.asyncio
async def test_card_data_uses_one_connection_per_query(engine):
    real_factory = database.SessionLocal
    sessions = []

    def tracking_factory():
        session = real_factory()
        sessions.append(session)
        return session

    with patch.object(database, "SessionLocal", side_effect=tracking_factory):
        await DashboardRepository.fetch_card_data()

    assert len(sessions) == 3
    assert len({id(session) for session in sessions}) == 3


@pytest.mark.asyncio
async def test_card_data_fails_if_any_query_fails(engine):
    Base.metadata.drop_all(engine, tables=[Invoice.__table__])

    with pytest.raises(DataFetchError, match="Failed to fetch card data.") as exc_info:
        await DashboardRepository.fetch_card_data()

    assert exc_info.value.__cause__ is None


@pytest.mark.asyncio
async def test_fetch_revenue_returns_rows_verbatim(seed):
    seed(Revenue(month="Jan", revenue=2000), Revenue(month="Feb", revenue=1800))

    rows = await RevenueRepository.fetch_revenue()

    assert sorted((row.month, row.revenue) for row in rows) == [("Feb", 1800), ("Jan", 2000)]


@pytest.mark.asyncio
async def test_fetch_revenue_empty(engine):
    assert await RevenueRepository.fetch_revenue() == []


@pytest.mark.asyncio
async def test_fetch_revenue_failure(engine):
    Base.metadata.drop_all(engine, tables=[Revenue.__table__])

    with pytest.raises(DataFetchError, match="Failed to fetch revenue data."):
        await RevenueRepository.fetch_revenue()
