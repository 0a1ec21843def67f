"""Pytest configuration and fixtures."""

import os
from datetime import date

# Keep the module-level engine off PostgreSQL; fixtures swap in a file-backed SQLite session factory.
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import NullPool

from acme_dashboard.core import database
from acme_dashboard.core.database import Base
from acme_dashboard.models import Customer, Invoice


@pytest.fixture
def engine(tmp_path, monkeypatch):
    """Temporary SQLite database wired in as the application's session factory."""
    engine = create_engine(f"sqlite:///{tmp_path / 'dashboard.db'}", poolclass=NullPool)
    Base.metadata.create_all(engine)
    monkeypatch.setattr(
        database,
        "SessionLocal",
        sessionmaker(autocommit=False, autoflush=False, bind=engine),
    )
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def seed(engine):
    """Insert ORM objects and commit them."""

    def _seed(*objects):
        with Session(engine) as session:
            session.add_all(objects)
            session.commit()

    return _seed


def make_customer(id, name, email=None, image_url=None):
    return Customer(
        id=id,
        name=name,
        email=email or f"{name.lower().replace(' ', '.')}@example.com",
        image_url=image_url or f"/customers/{id}.png",
    )


def make_invoice(id, customer_id, amount, status="pending", issued=date(2023, 1, 1)):
    return Invoice(id=id, customer_id=customer_id, amount=amount, status=status, date=issued)
