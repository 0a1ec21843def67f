"""Tests for scoped connection acquisition and release."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from acme_dashboard.core import database
from acme_dashboard.core.database import connection, with_connection


@pytest.fixture
def mock_session(monkeypatch):
    session = MagicMock()
    monkeypatch.setattr(database, "SessionLocal", MagicMock(return_value=session))
    return session


def test_connection_is_established_before_use_and_released(mock_session):
    with connection() as db:
        assert db is mock_session
        mock_session.connection.assert_called_once()
        mock_session.close.assert_not_called()

    mock_session.close.assert_called_once()


def test_connection_released_when_body_raises(mock_session):
    with pytest.raises(ValueError):
        with connection():
            raise ValueError("boom")

    mock_session.close.assert_called_once()


def test_connection_released_on_early_return(mock_session):
    def lookup():
        with connection():
            return "found"

    assert lookup() == "found"
    mock_session.close.assert_called_once()


def test_acquisition_failure_propagates_without_running_operation(mock_session):
    mock_session.connection.side_effect = OperationalError("connect", {}, Exception("refused"))
    operation = MagicMock()

    with pytest.raises(OperationalError):
        with connection() as db:
            operation(db)

    operation.assert_not_called()
    mock_session.close.assert_called_once()


@pytest.mark.asyncio
async def test_with_connection_passes_session_and_returns_result(mock_session):
    result = await with_connection(lambda db: (db, "rows"))

    assert result == (mock_session, "rows")
    mock_session.close.assert_called_once()


@pytest.mark.asyncio
async def test_with_connection_releases_on_failure(mock_session):
    def failing(db):
        raise RuntimeError("query failed")

    with pytest.raises(RuntimeError, match="query failed"):
        await with_connection(failing)

    mock_session.close.assert_called_once()


@pytest.mark.asyncio
async def test_each_call_acquires_its_own_connection(monkeypatch):
    sessions = [MagicMock(), MagicMock()]
    monkeypatch.setattr(database, "SessionLocal", MagicMock(side_effect=sessions))

    await with_connection(lambda db: None)
    await with_connection(lambda db: None)

    for session in sessions:
        session.connection.assert_called_once()
        session.close.assert_called_once()
