from typing import Optional

from sqlalchemy.orm import Session

from acme_dashboard.core.database import with_connection
from acme_dashboard.models.user import User
from acme_dashboard.repositories.base import fetch_guard
from acme_dashboard.schemas.dashboard import UserRecord


class UserRepository:
    @staticmethod
    async def get_user(email: str) -> Optional[UserRecord]:
        """Look up a user by exact email for the sign-in flow. None if there is no such user."""

        @fetch_guard("Failed to fetch user.")
        def operation(db: Session) -> Optional[UserRecord]:
            user = db.query(User).filter(User.email == email).first()
            if not user:
                return None
            return UserRecord(id=user.id, name=user.name, email=user.email, password=user.password)

        return await with_connection(operation)
