import uuid

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from acme_dashboard.core.database import Base


class Customer(Base):
    __tablename__ = "customers"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False, index=True)
    email = Column(String, nullable=False)
    image_url = Column(String, nullable=False)

    invoices = relationship("Invoice", back_populates="customer")
