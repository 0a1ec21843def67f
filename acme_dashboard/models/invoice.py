import uuid

from sqlalchemy import Column, Date, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from acme_dashboard.core.database import Base


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    customer_id = Column(String, ForeignKey("customers.id"), nullable=False, index=True)
    amount = Column(Integer, nullable=False)  # cents
    date = Column(Date, nullable=False, index=True)
    status = Column(String, nullable=False, index=True)  # "pending" | "paid"

    customer = relationship("Customer", back_populates="invoices")
