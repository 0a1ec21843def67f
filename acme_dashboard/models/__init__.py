from acme_dashboard.models.customer import Customer
from acme_dashboard.models.invoice import Invoice
from acme_dashboard.models.revenue import Revenue
from acme_dashboard.models.user import User

__all__ = ["Customer", "Invoice", "Revenue", "User"]
